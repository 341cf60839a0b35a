#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Project-wide **type hints** (i.e., PEP-compliant annotations of general-purpose
interest throughout the codebase).
'''

# ....................{ IMPORTS                            }....................
from beartype.typing import (
    Annotated,
    Optional,
    Sequence,
)
from beartype.vale import Is
from logging import Logger

# ....................{ HINTS ~ str                        }....................
StrOrNone = Optional[str]
'''
PEP-compliant type hint matching either a string *or* ``None``.

Callables accepting mandatory strings annotate those strings with this hint
rather than :class:`str`, deferring the rejection of ``None`` to the
:func:`textkit.util.type.obj.objtest.die_if_none` validator and hence to the
:class:`textkit.exceptions.TextkitNoneException` exception.
'''


StrNonempty = Annotated[str, Is[lambda text: bool(text)]]
'''
PEP-compliant type hint matching a non-empty string.
'''

# ....................{ HINTS ~ sequence                   }....................
SequenceOrNone = Optional[Sequence[object]]
'''
PEP-compliant type hint matching either a sequence of arbitrary objects *or*
``None``.
'''

# ....................{ HINTS ~ logging                    }....................
LoggerOrNone = Optional[Logger]
'''
PEP-compliant type hint matching either a :class:`logging.Logger` *or*
``None``.
'''
