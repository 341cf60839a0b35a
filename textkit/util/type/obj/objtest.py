#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level **object validation** (i.e., functions enabling callers to validate
parameters passed to their own callables) facilities.
'''

# ....................{ IMPORTS                           }....................
from beartype import beartype
from textkit.exceptions import TextkitNoneException, TextkitParamException
from textkit.util.type.typehints import StrOrNone

# ....................{ EXCEPTIONS ~ none                 }....................
@beartype
def die_if_none(obj: object, label: str = 'Object') -> None:
    '''
    Raise an exception if the passed object is ``None``.

    Parameters
    ----------
    obj : object
        Object to be validated.
    label : str
        Human-readable label describing this object, interpolated into the
        exception message. Defaults to ``Object``.

    Raises
    ----------
    TextkitNoneException
        If this object is ``None``.
    '''

    if obj is None:
        raise TextkitNoneException('{} is None.'.format(label))

# ....................{ EXCEPTIONS ~ condition            }....................
@beartype
def die_unless(is_ok: bool, template: StrOrNone, *args: object) -> None:
    '''
    Raise an exception whose message is the passed template leniently
    formatted with the passed positional arguments unless the passed boolean
    is ``True``.

    The message is synthesized *only* on failure, permitting callers to pass
    arguments whose string conversion is expensive without penalizing the
    common case.

    Parameters
    ----------
    is_ok : bool
        ``True`` only if the caller's precondition holds.
    template : Optional[str]
        Exception message template containing zero or more ``%s``
        placeholders.

    All remaining positional arguments are substituted into this template as
    documented by the
    :func:`textkit.util.type.text.string.strformat.lenient_format` function.

    Raises
    ----------
    TextkitParamException
        If this boolean is ``False``.
    '''

    if not is_ok:
        # Avoid circular import dependencies.
        from textkit.util.type.text.string import strformat

        raise TextkitParamException(strformat.lenient_format(template, *args))
