#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Application-specific exception hierarchy.
'''

# ....................{ IMPORTS                           }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: To avoid race conditions during application startup, this module may
# import *ONLY* from modules guaranteed to exist at startup. This includes all
# standard Python and application modules but *NOT* third-party dependencies,
# which if unimportable will only be validated at some later time in startup.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

from abc import ABCMeta

# ....................{ EXCEPTIONS                        }....................
class TextkitException(Exception, metaclass=ABCMeta):
    '''
    Abstract base class of all application-specific exceptions.
    '''

    pass

# ....................{ EXCEPTIONS ~ param                }....................
class TextkitParamException(TextkitException, ValueError):
    '''
    **Parameter** (i.e., positional or keyword argument passed to a
    callable)-specific exception.

    This exception is typically raised on passing a callable a value
    satisfying that parameter's type hint but violating some further
    constraint (e.g., a negative repetition count).
    '''

    pass


class TextkitNoneException(TextkitParamException, TypeError):
    '''
    **Missing parameter** (i.e., ``None`` passed as a mandatory parameter
    explicitly permitted to be ``None`` by its type hint)-specific exception.

    This exception is always raised *before* validating other parameters
    passed to the same callable, ensuring absent parameters to be reported
    consistently regardless of the values of other parameters.
    '''

    pass

# ....................{ EXCEPTIONS ~ size                 }....................
class TextkitSizeException(TextkitException, OverflowError):
    '''
    **Size** (i.e., length of a sequence to be created)-specific exception.

    This exception is typically raised when the length of a sequence to be
    created exceeds the largest index representable by the platform (i.e.,
    :data:`sys.maxsize`).
    '''

    pass
