#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level general-purpose string facilities.

``None`` Handling
----------
Functions defined by this submodule accept ``None`` as a first-class input.
Testers and converters (e.g., :func:`is_none_or_empty`) never raise
exceptions. All other functions raise
:class:`textkit.exceptions.TextkitNoneException` on being passed ``None``
*before* validating any other parameter.
'''

# ....................{ IMPORTS                           }....................
import sys
from beartype import beartype
from textkit.exceptions import TextkitSizeException
from textkit.util.type.obj import objtest
from textkit.util.type.typehints import StrOrNone

# ....................{ TESTERS                           }....................
@beartype
def is_none_or_empty(text: StrOrNone) -> bool:
    '''
    ``True`` only if the passed string is either ``None`` *or* empty.
    '''

    return text is None or not text

# ....................{ CONVERTERS                        }....................
@beartype
def none_to_empty(text: StrOrNone) -> str:
    '''
    Passed string if this string is *not* ``None`` *or* the empty string
    otherwise.
    '''

    return '' if text is None else text


@beartype
def empty_to_none(text: StrOrNone) -> StrOrNone:
    '''
    Passed string if this string is neither ``None`` nor empty *or* ``None``
    otherwise.
    '''

    return None if is_none_or_empty(text) else text

# ....................{ PADDERS                           }....................
@beartype
def pad_start(text: StrOrNone, min_len: int, pad_char: str) -> str:
    '''
    Passed string prefixed by as many copies of the passed padding character as
    needed to produce a string of at least the passed length.

    Parameters
    ----------
    text : str
        String to be padded. Strings whose length is already at least this
        minimum length (including *all* strings if this minimum length is
        non-positive) are returned unmodified.
    min_len : int
        Minimum length of the string to be returned.
    pad_char : str
        Single character to prefix this string with.

    Returns
    ----------
    str
        String of length ``max(len(text), min_len)`` suffixed by this string.

    Raises
    ----------
    TextkitNoneException
        If this string is ``None``.
    TextkitParamException
        If this padding character is *not* a single character.

    Examples
    ----------
        >>> from textkit.util.type.text.string import strs
        >>> strs.pad_start('7', 3, '0')
        '007'
        >>> strs.pad_start('2010', 3, '0')
        '2010'
    '''

    # Validate these parameters, beginning with the mandatory string.
    objtest.die_if_none(text, 'String')
    _die_unless_char(pad_char)

    # If this string is already sufficiently long, return this string as is.
    if len(text) >= min_len:
        return text

    # Else, prefix this string by the requisite padding.
    return pad_char * (min_len - len(text)) + text


@beartype
def pad_end(text: StrOrNone, min_len: int, pad_char: str) -> str:
    '''
    Passed string suffixed by as many copies of the passed padding character as
    needed to produce a string of at least the passed length.

    Examples
    ----------
        >>> from textkit.util.type.text.string import strs
        >>> strs.pad_end('4.', 5, '0')
        '4.000'

    See Also
    ----------
    :func:`pad_start`
        Further details on parameters and exceptions.
    '''

    objtest.die_if_none(text, 'String')
    _die_unless_char(pad_char)

    if len(text) >= min_len:
        return text

    return text + pad_char * (min_len - len(text))

# ....................{ REPEATERS                         }....................
@beartype
def repeat(text: StrOrNone, count: int) -> str:
    '''
    String consisting of the passed number of copies of the passed string.

    Size
    ----------
    The length of the returned string is ``len(text) * count``. If this length
    exceeds the largest index representable by the active platform (i.e.,
    :data:`sys.maxsize`), an exception is raised rather than attempting to
    allocate this string.

    Parameters
    ----------
    text : str
        String to be repeated.
    count : int
        Number of times to repeat this string. If ``0``, the empty string is
        returned. If ``1``, this string is returned as is.

    Returns
    ----------
    str
        This string repeated this number of times.

    Raises
    ----------
    TextkitNoneException
        If this string is ``None``.
    TextkitParamException
        If this count is negative.
    TextkitSizeException
        If the length of the string to be returned exceeds
        :data:`sys.maxsize`.
    '''

    # Validate these parameters.
    objtest.die_if_none(text, 'String')
    objtest.die_unless(count >= 0, 'invalid count: %s', count)

    # If the caller requested no copies, return the empty string.
    if count == 0:
        return ''
    # Else if the caller requested exactly one copy, return this string as is.
    elif count == 1:
        return text

    # Length of the string to be returned. Since Python integers are
    # arbitrary-precision, this product never overflows.
    text_len = len(text)
    size = text_len * count

    # If this length exceeds the largest representable index, raise an
    # exception.
    if size > sys.maxsize:
        raise TextkitSizeException(
            'Required array size too large: {}'.format(size))

    # Double the string built so far while the next doubling would still fall
    # short of this length, requiring only logarithmically many concatenations.
    text_repeated = text
    while len(text_repeated) < size - len(text_repeated):
        text_repeated += text_repeated

    # Append the remainder from the prefix of the string built so far.
    return text_repeated + text_repeated[:size - len(text_repeated)]

# ....................{ PRIVATE ~ validators              }....................
def _die_unless_char(pad_char: str) -> None:
    '''
    Raise an exception unless the passed string is a single character.
    '''

    objtest.die_unless(
        len(pad_char) == 1, 'Padding "%s" not a single character.', pad_char)
