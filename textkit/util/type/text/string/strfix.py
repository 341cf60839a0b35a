#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level **affix** (i.e., prefix and suffix) string facilities.
'''

# ....................{ IMPORTS                           }....................
from beartype import beartype
from textkit.util.type.obj import objtest
from textkit.util.type.text import chars
from textkit.util.type.typehints import StrOrNone

# ....................{ GETTERS                           }....................
@beartype
def get_common_prefix(text_a: StrOrNone, text_b: StrOrNone) -> str:
    '''
    Longest string prefixing both of the passed strings, excluding any
    trailing high surrogate whose low surrogate the prefix would otherwise
    strip.

    Specifically, if the last character of this prefix is the high surrogate
    of a valid surrogate pair in either string, this character is omitted.
    The returned prefix thus never bisects a supplementary character.

    Parameters
    ----------
    text_a : str
        First string to be compared.
    text_b : str
        Second string to be compared.

    Returns
    ----------
    str
        Longest common prefix of these strings if any *or* the empty string
        otherwise.

    Raises
    ----------
    TextkitNoneException
        If either string is ``None``.
    '''

    objtest.die_if_none(text_a, 'First string')
    objtest.die_if_none(text_b, 'Second string')

    # Length of the longest possible common prefix.
    prefix_len_max = min(len(text_a), len(text_b))

    # Length of the actual common prefix.
    prefix_len = 0
    while (
        prefix_len < prefix_len_max and
        text_a[prefix_len] == text_b[prefix_len]
    ):
        prefix_len += 1

    # If this prefix ends in the first half of a surrogate pair, omit that half.
    if (
        chars.is_surrogate_pair_at(text_a, prefix_len - 1) or
        chars.is_surrogate_pair_at(text_b, prefix_len - 1)
    ):
        prefix_len -= 1

    return text_a[:prefix_len]


@beartype
def get_common_suffix(text_a: StrOrNone, text_b: StrOrNone) -> str:
    '''
    Longest string suffixing both of the passed strings, excluding any leading
    low surrogate whose high surrogate the suffix would otherwise strip.

    See Also
    ----------
    :func:`get_common_prefix`
        Further details on parameters and exceptions.
    '''

    objtest.die_if_none(text_a, 'First string')
    objtest.die_if_none(text_b, 'Second string')

    text_a_len = len(text_a)
    text_b_len = len(text_b)
    suffix_len_max = min(text_a_len, text_b_len)

    suffix_len = 0
    while (
        suffix_len < suffix_len_max and
        text_a[text_a_len - suffix_len - 1] ==
        text_b[text_b_len - suffix_len - 1]
    ):
        suffix_len += 1

    # If this suffix starts in the second half of a surrogate pair, omit that
    # half.
    if (
        chars.is_surrogate_pair_at(text_a, text_a_len - suffix_len - 1) or
        chars.is_surrogate_pair_at(text_b, text_b_len - suffix_len - 1)
    ):
        suffix_len -= 1

    return text_a[text_a_len - suffix_len:]
