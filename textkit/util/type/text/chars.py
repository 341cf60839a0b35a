#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level **character** (i.e., strings of length 1) facilities.

Surrogates
----------
Python strings are sequences of Unicode code points rather than UTF-16 code
units. Strings may nonetheless contain **UTF-16 surrogates** (i.e., code points
in the range ``[U+D800, U+DFFF]``) when decoded with the ``surrogatepass``
error handler *or* when constructed from ``\\uXXXX`` escapes (e.g., by JSON
decoders parsing ``"\\ud83d\\ude00"``). A **high surrogate** followed by a
**low surrogate** encodes a single supplementary character, which string
slicing must *not* bisect.
'''

# ....................{ IMPORTS                           }....................
from beartype import beartype

# ....................{ CONSTANTS                         }....................
SURROGATE_HIGH_MIN = 0xD800
'''
Smallest code point of a UTF-16 high (i.e., leading) surrogate.
'''


SURROGATE_HIGH_MAX = 0xDBFF
'''
Largest code point of a UTF-16 high (i.e., leading) surrogate.
'''


SURROGATE_LOW_MIN = 0xDC00
'''
Smallest code point of a UTF-16 low (i.e., trailing) surrogate.
'''


SURROGATE_LOW_MAX = 0xDFFF
'''
Largest code point of a UTF-16 low (i.e., trailing) surrogate.
'''

# ....................{ TESTERS                           }....................
@beartype
def is_surrogate_high(char: str) -> bool:
    '''
    ``True`` only if the passed character is a UTF-16 high surrogate.
    '''

    return len(char) == 1 and (
        SURROGATE_HIGH_MIN <= ord(char) <= SURROGATE_HIGH_MAX)


@beartype
def is_surrogate_low(char: str) -> bool:
    '''
    ``True`` only if the passed character is a UTF-16 low surrogate.
    '''

    return len(char) == 1 and (
        SURROGATE_LOW_MIN <= ord(char) <= SURROGATE_LOW_MAX)


@beartype
def is_surrogate_pair_at(text: str, index: int) -> bool:
    '''
    ``True`` only if the two characters of the passed string starting at the
    passed index form a valid UTF-16 surrogate pair.

    Equivalently, this tester returns ``True`` only if:

    * This index is in the range ``[0, len(text) - 2]``. Unlike Python's
      standard indexing semantics, negative indices are *not* interpreted
      relative to the end of this string and always yield ``False``.
    * The character at this index is a high surrogate.
    * The character following this index is a low surrogate.

    Parameters
    ----------
    text : str
        String to be inspected.
    index : int
        0-based index of the first character of the pair to be tested.

    Returns
    ----------
    bool
        ``True`` only if a valid surrogate pair starts at this index.
    '''

    return (
        0 <= index <= len(text) - 2 and
        is_surrogate_high(text[index]) and
        is_surrogate_low(text[index + 1])
    )
