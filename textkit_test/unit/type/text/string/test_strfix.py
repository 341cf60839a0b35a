#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests exercising the :mod:`textkit.util.type.text.string.strfix`
submodule.
'''

# ....................{ IMPORTS                           }....................
import pytest

# ....................{ CONSTANTS                         }....................
# Smiling face with open mouth (i.e., U+1F603) encoded as a UTF-16 surrogate
# pair and hence as two code points.
_SMILE = '\ud83d\ude03'

# Smiling face with open mouth and smiling eyes (i.e., U+1F604), sharing the
# same high surrogate as the above face.
_SMILE_EYES = '\ud83d\ude04'

# Grinning cat face with smiling eyes (i.e., U+1F638), sharing the same high
# surrogate but a different low surrogate as both faces above.
_CAT = '\ud83d\ude38'

# ....................{ TESTS ~ prefix                    }....................
def test_get_common_prefix() -> None:
    '''
    Unit test the
    :func:`textkit.util.type.text.string.strfix.get_common_prefix` getter.
    '''

    # Defer heavyweight imports.
    from textkit.util.type.text.string import strfix

    assert strfix.get_common_prefix('', '') == ''
    assert strfix.get_common_prefix('abc', '') == ''
    assert strfix.get_common_prefix('', 'abc') == ''
    assert strfix.get_common_prefix('abcdef', 'abcxyz') == 'abc'
    assert strfix.get_common_prefix('abc', 'abcxyz') == 'abc'
    assert strfix.get_common_prefix('abcxyz', 'abc') == 'abc'
    assert strfix.get_common_prefix('xyz', 'abc') == ''
    assert strfix.get_common_prefix('abc', 'abc') == 'abc'

    # Assert the result to prefix both strings for arbitrary pairs.
    texts = ('', 'a', 'ab', 'abc', 'abd', 'b', 'ba')
    for text_a in texts:
        for text_b in texts:
            prefix = strfix.get_common_prefix(text_a, text_b)
            assert text_a.startswith(prefix)
            assert text_b.startswith(prefix)

            # Assert no longer common prefix to exist.
            prefix_len_next = len(prefix) + 1
            assert (
                prefix_len_next > min(len(text_a), len(text_b)) or
                text_a[:prefix_len_next] != text_b[:prefix_len_next]
            )


def test_get_common_prefix_surrogate() -> None:
    '''
    Unit test the
    :func:`textkit.util.type.text.string.strfix.get_common_prefix` getter
    against strings containing surrogate pairs.
    '''

    # Defer heavyweight imports.
    from textkit.util.type.text.string import strfix

    # Assert identical surrogate pairs to be preserved.
    assert strfix.get_common_prefix('abc' + _SMILE, 'abc' + _SMILE) == (
        'abc' + _SMILE)
    assert strfix.get_common_prefix(_SMILE + 'x', _SMILE + 'y') == _SMILE

    # Assert surrogate pairs sharing only their high surrogate to be omitted
    # rather than bisected.
    assert strfix.get_common_prefix('abc' + _SMILE, 'abc' + _SMILE_EYES) == (
        'abc')
    assert strfix.get_common_prefix(_SMILE, _CAT) == ''

    # Assert a surrogate pair in only one string to still be respected.
    assert strfix.get_common_prefix('abc\ud83d', 'abc' + _SMILE) == 'abc'
    assert strfix.get_common_prefix('abc' + _SMILE, 'abc\ud83dx') == 'abc'

    # Assert lone low surrogates to be preserved as ordinary characters.
    assert strfix.get_common_prefix('\ude03x', '\ude03y') == '\ude03'


def test_get_common_prefix_fail() -> None:
    '''
    Unit test the
    :func:`textkit.util.type.text.string.strfix.get_common_prefix` getter
    against ``None``.
    '''

    # Defer heavyweight imports.
    from textkit.exceptions import TextkitNoneException
    from textkit.util.type.text.string import strfix

    with pytest.raises(TextkitNoneException):
        strfix.get_common_prefix(None, 'abc')
    with pytest.raises(TextkitNoneException):
        strfix.get_common_prefix('abc', None)
    with pytest.raises(TextkitNoneException):
        strfix.get_common_prefix(None, None)

# ....................{ TESTS ~ suffix                    }....................
def test_get_common_suffix() -> None:
    '''
    Unit test the
    :func:`textkit.util.type.text.string.strfix.get_common_suffix` getter.
    '''

    # Defer heavyweight imports.
    from textkit.util.type.text.string import strfix

    assert strfix.get_common_suffix('', '') == ''
    assert strfix.get_common_suffix('abc', '') == ''
    assert strfix.get_common_suffix('', 'abc') == ''
    assert strfix.get_common_suffix('defabc', 'xyzabc') == 'abc'
    assert strfix.get_common_suffix('abc', 'xyzabc') == 'abc'
    assert strfix.get_common_suffix('xyzabc', 'abc') == 'abc'
    assert strfix.get_common_suffix('xyz', 'abc') == ''
    assert strfix.get_common_suffix('abc', 'abc') == 'abc'

    texts = ('', 'a', 'ba', 'cba', 'dba', 'b', 'ab')
    for text_a in texts:
        for text_b in texts:
            suffix = strfix.get_common_suffix(text_a, text_b)
            assert text_a.endswith(suffix)
            assert text_b.endswith(suffix)

            suffix_len_next = len(suffix) + 1
            assert (
                suffix_len_next > min(len(text_a), len(text_b)) or
                text_a[-suffix_len_next:] != text_b[-suffix_len_next:]
            )


def test_get_common_suffix_surrogate() -> None:
    '''
    Unit test the
    :func:`textkit.util.type.text.string.strfix.get_common_suffix` getter
    against strings containing surrogate pairs.
    '''

    # Defer heavyweight imports.
    from textkit.util.type.text.string import strfix

    assert strfix.get_common_suffix(_SMILE + 'abc', _SMILE + 'abc') == (
        _SMILE + 'abc')
    assert strfix.get_common_suffix('x' + _SMILE, 'y' + _SMILE) == _SMILE

    # Assert surrogate pairs sharing only their low surrogate to be omitted
    # rather than bisected.
    assert strfix.get_common_suffix('\ud83c\ude03abc', _SMILE + 'abc') == (
        'abc')

    # Assert a surrogate pair in only one string to still be respected.
    assert strfix.get_common_suffix('\ude03abc', _SMILE + 'abc') == 'abc'
    assert strfix.get_common_suffix(_SMILE + 'abc', 'x\ude03abc') == 'abc'

    # Assert lone high surrogates to be preserved as ordinary characters.
    assert strfix.get_common_suffix('x\ud83d', 'y\ud83d') == '\ud83d'


def test_get_common_suffix_fail() -> None:
    '''
    Unit test the
    :func:`textkit.util.type.text.string.strfix.get_common_suffix` getter
    against ``None``.
    '''

    # Defer heavyweight imports.
    from textkit.exceptions import TextkitNoneException
    from textkit.util.type.text.string import strfix

    with pytest.raises(TextkitNoneException):
        strfix.get_common_suffix(None, 'abc')
    with pytest.raises(TextkitNoneException):
        strfix.get_common_suffix('abc', None)
