#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Unit tests exercising the :mod:`textkit.util.type.obj.objects` submodule.
'''

# ....................{ CLASSES                           }....................
class _Outer(object):
    class Inner(object):
        pass

# ....................{ TESTS                             }....................
def test_get_class() -> None:
    '''
    Unit test the :func:`textkit.util.type.obj.objects.get_class` getter.
    '''

    # Defer heavyweight imports.
    from textkit.util.type.obj import objects

    assert objects.get_class(42) is int
    assert objects.get_class(int) is int
    assert objects.get_class(_Outer()) is _Outer


def test_get_class_name_qualified() -> None:
    '''
    Unit test the
    :func:`textkit.util.type.obj.objects.get_class_name_qualified` getter.
    '''

    # Defer heavyweight imports.
    from textkit.exceptions import TextkitParamException
    from textkit.util.type.obj import objects

    # Assert builtin classes to be unprefixed by their module name.
    assert objects.get_class_name_qualified(42) == 'int'
    assert objects.get_class_name_qualified(ValueError()) == 'ValueError'
    assert objects.get_class_name_qualified(type(None)) == 'NoneType'

    # Assert application classes to be prefixed by their module name.
    assert objects.get_class_name_qualified(TextkitParamException) == (
        'textkit.exceptions.TextkitParamException')

    # Assert nested classes to be qualified by their enclosing classes.
    assert objects.get_class_name_qualified(_Outer.Inner()).endswith(
        'test_objects._Outer.Inner')


def test_get_identity_repr() -> None:
    '''
    Unit test the :func:`textkit.util.type.obj.objects.get_identity_repr`
    getter.
    '''

    # Defer heavyweight imports.
    from textkit.util.type.obj import objects

    obj = object()
    assert objects.get_id_hex(obj) == '{:x}'.format(id(obj))
    assert objects.get_identity_repr(obj) == 'object@{:x}'.format(id(obj))

    # Assert distinct live objects to have distinct identity representations.
    obj_other = object()
    assert objects.get_identity_repr(obj) != (
        objects.get_identity_repr(obj_other))


def test_get_identity_repr_class() -> None:
    '''
    Unit test the :func:`textkit.util.type.obj.objects.get_identity_repr`
    getter against classes, which are described by their metaclasses.
    '''

    # Defer heavyweight imports.
    from textkit.util.type.obj import objects

    assert objects.get_identity_repr(int) == 'type@{:x}'.format(id(int))
    assert objects.get_identity_repr(_Outer) == 'type@{:x}'.format(id(_Outer))
