#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level **object** (i.e., arbitrary instance) getters.
'''

# ....................{ GETTERS ~ class                   }....................
def get_class(obj: object) -> type:
    '''
    Passed object if this object is itself a class *or* the class of this
    object otherwise (i.e., if this object is *not* a class).

    Parameters
    ----------
    obj : object
        Object to be queried for its class.

    Returns
    ----------
    type
        This object if this object is a class *or* this object's class.
    '''

    # Simplicity is not a place in Simple City.
    return obj if isinstance(obj, type) else type(obj)

# ....................{ GETTERS ~ class : name            }....................
def get_class_name_qualified(obj: object) -> str:
    '''
    Fully-qualified name of either the passed object if this object is itself a
    class *or* the class of this object otherwise.

    For readability, classes defined by the standard :mod:`builtins` module
    (e.g., :class:`int`, :class:`ValueError`) are *not* prefixed by the name of
    that module.

    Parameters
    ----------
    obj : object
        Object to be queried for its class name.

    Returns
    ----------
    str
        Fully-qualified name of this class (e.g.,
        ``textkit.exceptions.TextkitParamException``).
    '''

    # This object if this object is a class *OR* this object's class otherwise.
    cls = get_class(obj)

    # Name of the module defining this class if any *OR* "None" otherwise.
    # Note that classes dynamically synthesized in memory (e.g., via the
    # type() builtin) need *NOT* define the "__module__" attribute.
    cls_module_name = getattr(cls, '__module__', None)

    # Unqualified name of this class, preferring the PEP 3155-compliant
    # qualified name for nested classes.
    cls_name = getattr(cls, '__qualname__', cls.__name__)

    # Return this name prefixed by this module name if any.
    return (
        cls_name
        if not cls_module_name or cls_module_name == 'builtins' else
        '{}.{}'.format(cls_module_name, cls_name)
    )

# ....................{ GETTERS ~ identity                }....................
def get_id_hex(obj: object) -> str:
    '''
    Lowercase hexadecimal string (without the ``0x`` prefix) encoding the
    identity of the passed object.

    This identity is implementation-defined. Under CPython, this is the
    address of this object in memory and hence unique only over the lifetime
    of this object.
    '''

    return '{:x}'.format(id(obj))


def get_identity_repr(obj: object) -> str:
    '''
    **Identity representation** (i.e., fully-qualified class name of the
    passed object followed by ``@`` followed by the hexadecimal identity of
    this object) of the passed object (e.g., ``textkit_test.Unprintable@7f3a``).

    Unlike the :func:`str` and :func:`repr` builtins, this getter never calls
    methods defined by the class of this object and thus never raises
    exceptions. This getter is intended to describe objects whose
    ``__str__`` or ``__repr__`` methods are known to be broken.

    The class named is always the runtime type of this object as returned by
    the :func:`type` builtin. Classes are thus described by their metaclass
    (e.g., ``type@7f3a``). The ``__class__`` attribute of this object, which
    may be an arbitrary property, is never accessed.
    '''

    return '{}@{}'.format(
        get_class_name_qualified(type(obj)), get_id_hex(obj))
