#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level **lenient formatting** (i.e., substitution of arbitrary objects into
``%s``-delimited templates in a manner guaranteed to never raise exceptions)
facilities.

Motivation
----------
Lenient formatting is intended for synthesizing messages on error-handling
paths (e.g., exception messages, log records), where raising a second
exception while describing the first would obscure the original failure.
Unlike the ``%`` operator and :meth:`str.format` method, lenient formatting
tolerates ``None`` templates, mismatched numbers of placeholders and
arguments, *and* arguments whose ``__str__`` methods raise exceptions.
'''

# ....................{ IMPORTS                           }....................
from textkit.util.type.typehints import (
    LoggerOrNone, SequenceOrNone, StrOrNone)

# ....................{ CONSTANTS                         }....................
PLACEHOLDER = '%s'
'''
Placeholder substring in templates passed to the :func:`lenient_format`
function to be replaced by the string representation of the corresponding
argument.

No other ``%``-style format specifiers (e.g., ``%d``) are recognized.
'''


ARGS_NONE_STR = '(Object[])null'
'''
Sole argument substituted into templates passed to the
:func:`lenient_format_args` function when the passed argument sequence is
``None``.
'''


NONE_STR = 'null'
'''
String representation of ``None`` substituted for both ``None`` templates and
``None`` arguments.
'''

# ....................{ FORMATTERS                        }....................
def lenient_format(
    template: StrOrNone, *args: object, logger: LoggerOrNone = None) -> str:
    '''
    Passed template leniently formatted with the passed positional arguments.

    Examples
    ----------
        >>> from textkit.util.type.text.string.strformat import lenient_format
        >>> lenient_format('%s and %s', 'a', 'b')
        'a and b'
        >>> lenient_format('%s', 1, 2, 3)
        '1 [2, 3]'
        >>> lenient_format('%s, %s and %s', 'x')
        'x, %s and %s'

    See Also
    ----------
    :func:`lenient_format_args`
        Further details.
    '''

    return lenient_format_args(template, args, logger=logger)


def lenient_format_args(
    template: StrOrNone, args: SequenceOrNone, logger: LoggerOrNone = None,
) -> str:
    '''
    Passed template leniently formatted with the passed sequence of arguments.

    This function never raises exceptions, regardless of the passed template
    and arguments. Specifically, this function:

    #. Converts each argument into a string via the :func:`_to_str_lenient`
       function, which never raises exceptions.
    #. Replaces each of the first ``min(n_placeholders, n_args)`` occurrences
       of the :data:`PLACEHOLDER` substring in this template (scanning left to
       right) by the next converted argument.
    #. Preserves all remaining placeholders, if any, as is.
    #. Appends all remaining arguments, if any, to the end of the formatted
       template as a ``, ``-delimited list enclosed by `` [`` and ``]``.

    This function and the :func:`_to_str_lenient` function it calls are
    intentionally *not* decorated by :func:`beartype.beartype`, which would
    raise exceptions on being passed arguments of unexpected types.

    Parameters
    ----------
    template : Optional[str]
        Template containing zero or more :data:`PLACEHOLDER` substrings. If
        ``None``, the string :data:`NONE_STR` is formatted instead.
    args : Optional[Sequence[object]]
        Sequence of arbitrary objects (including ``None``) to be substituted
        into this template. If ``None``, the single-item sequence
        ``(ARGS_NONE_STR,)`` is substituted instead. If *not* iterable (or if
        iterating this object raises an exception), this object is
        substituted as a single argument instead.
    logger : Optional[Logger]
        Logger with which to log non-fatal warnings on failing to convert an
        argument into a string. Defaults to ``None``, in which case the logger
        specific to this submodule is used.

    Returns
    ----------
    str
        This template leniently formatted with these arguments.
    '''

    # Default these parameters.
    template = _to_str_lenient(template, logger=logger)
    if args is None:
        args_str = [ARGS_NONE_STR]
    else:
        # If these arguments are unsequenceable (e.g., a non-iterable object
        # or an iterable whose iteration raises), substitute these arguments
        # as a single argument instead.
        try:
            args = list(args)
        except Exception:
            args = [args]

        args_str = [_to_str_lenient(arg, logger=logger) for arg in args]

    # List of all substrings to be joined into the formatted string.
    substrs = []

    # 0-based index of the first character of this template yet to be copied.
    template_start = 0

    # 0-based index of the next argument to be substituted.
    arg_index = 0

    # Substitute arguments into placeholders until either are exhausted.
    while arg_index < len(args_str):
        placeholder_start = template.find(PLACEHOLDER, template_start)
        if placeholder_start == -1:
            break

        substrs.append(template[template_start:placeholder_start])
        substrs.append(args_str[arg_index])
        arg_index += 1
        template_start = placeholder_start + len(PLACEHOLDER)

    # Copy the remainder of this template, including unused placeholders.
    substrs.append(template[template_start:])

    # If arguments remain, append these arguments in square brackets.
    if arg_index < len(args_str):
        substrs.append(' [')
        substrs.append(', '.join(args_str[arg_index:]))
        substrs.append(']')

    return ''.join(substrs)

# ....................{ PRIVATE ~ converters              }....................
def _to_str_lenient(obj: object, logger: LoggerOrNone = None) -> str:
    '''
    String representation of the passed object, guaranteed to *never* raise
    exceptions.

    Specifically, this function returns:

    * If this object is ``None``, :data:`NONE_STR`.
    * If calling :func:`str` on this object succeeds, that string.
    * Else, a string of the form ``<{identity} threw {exception_class}>``,
      where ``{identity}`` is the identity representation returned by the
      :func:`textkit.util.type.obj.objects.get_identity_repr` getter and
      ``{exception_class}`` is the fully-qualified name of the class of the
      exception raised by :func:`str`. In this case, a non-fatal warning
      describing this exception is also logged.

    Only exceptions subclassing :class:`Exception` are caught. Process-level
    signals (e.g., :class:`KeyboardInterrupt`, :class:`SystemExit`) propagate.
    Likewise, non-terminating ``__str__`` methods remain the responsibility of
    the caller.

    Parameters
    ----------
    obj : object
        Object to be converted.
    logger : Optional[Logger]
        Logger with which to log the above warning. Defaults to ``None``, in
        which case the logger specific to this submodule is used.
    '''

    if obj is None:
        return NONE_STR

    try:
        return str(obj)
    except Exception as exception:
        # Avoid circular import dependencies.
        from textkit.util.io.log import logs
        from textkit.util.type.obj import objects

        # Identity representation of this object, which (unlike str() and
        # repr()) calls *NO* methods defined by the class of this object.
        obj_identity = objects.get_identity_repr(obj)

        # Default this logger to that of this submodule.
        if logger is None:
            logger = logs.get(__name__)

        # Log this failure with the exception and its traceback.
        logger.warning(
            'Exception during lenient_format() for %s',
            obj_identity,
            exc_info=exception,
        )

        return '<{} threw {}>'.format(
            obj_identity, objects.get_class_name_qualified(type(exception)))
