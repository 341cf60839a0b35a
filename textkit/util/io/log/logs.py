#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Low-level logging facilities.

Logging Hierarchy
----------
Loggers are hierarchically structured according to their ``.``-delimited
names. By default, messages logged to a child logger (e.g.,
``textkit.util.type.text.string.strformat``) are implicitly propagated up this
hierarchy to the **package logger** (i.e., ``textkit``) and then to the root
logger. This package installs *no* handlers on any logger. Callers wanting to
isolate messages logged by this package need thus configure *only* the package
logger.
'''

# ....................{ IMPORTS                            }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: To avoid circular import dependencies, avoid importing from *ANY*
# application-specific modules at the top-level -- excluding those explicitly
# known *NOT* to import from this module.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

import logging
from beartype import beartype
from beartype.typing import Optional
from textkit import metadata
from textkit.util.type.typehints import StrNonempty

# ....................{ GETTERS                            }....................
@beartype
def get(logger_name: Optional[StrNonempty] = None) -> logging.Logger:
    '''
    Logger with the passed ``.``-delimited name, defaulting to the name of the
    top-level package of this application (i.e., ``textkit``) and hence the
    **package logger** (i.e., the default application-wide logger).

    Parameters
    ----------
    logger_name : Optional[str]
        ``.``-delimited name of the logger to retrieve. By convention, logger
        names are typically that of the calling module (e.g., ``__name__``).
        Defaults to ``None``, in which case the package logger is retrieved.
        Since the empty string would silently retrieve the root logger rather
        than a logger owned by this application, the empty string is rejected.
    '''

    # Default the name of this logger to the name of the package logger.
    if logger_name is None:
        logger_name = metadata.PACKAGE_NAME

    # Return this logger.
    return logging.getLogger(logger_name)
