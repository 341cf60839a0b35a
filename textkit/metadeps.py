#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
Metadata constants synopsizing high-level application dependencies.

Design
----------
Metadata constants defined by this submodule are intentionally *not* defined
elsewhere in this package. Why? Because the top-level ``setup.py`` script
imports this submodule at installation time, when third-party dependencies
have yet to be installed. This submodule thus imports *only* from the standard
library.
'''

# ....................{ IMPORTS                           }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: To avoid race conditions during setuptools-based installation, this
# module may import *ONLY* from packages guaranteed to exist at the start of
# installation. This includes all standard Python and application packages but
# *NOT* third-party dependencies, which if currently uninstalled will only be
# installed at some later time in the installation.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

# ....................{ LIBS ~ install : mandatory        }....................
SETUPTOOLS_VERSION_MIN = '38.2.0'
'''
Minimum version of :mod:`setuptools` required at application install-time as
a human-readable ``.``-delimited string.
'''

# ....................{ LIBS ~ runtime : mandatory        }....................
RUNTIME_MANDATORY = {
    # beartype >= 0.10.0 first introduced the "beartype.typing" subpackage,
    # from which this codebase imports all PEP 585-compliant type hints.
    'beartype': '>= 0.10.0',
}
'''
Dictionary mapping from the :mod:`setuptools`-specific project name of each
mandatory runtime dependency for this application to the suffix of a
:mod:`setuptools`-specific requirements string constraining this dependency.

To simplify subsequent lookup, these dependencies are contained by a dictionary
rather than a simple set or sequence such that each:

* Key is the name of a :mod:`setuptools`-specific project identifying this
  dependency, which may have no relation to the name of that project's
  top-level module or package.
* Value is either:

  * ``None`` or the empty string, in which case this dependency is
    unconstrained (i.e., any version of this dependency is sufficient).
  * A string of the form ``{comparator} {version}``, where:

    * ``{comparator}`` is a comparison operator (e.g., ``>=``, ``!=``).
    * ``{version}`` is the required version of this project to compare.

Concatenating each such key and value yields a :mod:`setuptools`-specific
requirements string of the form either ``{project_name}`` or ``{project_name}
{comparator} {version}``.
'''

# ....................{ LIBS ~ testing : mandatory        }....................
TESTING_MANDATORY = {
    # For simplicity, py.test should remain the only hard dependency for
    # testing on local machines.
    'pytest': '>= 3.7.0',
}
'''
Dictionary mapping from the :mod:`setuptools`-specific project name of each
mandatory testing dependency for this application to the suffix of a
:mod:`setuptools`-specific requirements string constraining this dependency.

See Also
----------
:data:`RUNTIME_MANDATORY`
    Further details on dictionary structure.
'''

# ....................{ GETTERS                           }....................
def get_runtime_mandatory_tuple() -> tuple:
    '''
    Tuple listing the :mod:`setuptools`-specific requirement string containing
    the mandatory name and optional version constraints of each mandatory
    runtime dependency for this application, dynamically converted from the
    :data:`RUNTIME_MANDATORY` dictionary.
    '''

    return _get_requirements_str_from_dict(RUNTIME_MANDATORY)


def get_testing_mandatory_tuple() -> tuple:
    '''
    Tuple listing the :mod:`setuptools`-specific requirement string containing
    the mandatory name and optional version constraints of each mandatory
    testing dependency for this application, dynamically converted from the
    :data:`TESTING_MANDATORY` dictionary.
    '''

    return _get_requirements_str_from_dict(TESTING_MANDATORY)

# ....................{ PRIVATE ~ getters                 }....................
def _get_requirements_str_from_dict(requirements_dict: dict) -> tuple:
    '''
    Tuple of :mod:`setuptools`-specific requirement strings converted from the
    passed dictionary of requirement names to version constraints.
    '''
    assert isinstance(requirements_dict, dict), (
        '"{!r}" not a dictionary.'.format(requirements_dict))

    # Join each project name with its version constraint if any.
    return tuple(
        '{} {}'.format(requirement_name, requirement_constraint)
        if requirement_constraint else requirement_name
        for requirement_name, requirement_constraint in (
            requirements_dict.items())
    )
