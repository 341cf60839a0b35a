#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
**Root test configuration** (i.e., early-time configuration guaranteed to be
run by :mod:`pytest` *before* passed command-line arguments are parsed) for
this test suite.

Caveats
----------
For safety, this configuration should contain *only* early-time hooks
absolutely required by :mod:`pytest` design to be defined in this
configuration.
'''

# ....................{ IMPORTS                           }....................
import sys

# ....................{ HOOKS ~ session : start           }....................
def pytest_sessionstart(session: '_pytest.main.Session') -> None:
    '''
    Hook run immediately *before* starting the current test session (i.e.,
    calling the :func:`pytest.session.main` function).

    Parameters
    ----------
    session: _pytest.main.Session
        :mod:`pytest`-specific test session object.
    '''

    _print_metadata()


def _print_metadata() -> None:
    '''
    Print test-specific metadata for debuggability and quality assurance (QA).
    '''

    # Print a header for disambiguity.
    print('------[ paths ]------')

    # Print the absolute dirname of the system-wide Python prefix and
    # current Python prefix, which differs from the former under venvs.
    print('python prefix (system [base]): ' + sys.base_prefix)
    print('python prefix (current): ' + sys.prefix)

    # Defer heavyweight imports until *AFTER* printing the above metadata.
    import beartype, os, textkit

    # Print the absolute dirname of the top-level "textkit" package.
    print('project path: ' + os.path.dirname(os.path.realpath(
        textkit.__file__)))

    # Print the versions of this project and its mandatory dependencies.
    print('------[ versions ]------')
    print('textkit: ' + textkit.__version__)
    print('beartype: ' + beartype.__version__)
