#!/usr/bin/env python3
# --------------------( LICENSE                           )--------------------
# Copyright 2014-2019 by Alexis Pietak & Cecil Curry.
# See "LICENSE" for further details.

'''
:mod:`setuptools`-based makefile instrumenting all high-level administration
tasks (e.g., installation, test running) for this application.
'''

# ....................{ KLUDGES                           }....................
# Explicitly register the root directory containing this top-level "setup.py"
# script to be importable for the remainder of this Python process if this
# directory has yet to be registered.
#
# Technically, this should *NOT* be required. Unfortunately, "pip" >= 19.0.0
# does *NOT* guarantee this to be the case for projects built in isolation.
# See also:
#     https://github.com/pypa/pip/issues/6163

# Isolate this kludge to a private function for safety.
def _register_dir() -> None:

    # Avert thy eyes, purist Pythonistas!
    import os, sys

    # Absolute dirname of this directory, inspired by the following
    # StackOverflow answer: https://stackoverflow.com/a/8663557/2809027
    setup_dirname = os.path.dirname(os.path.realpath(__file__))

    # If the current PYTHONPATH does *NOT* already contain this directory,
    # append this directory to the current PYTHONPATH.
    if setup_dirname not in sys.path:
        sys.path.append(setup_dirname)

# Kludge us up the bomb.
_register_dir()

# ....................{ IMPORTS                           }....................
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!
# WARNING: To avoid race conditions during setuptools-based installation, this
# module may import *ONLY* from packages guaranteed to exist at the start of
# installation. This includes all standard Python and application packages but
# *NOT* third-party dependencies, which if currently uninstalled will only be
# installed at some later time in the installation.
#!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!

import setuptools
from textkit import metadata, metadeps

# ....................{ METADATA                          }....................
_KEYWORDS = [
    'string',
    'text',
    'padding',
    'formatting',
    'unicode',
]
'''
List of all lowercase alphabetic keywords synopsising this application.
'''


_CLASSIFIERS = [
    'Development Status :: 3 - Alpha',
    'Intended Audience :: Developers',
    'License :: OSI Approved :: BSD License',
    'Natural Language :: English',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Software Development :: Libraries :: Python Modules',
    'Topic :: Text Processing',
]
'''
List of all PyPI-specific trove classifier strings synopsizing this
application.

See Also
----------
https://pypi.org/classifiers
    Plaintext list of all trove classifier strings recognized by PyPI.
'''

# ....................{ OPTIONS                           }....................
_SETUP_OPTIONS = {
    # ..................{ CORE                              }..................
    # Self-explanatory metadata.
    'name':             metadata.PACKAGE_NAME,
    'version':          metadata.VERSION,
    'author':           metadata.AUTHORS,
    'author_email':     metadata.AUTHOR_EMAIL,
    'maintainer':       metadata.AUTHORS,
    'maintainer_email': metadata.AUTHOR_EMAIL,
    'description':      metadata.SYNOPSIS,
    'url':              metadata.URL_HOMEPAGE,
    'download_url':     metadata.URL_DOWNLOAD,

    # ..................{ PYPI                              }..................
    'classifiers': _CLASSIFIERS,
    'keywords': _KEYWORDS,
    'license': metadata.LICENSE,

    # ..................{ DEPENDENCIES                      }..................
    'python_requires': '>=' + metadata.PYTHON_VERSION_MIN,
    'install_requires': metadeps.get_runtime_mandatory_tuple(),
    'extras_require': {
        'test': metadeps.get_testing_mandatory_tuple(),
    },

    # ..................{ PACKAGES                          }..................
    # List of all Python packages (i.e., directories containing zero or more
    # Python modules) to be installed, excluding the test suite.
    'packages': setuptools.find_packages(exclude=(
        metadata.PACKAGE_NAME + '_test',
        metadata.PACKAGE_NAME + '_test.*',
        'build',
    )),
    'zip_safe': False,
}
'''
Dictionary passed to the subsequent call to the :func:`setup` function.
'''

# ....................{ SETUP                             }....................
setuptools.setup(**_SETUP_OPTIONS)
