"""
libbcrypt setup script
"""
#=============================================================================
# init script env -- ensure cwd = root of source dir
#=============================================================================
import os
root_dir = os.path.abspath(os.path.join(__file__, ".."))
os.chdir(root_dir)

#=============================================================================
# imports
#=============================================================================
import re
from setuptools import setup, find_packages

#=============================================================================
# version string
#=============================================================================

# read version string from libbcrypt without importing it
with open(os.path.join(root_dir, "libbcrypt", "__init__.py")) as fh:
    version = re.search(r'^__version__ = "([^"]+)"', fh.read(), re.M).group(1)

#=============================================================================
# static text
#=============================================================================
SUMMARY = "parser and rehash policies for bcrypt hash strings"

DESCRIPTION = """\
libbcrypt validates and decomposes stored bcrypt hashes (``$2a$12$...``),
exposing the variant, cost factor, salt and digest, and decides whether a
stored hash should be upgraded to a new variant or cost factor.
It performs no hashing itself.
"""

KEYWORDS = """\
password hash bcrypt
modular crypt format
rehash cost factor
"""

CLASSIFIERS = """\
Intended Audience :: Developers
License :: OSI Approved :: BSD License
Natural Language :: English
Operating System :: OS Independent
Programming Language :: Python :: 3
Programming Language :: Python :: Implementation :: CPython
Programming Language :: Python :: Implementation :: PyPy
Topic :: Security :: Cryptography
Topic :: Software Development :: Libraries
""".splitlines()

if '.dev' in version:
    CLASSIFIERS.append("Development Status :: 3 - Alpha")
else:
    CLASSIFIERS.append("Development Status :: 4 - Beta")

#=============================================================================
# run setup
#=============================================================================
setup(
    # package info
    packages=find_packages(root_dir, include=["libbcrypt", "libbcrypt.*"]),
    zip_safe=True,

    # metadata
    name="libbcrypt-format",
    version=version,
    license="BSD",

    description=SUMMARY,
    long_description=DESCRIPTION,
    keywords=KEYWORDS,
    classifiers=CLASSIFIERS,

    python_requires=">=3.9",
    install_requires=[
        "typing_extensions>=4.0",
    ],

    extras_require={
        "test": [
            "pytest",
            "pytest-archon",
            "bcrypt>=4.0",
        ],
    },
)

#=============================================================================
# eof
#=============================================================================
