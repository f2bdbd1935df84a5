#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import find_packages, setup


# Load the __version__ variable
exec(open('deferchain/__version__.py').read())


with open('README.rst') as readme_file:
    long_description = readme_file.read()


setup_kwargs = {
    'name': "deferchain",
    'version': __version__,  # noqa
    'description': "Combinators to compose deferred asynchronous results",
    'long_description': long_description,
    'license': "GPLv3",
    'classifiers': [
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries"
    ],
    'keywords': "deferred promise asynchronous combinators reactor",
    'packages': find_packages(exclude=['tests', 'tests.*']),
    'python_requires': '>=3.6',
    'install_requires': [
        'appdirs>=1.4'
    ],
    'extras_require': {
        'test': ['pytest>=3.0', 'tox']
    },
    'zip_safe': False
}


setup(**setup_kwargs)
