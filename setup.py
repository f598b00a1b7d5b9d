#!/usr/bin/env python

# Setup script for the `distro-lifecycle' package.
#
# Last Change: October 16, 2026

"""
Setup script for the `distro-lifecycle` package.

**python setup.py install**
  Install from the working directory into the current Python environment.

**python setup.py sdist**
  Build a source distribution archive.

**python setup.py bdist_wheel**
  Build a wheel distribution archive.
"""

# Standard library modules.
import codecs
import os
import re

# De-facto standard solution for Python packaging.
from setuptools import find_packages, setup


def get_contents(*args):
    """Get the contents of a file relative to the source distribution directory."""
    with codecs.open(get_absolute_path(*args), 'r', 'UTF-8') as handle:
        return handle.read()


def get_version(*args):
    """Extract the version number from a Python module."""
    contents = get_contents(*args)
    metadata = dict(re.findall('__([a-z]+)__ = [\'"]([^\'"]+)', contents))
    return metadata['version']


def get_requirements(*args):
    """Get requirements from pip requirement files."""
    requirements = set()
    with open(get_absolute_path(*args)) as handle:
        for line in handle:
            # Strip comments.
            line = re.sub(r'^#.*|\s#.*', '', line)
            # Ignore empty lines
            if line and not line.isspace():
                requirements.add(re.sub(r'\s+', '', line))
    return sorted(requirements)


def get_absolute_path(*args):
    """Transform relative pathnames into absolute pathnames."""
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), *args)


setup(
    name='distro-lifecycle',
    version=get_version('distro_lifecycle', '__init__.py'),
    description="Release lifecycle queries (stable, supported, devel, LTS) for Debian and Ubuntu series",
    long_description=get_contents('README.rst'),
    license='MIT',
    packages=find_packages(),
    package_data={'distro_lifecycle': ['data/*.csv']},
    python_requires='>=3.6',
    install_requires=get_requirements('requirements.txt'),
    extras_require={'tests': get_requirements('requirements-tests.txt')},
    entry_points=dict(console_scripts=[
        'debian-lifecycle = distro_lifecycle.cli:debian_main',
        'ubuntu-lifecycle = distro_lifecycle.cli:ubuntu_main',
    ]),
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: System :: Systems Administration',
        'Topic :: Utilities',
    ])
