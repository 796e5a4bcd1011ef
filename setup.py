#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re
from pathlib import Path

from setuptools import find_packages, setup

# XXX: importing the package would need its dependencies already installed
_version_file = Path(__file__).parent / 'nothingness' / 'version.py'
__version__ = re.search(r"^BASE_VERSION = '([^']+)'$", _version_file.read_text(), re.MULTILINE).group(1)

setup(
    name='nothingness',
    version=__version__,
    description='The empty value of a visitor-based serialization protocol',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    python_requires='>=3.11',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    packages=find_packages(exclude=('nothingness_tests', 'nothingness_tests.*')),
    install_requires=[
        'structlog',
        'pydantic>=2',
        'typing_extensions>=4.10',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
