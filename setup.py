#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

import os
import re

from setuptools import find_packages, setup  # type: ignore

with open("requirements.txt") as req_file:
    requirements = [line for line in req_file.read().splitlines() if line]

with open(os.path.join("jwkpem", "__version__.py")) as version_file:
    version_match = re.search(r'__version__ = "([^"]+)"', version_file.read())
    assert version_match, "Version not found"
    version = version_match.group(1)

with open("README.md", "r") as f:
    long_description = f.read()

extras_require = {
    "test": ["pytest>=7.4", "pytest-cov", "importlib-metadata>=6.0"],
}

setup(
    name="jwkpem",
    version=version,
    description="Key file converter between JWK and PEM formats",
    author="NXP",
    license="BSD-3-Clause",
    long_description=long_description,
    long_description_content_type="text/markdown",
    platforms="Windows, Linux, Mac OSX",
    python_requires=">=3.9",
    install_requires=requirements,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS :: MacOS X",
        "License :: OSI Approved :: BSD License",
        "Topic :: Security :: Cryptography",
        "Topic :: Utilities",
    ],
    packages=find_packages(exclude=["tests.*", "tests"]),
    entry_points={
        "console_scripts": [
            "jwkpem=jwkpem.apps.jwkpem:safe_main",
        ],
    },
    extras_require=extras_require,
)
