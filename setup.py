#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright (C) 2014 Ry Ferguson
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

from setuptools import setup


setup(
    name = 'cornwand',
    version = '1.0.0',
    description = 'Small functions for generating HTML markup as text',
    author = 'Ry Ferguson',
    license = 'MIT',
    packages = ['cornwand', 'cornwand.tests'],
    python_requires = '>=3.6',
    extras_require = {
        'test': ['pytest'],
    },
    test_suite = 'cornwand.tests.suite',
    classifiers = [
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Text Processing :: Markup :: HTML',
    ],
)
