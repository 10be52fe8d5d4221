# -*- coding: utf-8 -*-
#
# Copyright (C) 2014 Ry Ferguson
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

import doctest


class Unprintable(object):
    """Object that refuses to be converted to text."""

    def __str__(self):
        raise RuntimeError('no text for you')


def doctest_suite(module, **kwargs):
    return doctest.DocTestSuite(module, **kwargs)


def run_doctests(module):
    """Run the docstring examples of a module and return the number of
    failures.
    """
    failed, _ = doctest.testmod(module, verbose=False, report=True)
    return failed
