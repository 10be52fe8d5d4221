# -*- coding: utf-8 -*-
#
# Copyright (C) 2014 Ry Ferguson
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

import unittest

def suite():
    from cornwand.tests import test_builder, test_core, test_elements

    suite = unittest.TestSuite()
    suite.addTest(test_core.suite())
    suite.addTest(test_builder.suite())
    suite.addTest(test_elements.suite())
    return suite

if __name__ == '__main__':
    unittest.main(defaultTest='suite')
