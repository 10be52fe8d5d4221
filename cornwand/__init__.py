# -*- coding: utf-8 -*-
#
# Copyright (C) 2014 Ry Ferguson
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

"""This package provides small functions for generating HTML markup as text.

Tags are built from a name, an optional mapping of attributes and any number
of content arguments:

>>> from cornwand import tag
>>> print(tag('a', {'href': '/?a=1&b=2'}, 'Next'))
<a href="/?a=1&amp;b=2">Next</a>

Shortcuts exist for the tags of a basic document:

>>> from cornwand import html5, head, title, css, body, div
>>> print(html5(head(title('Home'), css('style.css')), body(div('Hi'))))
<!doctype html><html><head><title>Home</title><link rel="stylesheet" href="style.css"/></head><body><div>Hi</div></body></html>

Nothing is retained between calls, every function simply returns a string.
"""

from cornwand.core import *
from cornwand.builder import *
from cornwand.elements import *

__version__ = '1.0.0'
