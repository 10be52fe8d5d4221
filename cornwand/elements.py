# -*- coding: utf-8 -*-
#
# Copyright (C) 2014 Ry Ferguson
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

"""Shortcut functions for commonly used HTML tags.

Each function is the same as `tag()` with the name already set:

>>> print(p({'class': 'lead'}, 'Hello'))
<p class="lead">Hello</p>
>>> print(meta({'charset': 'utf-8'}))
<meta charset="utf-8"/>
"""

from cornwand.builder import unpack_tag

__all__ = ['DocType', 'html', 'head', 'title', 'base', 'link', 'meta', 'body',
           'p', 'div', 'html5', 'css']


class DocType(object):
    """Defines commonly used DOCTYPE declarations as constants."""

    HTML5 = '<!doctype html>'


def html(*args):
    return unpack_tag('html', args)

def head(*args):
    return unpack_tag('head', args)

def title(*args):
    return unpack_tag('title', args)

def base(*args):
    return unpack_tag('base', args)

def link(*args):
    return unpack_tag('link', args)

def meta(*args):
    return unpack_tag('meta', args)

def body(*args):
    return unpack_tag('body', args)

def p(*args):
    return unpack_tag('p', args)

def div(*args):
    return unpack_tag('div', args)


def html5(*args):
    """Return an `<html>` tag preceded by the HTML5 doctype declaration.
    
    >>> print(html5())
    <!doctype html><html/>
    >>> print(html5({'lang': 'en'}, head(title('Home')), body()))
    <!doctype html><html lang="en"><head><title>Home</title></head><body/></html>
    """
    return DocType.HTML5 + html(*args)


def css(url):
    """Return a `<link>` tag referencing a stylesheet.
    
    >>> print(css('style.css'))
    <link rel="stylesheet" href="style.css"/>
    >>> print(css('/s.css?a=1&b=2'))
    <link rel="stylesheet" href="/s.css?a=1&amp;b=2"/>
    """
    return link({'rel': 'stylesheet', 'href': url})
