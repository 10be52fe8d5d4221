# -*- coding: utf-8 -*-
#
# Copyright (C) 2014 Ry Ferguson
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

"""Core functions for escaping text and serializing attributes."""

from collections.abc import Mapping
import logging

__all__ = ['CoercionError', 'escape', 'attrs', 'serialize_attributes',
           'to_text']

log = logging.getLogger(__name__)


class CoercionError(ValueError):
    """Exception raised when a value can not be converted to text."""

    def __init__(self, value, cause=None):
        """Create the exception.
        
        @param value: the object that could not be converted
        @param cause: the exception raised by the conversion, if any
        """
        message = 'cannot convert %s object to text' % type(value).__name__
        if cause is not None:
            message = '%s (%s)' % (message, cause)
        ValueError.__init__(self, message)
        self.value = value


def to_text(value):
    """Convert a value to a string.
    
    >>> to_text(None)
    ''
    >>> to_text(42)
    '42'
    >>> to_text('foo')
    'foo'
    
    Every conversion in this package goes through this function, so a value
    that can not be converted always results in a `CoercionError`.
    """
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception as e:
        log.debug('Conversion of %s object to text failed',
                  type(value).__name__, exc_info=True)
        raise CoercionError(value, e) from e


def escape(value, quotes=True):
    """Escape the special characters (&, <, >, " and ') of a value.
    
    >>> print(escape('1 < 2 & "3" > \\'4\\''))
    1 &lt; 2 &amp; &quot;3&quot; &gt; &#039;4&#039;
    
    Values that are not strings are converted first, with `None` becoming the
    empty string:
    
    >>> print(escape(None) == '')
    True
    >>> print(escape(3.5))
    3.5
    
    Escaping is not idempotent, already escaped text is escaped again:
    
    >>> print(escape(escape('&')))
    &amp;amp;
    
    If the `quotes` parameter is set to `False`, the " and ' characters are
    left as is. Escaping quotes is only required for strings that are to be
    used in attribute values.
    
    >>> print(escape('"Hello" & \\'bye\\'', quotes=False))
    "Hello" &amp; 'bye'
    """
    text = to_text(value)
    if not text:
        return ''
    text = text.replace('&', '&amp;') \
               .replace('<', '&lt;') \
               .replace('>', '&gt;')
    if quotes:
        text = text.replace('"', '&quot;') \
                   .replace("'", '&#039;')
    return text


def attrs(mapping):
    """Convert a mapping into a string of HTML attributes.
    
    Every attribute is preceded by a single space, in the iteration order of
    the mapping:
    
    >>> print(attrs({'id': 'main', 'class': 'wide'}))
     id="main" class="wide"
    
    Values are escaped, names are inserted as they are:
    
    >>> print(attrs({'title': '1 < 2', 'data-x<y': 'v'}))
     title="1 &lt; 2" data-x<y="v"
    
    An entry with an integer key is a flag attribute. Only its value is
    written, without quotes, and it is left out when the value is empty:
    
    >>> print(attrs({0: 'disabled', 1: '', 'name': ''}))
     disabled name=""
    
    >>> attrs({})
    ''
    """
    buf = []
    for name, value in mapping.items():
        value = escape(value)
        if isinstance(name, int):
            if value:
                buf.append(' %s' % value)
        else:
            buf.append(' %s="%s"' % (to_text(name), value))
    return ''.join(buf)

serialize_attributes = attrs


def is_attrs(obj):
    """Return whether the given object is an attribute mapping.
    
    This is the only place where arguments are told apart by their type.
    
    >>> is_attrs({'id': 'foo'})
    True
    >>> is_attrs('id="foo"')
    False
    """
    return isinstance(obj, Mapping)
