# -*- coding: utf-8 -*-
#
# Copyright (C) 2014 Ry Ferguson
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

from cornwand.core import attrs, is_attrs, to_text

__all__ = ['tag', 'unpack_tag', 'TagFactory', 'tags']


def tag(name, *args):
    """Return the markup of an HTML tag with attributes and content.
    
    Without any further arguments the tag closes itself:
    
    >>> print(tag('br'))
    <br/>
    
    If the second argument is a mapping, it is used as the tag attributes
    and the remaining arguments form the content:
    
    >>> print(tag('div', {'class': 'a'}, 'x', 'y'))
    <div class="a">xy</div>
    
    Otherwise all arguments after the name are concatenated to form the
    content:
    
    >>> print(tag('a', 'x', 'y'))
    <a>xy</a>
    >>> print(tag('em', 42))
    <em>42</em>
    
    The tag closes itself whenever there are no content arguments, even if
    there are attributes. An empty string does count as content:
    
    >>> print(tag('div', {'class': 'a'}))
    <div class="a"/>
    >>> print(tag('p', ''))
    <p></p>
    
    Content is inserted as it is, so nested tags can be passed as strings:
    
    >>> print(tag('p', 'Hello ', tag('b', 'world')))
    <p>Hello <b>world</b></p>
    """
    name = to_text(name)
    if args and is_attrs(args[0]):
        attrib = attrs(args[0])
        content = args[1:]
    else:
        attrib = ''
        content = args
    if not content:
        return '<%s%s/>' % (name, attrib)
    return '<%s%s>%s</%s>' % (name, attrib,
                              ''.join([to_text(c) for c in content]), name)


def unpack_tag(name, args):
    """Same as `tag()`, but the arguments after the name are passed as a
    single sequence.
    
    >>> print(unpack_tag('p', [{'id': 'intro'}, 'Hello']))
    <p id="intro">Hello</p>
    >>> print(unpack_tag('hr', []))
    <hr/>
    """
    return tag(name, *args)


class TagFactory(object):
    """Factory for tag functions.
    
    Accessing an attribute of the factory returns a function that builds
    tags of the corresponding name, with the same argument conventions as
    `tag()`:
    
    >>> factory = TagFactory()
    >>> print(factory.section({'id': 's1'}, factory.h2('Title')))
    <section id="s1"><h2>Title</h2></section>
    >>> print(factory.img({'src': 'a.png', 0: 'ismap'}))
    <img src="a.png" ismap/>
    
    Tag names that are not valid Python identifiers can be given using item
    access:
    
    >>> print(factory['my-widget']('x'))
    <my-widget>x</my-widget>
    
    Calling the factory concatenates fragments without an enclosing tag:
    
    >>> print(factory('Hello, ', factory.em('world'), '!'))
    Hello, <em>world</em>!
    
    Usually the `TagFactory` class is not used directly. Rather, the `tags`
    instance should be used.
    """

    def __call__(self, *args):
        return ''.join([to_text(arg) for arg in args])

    def __getitem__(self, name):
        def build(*args):
            return tag(name, *args)
        build.__name__ = str(name)
        return build

    def __getattr__(self, name):
        if name.startswith('__'):
            raise AttributeError(name)
        return self[name]


tags = TagFactory()
