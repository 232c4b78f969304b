"""
Tests for parsetree.py - parse tree XML to node conversion.
"""

import pytest
from errors import ParseTreeError
from parsetree import Element, Text, parse_tree, text_content, capitalize


class TestParseTree:
    """Tests for converting XML into Element and Text nodes."""

    def test_root_element(self):
        root = parse_tree('<root/>')
        assert root == Element('root')
        assert root.children == ()

    def test_keeps_text_and_tails_in_order(self):
        root = parse_tree('<root>before<template><title>en</title></template>after</root>')
        assert root.children[0] == Text('before')
        assert isinstance(root.children[1], Element)
        assert root.children[1].name == 'template'
        assert root.children[2] == Text('after')

    def test_no_empty_text_nodes(self):
        root = parse_tree('<root><a/><b/></root>')
        assert [node.name for node in root.children] == ['a', 'b']

    def test_keeps_attributes(self):
        root = parse_tree('<root><part><name index="1"/></part></root>')
        name = root.child('part').child('name')
        assert name.attributes == {'index': '1'}

    def test_malformed_xml(self):
        with pytest.raises(ParseTreeError):
            parse_tree('<root><template></root>')

    def test_empty_document(self):
        with pytest.raises(ParseTreeError):
            parse_tree('')

    def test_rejects_entity_declarations(self):
        xml = '<!DOCTYPE root [<!ENTITY a "aaaa">]><root>&a;</root>'
        with pytest.raises(ParseTreeError):
            parse_tree(xml)


class TestElementLookup:
    """Tests for the child lookup helpers."""

    def test_child_returns_first(self):
        root = parse_tree('<root><a>1</a><a>2</a></root>')
        assert text_content(root.child('a')) == '1'

    def test_child_missing(self):
        assert parse_tree('<root>text</root>').child('a') is None

    def test_elements(self):
        root = parse_tree('<root><part/>x<name/><part/></root>')
        assert len(root.elements('part')) == 2


class TestTextContent:
    """Tests for flattening nodes to text."""

    def test_nested(self):
        root = parse_tree('<value>A <b>bold <i>and</i></b> plain</value>')
        assert text_content(root) == 'A bold and plain'

    def test_text_node(self):
        assert text_content(Text('hi')) == 'hi'

    def test_empty_element(self):
        assert text_content(Element('value')) == ''


class TestCapitalize:
    """Tests for first-letter capitalization."""

    def test_uppercases_first_letter(self):
        assert capitalize('information') == 'Information'

    def test_leaves_rest_alone(self):
        assert capitalize('fooBAR') == 'FooBAR'
        assert capitalize('FooBar') == 'FooBar'

    def test_empty(self):
        assert capitalize('') == ''


class TestNodeHashing:
    """Tests for using nodes as dict keys and set members."""

    def test_element_is_hashable(self):
        root = parse_tree('<root><part><name index="1"/></part>text</root>')
        assert hash(root) == hash(parse_tree('<root><part><name index="1"/></part>text</root>'))
        assert len({root, parse_tree('<root/>')}) == 2

    def test_attributes_still_compared(self):
        assert parse_tree('<name index="1"/>') != parse_tree('<name index="2"/>')
