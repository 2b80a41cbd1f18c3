"""Tests for the BeautifulSoup node adapter."""

from bs4 import BeautifulSoup

from owl import html_parse_from_string
from owl.dom.node import (
    NodeKind, attribute_map, attribute_pairs, child_nodes, first_child, is_element,
    is_text, last_child, next_sibling, node_kind, node_value, parent, prev_sibling
)


class TestNodeKind:
    def test_kinds(self):
        soup = BeautifulSoup('<!DOCTYPE html><!--c--><p>t</p>', 'html.parser')
        doctype, comment, p = soup.contents
        assert node_kind(soup) is NodeKind.DOCUMENT
        assert node_kind(doctype) is NodeKind.DOCTYPE
        assert node_kind(comment) is NodeKind.COMMENT
        assert node_kind(p) is NodeKind.ELEMENT
        assert node_kind(p.contents[0]) is NodeKind.TEXT
        assert is_element(p) and not is_element(comment) and not is_element(None)
        assert is_text(p.contents[0]) and not is_text(comment)

    def test_node_value(self):
        p = html_parse_from_string('<p>text</p>').find('p').node
        assert node_value(p) == 'p'
        assert node_value(p.contents[0]) == 'text'


class TestAttributes:
    def test_pairs_in_order(self):
        p = html_parse_from_string('<p id="x" class="a b"></p>').find('p').node
        assert attribute_pairs(p) == [('id', 'x'), ('class', 'a b')]
        assert attribute_map(p) == {'id': 'x', 'class': 'a b'}

    def test_multi_valued_lists_are_joined(self):
        soup = BeautifulSoup('<p class="a b"></p>', 'html.parser')
        assert attribute_pairs(soup.p) == [('class', 'a b')]

    def test_non_elements_have_no_attributes(self):
        p = html_parse_from_string('<p>t</p>').find('p').node
        assert attribute_pairs(p.contents[0]) == []
        assert attribute_pairs(BeautifulSoup('<p id="x"></p>', 'html.parser')) == []


class TestLinks:
    def test_navigation(self):
        ul = html_parse_from_string('<ul><li>a</li><li>b</li><li>c</li></ul>').find('ul').node
        a, b, c = child_nodes(ul)
        assert first_child(ul) is a
        assert last_child(ul) is c
        assert next_sibling(a) is b
        assert prev_sibling(b) is a
        assert next_sibling(c) is None
        assert parent(b) is ul

    def test_leaves(self):
        text = html_parse_from_string('<p>t</p>').find('p').node.contents[0]
        assert child_nodes(text) == []
        assert first_child(text) is None
        assert last_child(text) is None
