"""Tests for query parsing and single-node matching."""

import pytest

from owl import ErrorKind, OwlError, html_parse_from_string
from owl.dom.matcher import (
    Query, attribute_contains, attribute_equals, matches, parse_query
)


def element(markup):
    """First element inside the parsed body"""
    return html_parse_from_string(markup).find('body').find('').node


class TestParseQuery:
    def test_tag_only(self):
        query = parse_query('div')
        assert query == Query(tag='div')
        assert not query.has_attribute

    def test_tag_with_attribute_pair(self):
        query = parse_query('a', ('href', 'hello'), strict=True)
        assert query.attribute == 'href'
        assert query.value == 'hello'
        assert query.strict

    def test_none_tag_is_wildcard(self):
        assert parse_query(None).tag == ''

    @pytest.mark.parametrize('attrs', [('id',), ('id', '1', 'class'), ('id', '1', 'class', 'x')])
    def test_unsupported_argument_counts_are_rejected(self, attrs):
        with pytest.raises(OwlError) as excinfo:
            parse_query('div', attrs)
        assert excinfo.value.kind is ErrorKind.MALFORMED_QUERY

    def test_non_string_values_are_rejected(self):
        with pytest.raises(OwlError) as excinfo:
            parse_query('div', ('id', 4))
        assert excinfo.value.kind is ErrorKind.MALFORMED_QUERY

    def test_describe(self):
        assert parse_query('').describe() == '`*`'
        assert parse_query('p', ('id', 'x')).describe() == '`p` with attribute `id=x`'


class TestAttributeComparison:
    def test_loose_matches_any_token(self):
        assert attribute_contains('class', 'a b c', 'class', 'b')
        assert not attribute_contains('class', 'a b c', 'class', 'd')

    def test_loose_requires_same_name(self):
        assert not attribute_contains('id', 'a b c', 'class', 'a')

    def test_loose_does_not_match_partial_tokens(self):
        assert not attribute_contains('class', 'first second', 'class', 'first second')
        assert not attribute_contains('class', 'firsts', 'class', 'first')

    def test_strict_matches_whole_value_only(self):
        assert attribute_equals('class', 'a b c', 'class', 'a b c')
        assert not attribute_equals('class', 'a b c', 'class', 'c b a')
        assert not attribute_equals('class', 'a b c', 'class', 'a b')


class TestMatches:
    def test_tag_must_match(self):
        node = element('<div id="x"></div>')
        assert matches(node, Query(tag='div'))
        assert not matches(node, Query(tag='span'))

    def test_wildcard_tag_with_attribute(self):
        node = element('<section id="2"></section>')
        assert matches(node, Query(attribute='id', value='2'))

    def test_loose_and_strict_class(self):
        node = element('<div class="first second"></div>')
        assert matches(node, Query('div', 'class', 'first'))
        assert not matches(node, Query('div', 'class', 'first', strict=True))
        assert matches(node, Query('div', 'class', 'first second', strict=True))
        assert not matches(node, Query('div', 'class', 'second first', strict=True))

    def test_text_nodes_never_match(self):
        node = element('<p>hello</p>')
        text = node.contents[0]
        assert not matches(text, Query())
