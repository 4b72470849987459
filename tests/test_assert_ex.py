"""
Unit tests for the shared assertion helpers
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence, Tuple

import pytest

import assert_ex
from issue_reactions.ensure import ArgumentError


class TestHasAttribute:
    """Test cases for has_attribute."""

    def test_returns_attribute(self):
        class Thing:
            marker = 'value'

        assert assert_ex.has_attribute(Thing, 'marker') == 'value'

    def test_missing_attribute_fails(self):
        with pytest.raises(AssertionError):
            assert_ex.has_attribute(object(), 'marker')


class TestReadOnlyCollections:
    """Test cases for read-only collection checks."""

    def test_tuple_is_read_only(self):
        assert_ex.is_read_only_collection((1, 2))

    def test_mapping_proxy_is_read_only(self):
        assert_ex.is_read_only_collection(MappingProxyType({'a': 1}))

    def test_list_is_not_read_only(self):
        with pytest.raises(AssertionError):
            assert_ex.is_read_only_collection([1, 2])

    def test_dict_is_not_read_only(self):
        with pytest.raises(AssertionError):
            assert_ex.is_read_only_collection({'a': 1})

    def test_string_is_not_a_collection(self):
        with pytest.raises(AssertionError):
            assert_ex.is_read_only_collection('abc')

    def test_read_only_types(self):
        assert_ex.is_read_only_collection_type(Tuple[int, ...])
        assert_ex.is_read_only_collection_type(Sequence[int])
        assert_ex.is_read_only_collection_type(Mapping[str, int])

    def test_mutable_types_fail(self):
        with pytest.raises(AssertionError):
            assert_ex.is_read_only_collection_type(List[int])
        with pytest.raises(AssertionError):
            assert_ex.is_read_only_collection_type(Dict[str, int])


class TestWhitespaceArguments:
    """Test cases for throws_when_given_whitespace_argument."""

    def test_passes_when_every_argument_is_rejected(self):
        seen = []

        def action(value):
            seen.append(value)
            raise ArgumentError('blank')

        assert_ex.throws_when_given_whitespace_argument(action)
        assert seen == list(assert_ex.WHITESPACE_ARGUMENTS)

    def test_fails_when_an_argument_is_accepted(self):
        with pytest.raises(pytest.fail.Exception):
            assert_ex.throws_when_given_whitespace_argument(lambda value: None)
