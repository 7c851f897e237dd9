import operator

import pytest
from flexcomplete.autocomplete import CandidateMatcher


@pytest.fixture
def items():
    return [{'name': 'abc', 'id': 1}, {'name': 'cba', 'id': 2},
            {'name': 'xyz', 'id': 3}]


def test_fuzzy_matching_is_the_default():
    matcher = CandidateMatcher(['abc', 'cba', 'xyz'])
    assert matcher.match_fuzzy
    assert matcher.autocomplete('a') == ['cba', 'abc']


def test_no_completion():
    matcher = CandidateMatcher(['foo', 'bar'])
    assert matcher.autocomplete('baz') == []


def test_returns_the_original_items(items):
    matcher = CandidateMatcher(items, get_name=operator.itemgetter('name'))
    result = matcher.autocomplete('a')
    assert [item['id'] for item in result] == [2, 1]
    assert result[0] is items[1]


def test_disable_falls_back_to_prefix_matching():
    matcher = CandidateMatcher(['abd', 'abc', 'b', 'cab'])
    matcher.disable()
    assert not matcher.match_fuzzy
    assert matcher.autocomplete('ab') == ['abc', 'abd']


def test_disable_and_enable_are_idempotent():
    matcher = CandidateMatcher(['abc', 'cba'])
    matcher.disable()
    matcher.disable()
    assert not matcher.match_fuzzy
    assert matcher.autocomplete('a') == ['abc']
    matcher.enable()
    matcher.enable()
    assert matcher.match_fuzzy
    assert matcher.autocomplete('a') == ['cba', 'abc']


def test_empty_word_with_prefix_matching_returns_everything():
    matcher = CandidateMatcher(['b', 'a'], match_fuzzy=False)
    assert matcher.autocomplete('') == ['a', 'b']


def test_case_fold():
    matcher = CandidateMatcher(['ABC'])
    assert matcher.autocomplete('abc') == []
    matcher.case_fold = True
    assert matcher.autocomplete('abc') == ['ABC']


def test_case_fold_with_prefix_matching():
    matcher = CandidateMatcher(['Foo', 'bar'], case_fold=True,
                               match_fuzzy=False)
    assert matcher.autocomplete('f') == ['Foo']


def test_no_candidates():
    matcher = CandidateMatcher()
    assert matcher.autocomplete('a') == []
    matcher.disable()
    assert matcher.autocomplete('') == []
