"""Unit tests for the inverted keyword index."""

import pytest

from codeindex.index import InvertedKeywordIndex

pytestmark = pytest.mark.fast


def test_insert_and_lookup():
    index = InvertedKeywordIndex()
    index.insert("password", "src/auth.ts:login")
    index.insert("password", "src/auth.ts:reset")
    index.insert("password", "src/auth.ts:login")

    assert index.lookup("password") == {"src/auth.ts:login", "src/auth.ts:reset"}
    assert len(index) == 1


def test_lookup_unknown_keyword_is_empty():
    assert InvertedKeywordIndex().lookup("missing") == frozenset()


def test_remove_drops_empty_postings():
    index = InvertedKeywordIndex()
    index.insert_all({"token", "email"}, "a")
    index.insert("token", "b")

    index.remove_all({"token", "email"}, "a")

    assert "email" not in index
    assert index.lookup("token") == {"b"}
    assert len(index) == 1


def test_remove_unknown_is_noop():
    index = InvertedKeywordIndex()
    index.remove("token", "a")
    index.insert("token", "a")
    index.remove("token", "b")
    assert index.lookup("token") == {"a"}


def test_lookup_returns_a_snapshot():
    index = InvertedKeywordIndex()
    index.insert("token", "a")
    snapshot = index.lookup("token")
    index.insert("token", "b")
    assert snapshot == {"a"}


def test_keywords_for():
    index = InvertedKeywordIndex()
    index.insert_all({"token", "email"}, "a")
    index.insert("map", "b")
    assert index.keywords_for("a") == {"token", "email"}
