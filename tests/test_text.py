"""Unit tests for tokenization and keyword extraction."""

import pytest

from codeindex.text import extract_keywords, tokenize
from codeindex.text.config import TEXT_CONFIG

pytestmark = pytest.mark.fast


class TestTokenizer:
    """Tokenizer splits on non-alphanumerics and drops short tokens."""

    def test_lowercases_and_splits(self):
        assert list(tokenize("getUserName_v2 a ab abc")) == ["getusername", "abc"]

    def test_empty_input(self):
        assert list(tokenize("")) == []
        assert list(tokenize(None)) == []

    def test_stream_is_restartable(self):
        stream = tokenize("alpha beta gamma")
        assert list(stream) == list(stream) == ["alpha", "beta", "gamma"]

    def test_binary_input_does_not_raise(self):
        assert list(tokenize(b"\xff\xfehello world\x00")) == ["hello", "world"]

    def test_non_string_input_is_coerced(self):
        assert list(tokenize(12345)) == ["12345"]

    def test_content_is_capped(self, monkeypatch):
        monkeypatch.setitem(TEXT_CONFIG, "max_content_chars", 9)
        assert list(tokenize("alpha beta gamma delta")) == ["alpha", "bet"]


class TestKeywordExtractor:
    """Keyword sets combine identifiers and technical terms."""

    def test_identifiers_are_lowercased(self):
        keywords = extract_keywords("const fooBar = verifyPassword(user);")
        assert "foobar" in keywords
        assert "verifypassword" in keywords
        assert "user" in keywords

    def test_capitalized_words_are_not_identifiers(self):
        keywords = extract_keywords("AuthService")
        assert "authservice" not in keywords

    def test_stopwords_are_excluded(self):
        keywords = extract_keywords("the user and the token")
        assert "the" not in keywords
        assert "and" not in keywords
        assert {"user", "token"} <= keywords

    def test_short_identifiers_are_excluded(self):
        assert "id" not in extract_keywords("ab id xyz")

    def test_tech_terms_match_as_substrings(self):
        keywords = extract_keywords("Returns a PromiseLike from an EventEmitter")
        assert "promise" in keywords
        assert "event" in keywords

    def test_const_is_a_tech_term_but_not_an_identifier(self):
        keywords = extract_keywords("const")
        assert keywords == {"const"}

    def test_empty_content(self):
        assert extract_keywords("") == set()

    def test_deterministic(self):
        content = "async function handleEvent(callback) { await callback(); }"
        assert extract_keywords(content) == extract_keywords(content)
