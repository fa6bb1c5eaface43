"""Unit tests for the technical-term vocabulary scanner."""

import pytest

from jobmatch.matching.vocabulary import DEFAULT_TECHNICAL_TERMS, KeywordVocabulary


class TestDefaultVocabulary:
    """Tests for the built-in term table."""

    def test_default_table_has_27_terms(self):
        assert len(DEFAULT_TECHNICAL_TERMS) == 27
        assert len(KeywordVocabulary()) == 27

    def test_default_terms_are_lowercase(self):
        assert all(term == term.lower() for term in DEFAULT_TECHNICAL_TERMS)

    def test_multi_word_terms_present(self):
        vocab = KeywordVocabulary()
        assert "machine learning" in vocab
        assert "distributed systems" in vocab
        assert "ci/cd" in vocab


class TestScan:
    """Tests for free-text scanning."""

    @pytest.fixture
    def vocab(self):
        return KeywordVocabulary()

    def test_only_listed_terms_are_found(self, vocab):
        """Terraform is not in the table, so only kubernetes is returned."""
        assert vocab.scan("Experience with Kubernetes and Terraform") == ["kubernetes"]

    def test_case_insensitive_and_lowercased(self, vocab):
        assert vocab.scan("PYTHON, Java and AWS") == ["python", "java", "aws"]

    def test_repeats_are_returned(self, vocab):
        assert vocab.scan("python here, python there") == ["python", "python"]

    def test_whole_word_only(self, vocab):
        """'ai' inside 'main' and 'java' inside 'javascript' are not found."""
        assert vocab.scan("maintain the main branch") == []
        assert vocab.scan("JavaScript frontends") == ["javascript"]

    def test_multi_word_term(self, vocab):
        assert vocab.scan("Applied Machine Learning to ranking") == ["machine learning"]

    def test_term_with_punctuation(self, vocab):
        assert vocab.scan("Own the CI/CD pipeline") == ["ci/cd"]

    def test_adjacent_punctuation_is_a_boundary(self, vocab):
        assert vocab.scan("(docker), sql; nosql.") == ["docker", "sql", "nosql"]

    def test_empty_text(self, vocab):
        assert vocab.scan("") == []
        assert vocab.scan(None) == []

    def test_longest_term_wins(self):
        vocab = KeywordVocabulary(["machine", "machine learning"])
        assert vocab.scan("machine learning and machine vision") == [
            "machine learning",
            "machine",
        ]


class TestCustomVocabulary:
    """Tests for configured term tables."""

    def test_terms_are_normalized(self):
        vocab = KeywordVocabulary([" Terraform ", "terraform", "GO"])
        assert vocab.terms == ("terraform", "go")

    def test_regex_metacharacters_are_escaped(self):
        vocab = KeywordVocabulary(["c++", "node.js"])
        assert vocab.scan("C++ and Node.js, not nodexjs") == ["c++", "node.js"]

    def test_empty_vocabulary_rejected(self):
        with pytest.raises(ValueError, match="at least one term"):
            KeywordVocabulary([])

        with pytest.raises(ValueError):
            KeywordVocabulary(["  ", ""])

    def test_contains_normalizes(self):
        vocab = KeywordVocabulary(["Terraform"])
        assert " TERRAFORM " in vocab
        assert "ansible" not in vocab

    def test_repr(self):
        assert repr(KeywordVocabulary(["a", "b"])) == "KeywordVocabulary(2 terms)"
