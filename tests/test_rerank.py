"""
Tests for suggestion ranking.

Tests cover:
- Threshold filtering and confidence labels
- Best-per-translation deduplication after sorting
- Stable ordering and top-N truncation
- Ranking over the full corpus in both directions
"""

import pytest

from tlahtolli.models import DictionaryEntry, Direction, Suggestion, confidence_label
from tlahtolli.refine.rerank import rank_suggestions, score_corpus
from tlahtolli.translate.dictionary import load_dictionary

ES = Direction.SPANISH_TO_INDIGENOUS
IND = Direction.INDIGENOUS_TO_SPANISH


@pytest.fixture
def corpus():
    return load_dictionary([
        {"espanol": "perro, can", "nahuatl": "chichi"},
        {"espanol": "agua", "nahuatl": "atl"},
        {"espanol": "casa", "nahuatl": "calli"},
        {"espanol": "flor", "nahuatl": "xochitl"},
    ]).corpus


class TestConfidenceLabel:
    """Test score buckets."""

    @pytest.mark.parametrize("score,label", [
        (1.1, "High"),
        (0.81, "High"),
        (0.8, "Medium"),
        (0.51, "Medium"),
        (0.5, "Low"),
        (0.21, "Low"),
    ])
    def test_buckets(self, score, label):
        assert confidence_label(score) == label

    def test_spanish_label(self):
        suggestion = Suggestion("chichi", "perro", 0.4, "Low")
        assert suggestion.confianza == "Baja"
        assert suggestion.to_dict()["palabraOriginal"] == "perro"


class TestRankSuggestions:
    """Test ranking against a corpus."""

    def test_plural_query(self, corpus):
        """'perros' suggests 'chichi' via 'perro' with a partial-match score."""
        results = rank_suggestions("perros", ES, corpus)

        assert len(results) == 1
        assert results[0].translation == "chichi"
        assert results[0].matched_source == "perro"
        assert results[0].score == pytest.approx(0.4)
        assert results[0].confidence == "Low"

    def test_exact_query(self, corpus):
        results = rank_suggestions("Perro", ES, corpus)
        assert results[0].translation == "chichi"
        assert results[0].score == 1.0
        assert results[0].confidence == "High"

    def test_no_match(self, corpus):
        assert rank_suggestions("tonatiuh", ES, corpus) == []

    def test_best_score_per_translation(self):
        """Sorting happens before deduplication, so the best match survives."""
        corpus = [
            DictionaryEntry("perro negro", "chichi"),
            DictionaryEntry("perro", "chichi"),
        ]
        results = rank_suggestions("perro", ES, corpus)

        assert len(results) == 1
        assert results[0].matched_source == "perro"
        assert results[0].score == 1.0

    def test_order_and_top_n(self):
        """Descending score, ties in corpus order, cut at top_n."""
        corpus = [
            DictionaryEntry("sol rojo", "x1"),
            DictionaryEntry("sol azul", "x2"),
            DictionaryEntry("sol", "x3"),
            DictionaryEntry("luna", "x4"),
        ]
        assert [s.translation for s in rank_suggestions("sol", ES, corpus)] == ["x3", "x1", "x2"]
        assert [s.translation for s in rank_suggestions("sol", ES, corpus, top_n=2)] == ["x3", "x1"]
        assert rank_suggestions("sol", ES, corpus, top_n=0) == []

    def test_deterministic(self, corpus):
        first = rank_suggestions("ca", ES, corpus)
        for _ in range(3):
            assert rank_suggestions("ca", ES, corpus) == first

    def test_reverse_direction_sees_all_synonyms(self, corpus):
        """Both variants of 'chichi' are suggested although the index keeps one."""
        results = rank_suggestions("chichi", IND, corpus)
        assert [s.translation for s in results] == ["perro", "can"]

    def test_direction_string(self, corpus):
        results = rank_suggestions("atl", "ind-es", corpus)
        assert results[0].translation == "agua"

    def test_min_score(self):
        corpus = [DictionaryEntry("perro", "chichi")]
        assert rank_suggestions("perros", ES, corpus, min_score=0.5) == []


class TestScoreCorpus:
    """Test raw scoring."""

    def test_keeps_corpus_order(self):
        corpus = [DictionaryEntry("sol rojo", "x1"), DictionaryEntry("sol", "x3")]
        scored = score_corpus("sol", ES, corpus)
        assert [s.translation for s in scored] == ["x1", "x3"]
