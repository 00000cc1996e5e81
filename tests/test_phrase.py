"""
Tests for the phrase translator.

Tests cover:
- Lossless tokenization with whitespace and punctuation separators
- Exact, fuzzy and identity resolution of tokens
- Capitalization carried over from the input
- Combination generation, deduplication and the configurable cap
- Output rendering (bare result vs numbered listing)
"""

import pytest

from tlahtolli.models import DictionaryIndex, Direction
from tlahtolli.translate.dictionary import load_dictionary
from tlahtolli.translate.phrase import (
    LISTING_HEADER,
    fuzzy_candidates,
    generate_combinations,
    resolve_phrase,
    resolve_token,
    tokenize,
    translate_phrase,
)
from tlahtolli.utils import normalize_key

ES = Direction.SPANISH_TO_INDIGENOUS
IND = Direction.INDIGENOUS_TO_SPANISH


@pytest.fixture
def index():
    return load_dictionary([
        {"espanol": "perro, can", "nahuatl": "chichi"},
        {"espanol": "agua", "nahuatl": "atl"},
        {"espanol": "casa", "nahuatl": "calli"},
        {"espanol": "flor", "nahuatl": "xochitl"},
        {"espanol": "árbol", "nahuatl": "cuahuitl"},
    ]).index


@pytest.fixture
def ambiguous_index():
    return DictionaryIndex(
        spanish_to_indigenous={"gato": "mizton", "gatito": "miztontli"},
        indigenous_to_spanish={"mizton": "gato", "miztontli": "gatito"},
    )


class TestTokenize:
    """Test splitting text into tokens."""

    def test_keeps_separators(self):
        """Whitespace and punctuation runs are tokens of their own."""
        assert tokenize("Perro, agua.") == ["Perro", ",", " ", "agua", "."]

    def test_lossless(self):
        """Joining the tokens restores the input."""
        text = '  «Hola»   (mundo)!? "sí"; no: [a] {b}  '
        assert "".join(tokenize(text)) == text

    def test_unicode_quotes(self):
        """Typographic quotes are separators."""
        assert tokenize("“agua”") == ["“", "agua", "”"]


class TestNormalizeKey:
    """Test the normalization applied to word tokens."""

    def test_strips_accents(self):
        assert normalize_key("Árbol") == "arbol"

    def test_keeps_enye(self):
        assert normalize_key("Niño") == "niño"
        assert normalize_key("ÑUU") == "ñuu"

    def test_drops_symbols_keeps_apostrophe_and_hyphen(self):
        assert normalize_key("¡ja'-ja!") == "ja'-ja"

    def test_decomposed_input(self):
        """Decomposed accents are handled like precomposed ones."""
        assert normalize_key("a\u0301rbol") == "arbol"


class TestResolveToken:
    """Test resolution of single tokens."""

    def test_exact_hit(self, index):
        token = resolve_token("perro", index, ES)
        assert token.candidates == ["chichi"]
        assert token.source == "exact"

    def test_separator(self, index):
        token = resolve_token(",", index, ES)
        assert token.candidates == [","]
        assert token.is_separator

    def test_fuzzy_plural(self, index):
        """'perros' has no key but overlaps 'perro'."""
        token = resolve_token("perros", index, ES)
        assert token.candidates == ["chichi"]
        assert token.source == "fuzzy"

    def test_identity_fallback(self, index):
        token = resolve_token("Hola", index, ES)
        assert token.candidates == ["Hola"]
        assert token.source == "identity"

    def test_symbol_only_token_is_identity(self, index):
        """A token that normalizes to nothing does not match every key."""
        token = resolve_token("¿", index, ES)
        assert token.candidates == ["¿"]
        assert token.source == "identity"

    def test_accented_input_finds_key(self, index):
        """'Árbol' finds the accented key 'árbol' through the folded table."""
        token = resolve_token("Árbol", index, ES)
        assert token.candidates == ["Cuahuitl"]

    def test_reverse_direction(self, index):
        """Lookups in the indigenous direction use the reverse table."""
        token = resolve_token("atl", index, IND)
        assert token.candidates == ["agua"]


class TestFuzzyCandidates:
    """Test the word-overlap fuzzy scan."""

    def test_collects_in_dictionary_order(self, ambiguous_index):
        mapping = ambiguous_index.mapping(ES)
        assert fuzzy_candidates("gat", mapping) == ["mizton", "miztontli"]

    def test_deduplicates_values(self):
        mapping = {"perro": "chichi", "perrito": "chichi"}
        assert fuzzy_candidates("perr", mapping) == ["chichi"]

    def test_multi_word_key(self):
        """Any word of a multi-word key can overlap."""
        mapping = {"flor y canto": "in xochitl in cuicatl"}
        assert fuzzy_candidates("canto", mapping) == ["in xochitl in cuicatl"]

    def test_empty_key(self):
        assert fuzzy_candidates("", {"perro": "chichi"}) == []


class TestCapitalization:
    """Test casing carried from the input token."""

    def test_dog_example(self):
        index = DictionaryIndex({"dog": "chiwi"}, {"chiwi": "dog"})
        assert translate_phrase("Dog", ES, index) == "Chiwi"

    def test_lowercase_input_stays_lowercase(self, index):
        assert translate_phrase("perro", ES, index) == "chichi"

    def test_capitalizes_every_candidate(self, ambiguous_index):
        token = resolve_token("Gat", ambiguous_index, ES)
        assert token.candidates == ["Mizton", "Miztontli"]


class TestTranslatePhrase:
    """Test whole-phrase translation and rendering."""

    def test_single_word(self, index):
        assert translate_phrase("Perro", ES, index) == "Chichi"

    def test_second_variant_is_exact(self, index):
        assert translate_phrase("can", ES, index) == "chichi"

    def test_punctuation_preserved(self, index):
        assert translate_phrase("Perro, agua.", ES, index) == "Chichi, atl."

    def test_identity_phrase(self, index):
        """A phrase without dictionary hits comes back unchanged."""
        text = "Hola  mundo!  ¿Qué?"
        assert translate_phrase(text, ES, index) == text

    def test_reverse_uses_last_written_key(self, index):
        """'chichi' maps back to 'can', the later variant."""
        assert translate_phrase("Chichi", IND, index) == "Can"

    def test_accepts_direction_string(self, index):
        assert translate_phrase("atl", "ind-es", index) == "agua"

    def test_listing_for_ambiguous_token(self, ambiguous_index):
        result = translate_phrase("gat", ES, ambiguous_index)
        assert result == f"{LISTING_HEADER}\n1. mizton\n2. miztontli"

    def test_combination_cap(self, ambiguous_index):
        """Three ambiguous tokens give 8 combinations, capped at 5."""
        phrase = resolve_phrase("gat gat gat", ES, ambiguous_index)
        assert phrase.total_combinations == 8
        assert len(phrase.combinations) == 5
        assert phrase.combinations[0] == "mizton mizton mizton"
        assert phrase.text.splitlines()[0] == LISTING_HEADER
        assert len(phrase.text.splitlines()) == 6

    def test_long_phrase(self, index):
        """Long inputs translate without deep recursion."""
        text = " ".join(["perro"] * 600)
        result = translate_phrase(text, ES, index)
        assert result == " ".join(["chichi"] * 600)

    def test_long_ambiguous_phrase_is_capped(self, ambiguous_index):
        phrase = resolve_phrase(" ".join(["gat"] * 700), ES, ambiguous_index)
        assert phrase.total_combinations == 2 ** 700
        assert len(phrase.combinations) == 5

    def test_cap_is_configurable(self, ambiguous_index):
        phrase = resolve_phrase("gat gat gat", ES, ambiguous_index, max_combinations=2)
        assert phrase.combinations == ["mizton mizton mizton", "mizton mizton miztontli"]


class TestPhraseTranslation:
    """Test the structured result."""

    def test_fully_exact(self, index):
        phrase = resolve_phrase("Perro, agua.", ES, index)
        assert phrase.fully_exact
        assert phrase.has_translation
        assert phrase.is_single

    def test_fuzzy_is_not_fully_exact(self, index):
        phrase = resolve_phrase("perros", ES, index)
        assert not phrase.fully_exact
        assert phrase.has_translation
        assert phrase.text == "chichi"

    def test_identity_has_no_translation(self, index):
        phrase = resolve_phrase("Hola", ES, index)
        assert not phrase.has_translation
        assert str(phrase) == "Hola"


class TestGenerateCombinations:
    """Test combination deduplication."""

    def test_duplicates_removed(self, index):
        tokens = [resolve_token("perro", index, ES), resolve_token(" ", index, ES), resolve_token("can", index, ES)]
        assert generate_combinations(tokens) == ["chichi chichi"]
