import pytest

from seat_finder.normalization import normalize, tokenize


def test_normalize_folds_case_and_accents():
    assert normalize("JOSÉ") == normalize("jose") == "jose"


def test_normalize_collapses_whitespace():
    assert normalize("  María   de la\tCruz \n") == "maria de la cruz"


def test_normalize_repairs_mojibake():
    assert normalize("JosÃ© Alvarez") == "jose alvarez"


def test_normalize_keeps_digits_and_punctuation():
    assert normalize("Ana 123!") == "ana 123!"


@pytest.mark.parametrize("value", [None, 42, "", ["Maria"]])
def test_normalize_non_string_or_empty(value):
    assert normalize(value) == ""


@pytest.mark.parametrize(
    "value",
    [
        "Dr. José Álvarez",
        "  ÑANDÚ  pérez ",
        "O'Brien-Smith 3rd",
        "Zoë\tBrontë\n",
        "&amp;amp;",
    ],
)
def test_normalize_is_idempotent(value):
    once = normalize(value)
    assert normalize(once) == once


def test_tokenize_collapses_duplicates():
    assert tokenize("Maria maria  LÓPEZ") == frozenset({"maria", "lopez"})


def test_tokenize_empty():
    assert tokenize("   ") == frozenset()
    assert tokenize(None) == frozenset()
