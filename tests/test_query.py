import unicodedata

import pytest

from seat_finder.query import InvalidQueryError, parse_query


def test_parse_full_name_splits_by_position():
    query = parse_query("Maria  Elena Lopez")
    assert query.given_names == ("Maria",)
    assert query.surnames == ("Elena", "Lopez")
    assert not query.structured


def test_parse_accepts_accented_letters():
    query = parse_query("José Núñez")
    assert query.raw == "José Núñez"


@pytest.mark.parametrize("text", [None, "", "   "])
def test_parse_requires_a_name(text):
    with pytest.raises(InvalidQueryError, match="required"):
        parse_query(text)


def test_parse_requires_surname_in_full_name():
    with pytest.raises(InvalidQueryError, match="surname"):
        parse_query("Maria")


@pytest.mark.parametrize("text", ["Ana 2 Lopez", "Ana Lopez!", "Ana_Lopez Perez"])
def test_parse_rejects_digits_and_symbols(text):
    with pytest.raises(InvalidQueryError):
        parse_query(text)


def test_parse_structured_query():
    query = parse_query(given="Maria José", surnames=" López ")
    assert query.structured
    assert query.given_names == ("Maria", "José")
    assert query.surnames == ("López",)


def test_parse_structured_query_without_surnames():
    query = parse_query(given="Maria")
    assert query.surnames == ()


def test_parse_structured_requires_given_name():
    with pytest.raises(InvalidQueryError, match="given name"):
        parse_query(given=" ", surnames="Lopez")


def test_parse_rejects_mixed_forms():
    with pytest.raises(InvalidQueryError):
        parse_query("Maria Lopez", given="Maria")


def test_invalid_query_is_value_error():
    assert issubclass(InvalidQueryError, ValueError)


def test_parse_accepts_decomposed_accents():
    text = unicodedata.normalize("NFD", "José Núñez")
    query = parse_query(text)
    assert query.surnames == (unicodedata.normalize("NFD", "Núñez"),)
    structured = parse_query(given=unicodedata.normalize("NFD", "María"), surnames="López")
    assert structured.structured
