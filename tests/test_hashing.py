import pytest

from chisel.hashing import HashedString, hash_string, hash_string_lower


def test_empty_string_is_offset_basis():
    assert hash_string("") == 2166136261
    assert hash_string_lower("") == 2166136261


@pytest.mark.parametrize("text,expected", [("a", 0xE40C292C), ("foobar", 0xBF9CF968)])
def test_standard_vectors(text, expected):
    assert hash_string(text) == expected


def test_bytes_and_str_agree():
    assert hash_string(b"foobar") == hash_string("foobar")
    assert hash_string(bytearray(b"xyz")) == hash_string("xyz")


def test_lower_hash_ignores_ascii_case():
    assert hash_string_lower("HeLLo") == hash_string("hello")
    assert hash_string_lower("ABC") == hash_string_lower("abc")
    assert hash_string_lower("ABC") != hash_string("ABC")


def test_lower_hash_leaves_non_ascii_alone():
    assert hash_string_lower("É") == hash_string("É")


def test_hash_fits_32_bits():
    for word in ["brush", "entity", "worldspawn", "é" * 20]:
        assert 0 <= hash_string(word) <= 0xFFFFFFFF


def test_distinct_words_hash_differently():
    words = ["origin", "angles", "classname", "targetname", "model"]
    assert len({hash_string(w) for w in words}) == len(words)


def test_hashed_string_carries_hash_and_text():
    h = HashedString("classname")
    assert int(h) == hash_string("classname")
    assert hash(h) == hash_string("classname")
    assert str(h) == "classname"


def test_hashed_string_equality():
    assert HashedString("origin") == "origin"
    assert HashedString("origin") == HashedString("origin")
    assert not HashedString("origin") == "angles"


def test_hashed_string_as_dict_key():
    table = {HashedString("model"): 1, HashedString("origin"): 2}
    assert table[HashedString("origin")] == 2