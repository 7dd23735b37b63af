"""Tests for the Base32 secret codec."""

import pytest

from totpgen import base32
from totpgen.exceptions import InputError, InvalidCharacter

VECTORS = [
    (b"foo", "MZXW6"),
    (b"foob", "MZXW6YQ"),
    (b"fooba", "MZXW6YTB"),
    (b"foobar", "MZXW6YTBOI"),
]


class TestEncode:
    """Tests for base32.encode."""

    @pytest.mark.parametrize("raw,encoded", VECTORS)
    def test_known_vectors(self, raw, encoded):
        assert base32.encode(raw) == encoded

    def test_empty(self):
        assert base32.encode(b"") == ""

    def test_no_padding_characters(self):
        assert "=" not in base32.encode(b"f")
        assert base32.encode(b"f") == "MY"

    def test_output_length(self):
        for n in range(1, 12):
            assert len(base32.encode(bytes(n))) == -(-8 * n // 5)

    def test_accepts_bytearray(self):
        assert base32.encode(bytearray(b"foobar")) == "MZXW6YTBOI"

    def test_rfc_test_secret(self):
        assert base32.encode(b"12345678901234567890") == "GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ"

    @pytest.mark.parametrize("data", [5, "foo", None])
    def test_rejects_non_bytes(self, data):
        with pytest.raises(TypeError):
            base32.encode(data)

    def test_bit_order(self):
        assert base32.encode(b"\xff") == "74"
        assert base32.encode(b"\x00\x01") == "AAAQ"

    def test_rejects_oversized_input(self, monkeypatch):
        monkeypatch.setattr(base32, "MAX_ENCODE_LENGTH", 4)
        with pytest.raises(ValueError):
            base32.encode(b"abcd")


class TestDecode:
    """Tests for base32.decode."""

    @pytest.mark.parametrize("raw,encoded", VECTORS)
    def test_known_vectors(self, raw, encoded):
        assert base32.decode(encoded) == raw

    def test_round_trip(self):
        for n in range(0, 40):
            data = bytes((i * 37 + n) & 0xFF for i in range(n))
            assert base32.decode(base32.encode(data)) == data

    def test_short_residue_is_discarded(self):
        """A trailing symbol that cannot complete a byte changes nothing."""
        b16 = base32.decode("7" * 16)
        b17 = base32.decode("7" * 17)
        assert b16 == b17
        assert len(b16) == 10

    @pytest.mark.parametrize(
        "text,length",
        [("A", 0), ("", 0), (" ", 0), ("AA", 1), ("AAA", 1), ("AAAA", 2), ("AA-AA", 2)],
    )
    def test_lengths(self, text, length):
        assert len(base32.decode(text)) == length

    def test_separators_ignored(self):
        assert base32.decode("AA AA") == base32.decode("AA-AA") == base32.decode("AAAA")

    def test_grouped_secret(self):
        assert base32.decode("mzxw 6ytb-oi") == b"foobar"

    def test_trailing_padding_ignored(self):
        assert base32.decode("MZXW6===") == b"foo"
        assert base32.decode("MZXW6YTBOI======") == b"foobar"

    def test_case_insensitive(self):
        assert base32.decode("mzxw6ytboi") == base32.decode("MZXW6YTBOI")

    def test_surrounding_whitespace(self):
        assert base32.decode("\t MZXW6\n") == b"foo"

    @pytest.mark.parametrize("text", ["11", "A1", "AAA8", "AAA9", "AAA0", "AAA,", "AAA;", "AAA.", "AAA!"])
    def test_invalid_characters(self, text):
        with pytest.raises(InvalidCharacter):
            base32.decode(text)

    def test_invalid_character_is_reported(self):
        with pytest.raises(InvalidCharacter) as excinfo:
            base32.decode("ab8c")
        assert excinfo.value.char == "8"
        assert isinstance(excinfo.value, InputError)
        assert isinstance(excinfo.value, ValueError)

    @pytest.mark.parametrize("text,char", [("MZXW\u00df", "\u00df"), ("\ufb00OO", "\ufb00"), ("MZ\u0131", "\u0131")])
    def test_non_ascii_letters_are_not_case_folded(self, text, char):
        with pytest.raises(InvalidCharacter) as excinfo:
            base32.decode(text)
        assert excinfo.value.char == char

    def test_padding_in_the_middle_is_invalid(self):
        with pytest.raises(InvalidCharacter) as excinfo:
            base32.decode("MZ=XW6")
        assert excinfo.value.char == "="
