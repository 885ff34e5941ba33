"""Tests for the in-memory index entry and the value codec."""

import pytest

from imgterms import Document, SerialisationError
from imgterms.serialise import serialise_double, unserialise_double


class TestDocument:
    """Test sorted term storage and prefix iteration."""

    def test_terms_sorted_and_unique(self):
        doc = Document()
        for term in ["b", "a", "c", "a"]:
            doc.add_term(term)
        assert doc.termlist == ["a", "b", "c"]
        assert len(doc) == 3
        assert "b" in doc
        assert "z" not in doc
        assert 3 not in doc

    def test_iter_prefix_stops_at_prefix_end(self):
        doc = Document()
        for term in ["I00", "I0-5", "I12", "IA0127", "I03"]:
            doc.add_term(term)
        assert list(doc.iter_prefix("I0")) == ["I0-5", "I00", "I03"]
        assert list(doc.iter_prefix("I1")) == ["I12"]
        assert list(doc.iter_prefix("I2")) == []

    def test_skip_to(self):
        doc = Document()
        for term in ["a", "c", "e"]:
            doc.add_term(term)
        assert list(doc.skip_to("b")) == ["c", "e"]

    def test_values(self):
        doc = Document()
        assert doc.get_value(4) == b""
        doc.set_value(4, b"xy")
        assert doc.get_value(4) == b"xy"


class TestSerialise:
    """Test the double codec used for value slots."""

    @pytest.mark.parametrize("value", [0.0, -0.1, 0.596, 1e300])
    def test_round_trip(self, value):
        assert unserialise_double(serialise_double(value)) == value

    @pytest.mark.parametrize("data", [b"", b"\x00" * 7, b"\x00" * 9])
    def test_bad_length(self, data):
        with pytest.raises(SerialisationError):
            unserialise_double(data)

    def test_not_bytes(self):
        with pytest.raises(SerialisationError):
            unserialise_double("12345678")
