"""Tests for coefficient term encoding."""

import pytest

from imgterms import InternalConsistencyError, TermCodec


class TestTermCodec:
    """Test building and parsing coefficient terms."""

    def test_colour_prefix(self):
        codec = TermCodec("IMG")
        assert codec.colour_prefix(0) == "IMG0"
        assert codec.colour_prefix(2) == "IMG2"

    def test_coeff_term_is_sign_inclusive(self):
        codec = TermCodec("IMG")
        assert codec.coeff_term(0, 0) == "IMG00"
        assert codec.coeff_term(-5, 0) == "IMG0-5"
        assert codec.coeff_term(2, 1) == "IMG12"

    def test_terms_are_unique_over_domain(self):
        codec = TermCodec("IMG")
        n = 2000
        terms = {codec.coeff_term(x, c) for x in range(-n, n) for c in range(3)}
        assert len(terms) == 2 * n * 3

    def test_channel_prefixes_never_overlap(self):
        """A term of one channel never starts with another channel's prefix."""
        codec = TermCodec("IMG")
        for c in range(3):
            for other in range(3):
                if other == c:
                    continue
                for x in (-100, -1, 0, 1, 12, 100):
                    term = codec.coeff_term(x, c)
                    assert not term.startswith(codec.colour_prefix(other))

    def test_parse_reverses_coeff_term(self):
        codec = TermCodec("IMG")
        for x in (-16384, -5, 0, 3, 16383):
            for c in range(3):
                assert codec.parse_term(codec.coeff_term(x, c)) == (x, c)

    @pytest.mark.parametrize("term", ["IMG", "IMG0", "IMGx5", "IMG35", "IMG0+5", "IMG005", "XYZ01", "IMG0 5"])
    def test_parse_rejects_foreign_terms(self, term):
        codec = TermCodec("IMG")
        with pytest.raises(InternalConsistencyError):
            codec.parse_term(term)

    def test_unknown_channel_rejected(self):
        codec = TermCodec("IMG")
        with pytest.raises(ValueError):
            codec.colour_prefix(3)
        with pytest.raises(ValueError):
            codec.coeff_term(0, -1)

    def test_prefix_ending_in_digit_rejected(self):
        with pytest.raises(ValueError):
            TermCodec("IMG1")
        with pytest.raises(ValueError):
            TermCodec("")
