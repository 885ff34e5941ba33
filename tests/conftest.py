"""Shared test fixtures for imgterms tests."""

import pytest

from imgterms import Config, ImageSignature, ImgTerms


@pytest.fixture
def small_imgterms():
    """Term generator over the small domain N=6 with prefix IMG."""
    return ImgTerms(Config(prefix="IMG", domain_size=6))


@pytest.fixture
def small_signature():
    """Signature with a few coefficients per channel and mid-range averages."""
    return ImageSignature(
        coeffs=([0, 3, -5], [2], [-1]),
        averages=(0.5, -0.1, 0.05),
    )
