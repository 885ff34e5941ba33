"""imgterms - Index terms and similarity queries from wavelet image signatures."""

from .accelerator import RangeAccelerator
from .config import Config
from .document import Document, IndexEntry
from .errors import (
    ImgTermsError,
    InternalConsistencyError,
    InvalidArgumentError,
    SerialisationError,
)
from .image_terms import ImgTerms
from .models import ImageSignature, load_signatures
from .query import OrQuery, Query, ScaleWeight, TermQuery, or_query
from .terms import TermCodec
from .weights import WeightTable, find_weight

__version__ = "0.1.0"

__all__ = [
    "Config",
    "Document",
    "ImageSignature",
    "ImgTerms",
    "ImgTermsError",
    "IndexEntry",
    "InternalConsistencyError",
    "InvalidArgumentError",
    "OrQuery",
    "Query",
    "RangeAccelerator",
    "ScaleWeight",
    "SerialisationError",
    "TermCodec",
    "TermQuery",
    "WeightTable",
    "find_weight",
    "load_signatures",
    "or_query",
]
