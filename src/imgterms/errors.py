"""Exceptions raised while generating terms and building similarity queries."""


class ImgTermsError(Exception):
    """Base class for imgterms errors."""


class SerialisationError(ImgTermsError, ValueError):
    """A stored value could not be decoded."""


class InvalidArgumentError(ImgTermsError, ValueError):
    """An index entry holds data that cannot be turned into a query."""


class InternalConsistencyError(ImgTermsError, RuntimeError):
    """A term or weight lookup broke an invariant of the indexer."""
