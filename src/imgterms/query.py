#!/usr/bin/env python3
"""Similarity query trees built from index terms."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Query:
    """The empty query.

    Matches nothing and disappears when combined with OR.
    """

    def is_empty(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __or__(self, other: Query) -> Query:
        return or_query(self, other)

    def weighted_terms(self, scale: float = 1.0) -> Iterator[tuple[str, float]]:
        """Yield every leaf term with the product of the weights above it.

        Args:
            scale: Factor applied to the whole tree

        Yields:
            Tuples of (term, effective weight).
        """
        yield from ()

    def terms(self) -> Iterator[str]:
        """Yield every leaf term in the tree."""
        for term, _ in self.weighted_terms():
            yield term

    def _describe(self) -> str:
        return ""

    def describe(self) -> str:
        """Compact textual form, e.g. ``Query((2 * I00 OR I10))``."""
        return f"Query({self._describe()})"

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class TermQuery(Query):
    """Matches documents indexed with ``term``."""

    term: str

    def is_empty(self) -> bool:
        return False

    def weighted_terms(self, scale: float = 1.0) -> Iterator[tuple[str, float]]:
        yield self.term, scale

    def _describe(self) -> str:
        return self.term


@dataclass(frozen=True)
class ScaleWeight(Query):
    """Multiplies the contribution of ``subquery`` by ``factor``."""

    subquery: Query
    factor: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.factor) or self.factor < 0:
            msg = f"scale factor must be finite and >= 0, got {self.factor}"
            raise ValueError(msg)

    def is_empty(self) -> bool:
        return self.subquery.is_empty()

    def weighted_terms(self, scale: float = 1.0) -> Iterator[tuple[str, float]]:
        yield from self.subquery.weighted_terms(scale * self.factor)

    def _describe(self) -> str:
        return f"{self.factor:g} * {self.subquery._describe()}"


@dataclass(frozen=True)
class OrQuery(Query):
    """Matches documents matching any subquery; scores add up.

    Build instances with ``or_query`` so empty operands are dropped.
    """

    subqueries: tuple[Query, ...]

    def is_empty(self) -> bool:
        return all(q.is_empty() for q in self.subqueries)

    def weighted_terms(self, scale: float = 1.0) -> Iterator[tuple[str, float]]:
        for q in self.subqueries:
            yield from q.weighted_terms(scale)

    def _describe(self) -> str:
        return "(" + " OR ".join(q._describe() for q in self.subqueries) + ")"


def or_query(*queries: Query) -> Query:
    """Combine queries with OR.

    Empty operands are dropped and nested OR nodes are flattened.

    Returns:
        The empty query, the only remaining operand, or an ``OrQuery``.
    """
    operands: list[Query] = []
    for q in queries:
        if q.is_empty():
            continue
        if isinstance(q, OrQuery):
            operands.extend(q.subqueries)
        else:
            operands.append(q)

    if not operands:
        return Query()
    if len(operands) == 1:
        return operands[0]
    return OrQuery(tuple(operands))
