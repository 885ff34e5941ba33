#!/usr/bin/env python3
"""Bucketed index terms for continuous values and closeness queries."""

from __future__ import annotations

import logging
import math

from .document import IndexEntry
from .query import Query, ScaleWeight, TermQuery, or_query
from .serialise import serialise_double

logger = logging.getLogger(__name__)


class RangeAccelerator:
    """Maps a continuous value onto bucket terms in ``[low, high]``.

    The exact value is kept in a value slot; the bucket term lets queries
    find documents with nearby values without scanning every slot.
    """

    def __init__(self, prefix: str, slot: int, low: float, high: float, step: float):
        """Initialize accelerator.

        Args:
            prefix: Prefix for bucket terms
            slot: Value slot the exact value is stored in
            low: Lowest expected value
            high: Highest expected value
            step: Width of one bucket

        Raises:
            ValueError: If the range or step is invalid.
        """
        if not low < high:
            msg = f"low must be < high, got ({low}, {high})"
            raise ValueError(msg)
        if not step > 0:
            msg = f"step must be positive, got {step}"
            raise ValueError(msg)

        self.prefix = prefix
        self.slot = slot
        self.low = low
        self.high = high
        self.step = step
        self.num_buckets = max(1, round((high - low) / step))

    def bucket(self, value: float) -> int:
        """Bucket index for ``value``; out-of-range values go to the end buckets."""
        if math.isnan(value):
            msg = "cannot bucket NaN"
            raise ValueError(msg)
        if value <= self.low:
            return 0
        if value >= self.high:
            return self.num_buckets - 1
        return min(int((value - self.low) // self.step), self.num_buckets - 1)

    def bucket_term(self, bucket: int) -> str:
        return f"{self.prefix}{bucket}"

    def add_val(self, entry: IndexEntry, value: float) -> None:
        """Store ``value`` in the slot and index its bucket term."""
        term = self.bucket_term(self.bucket(value))
        entry.set_value(self.slot, serialise_double(value))
        entry.add_term(term)

    def query_for_val_distance(self, value: float, radius: int = 8) -> Query:
        """Query scoring documents by how close their value is to ``value``.

        Buckets within ``radius`` of the target bucket are matched, weighted
        linearly from 1.0 at the target down towards 0 at ``radius + 1``.

        Args:
            value: Target value
            radius: Number of neighbouring buckets on each side

        Returns:
            OR of scaled bucket term queries.
        """
        if radius < 0:
            msg = f"radius must be >= 0, got {radius}"
            raise ValueError(msg)

        centre = self.bucket(value)
        first = max(0, centre - radius)
        last = min(self.num_buckets - 1, centre + radius)

        subqueries = [
            ScaleWeight(
                TermQuery(self.bucket_term(b)),
                1.0 - abs(b - centre) / (radius + 1),
            )
            for b in range(first, last + 1)
        ]
        logger.debug(f"Closeness query for {value} spans buckets {first}..{last}")
        return or_query(*subqueries)
