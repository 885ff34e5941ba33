#!/usr/bin/env python3
"""Generate index terms from image signatures and similarity queries from documents."""

from __future__ import annotations

import logging

from .accelerator import RangeAccelerator
from .config import NUM_CHANNELS, Config
from .document import IndexEntry
from .errors import InvalidArgumentError, SerialisationError
from .models import ImageSignature
from .query import Query, ScaleWeight, TermQuery, or_query
from .serialise import unserialise_double
from .terms import TermCodec
from .weights import WeightTable

logger = logging.getLogger(__name__)


class ImgTerms:
    """Indexes image signatures and builds "find similar images" queries.

    Each retained Haar coefficient becomes a term ``<prefix><channel><x>``.
    Each channel's average colour is stored in a value slot and bucketed by a
    ``RangeAccelerator``. At query time the coefficient terms of a document
    are read back and weighted by their psychovisual importance, and the
    averages turn into closeness queries weighted like the DC coefficient.

    The weight table is built once here and never modified, so one instance
    may serve many threads as long as each call uses its own document.
    """

    def __init__(self, cfg: Config | None = None):
        """Initialize term generator.

        Args:
            cfg: Configuration object (defaults to ``Config()``)

        Raises:
            ValueError: If the configuration is invalid.
        """
        self.cfg = cfg or Config()
        self.cfg.validate()

        self.codec = TermCodec(self.cfg.prefix)
        self.value_slots = tuple(self.cfg.value_slots)
        self.weights = WeightTable(self.cfg.domain_size, self.cfg.num_pixels)  # type: ignore[arg-type]

        # One accelerator per channel, each bucketing its own YIQ range
        self.accelerators = [
            RangeAccelerator(
                self.cfg.average_prefix(c),
                self.value_slots[c],
                low,
                high,
                (high - low) / self.cfg.num_buckets,
            )
            for c, (low, high) in enumerate(self.cfg.channel_ranges)
        ]

    def make_coeff_terms(self, sig: ImageSignature) -> set[str]:
        """All coefficient terms of a signature.

        Args:
            sig: Image signature

        Returns:
            Set of terms across the three channels.
        """
        return {
            self.codec.coeff_term(x, c)
            for c, coeffs in enumerate(sig.coeffs)
            for x in coeffs
        }

    def add_terms(self, entry: IndexEntry, sig: ImageSignature) -> None:
        """Index a signature into a document.

        Adds one term per coefficient and registers each channel average
        with its accelerator. Errors raised by the document propagate.

        Args:
            entry: Document to add terms and values to
            sig: Image signature

        Raises:
            ValueError: If an average is NaN; nothing is written in that case.
        """
        # Bucket every average first so a bad value leaves the entry untouched
        for c in range(NUM_CHANNELS):
            self.accelerators[c].bucket(sig.averages[c])

        terms = self.make_coeff_terms(sig)
        for term in sorted(terms):
            entry.add_term(term)
        for c in range(NUM_CHANNELS):
            self.accelerators[c].add_val(entry, sig.averages[c])

        logger.debug(f"Indexed {len(terms)} coefficient terms for {sig.name or 'signature'}")

    def weight_for_term(self, term: str) -> float:
        """Psychovisual weight of a coefficient term.

        Raises:
            InternalConsistencyError: If the term is unknown to the table.
        """
        x, c = self.codec.parse_term(term)
        return self.weights.lookup(x, c)

    def make_coeff_query(self, entry: IndexEntry) -> Query:
        """OR of the document's coefficient terms, each scaled by its weight."""
        subqueries: list[Query] = []
        for c in range(NUM_CHANNELS):
            for term in entry.iter_prefix(self.codec.colour_prefix(c)):
                subqueries.append(ScaleWeight(TermQuery(term), self.weight_for_term(term)))
        return or_query(*subqueries)

    def read_average(self, entry: IndexEntry, channel: int) -> float:
        """Decode the stored average colour of a channel.

        Args:
            entry: Indexed document
            channel: Channel number

        Returns:
            The stored average.

        Raises:
            InvalidArgumentError: If the slot does not hold a valid double.
        """
        raw = entry.get_value(self.value_slots[channel])
        try:
            return unserialise_double(raw)
        except SerialisationError as e:
            msg = f"bad average stored in slot {self.value_slots[channel]}: {e}"
            raise InvalidArgumentError(msg) from e

    def make_averages_query(self, entry: IndexEntry) -> Query:
        """OR of closeness queries on the channel averages.

        Each channel's closeness query is scaled by the weight of that
        channel's DC coefficient.
        """
        subqueries: list[Query] = []
        for c in range(NUM_CHANNELS):
            value = self.read_average(entry, c)
            closeness = self.accelerators[c].query_for_val_distance(
                value, self.cfg.distance_radius
            )
            subqueries.append(ScaleWeight(closeness, self.weights.dc_weight(c)))
        return or_query(*subqueries)

    def query_similar(self, entry: IndexEntry) -> Query:
        """Build a query for images similar to an indexed document.

        Args:
            entry: Document previously filled by ``add_terms``

        Returns:
            OR of the coefficient query and the averages query.

        Raises:
            InvalidArgumentError: If a stored average is malformed.
            InternalConsistencyError: If a coefficient term has no weight.
        """
        return or_query(self.make_coeff_query(entry), self.make_averages_query(entry))
