#!/usr/bin/env python3
"""Index entries: sorted term lists plus numbered value slots."""

from __future__ import annotations

import bisect
from collections.abc import Iterator
from typing import Protocol


class IndexEntry(Protocol):
    """Protocol for the document an image is indexed into."""

    def add_term(self, term: str) -> None:
        """Add a term (adding an existing term is a no-op)."""
        ...

    def get_value(self, slot: int) -> bytes:
        """Return the raw value stored in ``slot`` (empty if unset)."""
        ...

    def set_value(self, slot: int, value: bytes) -> None:
        """Store a raw value in ``slot``."""
        ...

    def iter_prefix(self, prefix: str) -> Iterator[str]:
        """Iterate, in sorted order, the terms starting with ``prefix``."""
        ...


class Document:
    """In-memory index entry with a sorted term list."""

    def __init__(self) -> None:
        self._terms: list[str] = []
        self._values: dict[int, bytes] = {}

    def add_term(self, term: str) -> None:
        pos = bisect.bisect_left(self._terms, term)
        if pos == len(self._terms) or self._terms[pos] != term:
            self._terms.insert(pos, term)

    def get_value(self, slot: int) -> bytes:
        return self._values.get(slot, b"")

    def set_value(self, slot: int, value: bytes) -> None:
        self._values[slot] = bytes(value)

    @property
    def termlist(self) -> list[str]:
        """Copy of all terms in sorted order."""
        return list(self._terms)

    @property
    def values(self) -> dict[int, bytes]:
        """Copy of the value slots."""
        return dict(self._values)

    def skip_to(self, prefix: str) -> Iterator[str]:
        """Iterate sorted terms starting at the first term >= ``prefix``."""
        start = bisect.bisect_left(self._terms, prefix)
        return iter(self._terms[start:])

    def iter_prefix(self, prefix: str) -> Iterator[str]:
        for term in self.skip_to(prefix):
            if not term.startswith(prefix):
                break
            yield term

    def __len__(self) -> int:
        """Return number of terms."""
        return len(self._terms)

    def __contains__(self, term: object) -> bool:
        if not isinstance(term, str):
            return False
        pos = bisect.bisect_left(self._terms, term)
        return pos < len(self._terms) and self._terms[pos] == term
