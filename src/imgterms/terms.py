"""Encoding between (channel, coefficient) pairs and index terms."""

from .config import NUM_CHANNELS
from .errors import InternalConsistencyError

# Channels are tagged with exactly one digit after the prefix.
_CHANNEL_TAG_WIDTH = 1


class TermCodec:
    """Builds and parses coefficient terms of the form ``<prefix><channel><value>``.

    The channel tag has a fixed width, so all terms of one channel share a
    prefix that can never be the start of another channel's terms.
    """

    def __init__(self, prefix: str):
        """Initialize codec.

        Args:
            prefix: Term prefix shared by all coefficient terms
        """
        if not prefix or prefix[-1].isdigit():
            msg = f"prefix must be non-empty and not end with a digit, got {prefix!r}"
            raise ValueError(msg)
        self.prefix = prefix

    def colour_prefix(self, channel: int) -> str:
        """Prefix shared by every coefficient term of ``channel``."""
        if not 0 <= channel < NUM_CHANNELS:
            msg = f"channel must be in [0, {NUM_CHANNELS}), got {channel}"
            raise ValueError(msg)
        return f"{self.prefix}{channel:0{_CHANNEL_TAG_WIDTH}d}"

    def coeff_term(self, x: int, channel: int) -> str:
        """Term for coefficient value ``x`` in ``channel``."""
        return f"{self.colour_prefix(channel)}{int(x)}"

    def parse_term(self, term: str) -> tuple[int, int]:
        """Recover ``(x, channel)`` from a coefficient term.

        Args:
            term: Term produced by ``coeff_term``

        Returns:
            Tuple of (coefficient value, channel).

        Raises:
            InternalConsistencyError: If the term is not a coefficient term.
        """
        start = len(self.prefix)
        tag = term[start:start + _CHANNEL_TAG_WIDTH]
        digits = term[start + _CHANNEL_TAG_WIDTH:]
        if not term.startswith(self.prefix) or not tag.isdigit() or not digits:
            msg = f"not a coefficient term: {term!r}"
            raise InternalConsistencyError(msg)

        channel = int(tag)
        try:
            x = int(digits)
        except ValueError as e:
            msg = f"not a coefficient term: {term!r}"
            raise InternalConsistencyError(msg) from e
        if channel >= NUM_CHANNELS or self.coeff_term(x, channel) != term:
            msg = f"not a canonical coefficient term: {term!r}"
            raise InternalConsistencyError(msg)
        return x, channel
