#!/usr/bin/env python3
"""Psychovisual weights for Haar coefficients."""

from __future__ import annotations

import logging

import numpy as np
import numpy.typing as npt

from .config import NUM_CHANNELS
from .errors import InternalConsistencyError

logger = logging.getLogger(__name__)

# Weight per magnitude rank (rows) and YIQ channel (columns).
WEIGHTS: npt.NDArray[np.float64] = np.array(
    [
        #  Y      I      Q        rank  occurrences (128x128 grid)
        [5.00, 19.21, 34.37],  # 0     1 ("DC" component)
        [0.83, 1.26, 0.36],  # 1     3
        [1.01, 0.44, 0.45],  # 2     5
        [0.52, 0.53, 0.14],  # 3     7
        [0.47, 0.28, 0.18],  # 4     9
        [0.30, 0.14, 0.27],  # 5     16384-25=16359
    ],
    dtype=np.float64,
)
WEIGHTS.setflags(write=False)

MAX_RANK = WEIGHTS.shape[0] - 1


def coeff_rank(x: int | npt.NDArray[np.int64], num_pixels: int) -> int | npt.NDArray[np.int64]:
    """Magnitude band of a coefficient on the transform grid.

    A coefficient value encodes its (row, column) position on a
    ``num_pixels`` wide grid, with the sign carrying the coefficient sign.
    The band is the larger of row and column, so 0 is only the DC term.

    Args:
        x: Coefficient value, or an array of them
        num_pixels: Width of the transform grid

    Returns:
        Band index (unbounded, see ``weight_for_rank`` for clamping).
    """
    row, col = np.divmod(np.abs(x), num_pixels)
    band = np.maximum(row, col)
    if np.ndim(band) == 0:
        return int(band)
    return band


def weight_for_rank(
    rank: int | npt.NDArray[np.int64], channel: int
) -> float | npt.NDArray[np.float64]:
    """Psychovisual weight of a magnitude band for one channel.

    Args:
        rank: Band index from ``coeff_rank``, or an array of them
        channel: Channel number (0=Y, 1=I, 2=Q)

    Returns:
        Weight, or an array of weights matching ``rank``.

    Raises:
        ValueError: If the channel is unknown or a rank is negative.
    """
    if not 0 <= channel < NUM_CHANNELS:
        msg = f"channel must be in [0, {NUM_CHANNELS}), got {channel}"
        raise ValueError(msg)
    ranks = np.asarray(rank)
    if np.any(ranks < 0):
        msg = f"rank must be >= 0, got {rank}"
        raise ValueError(msg)

    # Every band past the last explicit row shares that row's weight.
    rows = np.minimum(ranks, MAX_RANK)

    weights = WEIGHTS[rows, channel]
    if np.ndim(weights) == 0:
        return float(weights)
    return weights


def find_weight(x: int, channel: int, num_pixels: int) -> float:
    """Weight of a single coefficient value in a channel."""
    return float(weight_for_rank(coeff_rank(x, num_pixels), channel))


class WeightTable:
    """Precomputed weights for every coefficient in ``[-N, N)`` and every channel.

    The table is built once and is read-only afterwards, so it can be
    shared between threads.
    """

    def __init__(self, domain_size: int, num_pixels: int):
        """Build the table.

        Args:
            domain_size: Coefficient domain bound N
            num_pixels: Width of the transform grid
        """
        self.domain_size = domain_size
        self.num_pixels = num_pixels

        values = np.arange(-domain_size, domain_size, dtype=np.int64)
        ranks = coeff_rank(values, num_pixels)
        self._table = np.column_stack(
            [weight_for_rank(ranks, c) for c in range(NUM_CHANNELS)]
        )
        self._table.setflags(write=False)

        logger.info(
            f"Built weight table: {len(values)} coefficients x {NUM_CHANNELS} channels"
        )

    @property
    def table(self) -> npt.NDArray[np.float64]:
        """Read-only weight array indexed by ``[x + N, channel]``."""
        return self._table

    def __len__(self) -> int:
        """Return number of (coefficient, channel) entries."""
        return int(self._table.size)

    def __contains__(self, key: tuple[int, int]) -> bool:
        x, channel = key
        return -self.domain_size <= x < self.domain_size and 0 <= channel < NUM_CHANNELS

    def lookup(self, x: int, channel: int) -> float:
        """Weight of coefficient ``x`` in ``channel``.

        Raises:
            InternalConsistencyError: If the pair lies outside the table.
        """
        if (x, channel) not in self:
            msg = (
                f"no weight for coefficient {x} in channel {channel} "
                f"(domain is [-{self.domain_size}, {self.domain_size}))"
            )
            raise InternalConsistencyError(msg)
        return float(self._table[x + self.domain_size, channel])

    def dc_weight(self, channel: int) -> float:
        """Weight of the DC (rank 0) coefficient of a channel."""
        return self.lookup(0, channel)
