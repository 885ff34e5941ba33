#!/usr/bin/env python3
"""Configuration dataclasses for the imgterms package."""

from __future__ import annotations

from dataclasses import dataclass

# Type aliases
ChannelRange = tuple[float, float]

# Ranges for the Y, I and Q components of the YIQ colourspace.
Y_RANGE: ChannelRange = (0.0, 1.0)
I_RANGE: ChannelRange = (-0.523, 0.523)
Q_RANGE: ChannelRange = (-0.596, 0.596)

NUM_CHANNELS = 3


@dataclass
class Config:
    """Configuration for term generation and similarity query construction."""

    # Term Settings
    prefix: str = "I"
    value_slots: tuple[int, int, int] = (0, 1, 2)

    # Transform Domain (supplied by the signature producer)
    num_pixels: int = 128  # Haar grid width
    domain_size: int | None = None  # N, coefficients lie in [-N, N)

    # Average Colour Accelerator Settings
    channel_ranges: tuple[ChannelRange, ChannelRange, ChannelRange] = (
        Y_RANGE,
        I_RANGE,
        Q_RANGE,
    )
    num_buckets: int = 255
    distance_radius: int = 8  # Buckets either side of the target value

    def __post_init__(self) -> None:
        """Post-initialization processing.

        Derives the coefficient domain from the grid width when not given.
        """
        if self.domain_size is None:
            self.domain_size = self.num_pixels * self.num_pixels

    def average_prefix(self, channel: int) -> str:
        """Term prefix used by the average colour accelerator of a channel.

        Args:
            channel: Channel number (0=Y, 1=I, 2=Q)

        Returns:
            Prefix string for bucket terms.
        """
        return f"{self.prefix}A{channel}"

    def validate(self) -> None:
        """Validate configuration parameters.

        Raises:
            ValueError: If any parameter is invalid.
        """
        if not self.prefix:
            msg = "prefix must not be empty"
            raise ValueError(msg)
        if self.prefix[-1].isdigit():
            msg = f"prefix must not end with a digit, got {self.prefix!r}"
            raise ValueError(msg)
        if len(self.value_slots) != NUM_CHANNELS:
            msg = f"value_slots must hold {NUM_CHANNELS} slots, got {len(self.value_slots)}"
            raise ValueError(msg)
        if len(set(self.value_slots)) != NUM_CHANNELS:
            msg = f"value_slots must be distinct, got {self.value_slots}"
            raise ValueError(msg)
        if any(slot < 0 for slot in self.value_slots):
            msg = f"value_slots must be non-negative, got {self.value_slots}"
            raise ValueError(msg)
        if self.num_pixels <= 0:
            msg = f"num_pixels must be positive, got {self.num_pixels}"
            raise ValueError(msg)
        if self.domain_size is None or self.domain_size <= 0:
            msg = f"domain_size must be positive, got {self.domain_size}"
            raise ValueError(msg)
        if self.num_buckets <= 0:
            msg = f"num_buckets must be positive, got {self.num_buckets}"
            raise ValueError(msg)
        if self.distance_radius < 0:
            msg = f"distance_radius must be >= 0, got {self.distance_radius}"
            raise ValueError(msg)
        if len(self.channel_ranges) != NUM_CHANNELS:
            msg = f"channel_ranges must hold {NUM_CHANNELS} ranges, got {len(self.channel_ranges)}"
            raise ValueError(msg)
        for channel, (low, high) in enumerate(self.channel_ranges):
            if not low < high:
                msg = f"channel {channel} range must satisfy min < max, got ({low}, {high})"
                raise ValueError(msg)
