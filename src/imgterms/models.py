"""Pydantic models for image signatures."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

ChannelCoeffs = frozenset[int]


class ImageSignature(BaseModel):
    """Compressed wavelet signature of one image.

    Attributes:
        coeffs: Per-channel (Y, I, Q) sets of retained Haar coefficient
            positions. The sign of a value carries the coefficient sign.
        averages: Per-channel average colour of the image.
        name: Optional identifier of the source image.
    """
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    coeffs: tuple[ChannelCoeffs, ChannelCoeffs, ChannelCoeffs]
    averages: tuple[float, float, float]
    name: str | None = Field(default=None)


def load_signatures(path: Path) -> list[ImageSignature]:
    """Load signatures from a JSON file.

    The file holds either a single signature object or a list of them.

    Args:
        path: Path to the JSON file

    Returns:
        List of validated signatures.
    """
    with path.open() as f:
        data: Any = json.load(f)

    if isinstance(data, dict):
        data = [data]
    return [ImageSignature.model_validate(item) for item in data]
