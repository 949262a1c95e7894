#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/core/framing.py

import math
from datetime import datetime, timezone
from enum import Enum
from typing import NamedTuple, Optional, Tuple

from . import config as c
from .errors import InvalidFormat, OutOfRange


class AspectRatio(NamedTuple):
    label: str
    value: float


class CropRect(NamedTuple):
    """Source rectangle in frame pixels."""
    x: float
    y: float
    width: float
    height: float


class GuideLine(NamedTuple):
    """A composition guide; `position` is in frame pixels along the other axis."""
    orientation: str  # 'vertical' or 'horizontal'
    position: float


RATIOS: Tuple[AspectRatio, ...] = tuple(AspectRatio(label, value) for label, value in c.RATIO_OPTIONS)


def next_ratio(index: int) -> int:
    """Index of the ratio after `index`, wrapping around."""
    return (index + 1) % len(RATIOS)


def ratio_from_label(label: str) -> AspectRatio:
    for ratio in RATIOS:
        if ratio.label == label:
            return ratio
    raise InvalidFormat(
        f"unknown aspect ratio '{label}'",
        value=label,
        hint=f"choose one of: {' '.join(r.label for r in RATIOS)}",
    )


class OverlayMode(Enum):
    NONE = "none"
    THIRDS = "thirds"
    SYMMETRY = "symmetry"

    @property
    def title(self) -> str:
        return c.OVERLAY_TITLES[self.value]

    def next(self) -> "OverlayMode":
        members = list(OverlayMode)
        return members[(members.index(self) + 1) % len(members)]


class FacingMode(Enum):
    USER = "user"
    ENVIRONMENT = "environment"

    def toggle(self) -> "FacingMode":
        return FacingMode.ENVIRONMENT if self is FacingMode.USER else FacingMode.USER

    @property
    def mirrored(self) -> bool:
        """Front camera previews and exports are flipped horizontally."""
        return self is FacingMode.USER


def _require_dimension(name: str, v: float) -> None:
    if not isinstance(v, (int, float)) or not math.isfinite(v) or v <= 0:
        raise OutOfRange(f"{name} must be a positive finite number, got {v!r}", value=v)


def crop_rect(width: float, height: float, ratio: float) -> CropRect:
    """
    Largest rectangle of the target aspect ratio centred in a frame.

    A frame wider than the ratio loses width; otherwise it loses height.

    Args:
        width (float): Frame width in pixels.
        height (float): Frame height in pixels.
        ratio (float): Target width / height.

    Returns:
        CropRect: The source rectangle to copy.
    """
    _require_dimension("width", width)
    _require_dimension("height", height)
    _require_dimension("ratio", ratio)

    crop_w, crop_h = float(width), float(height)
    if width / height > ratio:
        crop_w = min(width, height * ratio)
    else:
        crop_h = min(height, width / ratio)

    return CropRect((width - crop_w) / c.DIV_2, (height - crop_h) / c.DIV_2, crop_w, crop_h)


def guide_lines(overlay: OverlayMode, rect: CropRect) -> Tuple[GuideLine, ...]:
    """Guide lines of an overlay, positioned inside the crop rectangle."""
    overlay = OverlayMode(overlay)
    if overlay is OverlayMode.THIRDS:
        fractions = (1.0 / 3.0, 2.0 / 3.0)
    elif overlay is OverlayMode.SYMMETRY:
        fractions = (0.5,)
    else:
        return ()

    lines = [GuideLine("vertical", rect.x + rect.width * f) for f in fractions]
    lines += [GuideLine("horizontal", rect.y + rect.height * f) for f in fractions]
    return tuple(lines)


def capture_filename(ratio: AspectRatio, when: Optional[datetime] = None) -> str:
    """Export name such as 'photo-16:9-2024-05-01T10-20-30-123Z.png'. Naive times are taken as UTC."""
    if when is None:
        when = datetime.now(timezone.utc)
    if when.tzinfo is not None:
        when = when.astimezone(timezone.utc).replace(tzinfo=None)
    stamp = when.isoformat(timespec="milliseconds") + "Z"
    stamp = stamp.replace(":", "-").replace(".", "-")
    return f"{c.CAPTURE_PREFIX}-{ratio.label}-{stamp}.{c.CAPTURE_EXT}"
