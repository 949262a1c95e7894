#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/logic/frame/engine.py

import argparse
import sys
from typing import Dict, Any

from composition.core import framing
from composition.core.errors import ColorError, InvalidFormat
from composition.shared.logger import log_color_error
from .renderer import render_frame_info


def get_frame_data(args: argparse.Namespace) -> Dict[str, Any]:
    """Computes crop, guides and export name for the requested frame."""
    ratio = framing.ratio_from_label(args.ratio)
    overlay = _enum_or_error(framing.OverlayMode, args.overlay, "overlay")
    facing = _enum_or_error(framing.FacingMode, args.camera, "camera")

    rect = framing.crop_rect(args.width, args.height, ratio.value)
    data = {
        "ratio": ratio,
        "crop": rect,
        "overlay": overlay,
        "guides": framing.guide_lines(overlay, rect),
        "facing": facing,
        "filename": framing.capture_filename(ratio),
    }

    if getattr(args, "cycle", False):
        data["next_ratio"] = framing.RATIOS[framing.next_ratio(framing.RATIOS.index(ratio))]
        data["next_overlay"] = overlay.next()
        data["next_facing"] = facing.toggle()
    return data


def _enum_or_error(enum_cls, value: str, name: str):
    try:
        return enum_cls(value)
    except ValueError:
        choices = " ".join(m.value for m in enum_cls)
        raise InvalidFormat(f"invalid {name}: '{value}'", value=value, hint=f"choose one of: {choices}")


def run(args: argparse.Namespace, parser: argparse.ArgumentParser = None) -> None:
    """Main execution engine for the frame command"""
    try:
        data = get_frame_data(args)
    except ColorError as e:
        log_color_error(e, "composition frame")
        sys.exit(2)
    render_frame_info(data, getattr(args, "plain", False))
