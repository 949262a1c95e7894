#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/logic/frame/renderer.py

from typing import Dict, Any

from composition.core import config as c


def _fmt(v: float) -> str:
    """Pixels to 2 decimals, trailing zeros dropped."""
    return f"{v:.2f}".rstrip("0").rstrip(".")


def _row(key: str, value: str, plain: bool) -> str:
    if plain:
        return f"{key:<10}: {value}"
    label = f"{c.MSG_BOLD_COLORS['info']}{key}{c.RESET}"
    return f"{label}{' ' * (18 - len(key))}{c.BOLD_WHITE}: {value}{c.RESET}"


def render_frame_info(data: Dict[str, Any], plain: bool = False) -> None:
    """Prints the framing report built by the engine."""
    rect = data["crop"]
    print(_row("ratio", data["ratio"].label, plain))
    print(_row("crop", f"x={_fmt(rect.x)} y={_fmt(rect.y)} w={_fmt(rect.width)} h={_fmt(rect.height)}", plain))
    print(_row("overlay", data["overlay"].title, plain))
    for line in data["guides"]:
        print(_row("guide", f"{line.orientation} @ {_fmt(line.position)}", plain))
    print(_row("camera", f"{data['facing'].value}{' (mirrored)' if data['facing'].mirrored else ''}", plain))
    print(_row("filename", data["filename"], plain))

    if "next_ratio" in data:
        print(_row("next ratio", data["next_ratio"].label, plain))
        print(_row("next grid", data["next_overlay"].title, plain))
        print(_row("switch to", data["next_facing"].value, plain))
