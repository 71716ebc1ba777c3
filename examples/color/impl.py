"""Color conversion operations used by the example spec."""
from __future__ import annotations

import re

import numpy as np

_HEX_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")
_LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])


def hex_to_rgb(data: dict) -> dict:
    text = data["hex"].lstrip("#")
    return {"r": int(text[0:2], 16), "g": int(text[2:4], 16), "b": int(text[4:6], 16)}


def rgb_to_hex(data: dict) -> dict:
    return {"hex": "#{:02X}{:02X}{:02X}".format(data["r"], data["g"], data["b"])}


def luminance(data: dict) -> dict:
    srgb = np.array([data["r"], data["g"], data["b"]], dtype=np.float64) / 255.0
    linear = np.where(srgb <= 0.03928, srgb / 12.92, ((srgb + 0.055) / 1.055) ** 2.4)
    return {"value": np.dot(_LUMA_WEIGHTS, linear)}


def is_valid_hex(data: dict) -> dict:
    return {"valid": bool(_HEX_PATTERN.match(data["hex"]))}


def rgb_to_array(data: dict) -> tuple:
    return (data["r"], data["g"], data["b"])


def invert_color(data: dict) -> dict:
    return {"r": 255 - data["r"], "g": 255 - data["g"], "b": 255 - data["b"]}


def hsl_to_rgb(data: dict) -> dict:
    raise NotImplementedError("HSL conversion not implemented")
