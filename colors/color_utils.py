"""Color helpers for the choropleth map layer."""

import re
from typing import Any

from config.field_policy import DEFAULT_COLOR


NAMED_COLORS = {
    "red": "#ff0000",
    "blue": "#0000ff",
    "green": "#008000",
    "yellow": "#ffff00",
    "orange": "#ffa500",
    "purple": "#800080",
    "black": "#000000",
    "white": "#ffffff",
    "gray": "#808080",
    "grey": "#808080",
}

_HEX_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")
_RGB_PATTERN = re.compile(r"^rgb\(\s*\d+\s*,\s*\d+\s*,\s*\d+\s*\)$")


def get_default_color() -> str:
    return DEFAULT_COLOR


def rgb_to_hex(rgb: Any):
    """'rgb(255, 0, 0)' -> '#ff0000'. rgb 형식이 아니면 입력을 그대로 돌려준다."""
    if not rgb or not isinstance(rgb, str) or not rgb.startswith("rgb"):
        return rgb

    parts = re.findall(r"\d+", rgb)
    if len(parts) < 3:
        return DEFAULT_COLOR
    return "#" + "".join(f"{min(int(part), 255):02x}" for part in parts[:3])


def is_valid_color(color: Any) -> bool:
    if not color or not isinstance(color, str):
        return False
    if _HEX_PATTERN.match(color):
        return True
    if _RGB_PATTERN.match(color):
        return True
    return color.lower() in NAMED_COLORS


def to_hex_color(color: Any) -> str:
    """hex / rgb() / 기본 색 이름을 소문자 '#rrggbb'로. 그 외는 기본 회색."""
    if not is_valid_color(color):
        return DEFAULT_COLOR
    if color.startswith("#"):
        return color.lower()
    if color.lower() in NAMED_COLORS:
        return NAMED_COLORS[color.lower()]
    return rgb_to_hex(color)
