"""Render text with ANSI color and style codes, or strip them.

Usage:
    from colorkit import Color
    print(Color.FG_GREEN.render("message"))
    print(render_code("3;32;45", "some", "message"))
"""

from colorkit.ansi import strip_codes
from colorkit.codes import (
    BG_COLORS,
    EX_BG_COLORS,
    EX_FG_COLORS,
    FG_COLORS,
    OPTIONS,
    Color,
    InvalidCodeError,
    UnknownColorError,
    is_valid,
    lookup_color,
    lookup_option,
    parse_codes,
)
from colorkit.compose import (
    FULL_COLOR_TPL,
    RESET_CODE,
    RESET_SET,
    SETTING_TPL,
    join_codes,
    wrap_full,
    wrap_set_only,
)
from colorkit.renderer import (
    Renderer,
    disable,
    enable,
    get_renderer,
    render_code,
    render_string,
    reset_attributes,
    set_attributes,
    set_renderer,
)

__all__ = [
    "BG_COLORS",
    "EX_BG_COLORS",
    "EX_FG_COLORS",
    "FG_COLORS",
    "FULL_COLOR_TPL",
    "OPTIONS",
    "RESET_CODE",
    "RESET_SET",
    "SETTING_TPL",
    "Color",
    "InvalidCodeError",
    "Renderer",
    "UnknownColorError",
    "disable",
    "enable",
    "get_renderer",
    "is_valid",
    "join_codes",
    "lookup_color",
    "lookup_option",
    "parse_codes",
    "render_code",
    "render_string",
    "reset_attributes",
    "set_attributes",
    "set_renderer",
    "strip_codes",
    "wrap_full",
    "wrap_set_only",
]
