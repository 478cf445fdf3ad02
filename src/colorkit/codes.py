"""Basic 16-color SGR codes, name lookup tables and per-color helpers."""

from collections.abc import Mapping
from enum import IntEnum
from types import MappingProxyType

from colorkit.renderer import get_renderer

# Loose upper bound: gaps such as 50-89 pass too.
MAX_CODE = 107


class UnknownColorError(KeyError):
    """Error when a color or option name is not in the lookup tables."""

    def __init__(self, name: str, kind: str = "color") -> None:
        """Initialize with the unknown name and the kind of table searched."""
        self.name = name
        self.kind = kind
        super().__init__(f"Unknown {kind} name: {name!r}")

    def __str__(self) -> str:
        """Plain message, KeyError would quote it."""
        return str(self.args[0])


class InvalidCodeError(ValueError):
    """Error when a code string contains something other than SGR codes."""

    def __init__(self, code: str) -> None:
        """Initialize with the offending code string."""
        self.code = code
        super().__init__(f"Invalid color code: {code!r}")


class Color(IntEnum):
    """SGR parameter, usable directly as a renderer for its own style."""

    # Foreground colors
    FG_BLACK = 30
    FG_RED = 31
    FG_GREEN = 32
    FG_YELLOW = 33
    FG_BLUE = 34
    FG_MAGENTA = 35
    FG_CYAN = 36
    FG_WHITE = 37
    FG_DEFAULT = 39

    # Extra foreground colors, not in ECMA-48 but widely supported
    FG_DARK_GRAY = 90
    FG_LIGHT_RED = 91
    FG_LIGHT_GREEN = 92
    FG_LIGHT_YELLOW = 93
    FG_LIGHT_BLUE = 94
    FG_LIGHT_MAGENTA = 95
    FG_LIGHT_CYAN = 96
    FG_LIGHT_WHITE = 97
    FG_GRAY = 90

    # Background colors
    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_WHITE = 47
    BG_DEFAULT = 49

    # Extra background colors
    BG_DARK_GRAY = 100
    BG_LIGHT_RED = 101
    BG_LIGHT_GREEN = 102
    BG_LIGHT_YELLOW = 103
    BG_LIGHT_BLUE = 104
    BG_LIGHT_MAGENTA = 105
    BG_LIGHT_CYAN = 106
    BG_LIGHT_WHITE = 107
    BG_GRAY = 100

    # Text attributes
    OP_RESET = 0
    OP_BOLD = 1
    OP_FUZZY = 2  # faint, not supported by all terminals
    OP_ITALIC = 3
    OP_UNDERSCORE = 4
    OP_BLINK = 5
    OP_FAST_BLINK = 6
    OP_REVERSE = 7
    OP_CONCEALED = 8
    OP_STRIKETHROUGH = 9

    # Short aliases
    RED = FG_RED
    CYAN = FG_CYAN
    GRAY = FG_DARK_GRAY
    BLUE = FG_BLUE
    BLACK = FG_BLACK
    GREEN = FG_GREEN
    WHITE = FG_WHITE
    YELLOW = FG_YELLOW
    MAGENTA = FG_MAGENTA
    BOLD = OP_BOLD
    NORMAL = FG_DEFAULT

    @property
    def code(self) -> str:
        """Code string, e.g. "35"."""
        return str(int(self))

    def is_valid(self) -> bool:
        """Check the code against the loose upper bound."""
        return is_valid(self)

    def text(self, message: str) -> str:
        """Render a single string."""
        return get_renderer().render_string(self.code, message)

    def render(self, *args: object) -> str:
        """Render the concatenation of args.

        Usage:
            green = Color.FG_GREEN.render
            print(green("message"))
        """
        return get_renderer().render_code(self.code, *args)

    sprint = render

    def sprintf(self, format_string: str, *args: object) -> str:
        """Printf-style format, then render, see format_message."""
        message = format_message(format_string, *args)
        return get_renderer().render_string(self.code, message)

    def print(self, *args: object) -> None:
        """Write rendered args to the output, without newline."""
        get_renderer().print(self.code, *args)

    def printf(self, format_string: str, *args: object) -> None:
        """Printf-style format, then write to the output."""
        get_renderer().print(self.code, format_message(format_string, *args))

    def println(self, *args: object) -> None:
        """Write rendered args to the output, followed by a newline."""
        get_renderer().print(self.code, *args, newline=True)


def format_message(format_string: str, *args: object) -> str:
    """Apply printf-style formatting, never failing.

    Without args the format is returned as-is, so "100%" stays "100%". When
    the format does not match the args, the args are appended to the format,
    separated by spaces.
    """
    if not args:
        return format_string
    try:
        return format_string % args
    except (TypeError, ValueError):
        return " ".join([format_string, *(str(arg) for arg in args)])


def is_valid(code: int) -> bool:
    """Check whether code is in the SGR range handled here.

    This only checks the upper bound (and rejects negatives): values between
    defined codes are accepted.
    """
    return 0 <= code <= MAX_CODE


def parse_codes(code_string: str) -> list[Color | int]:
    """Parse a semicolon separated code string, e.g. "35;1".

    Known values are returned as Color members, other valid values as int.

    Raises:
        InvalidCodeError: a part is not a decimal number or is out of range
    """
    if not code_string:
        return []
    codes: list[Color | int] = []
    for part in code_string.split(";"):
        if not (part.isascii() and part.isdigit()):
            raise InvalidCodeError(code_string)
        value = int(part)
        if not is_valid(value):
            raise InvalidCodeError(code_string)
        codes.append(Color(value) if value in _ALL_VALUES else value)
    return codes


_ALL_VALUES = frozenset(member.value for member in Color)

# Foreground colors map
FG_COLORS: Mapping[str, Color] = MappingProxyType(
    {
        "black": Color.FG_BLACK,
        "red": Color.FG_RED,
        "green": Color.FG_GREEN,
        "yellow": Color.FG_YELLOW,
        "blue": Color.FG_BLUE,
        "magenta": Color.FG_MAGENTA,
        "cyan": Color.FG_CYAN,
        "white": Color.FG_WHITE,
        "default": Color.FG_DEFAULT,
    }
)

# Background colors map
BG_COLORS: Mapping[str, Color] = MappingProxyType(
    {
        "black": Color.BG_BLACK,
        "red": Color.BG_RED,
        "green": Color.BG_GREEN,
        "yellow": Color.BG_YELLOW,
        "blue": Color.BG_BLUE,
        "magenta": Color.BG_MAGENTA,
        "cyan": Color.BG_CYAN,
        "white": Color.BG_WHITE,
        "default": Color.BG_DEFAULT,
    }
)

# Extra foreground colors map
EX_FG_COLORS: Mapping[str, Color] = MappingProxyType(
    {
        "darkGray": Color.FG_DARK_GRAY,
        "lightRed": Color.FG_LIGHT_RED,
        "lightGreen": Color.FG_LIGHT_GREEN,
        "lightYellow": Color.FG_LIGHT_YELLOW,
        "lightBlue": Color.FG_LIGHT_BLUE,
        "lightMagenta": Color.FG_LIGHT_MAGENTA,
        "lightCyan": Color.FG_LIGHT_CYAN,
        "lightWhite": Color.FG_LIGHT_WHITE,
    }
)

# Extra background colors map
EX_BG_COLORS: Mapping[str, Color] = MappingProxyType(
    {
        "darkGray": Color.BG_DARK_GRAY,
        "lightRed": Color.BG_LIGHT_RED,
        "lightGreen": Color.BG_LIGHT_GREEN,
        "lightYellow": Color.BG_LIGHT_YELLOW,
        "lightBlue": Color.BG_LIGHT_BLUE,
        "lightMagenta": Color.BG_LIGHT_MAGENTA,
        "lightCyan": Color.BG_LIGHT_CYAN,
        "lightWhite": Color.BG_LIGHT_WHITE,
    }
)

# Text attributes map
OPTIONS: Mapping[str, Color] = MappingProxyType(
    {
        "reset": Color.OP_RESET,
        "bold": Color.OP_BOLD,
        "fuzzy": Color.OP_FUZZY,
        "italic": Color.OP_ITALIC,
        "underscore": Color.OP_UNDERSCORE,
        "blink": Color.OP_BLINK,
        "fastBlink": Color.OP_FAST_BLINK,
        "reverse": Color.OP_REVERSE,
        "concealed": Color.OP_CONCEALED,
        "strikethrough": Color.OP_STRIKETHROUGH,
    }
)


def lookup_color(name: str, *, background: bool = False) -> Color:
    """Find a color by name, basic table first, then extra colors.

    Raises:
        UnknownColorError: name is in neither table
    """
    basic, extra = (
        (BG_COLORS, EX_BG_COLORS) if background else (FG_COLORS, EX_FG_COLORS)
    )
    if name in basic:
        return basic[name]
    if name in extra:
        return extra[name]
    kind = "background color" if background else "color"
    raise UnknownColorError(name, kind)


def lookup_option(name: str) -> Color:
    """Find a text attribute by name.

    Raises:
        UnknownColorError: name is not a known option
    """
    try:
        return OPTIONS[name]
    except KeyError:
        raise UnknownColorError(name, "option") from None
