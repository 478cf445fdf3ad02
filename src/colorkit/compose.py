"""Compose SGR codes into escape sequences."""

# Set attributes and leave them on
SETTING_TPL = "\x1b[{}m"
# Set attributes, write the message, reset
FULL_COLOR_TPL = "\x1b[{}m{}\x1b[0m"

RESET_CODE = "0"
RESET_SET = "\x1b[0m"


def join_codes(*codes: int) -> str:
    """Convert codes to a code string, e.g. "32;45;3".

    Order is preserved, it is the SGR parameter order.
    """
    return ";".join(str(int(code)) for code in codes)


def wrap_full(code: str, message: str) -> str:
    """Wrap message in a set sequence and an unconditional reset."""
    if not code:
        return message
    return FULL_COLOR_TPL.format(code, message)


def wrap_set_only(code: str) -> str:
    """Return the set sequence alone, the caller must reset later."""
    if not code:
        return ""
    return SETTING_TPL.format(code)
