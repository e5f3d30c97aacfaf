"""ANSI terminal control sequences and terminal identification."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Optional, Protocol

from vbbs import log

ANSI_ESCAPE_CHAR = "\033"
ANSI_CSI_CHAR = "["

IDENTIFY = "\033[c"
DEVICE_STATUS_REPORT = "\033[5n"

CLEAR_TO_END_OF_LINE = "\033[0K"
CLEAR_TO_START_OF_LINE = "\033[1K"
CLEAR_LINE = "\033[2K"

CLEAR_TO_END_OF_SCREEN = "\033[0J"
CLEAR_TO_START_OF_SCREEN = "\033[1J"
CLEAR_SCREEN = "\033[2J"

CURSOR_HOME = "\033[H"
CURSOR_UP_ONE = "\033[A"
CURSOR_DOWN_ONE = "\033[B"
CURSOR_RIGHT_ONE = "\033[C"
CURSOR_LEFT_ONE = "\033[D"
CURSOR_SAVE = "\0337"
CURSOR_RESTORE = "\0338"
CURSOR_HIDE = "\033[?25l"
CURSOR_SHOW = "\033[?25h"

SET_BOLD = "\033[1m"
SET_FAINT = "\033[2m"
SET_BOLD_OFF = "\033[22m"
SET_ITALIC = "\033[3m"
SET_ITALIC_OFF = "\033[23m"
SET_UNDERLINE = "\033[4m"
SET_UNDERLINE_OFF = "\033[24m"
SET_BLINK = "\033[5m"
SET_BLINK_OFF = "\033[25m"
SET_REVERSE = "\033[7m"
SET_REVERSE_OFF = "\033[27m"
SET_CONCEAL = "\033[8m"
SET_CONCEAL_OFF = "\033[28m"
SET_STRIKETHROUGH = "\033[9m"
SET_STRIKETHROUGH_OFF = "\033[29m"

RESET_MODES = "\033[0m"

SET_FG_DEFAULT = "\033[39m"
SET_BG_DEFAULT = "\033[49m"

SET_FG_BLACK = "\033[30m"
SET_FG_RED = "\033[31m"
SET_FG_GREEN = "\033[32m"
SET_FG_YELLOW = "\033[33m"
SET_FG_BLUE = "\033[34m"
SET_FG_MAGENTA = "\033[35m"
SET_FG_CYAN = "\033[36m"
SET_FG_WHITE = "\033[37m"
SET_FG_BRIGHT_BLACK = "\033[90m"
SET_FG_BRIGHT_RED = "\033[91m"
SET_FG_BRIGHT_GREEN = "\033[92m"
SET_FG_BRIGHT_YELLOW = "\033[93m"
SET_FG_BRIGHT_BLUE = "\033[94m"
SET_FG_BRIGHT_MAGENTA = "\033[95m"
SET_FG_BRIGHT_CYAN = "\033[96m"
SET_FG_BRIGHT_WHITE = "\033[97m"

SET_BG_BLACK = "\033[40m"
SET_BG_RED = "\033[41m"
SET_BG_GREEN = "\033[42m"
SET_BG_YELLOW = "\033[43m"
SET_BG_BLUE = "\033[44m"
SET_BG_MAGENTA = "\033[45m"
SET_BG_CYAN = "\033[46m"
SET_BG_WHITE = "\033[47m"
SET_BG_BRIGHT_BLACK = "\033[100m"
SET_BG_BRIGHT_RED = "\033[101m"
SET_BG_BRIGHT_GREEN = "\033[102m"
SET_BG_BRIGHT_YELLOW = "\033[103m"
SET_BG_BRIGHT_BLUE = "\033[104m"
SET_BG_BRIGHT_MAGENTA = "\033[105m"
SET_BG_BRIGHT_CYAN = "\033[106m"
SET_BG_BRIGHT_WHITE = "\033[107m"

# Device-attributes reply: ESC [ ? then up to 50 non-blank characters.
_IDENTIFY_RESPONSE = re.compile(r"\x1b\[\?\s*(\S{1,50})")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_TERMINAL_NAMES = {
    1: "VT100",
    4: "VT132",
    6: "VT102",
    7: "VT131",
    12: "VT125",
    61: "Gnome Terminal?",
    62: "VT220",
    63: "VT320",
    64: "VT420",
    65: "VT520",
}


class TerminalType(enum.Enum):
    """Broad class of terminal."""

    RAW = 0
    ANSI = 1


@dataclass
class Terminal:
    """What is known about the remote terminal."""

    type: str = "Unknown"
    is_ansi: bool = True
    width: int = 80
    height: int = 24


class TextSink(Protocol):
    def write(self, text: str) -> object:
        ...


def set_cursor_pos(x: int, y: int) -> str:
    """Move the cursor to column x, row y."""
    return f"\033[{y};{x}H"


def set_cursor_col(x: int) -> str:
    """Move the cursor to column x."""
    return f"\033[{x}G"


def cursor_up(n: int) -> str:
    """Move the cursor up n rows."""
    return f"\033[{n}A"


def cursor_down(n: int) -> str:
    """Move the cursor down n rows."""
    return f"\033[{n}B"


def cursor_right(n: int) -> str:
    """Move the cursor right n columns."""
    return f"\033[{n}C"


def cursor_left(n: int) -> str:
    """Move the cursor left n columns."""
    return f"\033[{n}D"


def set_color(fg: int, bg: int) -> str:
    """Select foreground and background colour codes."""
    return f"\033[{fg};{bg}m"


def set_fg_rgb(r: int, g: int, b: int) -> str:
    """Select a 24-bit foreground colour."""
    return f"\033[38;2;{r};{g};{b}m"


def set_bg_rgb(r: int, g: int, b: int) -> str:
    """Select a 24-bit background colour."""
    return f"\033[48;2;{r};{g};{b}m"


def set_fg_256(n: int) -> str:
    """Select a foreground colour from the 256-colour palette."""
    return f"\033[38;5;{n}m"


def set_bg_256(n: int) -> str:
    """Select a background colour from the 256-colour palette."""
    return f"\033[48;5;{n}m"


def identify(out: TextSink) -> None:
    """Write the prompt and the device-attributes query to out."""
    out.write("[Press Enter to Continue]\n")
    out.write(SET_CONCEAL)
    out.write(IDENTIFY)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def check_identify_response(out: TextSink, response: str, terminal: Terminal) -> None:
    """Read a device-attributes reply into terminal and report ANSI support to out."""
    out.write(SET_CONCEAL_OFF)
    match = _IDENTIFY_RESPONSE.match(response)
    out.write(SET_CONCEAL_OFF)

    if match:
        terminal.is_ansi = True
        attributes = match.group(1)
        codes = [_atoi(part) for part in attributes.split(";")[:-1]]
        first: Optional[int] = codes[0] if codes else None
        name = _TERMINAL_NAMES.get(first) if first is not None else None
        if name is not None:
            log.debug("Terminal type: %s", name)
            terminal.type = name
        else:
            log.debug("Unknown terminal type: %s (%s)", first, attributes)

    if terminal.is_ansi:
        out.write("ANSI escape codes enabled.\n")
    else:
        out.write("ANSI escape codes disabled.\n")