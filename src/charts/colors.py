"""ANSI terminal color wrapping for rendered charts."""

from typing import Dict, List

RESET = "\x1b[0m"
DEFAULT_COLOR = "white"

ANSI_COLORS: Dict[str, str] = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "gray": "\x1b[90m",
    "brightRed": "\x1b[91m",
    "brightGreen": "\x1b[92m",
    "brightYellow": "\x1b[93m",
    "brightBlue": "\x1b[94m",
    "brightMagenta": "\x1b[95m",
    "brightCyan": "\x1b[96m",
    "brightWhite": "\x1b[97m",
}


def colorize(text: str, color: str = DEFAULT_COLOR) -> str:
    """Wrap ``text`` in the escape code for ``color``; unknown names use white."""
    code = ANSI_COLORS.get(color, ANSI_COLORS[DEFAULT_COLOR])
    return f"{code}{text}{RESET}"


def apply_color(text: str, color: str) -> str:
    """Colorize unless the color is the terminal default."""
    if not color or color == DEFAULT_COLOR:
        return text
    return colorize(text, color)


def is_valid_color(color: str) -> bool:
    return color in ANSI_COLORS


def get_color_list() -> List[str]:
    return list(ANSI_COLORS)
