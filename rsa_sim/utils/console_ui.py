"""Console presentation for the simulation CLI: banners, key/value lines, big numbers."""
from __future__ import annotations

import os
import shutil
import sys
import textwrap
from typing import Iterable, Optional

import colorama
import pyfiglet
from colorama import Fore, Style

__all__ = [
    "init",
    "banner",
    "task_panel",
    "section",
    "kv",
    "number",
    "blocks",
    "bullet",
    "info",
    "success",
    "warning",
    "error",
    "elapsed",
    "rule",
    "line",
]

_width = 100
_plain_mode = False
_use_color = False
_color_prefix = {
    "success": "",
    "warning": "",
    "error": "",
    "info": "",
}

_symbol_success = "✓"
_symbol_warning = "!"
_symbol_error = "✗"
_symbol_bullet = "•"


def init(plain: bool = False) -> None:
    """Initialise console helpers; colour is off for ``plain``, ``NO_COLOR`` or non-TTY output."""

    global _width, _plain_mode, _use_color, _color_prefix
    global _symbol_success, _symbol_warning, _symbol_error, _symbol_bullet

    _width = shutil.get_terminal_size(fallback=(100, 24)).columns or 100

    env_plain = bool(os.environ.get("NO_COLOR"))
    isatty = getattr(sys.stdout, "isatty", None)
    is_tty = bool(isatty()) if callable(isatty) else False

    _plain_mode = plain or env_plain or not is_tty
    _use_color = not _plain_mode
    if _use_color:
        colorama.init(autoreset=True)

    if _plain_mode:
        _symbol_success = "[OK]"
        _symbol_warning = "[!]"
        _symbol_error = "[X]"
        _symbol_bullet = "-"
    else:
        _symbol_success = "✓"
        _symbol_warning = "!"
        _symbol_error = "✗"
        _symbol_bullet = "•"

    if _use_color:
        _color_prefix = {
            "success": Fore.GREEN + Style.BRIGHT,
            "warning": Fore.YELLOW + Style.BRIGHT,
            "error": Fore.RED + Style.BRIGHT,
            "info": Fore.CYAN,
        }
    else:
        _color_prefix = {"success": "", "warning": "", "error": "", "info": ""}


def _apply(style: str, message: str) -> str:
    if not _use_color or not style:
        return message
    return f"{style}{message}{Style.RESET_ALL}"


def rule(char: str = "=", width: Optional[int] = None) -> None:
    count = width if width is not None else _width
    print(char * max(1, count))


def banner(title: str) -> None:
    """Display a figlet banner, or a centred text line in plain mode."""

    if _plain_mode:
        print(f"=== {title} ===".center(_width))
        return
    print(pyfiglet.figlet_format(title, width=_width))


def task_panel(title: str, detail: str | None = None) -> None:
    """Display a panel announcing the task about to run."""

    rule("=")
    heading = f"RUNNING: {title}"
    if _use_color:
        heading = _apply(Fore.MAGENTA + Style.BRIGHT, heading)
    print(heading)
    if detail:
        print(detail)
    rule("=")


def section(title: str) -> None:
    rule("=")
    print(f" {title.upper()}")
    rule("=")


def kv(key: str, value: str) -> None:
    print(f"{key}: {value}")


def number(key: str, value: int) -> None:
    """Print a big integer in decimal, wrapped under its label when it is long."""

    digits = str(value)
    label = f"{key} ({value.bit_length()} bits)"
    if len(label) + 2 + len(digits) <= _width:
        kv(label, digits)
        return
    print(f"{label}:")
    for chunk in textwrap.wrap(digits, max(20, _width - 4)):
        print(f"    {chunk}")


def blocks(key: str, values: Iterable[int]) -> None:
    """Print a block sequence as a bracketed list, one entry per line when long."""

    items = [str(v) for v in values]
    joined = "[" + ", ".join(items) + "]"
    if len(key) + 2 + len(joined) <= _width:
        kv(key, joined)
        return
    print(f"{key}:")
    for index, item in enumerate(items):
        print(f"    [{index}] {item}")


def bullet(msg: str) -> None:
    print(f"{_symbol_bullet} {msg}")


def info(msg: str) -> None:
    print(_apply(_color_prefix["info"], f"{_symbol_bullet} {msg}"))


def success(msg: str) -> None:
    print(_apply(_color_prefix["success"], f"{_symbol_success} {msg}"))


def warning(msg: str) -> None:
    print(_apply(_color_prefix["warning"], f"{_symbol_warning} {msg}"))


def error(msg: str) -> None:
    print(_apply(_color_prefix["error"], f"{_symbol_error} {msg}"))


def elapsed(prefix: str, seconds: float) -> None:
    print(f"{prefix} {seconds:.2f}s")


def line() -> None:
    rule("-")
