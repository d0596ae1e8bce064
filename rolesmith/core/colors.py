from __future__ import annotations

import sys
from typing import TextIO


class Style:  # type: ignore
    RESET_ALL = "\033[0m"
    BRIGHT = "\033[1m"
    DIM = "\033[2m"


class Fore:  # type: ignore
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"


def color_text(text: str, color: str) -> str:
    return f"{color}{text}{Style.RESET_ALL}"


def print_warning(message: str, stream: TextIO | None = None) -> None:
    print(color_text(f"Warning: {message}", Fore.YELLOW), file=stream or sys.stderr)


def print_error(message: str, stream: TextIO | None = None) -> None:
    print(color_text(f"Error: {message}", Fore.RED), file=stream or sys.stderr)
