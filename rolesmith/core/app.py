from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from rolesmith.core.colors import Fore, Style, color_text, print_error
from rolesmith.core.discovery import resolve_command_module
from rolesmith.core.help import (
    print_global_help,
    show_full_help_for_all,
    show_help_for_directory,
)
from rolesmith.core.run import open_log_file, run_command

PACKAGE_DIR = Path(__file__).resolve().parents[1]  # .../rolesmith/core/app.py -> .../rolesmith


@dataclass
class Flags:
    help_all: bool = False
    log_dir: Optional[Path] = None


def parse_flags(argv: List[str]) -> Flags:
    """Consume the global flags from argv (in place); argv[0] is the program name."""
    flags = Flags()

    flags.help_all = "--help-all" in argv and (argv.remove("--help-all") or True)

    if "--log" in argv:
        i = argv.index("--log")
        if i + 1 >= len(argv) or argv[i + 1].startswith("-"):
            print_error("--log requires a directory argument.")
            raise SystemExit(1)
        flags.log_dir = Path(argv[i + 1])
        del argv[i : i + 2]

    return flags


def main(argv: Optional[List[str]] = None) -> None:
    argv = list(sys.argv if argv is None else argv)
    flags = parse_flags(argv)
    args = argv[1:]

    if flags.help_all:
        print_global_help(PACKAGE_DIR)
        print(color_text("Full detailed help for all subcommands:", Style.BRIGHT))
        print()
        show_full_help_for_all(PACKAGE_DIR)
        raise SystemExit(0)

    if not args or args[0] in ("-h", "--help"):
        print_global_help(PACKAGE_DIR)
        raise SystemExit(0)

    # "<group> -h"
    if len(args) > 1 and args[-1] in ("-h", "--help"):
        if show_help_for_directory(PACKAGE_DIR, args[:-1]):
            raise SystemExit(0)

    module, remaining = resolve_command_module(PACKAGE_DIR, args)
    if not module:
        print_error(f"command '{' '.join(args)}' not found.")
        raise SystemExit(1)

    log_file = None
    if flags.log_dir is not None:
        log_file, log_path = open_log_file(flags.log_dir)
        print(color_text(f"Tip: Log file created at {log_path}", Fore.GREEN))

    full_cmd = [sys.executable, "-m", module] + remaining

    try:
        rc = run_command(full_cmd, log_file)
    except KeyboardInterrupt:
        print()
        print(color_text("Execution interrupted by user (Ctrl+C).", Fore.YELLOW))
        raise SystemExit(130)
    finally:
        if log_file:
            log_file.close()

    raise SystemExit(rc)
