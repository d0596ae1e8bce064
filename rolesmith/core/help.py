from __future__ import annotations

import subprocess
import sys
import textwrap
from pathlib import Path
from typing import List

from rolesmith.core.colors import Fore, Style, color_text
from rolesmith.core.discovery import discover_commands


def format_command_help(
    name: str, description: str, indent: int = 2, col_width: int = 36, width: int = 80
) -> str:
    prefix = " " * indent + f"{name:<{col_width - indent}}"
    wrapper = textwrap.TextWrapper(
        width=width, initial_indent=prefix, subsequent_indent=" " * col_width
    )
    return wrapper.fill(description)


def extract_description_via_help(module: str) -> str:
    """
    Run "python -m <module> --help" and return the first line of the description.

    Returns "-" when the command has no description or cannot be run.
    """
    try:
        result = subprocess.run(
            [sys.executable, "-m", module, "--help"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return "-"

    lines = (result.stdout or "").splitlines()

    # usage may wrap over several lines; the description follows the first blank line
    seen_usage = False
    for i, line in enumerate(lines):
        if line.strip().startswith("usage:"):
            seen_usage = True
            continue
        if seen_usage and not line.strip():
            for candidate in lines[i + 1 :]:
                if candidate.strip():
                    return candidate.strip()
            break
    return "-"


def print_global_help(package_dir: Path) -> None:
    commands = discover_commands(package_dir)

    print(color_text("rolesmith", Fore.CYAN + Style.BRIGHT))
    print()
    print(color_text("Scaffold Ansible playbooks below your roles path", Style.DIM))
    print()
    print(
        color_text(
            "Usage: rolesmith [--log <LOG_DIR>] [--help-all] [-h|--help] <command> [options]",
            Fore.GREEN,
        )
    )
    print()
    print(color_text("Options:", Style.BRIGHT))
    print(
        color_text(
            "  --log <LOG_DIR>   Log all proxied command output to <LOG_DIR>/<timestamp>.log",
            Fore.YELLOW,
        )
    )
    print(
        color_text("  --help-all        Show full --help for all commands", Fore.YELLOW)
    )
    print(
        color_text("  -h, --help        Show this help message and exit", Fore.YELLOW)
    )
    print()
    print(color_text("Available commands:", Style.BRIGHT))
    print()

    current_group: str | None = None
    for cmd in commands:
        if cmd.group != current_group:
            if cmd.group:
                print(color_text(f"{cmd.group}/", Fore.MAGENTA))
            current_group = cmd.group

        desc = extract_description_via_help(cmd.module)
        print(format_command_help(cmd.name, desc, indent=2))

    print()
    print(color_text("Nested folders map to subcommands,", Fore.CYAN))
    print(color_text("e.g. rolesmith create playbook -> rolesmith/create/playbook/__main__.py", Fore.CYAN))
    print()


def show_full_help_for_all(package_dir: Path) -> None:
    print(color_text("rolesmith: full help overview", Fore.CYAN + Style.BRIGHT))
    print()

    for cmd in discover_commands(package_dir):
        file_path = str(cmd.main_path.relative_to(package_dir.parent))
        print(color_text("=" * 80, Fore.BLUE + Style.BRIGHT))
        print(color_text(f"Subcommand: {cmd.subcommand}", Fore.YELLOW + Style.BRIGHT))
        print(color_text(f"File: {file_path}", Fore.CYAN))
        print(color_text("-" * 80, Fore.BLUE))

        try:
            result = subprocess.run(
                [sys.executable, "-m", cmd.module, "--help"],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            print(color_text(f"Failed to get help for {file_path}: {e}", Fore.RED))
            print()
            continue

        if result.stdout:
            print(result.stdout.rstrip())
        if result.stderr:
            print(color_text(result.stderr.rstrip(), Fore.RED))
        print()


def show_help_for_directory(package_dir: Path, dir_parts: List[str]) -> bool:
    """List the commands directly below rolesmith/<dir_parts>/; False if there are none."""
    if not package_dir.joinpath(*dir_parts).is_dir():
        return False

    group = "/".join(dir_parts)
    children = [c for c in discover_commands(package_dir) if (c.group or "") == group]
    if not children:
        return False

    print(color_text(f"Overview of commands in: {group}", Fore.CYAN + Style.BRIGHT))
    print()
    for cmd in children:
        desc = extract_description_via_help(cmd.module)
        print(format_command_help(cmd.name, desc, indent=2))

    return True
