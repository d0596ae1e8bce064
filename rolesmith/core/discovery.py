from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

IGNORED_DIRS = {"__pycache__", "core"}


@dataclass(frozen=True)
class Command:
    """
    A command is a package directory below the rolesmith package that contains __main__.py.

    Example:
      rolesmith/create/playbook/__main__.py
        -> parts=("create","playbook"), module="rolesmith.create.playbook"
    """

    parts: Tuple[str, ...]
    module: str
    main_path: Path

    @property
    def group(self) -> str | None:
        if len(self.parts) <= 1:
            return None
        return "/".join(self.parts[:-1])

    @property
    def name(self) -> str:
        return self.parts[-1]

    @property
    def subcommand(self) -> str:
        return " ".join(self.parts)


def _module_name(package_dir: Path, parts: Tuple[str, ...] | List[str]) -> str:
    return ".".join((package_dir.name, *parts))


def discover_commands(package_dir: Path) -> List[Command]:
    """Recursively collect every command package below package_dir, sorted by group and name."""
    commands: List[Command] = []

    for root, dirnames, filenames in os.walk(package_dir):
        dirnames[:] = [d for d in dirnames if d not in IGNORED_DIRS]

        if "__main__.py" not in filenames:
            continue

        root_path = Path(root)
        rel = root_path.relative_to(package_dir)
        if rel.parts == ():
            # the package's own __main__.py is the dispatcher
            continue

        parts = tuple(rel.parts)
        commands.append(
            Command(
                parts=parts,
                module=_module_name(package_dir, parts),
                main_path=root_path / "__main__.py",
            )
        )

    commands.sort(key=lambda c: (c.group or "", c.name))
    return commands


def resolve_command_module(
    package_dir: Path, argv_parts: List[str]
) -> tuple[str | None, List[str]]:
    """
    Resolve the longest argv prefix that names a command package.

    Example:
      argv_parts=["create","playbook","demo","--all"]
      -> ("rolesmith.create.playbook", ["demo","--all"])
    """
    for n in range(len(argv_parts), 0, -1):
        prefix = argv_parts[:n]
        if any(p.startswith("-") or "/" in p or p in IGNORED_DIRS for p in prefix):
            continue
        candidate_dir = package_dir.joinpath(*prefix)
        if candidate_dir.is_dir() and (candidate_dir / "__main__.py").is_file():
            return _module_name(package_dir, prefix), argv_parts[n:]
    return None, argv_parts
