from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from rolesmith.core.ansible_config import legacy_join

DEFAULT_PLAYBOOK_NAME = "my-playbook"
MARKER_FILE = "main.yml"

# Order matters: folders are created in this order.
OPTIONAL_FOLDERS = ("handlers", "templates", "files", "vars", "defaults", "meta")
ALL_FOLDERS = ("tasks",) + OPTIONAL_FOLDERS

# Folders holding arbitrary content rather than a main.yml entry point.
UNSEEDED_FOLDERS = frozenset({"files", "templates"})

DIR_MODE = 0o755


@dataclass(frozen=True)
class PlaybookRequest:
    name: str = DEFAULT_PLAYBOOK_NAME
    with_handlers: bool = False
    with_templates: bool = False
    with_files: bool = False
    with_vars: bool = False
    with_defaults: bool = False
    with_meta: bool = False
    all: bool = False

    def select_folders(self) -> List[str]:
        """tasks first, then every optional folder whose flag is set, in fixed order."""
        if self.all:
            return list(ALL_FOLDERS)

        flags = {
            "handlers": self.with_handlers,
            "templates": self.with_templates,
            "files": self.with_files,
            "vars": self.with_vars,
            "defaults": self.with_defaults,
            "meta": self.with_meta,
        }
        return ["tasks"] + [name for name in OPTIONAL_FOLDERS if flags[name]]


def _with_trailing_slash(path: str) -> str:
    if path.endswith("/"):
        return path
    return legacy_join(path, "/")


def playbook_root(roles_path: str, playbook_name: str) -> str:
    if not roles_path:
        raise ValueError("roles path must not be empty")
    return _with_trailing_slash(legacy_join(_with_trailing_slash(roles_path), playbook_name))


def _touch(path: str) -> None:
    # Truncates an existing file.
    with open(path, "w", encoding="utf-8"):
        pass


class StructureGenerator:
    """
    Create the folder skeleton of a playbook below a roles path.

    Every folder except files/ and templates/ gets an empty main.yml. Existing
    directories are reused; existing main.yml files are truncated. Nothing is
    rolled back if creation fails halfway.
    """

    def __init__(
        self,
        makedirs: Callable[..., None] = os.makedirs,
        touch: Callable[[str], None] = _touch,
        report: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.makedirs = makedirs
        self.touch = touch
        self.report = report

    def plan(
        self, roles_path: str, playbook_name: str, folders: Iterable[str]
    ) -> List[str]:
        """Return the directories and files generate() would create, in order."""
        root = playbook_root(roles_path, playbook_name)
        planned: List[str] = []
        for folder in folders:
            folder_path = legacy_join(root, folder)
            planned.append(folder_path)
            if folder not in UNSEEDED_FOLDERS:
                planned.append(legacy_join(folder_path, "/" + MARKER_FILE))
        return planned

    def generate(
        self, roles_path: str, playbook_name: str, folders: Iterable[str]
    ) -> List[str]:
        root = playbook_root(roles_path, playbook_name)
        created: List[str] = []

        for folder in folders:
            folder_path = legacy_join(root, folder)
            self.makedirs(folder_path, mode=DIR_MODE, exist_ok=True)
            self._record(created, folder_path)

            if folder in UNSEEDED_FOLDERS:
                continue

            file_path = legacy_join(folder_path, "/" + MARKER_FILE)
            self.touch(file_path)
            self._record(created, file_path)

        return created

    def _record(self, created: List[str], path: str) -> None:
        created.append(path)
        if self.report is not None:
            self.report(path)


def create_playbook(
    request: PlaybookRequest,
    roles_path: str,
    generator: Optional[StructureGenerator] = None,
) -> List[str]:
    generator = generator or StructureGenerator()
    return generator.generate(roles_path, request.name, request.select_folders())


def create_default_playbook(
    roles_path: str, generator: Optional[StructureGenerator] = None
) -> List[str]:
    """Scaffold "my-playbook" with only a tasks/ folder."""
    return create_playbook(PlaybookRequest(), roles_path, generator)
