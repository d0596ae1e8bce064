from __future__ import annotations

from .command import build_parser, main, request_from_args
from .structure import (
    ALL_FOLDERS,
    DEFAULT_PLAYBOOK_NAME,
    PlaybookRequest,
    StructureGenerator,
    create_default_playbook,
    create_playbook,
)

__all__ = [
    "ALL_FOLDERS",
    "DEFAULT_PLAYBOOK_NAME",
    "PlaybookRequest",
    "StructureGenerator",
    "build_parser",
    "create_default_playbook",
    "create_playbook",
    "main",
    "request_from_args",
]
