from __future__ import annotations

import argparse
from typing import List, Optional

from rolesmith.core.ansible_config import ConfigLocator, RolesPathResolver
from rolesmith.core.colors import Fore, color_text, print_error
from rolesmith.core.errors import RolesPathError

from .structure import DEFAULT_PLAYBOOK_NAME, PlaybookRequest, StructureGenerator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rolesmith create playbook",
        description="Create the folder skeleton of an Ansible playbook below the configured roles path.",
    )

    parser.add_argument(
        "name",
        nargs="?",
        default=DEFAULT_PLAYBOOK_NAME,
        help=f"Playbook name (default: {DEFAULT_PLAYBOOK_NAME}).",
    )
    parser.add_argument(
        "--with-handlers", action="store_true", help="Add handlers/main.yml."
    )
    parser.add_argument(
        "--with-templates", action="store_true", help="Add a templates/ folder."
    )
    parser.add_argument("--with-files", action="store_true", help="Add a files/ folder.")
    parser.add_argument("--with-vars", action="store_true", help="Add vars/main.yml.")
    parser.add_argument(
        "--with-defaults", action="store_true", help="Add defaults/main.yml."
    )
    parser.add_argument("--with-meta", action="store_true", help="Add meta/main.yml.")
    parser.add_argument(
        "--all", action="store_true", help="Add every optional folder."
    )
    parser.add_argument(
        "--roles-path",
        help="Use this roles path instead of reading it from the Ansible configuration.",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print the paths that would be created without writing anything.",
    )

    return parser


def request_from_args(args: argparse.Namespace) -> PlaybookRequest:
    return PlaybookRequest(
        name=args.name,
        with_handlers=args.with_handlers,
        with_templates=args.with_templates,
        with_files=args.with_files,
        with_vars=args.with_vars,
        with_defaults=args.with_defaults,
        with_meta=args.with_meta,
        all=args.all,
    )


def main(
    argv: Optional[List[str]] = None,
    locator: Optional[ConfigLocator] = None,
    resolver: Optional[RolesPathResolver] = None,
) -> int:
    """
    CLI entrypoint for `python -m rolesmith.create.playbook`.

    Stops with exit code 1 when the roles path cannot be resolved; nothing is
    created in that case.
    """
    args = build_parser().parse_args(argv)
    request = request_from_args(args)

    roles_path = args.roles_path
    if not roles_path:
        try:
            config_path = (locator or ConfigLocator()).locate()
            roles_path = (resolver or RolesPathResolver()).resolve(config_path)
        except RolesPathError as exc:
            print_error(str(exc))
            return 1

    print(f"Roles path is: {roles_path}")

    generator = StructureGenerator(report=print)
    folders = request.select_folders()

    if args.preview:
        print(color_text("Preview mode: nothing will be written.", Fore.CYAN))
        for path in generator.plan(roles_path, request.name, folders):
            print(path)
        return 0

    try:
        generator.generate(roles_path, request.name, folders)
    except (OSError, ValueError) as exc:
        print_error(f"Failed to create playbook '{request.name}': {exc}")
        return 1

    print(color_text(f"Playbook '{request.name}' created.", Fore.GREEN))
    return 0
