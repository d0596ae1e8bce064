from __future__ import annotations

import argparse
import sys
from typing import Optional

from rolesmith.core.ansible_config import (
    DEFAULT_SETTINGS,
    ConfigLocator,
    RolesPathResolver,
)
from rolesmith.core.colors import print_error
from rolesmith.core.errors import RolesPathError


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="rolesmith meta roles_path",
        description="Print the roles path declared by the active Ansible configuration.\n\n"
        "Lookup order:\n"
        f"  ${DEFAULT_SETTINGS.env_var}\n"
        + "".join(f"  {c}\n" for c in DEFAULT_SETTINGS.candidates),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument(
        "--show-config",
        action="store_true",
        help="Also print the configuration file the roles path was read from (to stderr).",
    )
    return p


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config_path = ConfigLocator().locate()
        roles_path = RolesPathResolver().resolve(config_path)
    except RolesPathError as exc:
        print_error(str(exc))
        return 1

    if args.show_config:
        print(f"Configuration file: {config_path}", file=sys.stderr)

    sys.stdout.write(roles_path + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
