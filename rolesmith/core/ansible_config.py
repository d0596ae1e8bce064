from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, List, Mapping, Optional, Tuple

from rolesmith.core.colors import print_warning
from rolesmith.core.errors import (
    ConfigNotFoundError,
    ConfigReadError,
    ConfigUnreadableError,
)

ROLES_PATH_KEY = "roles_path"
DEFAULT_ROLES_DIR = "roles"


@dataclass(frozen=True)
class ConfigSettings:
    """
    Where to look for the Ansible configuration file.

    The override variable always wins; the file candidates are checked in order
    and the first existing one is used.
    """

    env_var: str = "ANSIBLE_CONFIG"
    candidates: Tuple[str, ...] = (
        "./ansible.cfg",
        "./.ansible.cfg",
        "/etc/ansible/ansible.cfg",
    )


DEFAULT_SETTINGS = ConfigSettings()


def legacy_join(prefix: str, suffix: str) -> str:
    # Plain concatenation: no separator handling, "a" + "b" == "ab".
    return prefix + suffix


def config_prefix(config_path: str) -> str:
    """
    Return everything up to and including the last "/" of config_path.

      "/etc/ansible/ansible.cfg" -> "/etc/ansible/"
      "./ansible.cfg"            -> "./"
      "ansible.cfg"              -> ""
    """
    return config_path[: config_path.rfind("/") + 1]


def available_roles_paths(option_line: str) -> List[str]:
    """
    Split the value of a "roles_path = a:b:c" line into its candidates.

    Only the text between the first and second "=" is considered. An empty value
    (or a line without "=") yields an empty list.
    """
    parts = option_line.split("=")
    if len(parts) < 2:
        return []

    options = parts[1].strip()
    if not options:
        return []

    return options.split(":")


class ConfigLocator:
    def __init__(
        self,
        settings: ConfigSettings = DEFAULT_SETTINGS,
        environ: Optional[Mapping[str, str]] = None,
        exists: Callable[[str], bool] = os.path.exists,
    ) -> None:
        self.settings = settings
        self.environ = os.environ if environ is None else environ
        self.exists = exists

    def locate(self) -> str:
        # The override is trusted as-is; opening it later reports a missing file.
        env_path = self.environ.get(self.settings.env_var, "")
        if env_path:
            return env_path

        for candidate in self.settings.candidates:
            if self.exists(candidate):
                return candidate

        raise ConfigNotFoundError("Cannot find Ansible configuration file")


class RolesPathResolver:
    def __init__(self, warn: Callable[[str], None] = print_warning) -> None:
        self.warn = warn

    def resolve(self, config_path: str) -> str:
        """
        Read roles_path from config_path.

        The first line mentioning roles_path decides; its first ":"-separated entry
        is appended to the config file's directory. Without a usable value the
        result is "<config dir>roles".
        """
        prefix = config_prefix(config_path)
        default_path = legacy_join(prefix, DEFAULT_ROLES_DIR)

        try:
            handle = open(config_path, encoding="utf-8")
        except OSError as exc:
            raise ConfigUnreadableError(
                f"Cannot open Ansible configuration file: {config_path}"
            ) from exc

        with handle:
            try:
                for line in handle:
                    if ROLES_PATH_KEY not in line:
                        continue

                    paths = available_roles_paths(line.rstrip("\r\n"))
                    if not paths:
                        return default_path
                    return legacy_join(prefix, paths[0])
            except (OSError, UnicodeDecodeError) as exc:
                raise ConfigReadError(
                    f"Cannot read data from Ansible configuration file: {config_path}"
                ) from exc

        self.warn("Roles path was not found in configuration file, using default path.")
        return default_path


def resolve_roles_path(
    locator: Optional[ConfigLocator] = None,
    resolver: Optional[RolesPathResolver] = None,
) -> str:
    """Locate the Ansible configuration and return the roles path it declares."""
    config_path = (locator or ConfigLocator()).locate()
    return (resolver or RolesPathResolver()).resolve(config_path)
