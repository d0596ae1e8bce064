from __future__ import annotations


class RolesPathError(RuntimeError):
    """Raised when the roles path cannot be derived from the Ansible configuration."""


class ConfigNotFoundError(RolesPathError):
    """No Ansible configuration file could be discovered."""


class ConfigUnreadableError(RolesPathError):
    """The configuration file exists (or was named) but cannot be opened."""


class ConfigReadError(RolesPathError):
    """Reading the configuration file failed while scanning its lines."""
