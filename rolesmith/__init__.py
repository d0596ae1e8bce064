"""Scaffold Ansible playbook directory structures below the configured roles path."""

__version__ = "0.1.0"
