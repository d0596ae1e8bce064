from __future__ import annotations

import os
import subprocess
import sys
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _env() -> dict[str, str]:
    env = os.environ.copy()
    env.pop("ANSIBLE_CONFIG", None)
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = (
        str(PROJECT_ROOT) + os.pathsep + existing if existing else str(PROJECT_ROOT)
    )
    return env


def _rolesmith(cwd: Path, *args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "rolesmith", *args],
        cwd=str(cwd),
        env=_env(),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        check=False,
    )


class TestCreatePlaybookCLI(unittest.TestCase):
    def test_local_config_drives_scaffolding(self) -> None:
        with TemporaryDirectory() as td:
            root = Path(td)
            (root / "ansible.cfg").write_text(
                "[defaults]\nroles_path = roles:/usr/share/ansible/roles\n",
                encoding="utf-8",
            )

            proc = _rolesmith(root, "create", "playbook", "webserver", "--all")

            self.assertEqual(proc.returncode, 0, proc.stderr)
            self.assertIn("Roles path is: ./roles", proc.stdout)

            playbook = root / "roles" / "webserver"
            self.assertEqual(
                sorted(p.name for p in playbook.iterdir()),
                ["defaults", "files", "handlers", "meta", "tasks", "templates", "vars"],
            )

            main_files = sorted(playbook.glob("*/main.yml"))
            self.assertEqual(
                [p.parent.name for p in main_files],
                ["defaults", "handlers", "meta", "tasks", "vars"],
            )
            for main_yml in main_files:
                with main_yml.open(encoding="utf-8") as fh:
                    self.assertIsNone(yaml.safe_load(fh), main_yml)

    def test_dotfile_config_used_when_no_plain_config(self) -> None:
        with TemporaryDirectory() as td:
            root = Path(td)
            (root / ".ansible.cfg").write_text("[defaults]\n", encoding="utf-8")

            proc = _rolesmith(root, "create", "playbook")

            self.assertEqual(proc.returncode, 0, proc.stderr)
            self.assertIn("Roles path was not found", proc.stderr)
            self.assertTrue((root / "roles" / "my-playbook" / "tasks" / "main.yml").is_file())

    def test_meta_roles_path_prints_path(self) -> None:
        with TemporaryDirectory() as td:
            root = Path(td)
            (root / "ansible.cfg").write_text(
                "[defaults]\nroles_path = site-roles\n", encoding="utf-8"
            )

            proc = _rolesmith(root, "meta", "roles_path")

            self.assertEqual(proc.returncode, 0, proc.stderr)
            self.assertEqual(proc.stdout.strip(), "./site-roles")

    def test_unknown_command_exits_1(self) -> None:
        with TemporaryDirectory() as td:
            proc = _rolesmith(Path(td), "nope")

            self.assertEqual(proc.returncode, 1)
            self.assertIn("not found", proc.stderr)


if __name__ == "__main__":
    unittest.main()
