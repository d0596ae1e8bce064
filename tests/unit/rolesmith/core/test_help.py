import tempfile
import unittest
from pathlib import Path
from unittest.mock import Mock, patch

from rolesmith.core.discovery import Command
from rolesmith.core.help import (
    extract_description_via_help,
    format_command_help,
    show_full_help_for_all,
    show_help_for_directory,
)


class TestHelp(unittest.TestCase):
    def test_format_command_help_basic(self):
        output = format_command_help(
            name="cmd",
            description="A basic description",
            indent=2,
            col_width=20,
            width=40,
        )
        self.assertTrue(output.startswith("  cmd"))
        self.assertIn("A basic description", output)

    @patch("rolesmith.core.help.subprocess.run", side_effect=OSError("mocked error"))
    def test_extract_description_via_help_returns_dash_on_error(self, _mock_run):
        self.assertEqual(extract_description_via_help("rolesmith.fake"), "-")

    @patch("rolesmith.core.help.subprocess.run")
    def test_extract_description_via_help_with_description(self, mock_run):
        mock_run.return_value = Mock(
            stdout="usage: rolesmith create playbook [-h]\n\nCreate a playbook.\n",
            stderr="",
        )
        self.assertEqual(
            extract_description_via_help("rolesmith.create.playbook"),
            "Create a playbook.",
        )

    @patch("rolesmith.core.help.subprocess.run")
    def test_extract_description_via_help_without_description(self, mock_run):
        mock_run.return_value = Mock(stdout="usage: empty [options]\n", stderr="")
        self.assertEqual(extract_description_via_help("rolesmith.some.cmd"), "-")

    @patch("rolesmith.core.help.discover_commands")
    @patch("rolesmith.core.help.subprocess.run")
    @patch("builtins.print")
    def test_show_full_help_for_all_invokes_help_for_each_command(
        self, _mock_print, mock_run, mock_discover
    ):
        mock_run.return_value = Mock(stdout="usage: x\n", stderr="")
        with tempfile.TemporaryDirectory() as td:
            package_dir = Path(td) / "rolesmith"
            mock_discover.return_value = [
                Command(
                    parts=("create", "playbook"),
                    module="rolesmith.create.playbook",
                    main_path=package_dir / "create" / "playbook" / "__main__.py",
                ),
                Command(
                    parts=("meta", "roles_path"),
                    module="rolesmith.meta.roles_path",
                    main_path=package_dir / "meta" / "roles_path" / "__main__.py",
                ),
            ]

            show_full_help_for_all(package_dir)

            invoked = [call.args[0] for call in mock_run.call_args_list]
            self.assertEqual(
                [cmd[2] for cmd in invoked],
                ["rolesmith.create.playbook", "rolesmith.meta.roles_path"],
            )
            for cmd in invoked:
                self.assertEqual(cmd[1], "-m")
                self.assertEqual(cmd[3], "--help")

    @patch("rolesmith.core.help.discover_commands")
    @patch("rolesmith.core.help.extract_description_via_help", return_value="DESC")
    @patch("builtins.print")
    def test_show_help_for_directory_lists_only_direct_children(
        self, mock_print, mock_extract, mock_discover
    ):
        with tempfile.TemporaryDirectory() as td:
            package_dir = Path(td) / "rolesmith"
            (package_dir / "create").mkdir(parents=True)
            mock_discover.return_value = [
                Command(
                    parts=("create", "playbook"),
                    module="rolesmith.create.playbook",
                    main_path=package_dir / "create" / "playbook" / "__main__.py",
                ),
                Command(
                    parts=("meta", "roles_path"),
                    module="rolesmith.meta.roles_path",
                    main_path=package_dir / "meta" / "roles_path" / "__main__.py",
                ),
            ]

            self.assertTrue(show_help_for_directory(package_dir, ["create"]))
            mock_extract.assert_called_once_with("rolesmith.create.playbook")

    def test_show_help_for_directory_missing_dir(self):
        with tempfile.TemporaryDirectory() as td:
            self.assertFalse(show_help_for_directory(Path(td), ["nope"]))


if __name__ == "__main__":
    unittest.main()
