from __future__ import annotations

import os
import subprocess
from datetime import datetime
from pathlib import Path
from typing import List, TextIO

from rolesmith.core.colors import print_error


def open_log_file(log_dir: Path) -> tuple[TextIO, Path]:
    """
    Create/open a timestamped log file inside log_dir.

    log_dir is created with parents if missing and restricted to the owner.
    """
    log_dir = log_dir.expanduser()
    log_dir.mkdir(parents=True, exist_ok=True)

    try:
        os.chmod(log_dir, 0o700)
    except OSError:
        # not every filesystem supports POSIX permissions
        pass

    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    log_file_path = log_dir / f"{timestamp}.log"
    fd = os.open(str(log_file_path), os.O_WRONLY | os.O_CREAT | os.O_APPEND, 0o600)
    return os.fdopen(fd, "a", encoding="utf-8"), log_file_path


def run_command(full_cmd: List[str], log_file: TextIO | None = None) -> int:
    """
    Run full_cmd and return its exit code.

    With a log file, stdout and stderr are merged, echoed and written to the
    log with a timestamp per line.
    """
    try:
        if log_file is None:
            proc = subprocess.Popen(full_cmd)
            return proc.wait()

        proc = subprocess.Popen(
            full_cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
        assert proc.stdout is not None
        with proc.stdout:
            for line in proc.stdout:
                ts = datetime.now().strftime("%Y-%m-%dT%H:%M:%S")
                log_file.write(f"{ts} {line}")
                log_file.flush()
                print(line, end="")
        return proc.wait()
    except OSError as e:
        print_error(f"Exception running command: {e}")
        return 1
