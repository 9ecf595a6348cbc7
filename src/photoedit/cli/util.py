"""CLI utility functions"""

import os
from pathlib import Path

FLAG_FILE = ".photoedit_instance"
PID_FILE = "photoedit.pid"


def get_instance_path(path: str | None = None) -> Path:
    """Get instance path, default to ~/.photoedit

    Args:
        path: Custom path (relative or absolute), None for default

    Returns:
        Resolved absolute path
    """
    if path is None:
        return Path.home() / ".photoedit"
    return Path(path).resolve()


def is_initialized(instance_path: Path) -> bool:
    """Check if instance is initialized (flag file exists)"""
    return (instance_path / FLAG_FILE).exists()


def get_pid_file(instance_path: Path) -> Path:
    """Get PID file path"""
    return instance_path / PID_FILE


def read_pid(instance_path: Path) -> int | None:
    """Read the server PID, None if missing or malformed"""
    pid_file = get_pid_file(instance_path)
    if not pid_file.exists():
        return None
    try:
        return int(pid_file.read_text().strip())
    except ValueError:
        return None


def is_running(instance_path: Path) -> bool:
    """Check if the recorded server process is alive

    A stale PID file (process gone) is removed.
    """
    pid = read_pid(instance_path)
    if pid is None:
        return False
    try:
        os.kill(pid, 0)
    except ProcessLookupError:
        get_pid_file(instance_path).unlink(missing_ok=True)
        return False
    except PermissionError:
        # Process exists but belongs to another user
        return True
    return True
