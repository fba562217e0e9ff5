"""
Data directory locator.

The monitoring service and this backend share a data/ directory. In an
installed build it sits next to the executable; in a development checkout the
executable lives a few levels deeper (build/<target>/<profile>/) and data/ is
at the project root. Anything else falls back to ./data.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DATA_DIR_NAME = "data"
LOG_FILE = Path("logs") / "agent.log"


def executable_dir(executable: Optional[Path] = None) -> Optional[Path]:
    """Directory holding the running executable, or None if it can't be determined."""
    if executable is None:
        if not sys.executable:  # embedded interpreters may leave this empty
            return None
        executable = Path(sys.executable)
    try:
        return executable.resolve().parent
    except OSError as e:
        logger.debug(f"Cannot resolve executable path {executable}: {e}")
        return None


def locate_data_dir(executable: Optional[Path] = None) -> Path:
    """Return the directory used for every data file. Never raises.

    Precedence:
      1. <exe_dir>/data
      2. <exe_dir>/../../../data
      3. data (relative to the current working directory)

    The fallback is returned even when it does not exist; reads against it
    simply come back empty.
    """
    exe_dir = executable_dir(executable)
    if exe_dir is not None:
        beside_exe = exe_dir / DATA_DIR_NAME
        if beside_exe.exists():
            return beside_exe

        project_data = exe_dir.parent.parent.parent / DATA_DIR_NAME
        if project_data.exists():
            return project_data

    return Path(DATA_DIR_NAME)


def agent_log_path(executable: Optional[Path] = None) -> Optional[Path]:
    exe_dir = executable_dir(executable)
    return exe_dir / LOG_FILE if exe_dir is not None else None
