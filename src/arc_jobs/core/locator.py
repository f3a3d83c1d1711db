"""
Locate a runtime installation on the submitting host
"""

import shutil
from pathlib import Path
from typing import Callable, Optional


def find_runtime_bindir(
    executable: str = "julia",
    which: Callable[[str], Optional[str]] = shutil.which,
) -> str:
    """
    Find the directory holding ``executable``, following symlinks

    Args:
        executable: Runtime executable name
        which: PATH lookup, replaceable for testing

    Returns:
        Absolute path of the binary directory

    Raises:
        FileNotFoundError: If the executable is not on PATH
    """
    found = which(executable)
    if not found:
        raise FileNotFoundError(f"Runtime executable not found on PATH: {executable}")

    bindir = Path(found).resolve().parent
    if not bindir.is_dir():
        raise FileNotFoundError(f"Runtime binary directory not found: {bindir}")

    return str(bindir)
