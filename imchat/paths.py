"""Output directory resolution and process exit helpers."""

from __future__ import annotations

import os
import sys
from typing import NoReturn


def out_dir(path: str) -> str:
    """Return the absolute form of an existing directory, ending in '/'."""
    absolute = os.path.abspath(path)
    if not os.path.exists(absolute):
        raise FileNotFoundError(f"no such file or directory: {absolute}")
    if not os.path.isdir(absolute):
        raise NotADirectoryError(f"output directory {absolute} is not a directory")
    return absolute + "/"


def _program_name() -> str:
    return os.path.basename(sys.argv[0]) if sys.argv else ""


def exit_with_error(err: object) -> NoReturn:
    """Report the error on stderr and exit with status -1."""
    sys.stderr.write(f"{_program_name()} exit -1: {err}\n\n")
    sys.exit(-1)


def sigterm_exit() -> None:
    """Report on stderr that a termination signal was received."""
    sys.stderr.write(
        f"Warning {_program_name()} receive process terminal SIGTERM exit 0\n"
    )