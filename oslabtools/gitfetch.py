"""Run ``git fetch origin`` in every sub-folder of a catalog, with confirmation."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from typing import Callable, List, Optional, Sequence

FETCH_COMMAND = ("git", "fetch", "origin")


def catalog_folders(catalog: str) -> List[str]:
    """Return the paths of the directories directly inside ``catalog``, sorted."""
    with os.scandir(catalog) as entries:
        names = [
            entry.name
            for entry in entries
            if entry.is_dir(follow_symlinks=False) and entry.name not in (".", "..")
        ]
    return [os.path.join(catalog, name) for name in sorted(names)]


def _ask(folder: str) -> bool:
    try:
        answer = input("Do you wish to fetch this folder? (y/n) ")
    except EOFError:
        return False
    return answer.strip()[:1] == "y"


def execute_fetch(
    folder: str,
    confirm: Optional[Callable[[str], bool]] = None,
) -> Optional[int]:
    """Ask for confirmation, then fetch ``folder``.

    ``confirm`` receives the folder and decides; by default the user is asked
    on standard input and only an answer starting with ``y`` goes ahead.
    Returns the exit status of git, or None if nothing was run.
    """
    approve = _ask if confirm is None else confirm
    if not approve(folder):
        print("Process terminated.")
        return None

    if not os.path.isdir(folder):
        print(f"Failed to change directory to: {folder}", file=sys.stderr)
        return None

    try:
        completed = subprocess.run(list(FETCH_COMMAND), cwd=folder, check=False)
    except OSError:
        print("Execute failed.", file=sys.stderr)
        return None
    return completed.returncode


def browse_folder(saved_path: str = "") -> str:
    """Read a folder path from the user, falling back to ``saved_path``."""
    try:
        folder = input(f"Enter folder path to fetch (default: {saved_path}): ")
    except EOFError:
        return saved_path
    return folder or saved_path


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Fetch every sub-folder of a catalog given as argument or asked for."""
    parser = argparse.ArgumentParser(
        prog="gitfetch",
        description="Run 'git fetch origin' in each sub-folder of a catalog.",
    )
    parser.add_argument("catalog", nargs="?", help="folder holding the repositories")
    args = parser.parse_args(argv)

    folder = args.catalog if args.catalog else browse_folder()
    if not folder:
        print("Empty folder selected.")
        return 0
    print(f"Selected catalog: {folder}")

    try:
        folders = catalog_folders(folder)
    except OSError as exc:
        print(f"Cannot read catalog {folder}: {exc}", file=sys.stderr)
        return 1

    for path in folders:
        print(f"Folder: {path}")
        execute_fetch(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())