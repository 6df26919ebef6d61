"""Interactive menu for overwriting, appending to and reading a text file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence

DEFAULT_FILENAME = "data.txt"

MENU = (
    "\n\U0001F4D8 File Handling Menu:\n"
    "1. Write to file (overwrite)\n"
    "2. Append to file\n"
    "3. Read from file\n"
    "4. Exit"
)


def write_to_file(path: str | Path, text: str) -> None:
    """Replace the file's content with ``text`` followed by a newline."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(f"{text}\n")


def append_to_file(path: str | Path, text: str) -> None:
    """Add ``text`` and a newline to the end of the file."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{text}\n")


def read_lines(path: str | Path) -> list[str]:
    """Return the file's lines without their line endings."""
    with open(path, encoding="utf-8") as handle:
        return handle.read().splitlines()


def _prompt(message: str) -> str:
    print(message, end="", flush=True)
    try:
        return input()
    except EOFError:
        return ""


def _do_write(path: Path) -> None:
    text = _prompt("Enter text to write to the file (overwrite mode):\n> ")
    try:
        write_to_file(path, text)
    except OSError:
        print("Error: Could not open file for writing.", file=sys.stderr)
        return
    print("Data written to file.")


def _do_append(path: Path) -> None:
    text = _prompt("Enter text to append to the file:\n> ")
    try:
        append_to_file(path, text)
    except OSError:
        print("Error: Could not open file for appending.", file=sys.stderr)
        return
    print("Data appended to file.")


def _do_read(path: Path) -> None:
    try:
        lines = read_lines(path)
    except OSError:
        print("Error: Could not open file for reading.", file=sys.stderr)
        return
    print(f"Contents of '{path}':")
    for line in lines:
        print(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the menu loop until the user chooses to exit or input ends."""
    parser = argparse.ArgumentParser(description="Write, append to and read a text file.")
    parser.add_argument("filename", nargs="?", default=DEFAULT_FILENAME)
    args = parser.parse_args(argv)
    path = Path(args.filename)

    actions: dict[int, Callable[[Path], None]] = {
        1: _do_write,
        2: _do_append,
        3: _do_read,
    }

    while True:
        print(MENU)
        print("Choose an option (1-4): ", end="", flush=True)
        try:
            line = input()
        except EOFError:
            break
        try:
            choice = int(line.strip())
        except ValueError:
            choice = None

        if choice == 4:
            print("Exiting program.")
            break
        action = actions.get(choice) if choice is not None else None
        if action is None:
            print("Invalid option. Please choose 1-4.")
        else:
            action(path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())