"""Numbered line-input menu.

The plain fallback for terminals without cursor control or for piped input:
options are listed as `` 1) option`` and the user types a number followed by
Enter. The input prompt is passed per call; nothing is shared between calls.
"""

from __future__ import annotations

import sys
from typing import Sequence, TextIO


def select_numbered(
    prompt: str,
    options: Sequence[str],
    input_prompt: str | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> tuple[str, bool]:
    """List ``options`` with numbers and read a choice line by line.

    Re-prompts until a number in ``1..len(options)`` is entered. Returns
    ``(selected, True)`` on a valid choice and ``("", False)`` for an empty
    option list or when input ends first.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    count = len(options)
    if count == 0:
        return "", False

    if input_prompt is None:
        input_prompt = f"Enter selection [1-{count}]: "

    stdout.write(f"\n{prompt}\n\n")
    for i, option in enumerate(options, start=1):
        stdout.write(f" {i:2d}) {option}\n")
    stdout.write("\n")

    while True:
        stdout.write(input_prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            stdout.flush()
            return "", False
        choice = line.strip()
        if choice.isascii() and choice.isdigit() and 1 <= int(choice) <= count:
            stdout.write("\n")
            stdout.flush()
            return options[int(choice) - 1], True
        stdout.write(f"Please enter a number between 1 and {count}\n")
