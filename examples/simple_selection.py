"""Menu with a multi-byte option, plus the numbered fallback."""

import sys

from grid_menu import select_numbered, select_option

SELECTIONS = [
    "Selection A (default)",
    "Selection B",
    "Selection D",
    "Selection E",
    "Selection F",
    "Selection G",
    "Selection H",
    "Selection I",
    "Selection J",
    "Selection K",
    "Selection L",
    "Selection M",
    "Selection Ñ",
    "Selection O",
]


def main() -> None:
    if sys.stdin.isatty():
        choice, ok = select_option("Please make a choice:", SELECTIONS)
    else:
        choice, ok = select_numbered("Please make a choice:", SELECTIONS)
    print(f"Selected choice: {choice}" if ok else "Nothing selected.")


if __name__ == "__main__":
    main()
