# keypad_solver/__main__.py
# Package entrypoint so you can run:
#   python -m keypad_solver --help
# and it will delegate to the CLI.
#
# Examples:
#   python -m keypad_solver --input codes.txt
#   python -m keypad_solver --input codes.txt --robots 2 --breakdown --expand

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
