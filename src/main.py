"""Script de ejecución.

Por qué existe:
- Permite ejecutar la CLI con `python -m main` desde `src/`.
- Es el target del script `landmark-lens` declarado en pyproject.
"""

from __future__ import annotations

import sys

# Los paneles usan emojis (🔹, ❌); en consolas Windows cp1252 fallarían.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
