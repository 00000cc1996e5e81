"""
Entry point for running Tlahtolli as a module.

Usage:
    python -m tlahtolli --help
    python -m tlahtolli translate "perro" --language nahuatl
    python -m tlahtolli phonetic "xochitl" --language nahuatl
"""
from .cli import app


if __name__ == "__main__":
    app()
