"""Allow running ugh with python -m ugh."""

from ugh.cli import app

if __name__ == "__main__":
    app()
