"""Allow ``python -m docsmith``."""

from docsmith.cli import app

if __name__ == "__main__":
    app()
