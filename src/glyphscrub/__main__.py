"""Allow ``python -m glyphscrub``."""

from glyphscrub.cli import app

if __name__ == "__main__":
    app()
