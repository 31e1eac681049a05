"""Entry point for `python -m lift`."""

from lift.cli.main import app


if __name__ == "__main__":
    app()
