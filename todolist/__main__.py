"""Entry point for `python -m todolist`."""

from todolist.cli import app


def main() -> None:
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
