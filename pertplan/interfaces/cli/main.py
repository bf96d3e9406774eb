"""Entry point for the pertplan CLI.

Usage:
    python -m pertplan.interfaces.cli.main

Or via installed entry point:
    pertplan <command>
"""

from pertplan.interfaces.cli import app


def main() -> None:
    """Run the pertplan CLI application."""
    app()


if __name__ == "__main__":
    main()
