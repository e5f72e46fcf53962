"""Entry point for vendingmachine CLI.

Run with: python -m vendingmachine
Or after install: vendingmachine
"""

from vendingmachine.cli.commands import cli


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
