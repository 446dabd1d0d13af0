"""Entry point for ``python -m ai_cli``."""

from ai_cli.cli import main

if __name__ == "__main__":
    main()
