"""Module entry point so ``python -m maniaconv`` runs the CLI."""

from maniaconv.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
