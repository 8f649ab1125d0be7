"""CLI entrypoint for the word finder."""

from wordfinder.cli import main


if __name__ == "__main__":  # pragma: no cover
    main()
