"""Entrypoint script for evaluating and drawing a feed-forward network."""

from nnvis.adapters.cli import main


if __name__ == "__main__":
    main()
