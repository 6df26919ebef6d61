"""A text-file menu, a chunked run-length encoder and a Snake arcade game."""

__version__ = "0.1.0"