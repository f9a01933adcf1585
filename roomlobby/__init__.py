"""Client and lobby front-end for the rooms chat backend."""

__version__ = "0.1.0"
