"""A tiny compiler from a minimal language to QBE IR, built and run via qbe and cc."""

__version__ = "0.1.0"