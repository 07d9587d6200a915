"""Multi-store product search driven by CSS selectors, with JSON storage and a command line."""

__version__ = "0.1.0"