"""Exa search tools exposed over the Model Context Protocol."""
__version__ = "0.3.2"
