"""A small Unix shell, a pipeline runner and a /proc information tool."""

__version__ = "0.1.0"