"""Functions and classes answering the Bajtocja puzzle tasks, grouped by round."""

__version__ = "0.1.0"