"""Runnable design pattern examples and a small product REST API with SQL migrations."""

__version__ = "0.1.0"