"""Command line interface for jobscope (``jobscope``)."""

from jobscope.cli.app import app

__all__ = ["app"]
