"""A small threaded HTTP server with a path-tree router, a GET client and a demo app."""

__version__ = "0.1.0"
__all__ = ["__version__"]