"""Workshop API: a small JSON-document backed REST service."""

__version__ = "1.0.0"
