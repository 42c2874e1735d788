"""Artistic photo filters, an in-memory photo library and side-by-side collages."""

__version__ = "0.1.0"