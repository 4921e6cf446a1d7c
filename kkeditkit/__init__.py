"""Syntax highlighting rule sets, an XML tag reader, editor message parsing and progress control files."""

__version__ = "0.1.0"