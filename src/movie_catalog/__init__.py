"""In-memory movie catalog answering a line-oriented query protocol."""

__version__ = "0.1.0"
