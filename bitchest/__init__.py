"""A lightweight in-memory key-value database server and client with a RESP-style protocol."""

__version__ = "0.1.0"