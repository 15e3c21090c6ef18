"""In-memory key-value server speaking the Redis RESP protocol."""

__version__ = "0.1.0"
__all__ = ["__version__"]