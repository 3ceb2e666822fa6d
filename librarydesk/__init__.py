"""In-memory library catalogue: resources, users, loans and notifications."""

__version__ = "0.1.0"
__all__ = ["__version__"]