"""plotctl — Zero Colony land plot explorer."""

__version__ = "0.3.0"
