"""Marathon route tracker: route geometry, pace projection and race markers."""

__version__ = "0.1.0"
