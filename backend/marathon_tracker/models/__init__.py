"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy.

Note: Feature models are imported lazily to avoid circular imports.
Use direct imports from features/ modules when possible.
"""

from marathon_tracker.models.base import Base


def _get_marker_models():
    """Lazy import of Marker model."""
    from marathon_tracker.features.markers.models import Marker
    return Marker


def __getattr__(name):
    if name == "Marker":
        return _get_marker_models()

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Base",
    "Marker",
]
