"""Operations on null-terminated byte strings, provided by the ops module."""

__version__ = "1.0.0"
__all__ = ["ops"]