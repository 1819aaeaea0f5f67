"""Navigation header behaviour."""

from newshub.navigation.gesture import TripleClickDetector

__all__ = ["TripleClickDetector"]
