"""
Controller package exports.

This file exists to provide a stable import surface for the Qt-free
controllers that sit between a keyboard front end and the domain layer.
"""

from .typing_session import TypingSession  # noqa: F401

__all__ = [
    "TypingSession",
]
