"""Protocol definitions for pluggable adapters."""

from .dispatcher import MessageDispatcher

__all__ = ["MessageDispatcher"]
