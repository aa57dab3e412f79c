"""Concrete implementations of provider interfaces."""

from .slack import SlackDispatcher

__all__ = ["SlackDispatcher"]
