"""Coordinators - conversation flow between speech/typed input and translation."""

from .conversation_coordinator import ConversationCoordinator

__all__ = ["ConversationCoordinator"]
