"""Core rule engine package for Klondike Solitaire."""

__all__ = [
    "cards",
    "deck",
    "state",
    "rules",
    "history",
    "hints",
    "game",
    "config",
    "service",
]
