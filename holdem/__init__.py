"""Texas hold'em cards, shuffled decks, five-card hand ranking and showdown."""

__version__ = "0.1.0"
__all__ = ["cards", "shuffle", "board", "showdown"]