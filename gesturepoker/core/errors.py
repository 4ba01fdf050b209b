"""
Exceptions raised by the poker core.

Every error here is a contract violation by the caller (the UI, a bot, a test),
not a transient condition. They derive from ValueError as well so callers that
only care about "bad input" can catch that.
"""


class PokerError(Exception):
    """Base class for all poker engine errors."""


class InsufficientCardsError(PokerError, ValueError):
    """Raised when dealing more cards than the deck holds."""


class InvalidHandSizeError(PokerError, ValueError):
    """Raised when evaluating a hand that is not exactly 5 cards."""


class InactivePlayerError(PokerError, ValueError):
    """Raised when a folded, all-in or busted seat tries to act."""


class IllegalCheckError(PokerError, ValueError):
    """Raised when checking while a bet is owed."""


class IllegalRaiseError(PokerError, ValueError):
    """Raised when a raise does not exceed the current table bet."""


class InsufficientChipsError(PokerError, ValueError):
    """Raised when a call or raise costs more than the player's stack."""


class NoHandInProgressError(PokerError, ValueError):
    """Raised when an action arrives while no betting round is open."""
