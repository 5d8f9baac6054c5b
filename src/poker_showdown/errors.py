"""Errors raised while evaluating poker hands."""


class HandEvaluationError(ValueError):
    """
    Base class for evaluation failures.

    Every subclass carries a ``tag`` naming the kind of failure so that
    callers (and the CLI) can report it without matching on class names.
    """
    tag = "HandEvaluationError"
    default_message = "Hand evaluation failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidInputShapeError(HandEvaluationError):
    """Input was not a sequence of cards."""
    tag = "InvalidInputShapeError"
    default_message = "Invalid input: cards must be an array"


class InvalidCardCountError(HandEvaluationError):
    """Too many (or, for direct classification, too few) cards."""
    tag = "InvalidCardCountError"
    default_message = "Invalid input: 1-10 cards required"


class InvalidCardError(HandEvaluationError):
    """A card's rank or suit is out of range."""
    tag = "InvalidCardError"
    default_message = "Invalid card"


class DuplicateCardError(HandEvaluationError):
    """The same rank and suit appear twice in one hand."""
    tag = "DuplicateCardError"
    default_message = "Duplicate card found"


class EmptyPlayerListError(HandEvaluationError):
    """Winner resolution was called without players."""
    tag = "EmptyPlayerListError"
    default_message = "Invalid input: players must be a non-empty array"


class NoValidHandError(HandEvaluationError):
    """No candidate subset could be classified. Indicates a logic defect."""
    tag = "NoValidHandError"
    default_message = "Failed to evaluate any valid hand combination"


class EvaluationConfigError(HandEvaluationError):
    """Evaluation configuration is missing or malformed."""
    tag = "EvaluationConfigError"
    default_message = "Invalid evaluation configuration"
