class StepEngineError(Exception):
    """Base class for step debugger failures."""


class InvalidInputError(StepEngineError, ValueError):
    """Input to initialize is missing, empty or unusable."""


class UnknownProductError(InvalidInputError):
    """Product is not a key of the co-purchase table."""


class DivisionByZeroError(StepEngineError, ZeroDivisionError):
    """Degenerate dataset: a product has no positive purchase total."""


class NotActiveError(StepEngineError, RuntimeError):
    """advance called before initialize."""


class AlreadyCompleteError(StepEngineError, RuntimeError):
    """advance called after the final step."""
