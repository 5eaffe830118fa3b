"""Exception taxonomy for overload-calc."""


class OverloadCalcError(Exception):
    """Base exception for overload-calc errors."""
    pass


class InvalidInput(OverloadCalcError):
    """Raised when a session field fails validation.

    ``field`` names the offending input ("exercise", "weight", "reps",
    "sets") and ``rule`` the check that failed ("required", "too_short",
    "not_a_number", "not_finite", "not_positive", "not_integer",
    "out_of_range").
    """

    def __init__(self, message: str, field: str, rule: str):
        super().__init__(message)
        self.field = field
        self.rule = rule


class InvalidProgressionRequest(OverloadCalcError):
    """Raised when a progression plan cannot be generated.

    ``reason`` is one of "missing_field", "unknown_exercise",
    "target_not_greater", "out_of_range".
    """

    def __init__(self, message: str, reason: str):
        super().__init__(message)
        self.reason = reason
