class ParameterError(ValueError):
    """
    Raised when a generator or distribution receives an invalid parameter,
    such as a non-positive standard deviation.

    Validation is deterministic: the same inputs will always fail the same
    way, so nothing in ovbias retries after this error.
    """
    pass


class FitError(Exception):
    """Raised when the regression engine cannot produce coefficients."""
    pass


class DimensionMismatchError(FitError):
    """Raised when the design matrix and response disagree on shape."""
    pass


class SingularDesignError(FitError):
    """Raised when the design matrix is empty, non-finite or rank deficient."""
    pass


class ExperimentError(Exception):
    """
    Raised when any stage of an experiment fails.

    ``stage`` names the step that failed (for example
    ``"independent variables"`` or ``"full regression"``). The original
    ``ParameterError`` or ``FitError`` is chained as ``__cause__``.
    """

    def __init__(self, stage: str, message: str) -> None:
        super().__init__(f"Error in {stage}: {message}")
        self.stage = stage
        self.message = message
