"""Errors raised while recoding or binning the survey table."""


class InvalidCategoryError(ValueError):
    """A two-valued categorical column holds a value outside its coding table."""


class InvalidOrdinalError(ValueError):
    """An ordinal survey column holds a value outside {1, 2}."""


class InsufficientDataError(ValueError):
    """Not enough data (or a bad bin count) to run a diagnostic."""


class UndefinedLogitWarning(UserWarning):
    """
    A bin whose outcomes are all 0 or all 1, so its log-odds are infinite.

    Returned alongside the diagnostic output, never raised.
    """

    def __init__(self, lower: float, upper: float, p_hat: float):
        self.lower = lower
        self.upper = upper
        self.p_hat = p_hat
        super().__init__(
            f"logit undefined for bin [{lower:g}, {upper:g}]: p_hat={p_hat:g}"
        )
