"""Exceptions raised by sitepattern."""


class SitePatternError(Exception):
    """Base class for sitepattern errors."""

    pass


class InsufficientPointsError(SitePatternError, ValueError):
    """Exception raised when a point set is too small for the statistic."""

    def __init__(self, n_points: int, required: int = 2):
        self.n_points = n_points
        self.required = required
        super().__init__(
            f"At least {required} points are required, got {n_points}"
        )


class InvalidWindowError(SitePatternError, ValueError):
    """Exception raised for degenerate, inverted or non-finite windows."""

    pass


class InvalidTrialCountError(SitePatternError, ValueError):
    """Exception raised when the number of simulation trials is not positive."""

    def __init__(self, trials):
        self.trials = trials
        super().__init__(f"Number of trials must be a positive integer, got {trials!r}")
