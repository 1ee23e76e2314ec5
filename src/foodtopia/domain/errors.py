"""Domain error types."""


class FoodtopiaError(Exception):
    """Base class for domain errors."""


class InvalidMetricError(FoodtopiaError, ValueError):
    """Raised when a numeric metric is missing, non-finite, or negative."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"Invalid value for {field}: {value!r}")
        self.field = field
        self.value = value


class InvalidWorkoutDetailsError(FoodtopiaError, ValueError):
    """Raised when a workout details bag does not fit its workout type."""


class UsernameTakenError(FoodtopiaError):
    """Raised when registering a username that already exists."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Username already exists: {username}")
        self.username = username
