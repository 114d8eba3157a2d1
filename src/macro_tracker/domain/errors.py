"""Domain errors."""


class ValidationError(ValueError):
    """Raised when user input is rejected before it reaches the data model."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Invalid input: {fields}")
