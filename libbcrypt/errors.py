__all__ = ["MalformedHashError"]


class MalformedHashError(ValueError):
    """Raised when a string is not a well-formed bcrypt hash."""

    def __init__(self, msg: str = "Invalid Hash Format") -> None:
        super().__init__(msg)
