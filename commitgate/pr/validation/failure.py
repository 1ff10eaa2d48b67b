"""Failure raised by a pull request validation and returned by its runner."""


class PullRequestValidationFailure(Exception):
    """A policy violation found by a pull request validation.

    Attributes:
        message (str): Human-readable message for the failure
        validation_name (str): Validation config name of the failing validation
        can_be_force_ignored (bool): Whether an operator may override the failure
    """

    def __init__(self, message: str, validation_name: str, can_be_force_ignored: bool):
        super().__init__(message)
        self.message = message
        self.validation_name = validation_name
        self.can_be_force_ignored = can_be_force_ignored

    def __repr__(self) -> str:
        return (
            f"PullRequestValidationFailure({self.message!r}, "
            f"{self.validation_name!r}, {self.can_be_force_ignored!r})"
        )
