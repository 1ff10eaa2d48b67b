"""Pull request validations.

Example:
    ```python
    from commitgate.pr.validation import assert_valid_pull_request, create_validation_config

    failures = await assert_valid_pull_request(
        pull_request, create_validation_config({"assertSignedCla": False}), config
    )
    blocking = [f for f in failures if not f.can_be_force_ignored]
    ```
"""

from .config import (
    DEFAULT_VALIDATION_CONFIG,
    PullRequestValidation,
    PullRequestValidationRunner,
    ValidationName,
    create_pull_request_validation,
    create_validation_config,
)
from .failure import PullRequestValidationFailure
from .validate_pull_request import assert_valid_pull_request

__all__ = [
    "DEFAULT_VALIDATION_CONFIG",
    "PullRequestValidation",
    "PullRequestValidationRunner",
    "ValidationName",
    "create_pull_request_validation",
    "create_validation_config",
    "PullRequestValidationFailure",
    "assert_valid_pull_request",
]
