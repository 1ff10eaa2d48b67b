"""Validation config and the registry wrapping every pull request validation.

A validation is written as a ``PullRequestValidation`` subclass whose
``assert_`` raises a failure created through ``self._create_error``. The
runner returned by ``create_pull_request_validation`` gates it on the
validation config and turns that failure into a return value, while any
other exception propagates to the caller.
"""

import inspect
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Type

from .failure import PullRequestValidationFailure


class ValidationName(str, Enum):
    PENDING = "assertPending"
    MERGE_READY = "assertMergeReady"
    SIGNED_CLA = "assertSignedCla"
    CHANGES_ALLOW_FOR_TARGET_LABEL = "assertChangesAllowForTargetLabel"
    PASSING_CI = "assertPassingCi"
    COMPLETED_REVIEWS = "assertCompletedReviews"
    ENFORCED_STATUSES = "assertEnforcedStatuses"
    MINIMUM_REVIEWS = "assertMinimumReviews"
    BREAKING_CHANGE_INFO = "assertBreakingChangeInfo"
    ISOLATED_SEPARATE_FILES = "assertIsolatedSeparateFiles"
    ENFORCE_TESTED = "assertEnforceTested"


DEFAULT_VALIDATION_CONFIG: Dict[str, bool] = {
    ValidationName.PENDING.value: True,
    ValidationName.MERGE_READY.value: True,
    ValidationName.SIGNED_CLA.value: True,
    ValidationName.CHANGES_ALLOW_FOR_TARGET_LABEL.value: True,
    ValidationName.PASSING_CI.value: True,
    ValidationName.COMPLETED_REVIEWS.value: True,
    ValidationName.ENFORCED_STATUSES.value: True,
    ValidationName.MINIMUM_REVIEWS.value: True,
    ValidationName.BREAKING_CHANGE_INFO.value: True,
    # Organization specific
    ValidationName.ISOLATED_SEPARATE_FILES.value: False,
    ValidationName.ENFORCE_TESTED.value: False,
}


def create_validation_config(overrides: Optional[Mapping[str, bool]] = None) -> Dict[str, bool]:
    """Overlay ``overrides`` on the default validation config."""
    config = dict(DEFAULT_VALIDATION_CONFIG)
    for name, enabled in (overrides or {}).items():
        if name not in config:
            raise ValueError(f"Unknown pull request validation: {name}")
        config[name] = enabled
    return config


class PullRequestValidation(ABC):
    """Base class for a pull request validation.

    Attributes:
        name (str): Validation config name
    """

    def __init__(self, name: str, create_error: Callable[[str], PullRequestValidationFailure]):
        self.name = name
        self._create_error = create_error

    @abstractmethod
    def assert_(self, *args: Any) -> Any:
        """Raise a failure from ``self._create_error`` when the pull request violates the policy.

        May be a coroutine function.
        """
        pass


class PullRequestValidationRunner:
    """Runs one validation under the enable/disable gate of a validation config."""

    def __init__(
        self,
        name: ValidationName,
        can_be_force_ignored: bool,
        validation_cls: Type[PullRequestValidation],
    ):
        self.name = name.value
        self.can_be_force_ignored = can_be_force_ignored
        self.validation_cls = validation_cls

    def _create_error(self, message: str) -> PullRequestValidationFailure:
        return PullRequestValidationFailure(message, self.name, self.can_be_force_ignored)

    async def run(
        self, validation_config: Mapping[str, bool], *args: Any
    ) -> Optional[PullRequestValidationFailure]:
        """Run the validation.

        Returns:
            The failure raised by the validation, or None if it passed or is disabled
        """
        if not validation_config.get(self.name):
            return None

        validation = self.validation_cls(self.name, self._create_error)
        try:
            result = validation.assert_(*args)
            if inspect.isawaitable(result):
                await result
        except PullRequestValidationFailure as e:
            return e
        return None


def create_pull_request_validation(
    name: ValidationName,
    can_be_force_ignored: bool,
    validation_cls: Type[PullRequestValidation],
) -> PullRequestValidationRunner:
    return PullRequestValidationRunner(name, can_be_force_ignored, validation_cls)
