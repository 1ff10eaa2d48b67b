"""Commit message validation using Chain of Responsibility pattern.

Every handler either settles the verdict for a commit (valid or invalid) or
defers to the next handler. The chain stops at the first handler that
settles, so an invalid commit is reported with exactly one error.
"""
import re
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..config import CommitMessageConfig
from ..models import Commit, ScopeRequirement, ValidationOptions

Verdict = Optional[Tuple[bool, str]]

VALID: Tuple[bool, str] = (True, "")

# Regex matching a URL for an entire commit body line.
COMMIT_BODY_URL_LINE_RE = re.compile(r"^https?://.*$")

# Misspelled breaking change markers:
#   `BREAKING CHANGE <content>`   missing colon
#   `BREAKING-CHANGE: <content>`  wrong keyword
#   `BREAKING CHANGES: <content>` wrong keyword
#   `BREAKING-CHANGES: <content>` wrong keyword
INCORRECT_BREAKING_CHANGE_BODY_RE = re.compile(
    r"^(BREAKING CHANGE[^:]|BREAKING-CHANGE|BREAKING[ -]CHANGES)", re.MULTILINE
)

# Misspelled deprecation markers:
#   `DEPRECATED <content>`     missing colon
#   `DEPRECATIONS: <content>`  wrong keyword
#   `DEPRECATION: <content>`   wrong keyword
#   `DEPRECATE: <content>`     wrong keyword
#   `DEPRECATES: <content>`    wrong keyword
INCORRECT_DEPRECATION_BODY_RE = re.compile(
    r"^(DEPRECATED[^:]|DEPRECATIONS?|DEPRECATE:|DEPRECATES)", re.MULTILINE
)

RELEASE_TYPE = "release"


class ValidationHandler(ABC):
    """Abstract base class for validation handlers."""

    def __init__(self, next_handler: Optional['ValidationHandler'] = None):
        self.next_handler = next_handler

    def handle(self, commit: Commit) -> Tuple[bool, str]:
        """Handle validation and pass to next handler if this one does not settle it."""
        verdict = self.validate(commit)
        if verdict is not None:
            return verdict
        if not self.next_handler:
            return VALID
        return self.next_handler.handle(commit)

    @abstractmethod
    def validate(self, commit: Commit) -> Verdict:
        """Return a verdict to stop the chain, or None to defer to the next handler."""
        pass


class RevertHandler(ValidationHandler):
    """All revert commits are considered valid."""

    def validate(self, commit: Commit) -> Verdict:
        if commit.is_revert:
            return VALID
        return None


class SquashHandler(ValidationHandler):
    """Squash commits are valid unless squash commits are disallowed."""

    def __init__(self, options: ValidationOptions, next_handler: Optional[ValidationHandler] = None):
        super().__init__(next_handler)
        self.options = options

    def validate(self, commit: Commit) -> Verdict:
        if not commit.is_squash:
            return None
        if self.options.disallow_squash:
            return False, "The commit must be manually squashed into the target commit"
        return VALID


class FixupHandler(ValidationHandler):
    """Fixup commits must match one of the provided non-fixup headers, when given."""

    def __init__(self, options: ValidationOptions, next_handler: Optional[ValidationHandler] = None):
        super().__init__(next_handler)
        self.options = options

    def validate(self, commit: Commit) -> Verdict:
        if not commit.is_fixup:
            return None
        if self.options.disallow_fixup:
            return False, (
                "The commit must be manually fixed-up into the target commit "
                "as fixup commits are disallowed"
            )
        headers = self.options.non_fixup_commit_headers
        if headers is not None and commit.header not in headers:
            candidates = "".join(f"\n      {header}" for header in headers) or "-"
            return False, f"Unable to find match for fixup commit among prior commits: {candidates}"
        return VALID


class HeaderLengthHandler(ValidationHandler):
    """Validates the header length."""

    def __init__(self, max_length: int, next_handler: Optional[ValidationHandler] = None):
        super().__init__(next_handler)
        self.max_length = max_length

    def validate(self, commit: Commit) -> Verdict:
        if len(commit.header) > self.max_length:
            return False, f"The commit message header is longer than {self.max_length} characters"
        return None


class HeaderFormatHandler(ValidationHandler):
    """Validates that a type could be extracted from the header."""

    def validate(self, commit: Commit) -> Verdict:
        if not commit.type:
            return False, "The commit message header does not match the expected format."
        return None


class CommitTypeHandler(ValidationHandler):
    """Validates the type and its scope requirement."""

    def __init__(self, config: CommitMessageConfig, next_handler: Optional[ValidationHandler] = None):
        super().__init__(next_handler)
        self.config = config

    def validate(self, commit: Commit) -> Verdict:
        type_info = self.config.types.get(commit.type)
        if type_info is None:
            allowed = ", ".join(self.config.types)
            return False, f"'{commit.type}' is not an allowed type.\n => TYPES: {allowed}"

        if type_info.scope == ScopeRequirement.FORBIDDEN and commit.scope:
            return False, (
                f"Scopes are forbidden for commits with type '{commit.type}', "
                f"but a scope of '{commit.scope}' was provided."
            )
        if type_info.scope == ScopeRequirement.REQUIRED and not commit.scope:
            return False, (
                f"Scopes are required for commits with type '{commit.type}', "
                "but no scope was provided."
            )
        return None


class ScopeHandler(ValidationHandler):
    """Validates that a provided scope is one of the configured scopes."""

    def __init__(self, config: CommitMessageConfig, next_handler: Optional[ValidationHandler] = None):
        super().__init__(next_handler)
        self.config = config

    def validate(self, commit: Commit) -> Verdict:
        if commit.scope and commit.scope not in self.config.scopes:
            allowed = ", ".join(self.config.scopes)
            return False, f"'{commit.scope}' is not an allowed scope.\n => SCOPES: {allowed}"
        return None


class ReleaseTypeHandler(ValidationHandler):
    """Commits of the release type do not require a body."""

    def validate(self, commit: Commit) -> Verdict:
        if commit.type == RELEASE_TYPE:
            return VALID
        return None


class BodyLengthHandler(ValidationHandler):
    """Validates the minimum length of everything after the header."""

    def __init__(self, config: CommitMessageConfig, next_handler: Optional[ValidationHandler] = None):
        super().__init__(next_handler)
        self.config = config

    def validate(self, commit: Commit) -> Verdict:
        if commit.type in self.config.min_body_length_type_excludes:
            return None
        # Footer is included since notes and references end up there.
        non_header_content = f"{commit.body.strip()}\n{commit.footer.strip()}"
        if len(non_header_content) < self.config.min_body_length:
            return False, (
                "The commit message body does not meet the minimum length of "
                f"{self.config.min_body_length} characters"
            )
        return None


class BodyLineLengthHandler(ValidationHandler):
    """Validates body line lengths, ignoring lines made of a single URL."""

    def __init__(self, max_length: int, next_handler: Optional[ValidationHandler] = None):
        super().__init__(next_handler)
        self.max_length = max_length

    def validate(self, commit: Commit) -> Verdict:
        for line in commit.body.split('\n'):
            if len(line) > self.max_length and not COMMIT_BODY_URL_LINE_RE.match(line):
                return False, (
                    f"The commit message body contains lines greater than {self.max_length} characters."
                )
        return None


class BreakingChangeNoteHandler(ValidationHandler):
    """Rejects misspelled breaking change notes."""

    def validate(self, commit: Commit) -> Verdict:
        if INCORRECT_BREAKING_CHANGE_BODY_RE.search(commit.full_text):
            return False, "The commit message body contains an invalid breaking change note."
        return None


class DeprecationNoteHandler(ValidationHandler):
    """Rejects misspelled deprecation notes."""

    def validate(self, commit: Commit) -> Verdict:
        if INCORRECT_DEPRECATION_BODY_RE.search(commit.full_text):
            return False, "The commit message body contains an invalid deprecation note."
        return None


def create_validation_chain(config: CommitMessageConfig, options: ValidationOptions) -> ValidationHandler:
    """Create the validation chain for the given config and per-commit options."""
    deprecation = DeprecationNoteHandler()
    breaking_change = BreakingChangeNoteHandler(deprecation)
    body_line_length = BodyLineLengthHandler(config.max_line_length, breaking_change)
    body_length = BodyLengthHandler(config, body_line_length)
    release = ReleaseTypeHandler(body_length)
    scope = ScopeHandler(config, release)
    commit_type = CommitTypeHandler(config, scope)
    header_format = HeaderFormatHandler(commit_type)
    header_length = HeaderLengthHandler(config.max_line_length, header_format)
    fixup = FixupHandler(options, header_length)
    squash = SquashHandler(options, fixup)
    revert = RevertHandler(squash)

    return revert
