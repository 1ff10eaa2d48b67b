"""Commit message parsing and validation package."""

from .parse import parse_commit_message
from .validator import CommitMessageValidator, print_validation_errors
from .validate_range import RangeValidationResult, validate_commit_range, validate_commits
from .validate_file import validate_file

__all__ = [
    'parse_commit_message',
    'CommitMessageValidator',
    'print_validation_errors',
    'RangeValidationResult',
    'validate_commit_range',
    'validate_commits',
    'validate_file',
]
