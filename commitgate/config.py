"""Configuration management for commitgate."""
import os
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import tomli
import tomli_w
from pydantic import BaseModel, Field, model_validator

from .models import DEFAULT_COMMIT_TYPES, CommitTypeInfo

DEFAULT_CONFIG_FILENAME = ".commitgate.toml"


class ConfigValidationError(Exception):
    """Raised when a configuration section required by an operation is missing or invalid."""


class CommitMessageConfig(BaseModel):
    """Rules applied to every commit message."""

    max_line_length: int = Field(
        default=120,
        description="Maximum length of the header and of every body line",
    )
    min_body_length: int = Field(
        default=20,
        description="Minimum length of the body and footer combined",
    )
    min_body_length_type_excludes: List[str] = Field(
        default_factory=lambda: ["docs"],
        description="Commit types exempt from the minimum body length",
    )
    scopes: List[str] = Field(
        default_factory=list,
        description="Scopes allowed in a commit header",
    )
    types: Dict[str, CommitTypeInfo] = Field(
        default_factory=lambda: dict(DEFAULT_COMMIT_TYPES),
        description="Allowed commit types and their scope requirement",
    )

    @model_validator(mode="before")
    @classmethod
    def _name_types_from_keys(cls, data: Any) -> Any:
        """Let ``[commit_message.types.<name>]`` tables omit ``name``."""
        if isinstance(data, dict) and isinstance(data.get("types"), dict):
            data = dict(data)
            data["types"] = {
                key: {"name": key, **value} if isinstance(value, dict) else value
                for key, value in data["types"].items()
            }
        return data


class RequiredStatus(BaseModel):
    name: str
    type: str = Field(default="check", description="Either 'check' or 'status'")


class PullRequestConfig(BaseModel):
    """Settings consumed by the pull request validations."""

    required_statuses: Optional[List[RequiredStatus]] = Field(
        default=None,
        description="Statuses that must be reported on the pull request head",
    )
    target_label_exempt_scopes: List[str] = Field(
        default_factory=list,
        description="Commit scopes ignored by the target label validation",
    )
    validation: Dict[str, bool] = Field(
        default_factory=dict,
        description="Overrides for the default validation config",
    )


class SyncConfig(BaseModel):
    synced_file_patterns: List[str] = Field(default_factory=list)
    always_external_file_patterns: List[str] = Field(default_factory=list)
    separate_file_patterns: List[str] = Field(default_factory=list)


class CaretakerConfig(BaseModel):
    main_branch: str = Field(default="main", description="Name of the main branch")
    sync_branch: str = Field(
        default="g3",
        description="Branch tracking the last synchronized state of the main branch",
    )
    sync: Optional[SyncConfig] = Field(
        default=None,
        description="Patterns describing which files are synchronized and how",
    )


class GithubConfig(BaseModel):
    owner: str
    name: str
    org: Optional[str] = Field(
        default=None,
        description="Organization whose members count as trusted authors (defaults to owner)",
    )
    api_url: str = "https://api.github.com"


class Config(BaseModel):
    """Configuration settings for commitgate.

    This class defines all configurable options that can be set either
    via the config file or environment variables.
    """

    commit_message: Optional[CommitMessageConfig] = Field(
        default_factory=CommitMessageConfig,
        description="Commit message rules",
    )
    pull_request: PullRequestConfig = Field(
        default_factory=PullRequestConfig,
        description="Pull request validation settings",
    )
    caretaker: Optional[CaretakerConfig] = Field(
        default=None,
        description="Branch synchronization settings",
    )
    github: Optional[GithubConfig] = Field(
        default=None,
        description="Repository on the hosting service",
    )
    always_log: bool = Field(
        default=False,
        description="Whether to always generate log files",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Path to log file (if not using automatic log file generation)",
    )

    @staticmethod
    def _sanitize_string(value: str) -> str:
        """Strip control characters and surrounding whitespace from a string setting."""
        if not value:
            return value
        value = re.sub(r'[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]', '', value)
        return value[:1000].strip()

    @staticmethod
    def _is_safe_path(path: str) -> bool:
        """Check if a path is safe (relative, no path traversal)."""
        if not path:
            return False
        if '..' in path or path.startswith('/') or '\\' in path:
            return False
        return not os.path.isabs(path)

    @classmethod
    def load(cls, repo_path: Path) -> 'Config':
        """Load configuration from the config file.

        Args:
            repo_path: Path to the git repository

        Returns:
            Config: Configuration object with values from file or defaults
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME

        if not config_path.exists():
            return cls()

        try:
            with config_path.open('rb') as f:
                config_data = tomli.load(f)
        except (OSError, tomli.TOMLDecodeError) as e:
            print(f"Warning: Error reading config file: {e}")
            return cls()

        log_file = config_data.get('log_file')
        if isinstance(log_file, str):
            log_file = cls._sanitize_string(log_file)
            if not cls._is_safe_path(log_file):
                print(f"Warning: Unsafe log file path '{log_file}', using default")
                log_file = None
            config_data['log_file'] = log_file

        return cls(**config_data)

    def save(self, repo_path: Path) -> None:
        """Save configuration to the config file.

        Args:
            repo_path: Path to the git repository
        """
        config_path = repo_path / DEFAULT_CONFIG_FILENAME
        config_dict = self.model_dump(mode='json', exclude_none=True)

        with config_path.open('wb') as f:
            tomli_w.dump(config_dict, f)

    def require_commit_message(self) -> CommitMessageConfig:
        if self.commit_message is None:
            raise ConfigValidationError('No configuration defined for "commit_message"')
        return self.commit_message

    def require_caretaker(self) -> CaretakerConfig:
        if self.caretaker is None:
            raise ConfigValidationError('No configuration defined for "caretaker"')
        return self.caretaker

    def require_github(self) -> GithubConfig:
        if self.github is None:
            raise ConfigValidationError('No configuration defined for "github"')
        return self.github

    def get_log_file(self) -> Optional[Path]:
        """Get the path to the log file.

        If always_log is True, generates a timestamped log file name.
        Otherwise, returns the configured log_file path if set.

        Returns:
            Optional[Path]: Path to the log file, or None if logging is disabled
        """
        if self.always_log:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            return Path(f"commitgate_log-{timestamp}.log")
        elif self.log_file:
            if self._is_safe_path(self.log_file):
                return Path(self.log_file)
            print(f"Warning: Unsafe log file path '{self.log_file}', using default")
        return None

    def __init__(self, **data):
        """Initialize config with environment variable support."""
        env_data = {}

        if 'COMMITGATE_LOG_FILE' in os.environ:
            env_data['log_file'] = self._sanitize_string(os.environ['COMMITGATE_LOG_FILE'])
        if 'COMMITGATE_ALWAYS_LOG' in os.environ:
            env_data['always_log'] = (
                os.environ['COMMITGATE_ALWAYS_LOG'].lower() in ['true', '1', 'yes', 'on']
            )

        merged_data = {**env_data, **data}

        super().__init__(**merged_data)
