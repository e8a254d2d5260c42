"""
Configuration management for NOTICE checks.
"""

import codecs
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import List

import yaml

from notice.notice_exceptions import NoticeConfigError


@dataclass
class NoticeCheckConfig:
    """Configuration for checking a NOTICE file against generated contents."""

    notice_file: str = "NOTICE"
    build_dir: str = "build"
    expected_file_name: str = "NOTICE.expected"
    encoding: str = "UTF-8"

    @classmethod
    def load_from_file(cls, config_path: str) -> 'NoticeCheckConfig':
        """Load configuration from YAML file."""
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f)

            except yaml.YAMLError as e:
                raise NoticeConfigError(
                    f"Invalid YAML in configuration file {config_path}: {e}",
                    {'config_path': config_path}
                ) from e

        if data is None:
            return cls()

        if not isinstance(data, dict):
            raise NoticeConfigError(
                f"Configuration file must contain a mapping: {config_path}",
                {'config_path': config_path, 'found_type': type(data).__name__}
            )

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in data if key not in known)
        if unknown:
            raise NoticeConfigError(
                f"Unknown configuration keys in {config_path}: {', '.join(unknown)}",
                {'config_path': config_path, 'unknown_keys': unknown}
            )

        # A key left empty ("build_dir:") keeps its default
        values = {key: value for key, value in data.items() if value is not None}
        invalid = sorted(key for key, value in values.items() if not isinstance(value, str))
        if invalid:
            raise NoticeConfigError(
                f"Configuration values must be strings in {config_path}: {', '.join(invalid)}",
                {'config_path': config_path, 'invalid_keys': invalid}
            )

        return cls(**values)

    @classmethod
    def create_default(cls) -> 'NoticeCheckConfig':
        """Create a default configuration."""
        return cls()

    def save_to_file(self, config_path: str) -> None:
        """Save configuration to YAML file."""
        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(asdict(self), f, default_flow_style=False, sort_keys=True)

    @property
    def notice_path(self) -> Path:
        """Path of the checked-in NOTICE file."""
        return Path(self.notice_file)

    @property
    def expected_path(self) -> Path:
        """Path the expected NOTICE contents are written to on mismatch."""
        return Path(self.build_dir) / self.expected_file_name

    def validate(self) -> List[str]:
        """Validate the configuration and return any errors."""
        errors = []

        if not self.notice_file:
            errors.append("'notice_file' must not be empty")

        if not self.expected_file_name:
            errors.append("'expected_file_name' must not be empty")

        if not self.encoding:
            errors.append("'encoding' must not be empty")

        else:
            try:
                codecs.lookup(self.encoding)

            except LookupError:
                errors.append(f"Unknown encoding '{self.encoding}'")

        return errors
