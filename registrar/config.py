"""
Registry configuration.

Loaded from a JSON file passed on the command line, or built from a dict.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .core.enums import EntityKind, GradingScheme, UngradedPolicy
from .core.exceptions import ConfigurationError


class RegistrarConfig(BaseModel):
    """Settings for a RegistryService instance."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    student_id_base: int = Field(1000, ge=0)
    course_id_base: int = Field(100, ge=0)
    grading_scheme: GradingScheme = GradingScheme.PERCENTAGE
    ungraded_policy: UngradedPolicy = UngradedPolicy.EXCLUDE
    log_level: str = "INFO"
    seed_sample_data: bool = False

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def id_bases(self) -> Dict[EntityKind, int]:
        return {
            EntityKind.STUDENT: self.student_id_base,
            EntityKind.COURSE: self.course_id_base,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RegistrarConfig":
        try:
            return cls.model_validate(dict(data))
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", error_code="config",
                                     details={"errors": e.errors()})

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "RegistrarConfig":
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file {path}: {e}", error_code="config")
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object", error_code="config")
        return cls.from_dict(data)
