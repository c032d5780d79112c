from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


TBaseSchema = TypeVar("TBaseSchema", bound="BaseSchema")


class BaseSchema(BaseModel):
    def to_json(self) -> str:
        return self.model_dump_json()

    def to_dict(self) -> dict[str, object]:
        return self.model_dump()

    @classmethod
    def from_json(cls: type[TBaseSchema], data: str) -> TBaseSchema:
        return cls.model_validate_json(data)

    @classmethod
    def from_dict(cls: type[TBaseSchema], data: Mapping[str, object]) -> TBaseSchema:
        return cls.model_validate(data)


class SecurityConfig(BaseSchema):
    """Limits shared by all operations.

    Built once and passed to each operation; instances are frozen.
    """

    model_config = ConfigDict(frozen=True)

    max_input_length: int = Field(default=1000, gt=0)
    allowed_chars: str = r"^[a-zA-Z0-9\s\-_]+$"
    timeout_ms: int = Field(default=5000, ge=0)

    @field_validator("allowed_chars")
    @classmethod
    def allowed_chars_compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"allowed_chars is not a valid pattern: {exc}") from exc
        return value

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


DEFAULT_CONFIG = SecurityConfig()
