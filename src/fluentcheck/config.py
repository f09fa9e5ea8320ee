from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator


class FormatterConfig(BaseModel):
    """Options controlling how values are rendered into failure messages."""

    model_config = ConfigDict(extra="forbid", frozen=True)
    null_literal: str = "<null>"
    default_context: str = "value"
    max_items: int = Field(default=32, ge=1)
    quote_strings: bool = True

    @model_validator(mode="after")
    def labels_must_not_be_blank(self) -> "FormatterConfig":
        if not self.null_literal.strip():
            raise ValueError("null_literal must not be blank")
        if not self.default_context.strip():
            raise ValueError("default_context must not be blank")
        return self


class FluentCheckConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    formatting: FormatterConfig = FormatterConfig()


DEFAULT_CONFIG = FormatterConfig()


def load_config(path: Path) -> FormatterConfig:
    """Load formatter options from a YAML file.

    The file may be empty, in which case the defaults are returned.
    """
    with open(path) as f:
        raw = yaml.safe_load(f)

    config = FluentCheckConfig(**(raw or {}))
    return config.formatting
