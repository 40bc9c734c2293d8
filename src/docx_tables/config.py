"""Extraction options and header-heuristic thresholds.

Both are frozen Pydantic models so a bad option fails loudly at construction
time, while the extraction itself never raises on malformed markup.
``load_options`` reads overrides from the environment (and an optional .env
file) for integration layers that configure the engine that way.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from docx_tables.patterns import NUMERIC_LITERAL_PATTERN

logger = logging.getLogger(__name__)

TableFormat = Literal["array", "objects"]

DEFAULT_TABLE_FORMAT: TableFormat = "objects"

# Environment variables read by load_options()
ENV_PREFIX = "DOCX_TABLES_"
ENV_TABLE_FORMAT = f"{ENV_PREFIX}TABLE_FORMAT"
ENV_INCLUDE_STYLES = f"{ENV_PREFIX}INCLUDE_STYLES"
ENV_HEADER_FROM_CLASSIFIER = f"{ENV_PREFIX}HEADER_FROM_CLASSIFIER"

_TRUE_STRINGS = ("1", "true", "yes", "on")


class HeaderHeuristicConfig(BaseModel):
    """Thresholds for deciding whether a table's first row holds column headers.

    Defaults:
      short_text_max_length -- 50; a cell shorter than this counts as label-like
      short_text_ratio      -- 0.5; share of cells that must be short
      valid_header_ratio    -- 0.5; share of cells that must not be pure numbers
      bold_ratio            -- 0.5; share of bold cells that qualifies on its own
      numeric_pattern       -- integer or decimal with "." or "," separator
    """

    model_config = ConfigDict(frozen=True)

    short_text_max_length: int = Field(default=50, ge=1)
    short_text_ratio: float = Field(default=0.5, ge=0.0, le=1.0)
    valid_header_ratio: float = Field(default=0.5, ge=0.0, le=1.0)
    bold_ratio: float = Field(default=0.5, ge=0.0, le=1.0)
    numeric_pattern: str = NUMERIC_LITERAL_PATTERN

    @field_validator("numeric_pattern")
    @classmethod
    def validate_numeric_pattern(cls, value: str) -> str:
        """Reject patterns that do not compile."""
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"numeric_pattern does not compile: {exc}") from exc
        return value


class ExtractionOptions(BaseModel):
    """Options for one extraction call.

    table_format                 -- "array" for the row/cell grid only, "objects" to
                                    also project data rows into header-keyed records
    include_styles               -- attach bold/italic/underline to every cell
    header_flag_from_classifier  -- when False (default) the first row is always
                                    flagged ``isHeader``; when True the flag follows
                                    the header heuristic's verdict
    header_heuristic             -- thresholds for the header heuristic
    """

    model_config = ConfigDict(frozen=True)

    table_format: TableFormat = DEFAULT_TABLE_FORMAT
    include_styles: bool = False
    header_flag_from_classifier: bool = False
    header_heuristic: HeaderHeuristicConfig = HeaderHeuristicConfig()


def _env_flag(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip().lower() in _TRUE_STRINGS


def load_options(env_file: Path | str | None = None) -> ExtractionOptions:
    """Build ExtractionOptions from ``DOCX_TABLES_*`` environment variables.

    *env_file* (or a .env found by python-dotenv when omitted) is loaded first
    without overriding variables that are already set.  Unset variables keep
    the model defaults.  Raises pydantic.ValidationError for invalid values.
    """
    load_dotenv(env_file)

    overrides: dict[str, Any] = {}
    table_format = os.getenv(ENV_TABLE_FORMAT)
    if table_format and table_format.strip():
        overrides["table_format"] = table_format.strip().lower()
    include_styles = _env_flag(ENV_INCLUDE_STYLES)
    if include_styles is not None:
        overrides["include_styles"] = include_styles
    from_classifier = _env_flag(ENV_HEADER_FROM_CLASSIFIER)
    if from_classifier is not None:
        overrides["header_flag_from_classifier"] = from_classifier

    logger.debug("Extraction option overrides from environment: %s", overrides)
    return ExtractionOptions(**overrides)


def validate_extraction_options(raw: dict[str, Any]) -> list[str]:
    """Return human-readable problems with *raw* options; an empty list means they are valid."""
    try:
        ExtractionOptions.model_validate(raw)
    except ValidationError as exc:
        return [f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()]
    return []
