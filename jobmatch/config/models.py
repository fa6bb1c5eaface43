"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator, model_validator

from jobmatch.matching.engine import DEFAULT_CATEGORY_ALIASES, DEFAULT_MAX_RECOMMENDATIONS
from jobmatch.matching.predicates import PREDICATES
from jobmatch.matching.vocabulary import DEFAULT_TECHNICAL_TERMS


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class MatchingConfig(BaseModel):
    """Vocabulary, match policy, and category aliases for the matcher."""

    vocabulary: List[str] = Field(
        default_factory=lambda: list(DEFAULT_TECHNICAL_TERMS),
        description="Technical terms recognized when scanning free text",
    )
    predicate: str = Field(
        "substring", description="Keyword match policy (substring or exact)"
    )
    category_aliases: Dict[str, List[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_CATEGORY_ALIASES.items()},
        description="Technical stack category -> skill name search terms",
    )
    max_recommendations: int = Field(
        DEFAULT_MAX_RECOMMENDATIONS,
        ge=1,
        le=20,
        description="Missing technologies listed per category",
    )

    @field_validator("vocabulary")
    @classmethod
    def normalize_vocabulary(cls, v: List[str]) -> List[str]:
        """Normalize terms: strip, lowercase, drop empties and duplicates."""
        normalized = []
        for term in v:
            stripped = term.strip().lower()
            if stripped and stripped not in normalized:
                normalized.append(stripped)
        if not normalized:
            raise ValueError("vocabulary must contain at least one term")
        return normalized

    @field_validator("predicate")
    @classmethod
    def validate_predicate(cls, v: str) -> str:
        """Validate the predicate name is known."""
        name = v.strip().lower()
        if name not in PREDICATES:
            raise ValueError(
                f"predicate must be one of: {', '.join(sorted(PREDICATES))}, got: {v}"
            )
        return name

    @field_validator("category_aliases")
    @classmethod
    def normalize_category_aliases(cls, v: Dict[str, List[str]]) -> Dict[str, List[str]]:
        """Lowercase categories and terms; every category needs at least one term."""
        normalized: Dict[str, List[str]] = {}
        for category, terms in v.items():
            key = category.strip().lower()
            if not key:
                raise ValueError("category names cannot be empty")
            cleaned = [term.strip().lower() for term in terms if term.strip()]
            if not cleaned:
                raise ValueError(f"category '{key}' must list at least one search term")
            normalized[key] = cleaned
        return normalized


class CatalogConfig(BaseModel):
    """Location of the JSON catalog of job descriptions and resumes."""

    data_dir: str = Field(
        ".", min_length=1, description="Directory holding companies/ and users/"
    )

    @field_validator("data_dir")
    @classmethod
    def strip_data_dir(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            raise ValueError("data_dir cannot be empty")
        return stripped


class ValidationConfig(BaseModel):
    """Rules for the job description validator."""

    required_fields: List[str] = Field(
        default_factory=lambda: ["metadata", "technicalStack", "requirements", "responsibilities"],
        description="Top-level fields every job description must have",
    )
    max_responsibilities: int = Field(10, ge=1, description="Warn above this many")
    max_essential_requirements: int = Field(15, ge=1, description="Warn above this many")

    @field_validator("required_fields")
    @classmethod
    def strip_required_fields(cls, v: List[str]) -> List[str]:
        return [field.strip() for field in v if field.strip()]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class AppConfig(BaseModel):
    """Root configuration object for the job/resume keyword matcher.

    Every section has defaults, so an empty or absent config file is valid.
    """

    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def validate_required_fields(self):
        """The extractor cannot run without these fields, so they stay required."""
        must_have = {"technicalStack", "requirements", "responsibilities"}
        missing = must_have - set(self.validation.required_fields)
        if missing:
            raise ValueError(
                f"validation.required_fields must include: {', '.join(sorted(missing))}"
            )
        return self
