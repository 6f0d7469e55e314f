"""Parse and format options for hex MAC addresses."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_SEPARATORS = (":", "-")


class ParseOptions(BaseModel):
    """Separators stripped from text before hex decoding."""

    model_config = ConfigDict(frozen=True)

    separators: list[str] = Field(default_factory=lambda: list(DEFAULT_SEPARATORS))

    @field_validator("separators", mode="before")
    @classmethod
    def _coerce_separators(cls, v: Any) -> Any:
        if v is None:
            return list(DEFAULT_SEPARATORS)
        if isinstance(v, str):
            v = [v]
        if isinstance(v, list | tuple):
            return [s for s in v if s != ""]
        return v


class FormatOptions(BaseModel):
    """Case and separator used when rendering an address."""

    model_config = ConfigDict(frozen=True)

    case: Literal["upper", "lower"] = "lower"
    separator: str = ":"

    @field_validator("case", mode="before")
    @classmethod
    def _lower_case_name(cls, v: Any) -> Any:
        return v.lower() if isinstance(v, str) else v
