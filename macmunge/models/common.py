from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from .options import FormatOptions, ParseOptions


class Settings(BaseModel):
    """macmunge configuration, usually loaded from YAML.

    ``interfaces`` is the interface table used by the ``static`` directory,
    mapping names to hex text written with the ``parse`` separators.
    """

    parse: ParseOptions = Field(default_factory=ParseOptions)
    format: FormatOptions = Field(default_factory=FormatOptions)
    directory: Literal["system", "static"] = "system"
    interfaces: dict[str, str | None] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _interfaces_are_hex(self) -> "Settings":
        from ..core.hexcodec import parse_hex

        for name, text in self.interfaces.items():
            if text is None:
                continue
            parsed = parse_hex(text, self.parse)
            if not parsed.is_ok():
                raise ValueError(f"interface {name!r}: {parsed.error}")
        return self


def load_settings(path: str | Path) -> Settings:
    """Load YAML -> Settings (Pydantic)."""

    p = Path(path)
    data: Any = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"[Config Validation Error]\n{p}: expected a mapping at the top level, got {type(data).__name__}")
    try:
        return Settings(**data)
    except ValidationError as ve:
        raise SystemExit(f"[Config Validation Error]\n{ve}") from ve
