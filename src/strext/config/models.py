"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, strext.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class LayoutConfig(BaseModel):
    """[layout] section."""

    model_config = {"frozen": True}

    font_path: str | None = None
    font_size: float = Field(default=14.0, gt=0)


class DigestConfig(BaseModel):
    """[digest] section."""

    model_config = {"frozen": True}

    strict: bool = False


class JsonConfig(BaseModel):
    """[jsonconv] section."""

    model_config = {"frozen": True}

    indent: int = Field(default=2, ge=0)
    ensure_ascii: bool = False


class PinyinConfig(BaseModel):
    """[pinyin] section."""

    model_config = {"frozen": True}

    head_fallback: str = "#"
