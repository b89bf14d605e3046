"""Configuration value objects with validation."""

from __future__ import annotations

import pickle
from pathlib import Path

from pydantic import BaseModel, DirectoryPath, Field, field_validator


class CacheConfig(BaseModel):
    """Cache configuration with validation."""

    model_config = {"frozen": True}

    # Storage
    directory: DirectoryPath

    # Expiration
    default_ttl: int | None = Field(default=None, ge=1)

    # Serialization
    pickle_protocol: int = Field(
        default=pickle.DEFAULT_PROTOCOL, ge=0, le=pickle.HIGHEST_PROTOCOL
    )

    @field_validator('directory')
    @classmethod
    def resolve_directory(cls, v: Path) -> Path:
        """Canonicalize the root so equivalent spellings share one cache."""
        return v.resolve(strict=True)


__all__ = ['CacheConfig']
