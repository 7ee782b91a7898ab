from __future__ import annotations

import os
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from utils.env_loader import env_list, load_environments


class AdapterOptions(BaseModel):
    type: Optional[str] = Field(default=None, description="Adapter type, e.g. sql or memory")
    uri: Optional[str] = Field(default=None, description="Connection uri handed to the adapter")
    extension: List[str] = Field(default_factory=list, description="Adapter feature flags, passed through")

    @field_validator("type", "uri", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value.strip() if isinstance(value, str) else value

    @field_validator("extension", mode="before")
    @classmethod
    def _split_extensions(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        return [str(item).strip() for item in value if str(item).strip()]


def load_adapter_options(env_path: str = ".env") -> AdapterOptions:
    load_environments(env_path)
    return AdapterOptions(
        type=os.getenv("MODEL_ADAPTER_TYPE"),
        uri=os.getenv("MODEL_ADAPTER_URI") or os.getenv("DATABASE_URL"),
        extension=env_list("MODEL_ADAPTER_EXTENSIONS"),
    )
