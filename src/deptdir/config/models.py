"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, deptdir.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- deptdir.toml sections ---


class ReplConfig(BaseModel):
    """[repl] section."""

    model_config = {"frozen": True}

    prompt: str = "> "
    show_prompt: bool = True


class DirectoryConfig(BaseModel):
    """[directory] section."""

    model_config = {"frozen": True}

    keep_sorted: bool = False

