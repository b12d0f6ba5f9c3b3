"""Static chunking config loader. One profile per chunking method. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from app.config.chunking.models import ChunkingConfig

_config_dir = Path(__file__).resolve().parent
_config_path = _config_dir / "static.json"

_cached: dict[str, ChunkingConfig] | None = None


def load_chunking_profiles() -> dict[str, ChunkingConfig]:
    """Load chunking profiles from static.json. Keys are method names."""
    global _cached
    if _cached is not None:
        return _cached
    raw = _config_path.read_text(encoding="utf-8")
    data = json.loads(raw)
    profiles = data.get("profiles", {})
    _cached = {k: ChunkingConfig.model_validate(v) for k, v in profiles.items()}
    return _cached


def get_chunking_config(method: str) -> ChunkingConfig | None:
    """Return the default config for the given method, or None if missing."""
    return load_chunking_profiles().get(method)


def resolve_chunking_config(method: str, overrides: dict[str, Any] | None = None) -> ChunkingConfig:
    """
    Resolve chunking config for a method, merging optional overrides over the profile.
    Raises ValueError if no profile exists for the method.
    """
    base = get_chunking_config(method)
    if base is None:
        raise ValueError(f"Unknown chunking method: {method!r}")
    if not overrides:
        return base
    return ChunkingConfig.model_validate({**base.model_dump(), **overrides, "method": method})
