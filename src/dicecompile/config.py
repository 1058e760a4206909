"""Limits applied when compiling and rolling dice expressions."""
from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

# Longest expression accepted, after whitespace is removed.
MAX_LENGTH = 60
# Most chunks (signed terms) in one expression.
MAX_CHUNKS = 10
# Largest static pool, and the most dice one chunk may roll including explosions.
MAX_DICE = 100
# Most faces on any single die.
MAX_FACES = 1000

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.toml"


class Limits(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_length: int = Field(default=MAX_LENGTH, ge=1)
    max_chunks: int = Field(default=MAX_CHUNKS, ge=1)
    max_dice: int = Field(default=MAX_DICE, ge=1)
    max_faces: int = Field(default=MAX_FACES, ge=1)


DEFAULT_LIMITS = Limits()


def _load_config(path: Path) -> dict[str, Any]:
    if path.exists():
        with open(path, "rb") as f:
            return tomllib.load(f)
    return {}


def load_limits(path: Path | str | None = None) -> Limits:
    """Read the ``[dice]`` table of a config.toml into a Limits model.

    Missing files or tables fall back to the defaults; invalid values raise
    pydantic's ValidationError.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    dice_cfg = _load_config(config_path).get("dice", {})
    if not dice_cfg:
        logger.debug("No [dice] table in %s, using default limits", config_path)
        return DEFAULT_LIMITS
    return Limits(**dice_cfg)
