# SPDX-FileCopyrightText: <text>Copyright 2025-2026 Arm Limited and/or
# its affiliates <open-source-office@arm.com></text>
# SPDX-License-Identifier: Apache-2.0
import pathlib
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from log_cleaner.core.utils.types import PATTERNS

# Pydantic model describing a cleanup run. It is only ever built in code,
# the tool reads no configuration files or environment variables.


class CleanerConfig(BaseModel):
    """Root directory and glob patterns for a cleanup run"""

    model_config = ConfigDict(extra="forbid", frozen=True)

    root_dir: Optional[pathlib.Path] = Field(
        default=None,
        description="Directory to clean. If None, the parent of the directory "
        "containing the running script is used",
    )
    patterns: Tuple[str, ...] = Field(
        default=PATTERNS,
        min_length=1,
        description="Filename glob patterns, matched in order against files "
        "directly inside root_dir",
    )

    @field_validator("patterns", mode="after")
    @classmethod
    def _patterns_are_basenames(cls, patterns: Tuple[str, ...]):
        """Patterns match base names only, so they can never reach into subdirectories"""
        for pattern in patterns:
            if not pattern.strip():
                raise PydanticCustomError("empty_pattern", "Empty glob pattern")
            if "/" in pattern or "\\" in pattern:
                raise PydanticCustomError(
                    "pattern_separator",
                    f"Pattern {pattern!r} contains a path separator",
                )
        return patterns
