"""
Configuration for the Zod schema generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OutputMode(str, Enum):
    """What to do when the output file is already there."""

    ERROR_IF_EXISTS = "error"
    FORCE = "force"


@dataclass
class OutputConfig:
    """Output file handling.

    Attributes:
        mode: Behavior when the output file exists
        atomic_write: Write through a temporary file and rename it into place
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    atomic_write: bool = True

    @staticmethod
    def from_dict(d: dict) -> OutputConfig:
        return OutputConfig(
            mode=OutputMode(d.get("mode", OutputMode.ERROR_IF_EXISTS)),
            atomic_write=d.get("atomic_write", True),
        )

    def to_dict(self) -> dict:
        return {"mode": self.mode.value, "atomic_write": self.atomic_write}


@dataclass
class GeneratorConfig:
    """Configuration options for schema generation."""

    # Identifier Zod is imported as (import { z as <value> } from "zod")
    zod_import_value: str = "z"

    # Re-emit JSDoc comments above generated schemas and members
    keep_comments: bool = True

    # Ignore JSDoc tags (@format, @minimum, ...) entirely
    skip_parse_jsdoc: bool = False

    # Log and skip unsupported declarations instead of failing the whole file
    skip_unsupported: bool = False

    # First line of the output: "// Generated by ts_to_zod v<version> : <command line>"
    add_generation_comment: bool = True

    # Declarations to leave out of the output
    ignore_declarations: list[str] = field(default_factory=list)

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "output":
                config.output = OutputConfig.from_dict(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a JSON-compatible dictionary."""
        return {
            "zod_import_value": self.zod_import_value,
            "keep_comments": self.keep_comments,
            "skip_parse_jsdoc": self.skip_parse_jsdoc,
            "skip_unsupported": self.skip_unsupported,
            "add_generation_comment": self.add_generation_comment,
            "ignore_declarations": list(self.ignore_declarations),
            "output": self.output.to_dict(),
        }
