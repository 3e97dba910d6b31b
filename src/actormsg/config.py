"""
Configuration for the actormsg codec.

Defines CodecSettings, a frozen dataclass carrying the output options of the
encoders and message builders. Defaults reproduce the reference wire format
byte for byte; loaders apply overrides with precedence env > TOML > defaults.

Notes
- Codec functions never load configuration themselves: callers pass a settings
  instance (or rely on the defaults), so encoding stays free of env/file access.
- escape_user_message=False keeps the verbatim user message form that existing
  consumers expect. Text containing double quotes or control characters then
  yields an invalid document; enable escaping when peers accept it.
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from actormsg.core.constants import STANDALONE_SEPARATOR

__all__ = ["CodecSettings"]

_TRUE = {"1", "true", "t", "yes", "y", "on"}


@dataclass(frozen=True)
class CodecSettings:
    """
    Output options for encoders and message builders.

    Attributes:
        escape_user_message (bool): If True, build_user_message emits an escaped
            JSON document instead of inserting the text verbatim.
        standalone_separator (str): Text written between the wrapping key and the
            encoded object of standalone documents (reference form ``" : "``).

    Examples:
        >>> from actormsg.config import CodecSettings
        >>> CodecSettings(escape_user_message=True).escape_user_message
        True
    """

    escape_user_message: bool = False
    standalone_separator: str = STANDALONE_SEPARATOR

    @classmethod
    def _apply_mapping(cls, base: CodecSettings, cfg: dict[str, Any] | None) -> CodecSettings:
        """Apply a loose config mapping onto CodecSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        def _bool(v: Any) -> bool:
            if isinstance(v, bool):
                return v
            if isinstance(v, (int, float)):
                return bool(v)
            if isinstance(v, str):
                return v.strip().lower() in _TRUE
            return False

        if "escape_user_message" in cfg:
            s = replace(s, escape_user_message=_bool(cfg["escape_user_message"]))

        # Only ":" padded by spaces keeps the standalone document valid JSON.
        sep = cfg.get("standalone_separator")
        if isinstance(sep, str) and sep.strip(" ") == ":":
            s = replace(s, standalone_separator=sep)

        return s

    @classmethod
    def from_env(
        cls, base: CodecSettings | None = None, prefix: str = "ACTORMSG_"
    ) -> CodecSettings:
        """
        Build CodecSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - ACTORMSG_ESCAPE_USER_MESSAGE (1/0/true/false/yes/no/on/off)
            - ACTORMSG_STANDALONE_SEPARATOR (e.g. ":" or " : ")
        """
        s = base or cls()

        def get(name: str) -> str | None:
            return os.getenv(prefix + name)

        mapping: dict[str, Any] = {}
        v = get("ESCAPE_USER_MESSAGE")
        if v:
            mapping["escape_user_message"] = v
        v = get("STANDALONE_SEPARATOR")
        if v:
            mapping["standalone_separator"] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> CodecSettings:
        """
        Build CodecSettings from a TOML file.

        Search order when `path` is None:
            1) ./actormsg.toml (with either a [codec] table or top-level keys)
            2) ./pyproject.toml under [tool.actormsg.codec]

        Returns defaults if no file is present or the file is not valid TOML.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError):
                return None

        cfg: dict[str, Any] | None = None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "actormsg.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool")
                section = tool.get("actormsg") if isinstance(tool, dict) else None
                cfg = section.get("codec") if isinstance(section, dict) else None
            elif isinstance(data.get("codec"), dict):
                cfg = data["codec"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> CodecSettings:
        """
        Load CodecSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (actormsg.toml, pyproject.toml).

        Returns:
            CodecSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
