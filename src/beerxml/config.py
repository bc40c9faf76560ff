from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict
import logging

import yaml

# ---------------------------------------------------------------------------
# Codec profiles (optional presets)
# ---------------------------------------------------------------------------

CODEC_PROFILES: Dict[str, Dict[str, Any]] = {
    "compact": {"xml_indent": "", "xml_declaration": False},
    "pretty": {"xml_indent": "  ", "xml_declaration": True},
}


@dataclass
class CodecConfig:
    """
    Output settings for the markup writer and the CLI.

    Fields:
      xml_indent: indentation unit for nested elements ("" = single line)
      xml_declaration: prepend <?xml version="1.0" encoding="UTF-8"?>
      log_level: level name for the "beerxml" logger
    """

    xml_indent: str = "  "
    xml_declaration: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_config(cls, cfg: Dict[str, Any] | None) -> "CodecConfig":
        """
        Build from a YAML mapping:

        codec:
          profile: compact
          xml_declaration: true
          log_level: DEBUG
        """
        if cfg is None:
            return cls()

        cfg = dict(cfg)

        profile_name = cfg.pop("profile", None)
        base: Dict[str, Any] = {}
        if profile_name is not None:
            if profile_name not in CODEC_PROFILES:
                raise ValueError(f"Unknown codec profile: {profile_name!r}")
            base.update(CODEC_PROFILES[profile_name])

        known = {f.name for f in fields(cls)}
        unknown = set(cfg) - known
        if unknown:
            raise ValueError(f"Unknown codec config key(s): {', '.join(sorted(unknown))}")

        base.update(cfg)
        return cls(**base)

    def apply_logging(self) -> None:
        logging.getLogger("beerxml").setLevel(self.log_level.upper())


def load_codec_config(path: Path) -> CodecConfig:
    """Load CodecConfig from a YAML file (top-level `codec:` block or bare mapping)."""
    path = Path(path).expanduser().resolve()
    if not path.is_file():
        raise FileNotFoundError(path)

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"{path}: codec config must be a mapping")

    return CodecConfig.from_config(data.get("codec", data))
