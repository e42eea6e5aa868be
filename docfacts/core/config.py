"""Configuration: discovery, loading, validation."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from docfacts.core.exceptions import ConfigError
from docfacts.core.models import DeclarationKind

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV_VAR = "DOCFACTS_CONFIG_FILE"


@dataclass
class DocfactsConfig:
    """Which declarations to extract and which files to skip."""

    member_kinds: list[str] = field(default_factory=lambda: [k.value for k in DeclarationKind])
    exclude: list[str] = field(default_factory=list)
    include_documented: bool = True

    @property
    def kinds(self) -> set[DeclarationKind]:
        return {DeclarationKind(k) for k in self.member_kinds}

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def resolve_config_path(cli_path: str | Path | None) -> Path | None:
    """Pick the config file: CLI option first, then the environment variable."""
    if cli_path:
        logger.debug("Using config file provided via CLI: %s", cli_path)
        return Path(cli_path)

    env_path = os.environ.get(CONFIG_FILE_ENV_VAR, "").strip()
    if env_path:
        logger.debug("Using config file provided via %s: %s", CONFIG_FILE_ENV_VAR, env_path)
        return Path(env_path)

    return None


def load_config(path: Path | None) -> DocfactsConfig:
    """Read and validate a JSON config file; defaults when `path` is None.

    Raises:
        ConfigError: If the file is missing, not JSON, or has invalid values.
    """
    if path is None:
        return DocfactsConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError(f"No config file at {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    return parse_config(data, source=str(path))


def parse_config(data: Any, source: str = "<config>") -> DocfactsConfig:
    """Validate a decoded config mapping."""
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: config must be a JSON object")

    known = {"member_kinds", "exclude", "include_documented"}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"{source}: unknown config keys: {', '.join(unknown)}")

    config = DocfactsConfig()

    if "member_kinds" in data:
        kinds = data["member_kinds"]
        valid = {k.value for k in DeclarationKind}
        if not isinstance(kinds, list) or not all(isinstance(k, str) for k in kinds):
            raise ConfigError(f"{source}: 'member_kinds' must be a list of strings")
        invalid = [k for k in kinds if k not in valid]
        if invalid:
            raise ConfigError(
                f"{source}: unknown member kinds {invalid}. Valid: {sorted(valid)}"
            )
        config.member_kinds = kinds

    if "exclude" in data:
        exclude = data["exclude"]
        if not isinstance(exclude, list) or not all(isinstance(p, str) for p in exclude):
            raise ConfigError(f"{source}: 'exclude' must be a list of glob patterns")
        config.exclude = exclude

    if "include_documented" in data:
        if not isinstance(data["include_documented"], bool):
            raise ConfigError(f"{source}: 'include_documented' must be true or false")
        config.include_documented = data["include_documented"]

    return config


def render_config(config: DocfactsConfig) -> str:
    """Serialize a config the way it is read back."""
    return json.dumps(config.to_dict(), indent=2) + "\n"
