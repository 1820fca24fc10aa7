"""
Unified configuration loader with priority resolution.

Root directory (FEEDSOURCE_ROOT):
- macOS/Linux: ~/.feedsource
- Windows: %APPDATA%\\feedsource
- Override: FEEDSOURCE_ROOT environment variable

Config file priority (highest to lowest):
1. Environment variable (FEEDSOURCE_CONFIG) - path to a YAML file
2. Project config (.feedsource/config.yaml, searched upward from cwd)
3. User config ({root_dir}/config.yaml)
4. Defaults (built-in provider hosts only)

Config schema:

    hosts:
      youtube: [yt.example.org]
      vimeo: [vimeo.example.org]

Extra hosts join the built-in host family of their provider.
"""

import logging
import os
import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from feedsource.config.defaults import (
    APP_DIR_NAME,
    CONFIG_FILE_NAME,
    ENV_CONFIG,
    ENV_ROOT,
    PROJECT_DIR_NAME,
    VALID_TOP_LEVEL_KEYS,
)
from feedsource.config.providers import BUILTIN_HOSTS
from feedsource.exceptions import ConfigError
from feedsource.models.kinds import Provider
from feedsource.parsing import normalize_host

logger = logging.getLogger(__name__)

_HOSTNAME_RE = re.compile(
    r"^(?=.{1,253}$)[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?(?:\.[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?)+$",
    re.IGNORECASE,
)


class ConfigSource(Enum):
    """Source of the configuration value."""

    ENV = "env"
    PROJECT = "project"
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True)
class FeedsourceConfig:
    """Resolved feedsource configuration."""

    root_dir: Path
    source: ConfigSource
    config_path: Path | None = None
    extra_hosts: dict[Provider, frozenset[str]] = field(default_factory=dict)

    def hosts_for(self, provider: Provider) -> frozenset[str]:
        """Built-in plus configured hosts accepted for provider."""
        return BUILTIN_HOSTS[provider] | self.extra_hosts.get(provider, frozenset())

    def __repr__(self) -> str:
        return (
            f"FeedsourceConfig(root_dir={self.root_dir!r}, "
            f"config_path={self.config_path!r}, source={self.source.value!r})"
        )


@dataclass
class ConfigValidationResult:
    """Result of validating a config dict.

    Attributes:
        errors: Fatal issues that prevent correct operation.
        warnings: Non-fatal issues that may cause unexpected behavior.
    """

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True if no errors were found."""
        return len(self.errors) == 0


def _load_yaml_config(config_path: Path) -> dict[str, Any] | None:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Parsed config dict, or None if file doesn't exist or fails to parse.
    """
    if not config_path.exists():
        return None

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}")
        return None

    if config is None:
        return {}
    if not isinstance(config, dict):
        logger.warning(f"Config file {config_path} is not a valid YAML dict")
        return None
    return config


def _find_project_config() -> Path | None:
    """Find project-level config by walking up from cwd.

    Returns:
        Path to .feedsource/config.yaml if found, None otherwise.
    """
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        config_path = parent / PROJECT_DIR_NAME / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path
    return None


def _get_root_dir() -> Path:
    """Get the feedsource root directory.

    Priority:
    1. FEEDSOURCE_ROOT environment variable
    2. Platform-specific default:
       - Windows: %APPDATA%\\feedsource
       - macOS/Linux: ~/.feedsource
    """
    env_root = os.environ.get(ENV_ROOT)
    if env_root:
        return Path(env_root).expanduser().resolve()

    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / APP_DIR_NAME
        return Path.home() / "AppData" / "Roaming" / APP_DIR_NAME
    return Path.home() / f".{APP_DIR_NAME}"


def _get_user_config_path() -> Path:
    """Get the user-level config path ({root_dir}/config.yaml)."""
    return _get_root_dir() / CONFIG_FILE_NAME


def _get_env_config_path() -> Path | None:
    env_path = os.environ.get(ENV_CONFIG)
    if not env_path:
        return None
    return Path(env_path).expanduser().resolve()


def validate_config(config_dict: Any) -> ConfigValidationResult:
    """Validate a parsed config dict.

    Checks for:
    - Structural issues (wrong types)
    - Unknown top-level keys
    - Unknown provider names under "hosts"
    - Entries that are not bare hostnames
    - Hosts already built in, or claimed by another provider

    Args:
        config_dict: Parsed YAML config (the whole file).

    Returns:
        ConfigValidationResult with errors and warnings.
    """
    result = ConfigValidationResult()

    if config_dict is None:
        return result

    if not isinstance(config_dict, dict):
        result.errors.append(
            f"Config must be a YAML mapping (dict), got {type(config_dict).__name__}"
        )
        return result

    for key in config_dict:
        if key not in VALID_TOP_LEVEL_KEYS:
            result.warnings.append(
                f"Unknown top-level key '{key}'. "
                f"Valid keys: {', '.join(sorted(VALID_TOP_LEVEL_KEYS))}"
            )

    hosts_section = config_dict.get("hosts")
    if hosts_section is None:
        return result

    if not isinstance(hosts_section, dict):
        result.errors.append(
            "The 'hosts' section must be a mapping (dict), "
            f"got {type(hosts_section).__name__}"
        )
        return result

    known = {p.value: p for p in Provider}
    claimed: dict[str, Provider] = {
        host: provider for provider, hosts in BUILTIN_HOSTS.items() for host in hosts
    }

    for name, entries in hosts_section.items():
        provider = known.get(str(name))
        if provider is None:
            result.errors.append(
                f"Unknown provider '{name}' in hosts section. "
                f"Valid providers: {', '.join(sorted(known))}"
            )
            continue
        if entries is None:
            continue
        if not isinstance(entries, list):
            result.errors.append(
                f"Hosts for '{name}' must be a list, got {type(entries).__name__}"
            )
            continue

        for entry in entries:
            if not isinstance(entry, str) or not _HOSTNAME_RE.match(entry):
                result.errors.append(
                    f"Invalid host {entry!r} for '{name}': expected a bare hostname "
                    "like 'videos.example.org' (no scheme, port or path)"
                )
                continue
            host = normalize_host(entry)
            owner = claimed.get(host)
            if owner is provider and host in BUILTIN_HOSTS[provider]:
                result.warnings.append(f"Host '{entry}' is already built in for '{name}'")
            elif owner is not None and owner is not provider:
                result.errors.append(
                    f"Host '{entry}' is listed for '{name}' but belongs to '{owner.value}'"
                )
            else:
                claimed[host] = provider

    return result


def _extra_hosts_from_yaml(config: dict[str, Any]) -> dict[Provider, frozenset[str]]:
    """Collect normalized extra hosts from a validated config dict."""
    hosts_section = config.get("hosts") or {}
    extra: dict[Provider, frozenset[str]] = {}
    for name, entries in hosts_section.items():
        provider = Provider(name)
        hosts = frozenset(normalize_host(h) for h in entries or [])
        if hosts:
            extra[provider] = hosts
    return extra


def _config_from_file(
    root_dir: Path, config_path: Path, source: ConfigSource
) -> FeedsourceConfig | None:
    """Build a config from one file, or None if it can't be read."""
    raw = _load_yaml_config(config_path)
    if raw is None:
        return None

    validation = validate_config(raw)
    for warning in validation.warnings:
        logger.warning(f"{config_path}: {warning}")
    if not validation.is_valid:
        raise ConfigError(
            f"Invalid config file {config_path}: {'; '.join(validation.errors)}",
            errors=validation.errors,
        )

    logger.info(f"Using {source.value} config {config_path}")
    return FeedsourceConfig(
        root_dir=root_dir,
        source=source,
        config_path=config_path,
        extra_hosts=_extra_hosts_from_yaml(raw),
    )


def find_config_file() -> tuple[Path | None, ConfigSource]:
    """Locate the active config file without parsing it.

    Returns:
        (path, source) for the highest-priority existing file, or
        (None, ConfigSource.DEFAULT) when there is none.
    """
    env_path = _get_env_config_path()
    if env_path and env_path.exists():
        return env_path, ConfigSource.ENV

    project_path = _find_project_config()
    if project_path:
        return project_path, ConfigSource.PROJECT

    user_path = _get_user_config_path()
    if user_path.exists():
        return user_path, ConfigSource.USER

    return None, ConfigSource.DEFAULT


def _resolve_config() -> FeedsourceConfig:
    """Resolve configuration from all sources in priority order.

    Raises:
        ConfigError: If the highest-priority readable file is invalid.
    """
    root_dir = _get_root_dir()

    # 1. Explicit file from environment
    env_path = _get_env_config_path()
    if env_path:
        if env_path.exists():
            config = _config_from_file(root_dir, env_path, ConfigSource.ENV)
            if config:
                return config
        else:
            logger.warning(f"{ENV_CONFIG} points to missing file {env_path}")

    # 2. Project config
    project_path = _find_project_config()
    if project_path:
        config = _config_from_file(root_dir, project_path, ConfigSource.PROJECT)
        if config:
            return config

    # 3. User config
    config = _config_from_file(root_dir, _get_user_config_path(), ConfigSource.USER)
    if config:
        return config

    # 4. Defaults
    logger.debug("No config file found, using built-in provider hosts")
    return FeedsourceConfig(root_dir=root_dir, source=ConfigSource.DEFAULT)


@lru_cache(maxsize=1)
def get_config() -> FeedsourceConfig:
    """Get resolved feedsource configuration.

    Results are cached - configuration is resolved once per process.
    To force re-resolution (e.g., after env change), use clear_config_cache().
    """
    return _resolve_config()


def clear_config_cache() -> None:
    """Clear the cached configuration.

    Call this if environment variables or config files have changed
    and you need to re-resolve the configuration.
    """
    get_config.cache_clear()
