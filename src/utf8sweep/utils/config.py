"""Config utility for persistent utf8sweep settings.

Settings live in ~/.config/utf8sweep (or $XDG_CONFIG_HOME/utf8sweep, or
$UTF8SWEEP_CONFIG_DIR):
- ``ignore`` holds the excluded extensions, one per line, UTF-8.
- ``config.toml`` holds the boolean preferences under ``[convert]``. Uses
  tomli/tomli-w for TOML parsing and writing.

A missing or corrupt store is never fatal: it is logged and replaced by the
defaults.
"""

from pathlib import Path
from typing import Any, List, Optional, TypeVar, cast
import contextlib
import logging
import os

import tomli
import tomli_w
from pydantic import ValidationError

from utf8sweep.models.settings import DEFAULT_EXCLUDED_EXTENSIONS, Settings

# Logger for this module
logger = logging.getLogger(__name__)

# Determine config directory respecting XDG_CONFIG_HOME if set.
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
# Path like ~/.config/utf8sweep or $XDG_CONFIG_HOME/utf8sweep
CONFIG_DIR = Path(os.environ.get("UTF8SWEEP_CONFIG_DIR", _xdg_config_home / "utf8sweep"))
CONFIG_FILE = CONFIG_DIR / "config.toml"
IGNORE_FILE = CONFIG_DIR / "ignore"


class ConfigurationError(Exception):
    """Raised when the settings store cannot be read or parsed."""


def _read_ignore_file() -> List[str]:
    try:
        text = IGNORE_FILE.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read {IGNORE_FILE}: {e}") from e
    return [line.strip() for line in text.splitlines() if line.strip()]


def _write_ignore_file(extensions: List[str]) -> None:
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    content = "".join(f"{ext}\n" for ext in extensions)
    IGNORE_FILE.write_text(content, encoding="utf-8")


def _read_config_file() -> dict[str, Any]:
    """Read the TOML config file if it exists, returning a (nested) dict."""

    if not CONFIG_FILE.exists():
        return {}
    try:
        with CONFIG_FILE.open("rb") as f:
            return tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as e:
        raise ConfigurationError(f"Cannot read {CONFIG_FILE}: {e}") from e


def _write_config_file(data: dict[str, Any]) -> None:
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    with CONFIG_FILE.open("wb") as f:
        tomli_w.dump(data, f)


def save_settings(settings: Settings) -> None:
    """Flush *settings* to the ignore file and config.toml.

    Raises:
        OSError: If the config directory is not writable.
    """
    _write_ignore_file(settings.excluded_extensions)
    try:
        data = _read_config_file()
    except ConfigurationError:
        data = {}
    data["convert"] = {
        "whitelist_extensionless": settings.whitelist_extensionless,
        "add_bom": settings.add_bom,
    }
    _write_config_file(data)


def reset_settings() -> Settings:
    """Write the default exclusion list and preferences back to disk."""
    settings = Settings()
    save_settings(settings)
    return settings


def load_settings() -> Settings:
    """Load settings from disk.

    On first run (no ignore file) the defaults are written out. Unreadable or
    corrupt files are logged and replaced by defaults for this process.

    Returns:
        Settings: The loaded settings.
    """
    if not IGNORE_FILE.exists():
        try:
            return reset_settings()
        except OSError as e:
            logger.warning(f"Could not write default settings to {CONFIG_DIR}: {e}")
            return Settings()

    try:
        extensions = _read_ignore_file()
    except ConfigurationError as e:
        logger.warning(f"{e}; using default exclusion list")
        extensions = list(DEFAULT_EXCLUDED_EXTENSIONS)

    try:
        convert = _lookup_nested(_read_config_file(), "convert") or {}
    except ConfigurationError as e:
        logger.warning(f"{e}; using default preferences")
        convert = {}

    try:
        return Settings(
            excluded_extensions=extensions,
            whitelist_extensionless=convert.get("whitelist_extensionless", False),
            add_bom=convert.get("add_bom", True),
        )
    except (ValidationError, AttributeError) as e:
        logger.warning(f"Invalid settings in {CONFIG_DIR}: {e}; using defaults")
        return Settings(excluded_extensions=extensions)


# ---------------------------------------------------------------------------
# Generic configuration resolution
# ---------------------------------------------------------------------------

T = TypeVar("T")


def _lookup_nested(data: dict[str, Any], dotted_key: str) -> Any | None:
    """Retrieve a nested value from *data* given a dotted key path.

    Example: dotted_key="convert.add_bom" will attempt
    ``data["convert"]["add_bom"]`` returning None if any level is missing.
    """

    keys = dotted_key.split(".")
    current: Any = data
    for part in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def _make_env_var_name(dotted_key: str, prefix: str = "UTF8SWEEP_") -> str:
    """Convert a dotted key path to an uppercase ENV var name.

    Example: "convert.add_bom" -> "UTF8SWEEP_CONVERT_ADD_BOM".
    """

    return prefix + dotted_key.replace(".", "_").upper()


def _coerce_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() in {"1", "true", "yes", "on"}
    return default


def resolve_setting(
    key: str,
    *,
    default: T,
    cli_value: Optional[T] = None,
) -> T:
    """Resolve a configuration *key* using precedence CLI > env > config > default.

    Args:
        key: Dotted key path, e.g. ``"convert.add_bom"``.
        default: Value to fall back to when no overrides found.
        cli_value: Value passed from CLI option (may be ``None`` when not provided).

    Returns:
        The resolved value with type matching *default* (or *cli_value*).
    """

    # 1. CLI value wins if provided (and not ``None`` to mimic Typer semantics).
    if cli_value is not None:
        return cli_value

    # 2. Environment variable
    env_var = _make_env_var_name(key)
    if env_var in os.environ:
        env_val: str = os.environ[env_var]
        if isinstance(default, bool):
            return cast(T, _coerce_bool(env_val, default))
        if isinstance(default, int):
            with contextlib.suppress(ValueError):
                return cast(T, int(env_val))
            return default
        return cast(T, env_val)

    # 3. Config file lookup
    try:
        file_val = _lookup_nested(_read_config_file(), key)
    except ConfigurationError as e:
        logger.warning(str(e))
        file_val = None
    if file_val is not None:
        if isinstance(default, bool):
            return cast(T, _coerce_bool(file_val, default))
        if isinstance(default, int):
            if isinstance(file_val, int):
                return cast(T, file_val)
            if isinstance(file_val, str):
                with contextlib.suppress(ValueError):
                    return cast(T, int(file_val))
            return default
        return cast(T, file_val)

    # 4. Default
    return default
