"""
Configuration management for jira-comment.

Settings are loaded from several sources with proper precedence:
1. Default values
2. Configuration file values
3. Environment variables

Command line flags are kept apart in a RunConfig. Both are passed explicitly to
the stages that need them; nothing here is cached at module level.
"""

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import tomli
from toolkit_utils import ConfigError
from toolkit_utils.logging_utils import debug, info, warning

from .constants import DEFAULT_RECENT_COMMITS

# * Define the configuration schema with default values
DEFAULT_CONFIG: Dict[str, Any] = {
    "editor": {
        "command": None,  # ? Asked for and saved on first interactive run
    },
    "clipboard": {
        "command": None,  # ? Platform tool if None
    },
    "git": {
        "recent_commits": DEFAULT_RECENT_COMMITS,
    },
    "templates": {
        "header_template": None,  # ? Built-in header if None
    },
    "output": {
        "debug": False,
        "log_level": None,  # ? "trace", "debug", "info", "warning", "error"
        "show_timestamps": False,
        "color": True,
    },
}

# * Environment variables mapped to config keys
ENV_MAPPINGS = {
    "JIRAC_EDITOR": ["editor", "command"],
    "JIRAC_CLIPBOARD": ["clipboard", "command"],
    "JIRAC_RECENT_COMMITS": ["git", "recent_commits"],
    "JIRAC_HEADER_TEMPLATE": ["templates", "header_template"],
    "JIRAC_DEBUG": ["output", "debug"],
}


def user_config_dir() -> Path:
    return Path.home() / ".config" / "jirac"


def user_config_path() -> Path:
    """Path of the file that stores settings chosen interactively."""
    return user_config_dir() / "config.json"


def _merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries, with override values taking precedence."""
    result = copy.deepcopy(base)

    for key, value in override.items():
        # * If both values are dictionaries, merge them recursively
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def _set_nested(config: Dict[str, Any], key_path: List[str], value: Any) -> None:
    current = config
    for part in key_path[:-1]:
        current = current.setdefault(part, {})
    current[key_path[-1]] = value


def _read_config_file(path: Path) -> Dict[str, Any]:
    """Read a JSON or TOML config file.

    Raises:
        ConfigError: If the file is malformed or has an unsupported extension
    """
    suffix = path.suffix.lower()
    if suffix == ".json":
        with open(path, "r", encoding="utf-8") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(
                    f"Invalid JSON in config file {path}: {str(e)}", cause=e
                )
    elif suffix == ".toml":
        with open(path, "rb") as f:
            try:
                return tomli.load(f)
            except tomli.TOMLDecodeError as e:
                raise ConfigError(
                    f"Invalid TOML in config file {path}: {str(e)}", cause=e
                )
    raise ConfigError(f"Unsupported config file format: {path.suffix}")


def _load_config_file(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from file if it exists.

    An explicitly requested file must exist and parse. Files found in the
    standard locations are skipped with a warning when they are malformed.

    Args:
        config_path: Optional path to a specific config file

    Returns:
        Dict containing configuration values or empty dict if no file found
    """
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        debug(f"Loading configuration from {path}")
        return _read_config_file(path)

    # * Look in standard locations for config files
    config_paths = [
        # ? Current directory
        Path("jirac.json"),
        Path("jirac.toml"),
        # ? User's home directory
        user_config_dir() / "config.json",
        user_config_dir() / "config.toml",
        Path.home() / ".jirac.json",
        Path.home() / ".jirac.toml",
    ]

    for path in config_paths:
        if path.exists():
            try:
                config = _read_config_file(path)
            except (ConfigError, OSError) as e:
                warning(str(e))
                continue
            debug(f"Loaded configuration from {path}")
            return config

    return {}


def _load_env_vars() -> Dict[str, Any]:
    """Load configuration from environment variables."""
    env_config: Dict[str, Any] = {}

    for env_var, key_path in ENV_MAPPINGS.items():
        if env_var not in os.environ:
            continue

        env_value: str = os.environ[env_var]
        value: Union[str, bool, int]

        # * Handle boolean values
        if env_value.lower() in ("true", "yes"):
            value = True
        elif env_value.lower() in ("false", "no"):
            value = False
        # * Handle numeric values
        elif env_value.isdigit():
            value = int(env_value)
        else:
            value = env_value

        # ? "1"/"0" are flags for the debug switch only
        if env_var == "JIRAC_DEBUG" and isinstance(value, int):
            value = bool(value)

        _set_nested(env_config, key_path, value)

    return env_config


def _validate_config(config: Dict[str, Any]) -> None:
    recent = config["git"]["recent_commits"]
    if isinstance(recent, bool) or not isinstance(recent, int) or recent <= 0:
        raise ConfigError(
            f"git.recent_commits must be a positive integer, got {recent!r}"
        )


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from all sources with proper precedence:
    1. Default values
    2. Configuration file
    3. Environment variables

    Args:
        config_path: Explicit config file given on the command line

    Returns:
        Dict[str, Any]: Complete configuration dictionary

    Raises:
        ConfigError: If a value is invalid or an explicit file cannot be read
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    file_config = _load_config_file(config_path)
    if file_config:
        config = _merge_configs(config, file_config)

    env_config = _load_env_vars()
    if env_config:
        config = _merge_configs(config, env_config)

    _validate_config(config)
    return config


def save_user_setting(key_path: List[str], value: Any) -> Path:
    """Persist one setting to the user config file, keeping the other keys.

    The file is created readable by its owner only.

    Returns:
        Path: The file written
    """
    path = user_config_path()
    stored: Dict[str, Any] = {}
    if path.exists():
        stored = _read_config_file(path)

    _set_nested(stored, key_path, value)

    path.parent.mkdir(parents=True, exist_ok=True)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        json.dump(stored, f, indent=2)
        f.write("\n")
    return path


def default_editor() -> str:
    return os.environ.get("VISUAL") or os.environ.get("EDITOR") or "vi"


def get_editor_command(config: Dict[str, Any], prompter) -> str:
    """Return the configured editor, asking for one and saving it if unset.

    Args:
        config: Loaded settings
        prompter: Source of interactive answers

    Returns:
        str: Editor command line (may hold arguments, e.g. "code --wait")
    """
    editor = config["editor"].get("command")
    if editor:
        return editor

    editor = prompter.ask_editor(default_editor()).strip()
    if not editor:
        raise ConfigError("An editor command is required for interactive selection")

    path = save_user_setting(["editor", "command"], editor)
    info(f"Saved editor '{editor}' to {path}")
    config["editor"]["command"] = editor
    return editor
