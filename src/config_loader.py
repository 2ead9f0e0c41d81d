"""Configuration loader for the SkyCMS Tailwind distribution builder."""

import copy
import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv


DEFAULT_CONFIG: Dict[str, Any] = {
    "project_root": ".",
    "sources": {
        "runtime": "tailwind.js",
        "config": "tailwind-config.js",
    },
    "output": {
        "dir": "dist/skycms",
        "runtime": "tailwind-runtime.js",
        "config": "tailwind-config.js",
        "bundle": "tailwind-bundle.js",
        "readme": "README.md",
        "example": "example-template.html",
    },
    "minify": {
        "dead_code": True,
        "drop_console": False,
        "drop_debugger": True,
        "mangle": False,
    },
    "logging": {
        "level": "INFO",
        "file": "logs/skycms-build.log",
        "rotation": "1 week",
        "retention": "1 month",
    },
}


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML file merged over the built-in defaults.

    Args:
        config_path: Path to config file. If None, uses default locations
            and falls back to the defaults when none exists.

    Returns:
        Dictionary with configuration values.
    """
    # Load environment variables first
    load_dotenv()

    if config_path is not None and not Path(config_path).exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    if config_path is None:
        # Check common locations
        locations = [
            "config.yaml",
            "config.yml",
            "../config.yaml",
            "../config.yml",
        ]
        for loc in locations:
            if Path(loc).exists():
                config_path = loc
                break

    config = copy.deepcopy(DEFAULT_CONFIG)
    if config_path is None:
        return config

    with open(config_path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"Configuration root must be a mapping: {config_path}")

    # Substitute environment variables
    loaded = _substitute_env_vars(loaded)

    return _deep_merge(config, loaded)


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def _substitute_env_vars(obj: Any) -> Any:
    """Recursively substitute environment variables in config.

    Supports syntax: ${VAR_NAME} or ${VAR_NAME:default_value}
    """
    if isinstance(obj, dict):
        return {k: _substitute_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_substitute_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return _substitute_env_string(obj)
    else:
        return obj


def _substitute_env_string(value: str) -> str:
    """Substitute environment variables in a string."""
    pattern = r'\$\{([^}]+)\}'

    def replace(match):
        var_expr = match.group(1)
        if ':' in var_expr:
            var_name, default = var_expr.split(':', 1)
            return os.getenv(var_name, default)
        else:
            return os.getenv(var_expr, match.group(0))

    return re.sub(pattern, replace, value)


def get_sources_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Get source file configuration."""
    return config.get("sources", {})


def get_output_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Get output file configuration."""
    return config.get("output", {})


def get_minify_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Get minifier configuration."""
    return config.get("minify", {})


def resolve_project_root(config: Dict[str, Any]) -> Path:
    """Resolve the directory that source and output paths are relative to."""
    return Path(str(config.get("project_root") or ".")).resolve()


def ensure_directories(config: Dict[str, Any]):
    """Ensure all required directories exist."""
    # Log directory
    log_path = config.get("logging", {}).get("file", "logs/skycms-build.log")
    Path(log_path).parent.mkdir(parents=True, exist_ok=True)
