"""Path utilities for the upbank home directory."""

from pathlib import Path


def get_upbank_home() -> Path:
    """Get the upbank home directory (~/.upbank), creating it if needed."""
    home = Path.home() / ".upbank"
    home.mkdir(parents=True, exist_ok=True)
    return home


def get_default_exports_dir() -> Path:
    exports_dir = get_upbank_home() / "exports"
    exports_dir.mkdir(parents=True, exist_ok=True)
    return exports_dir


def get_default_config_path() -> Path:
    return get_upbank_home() / "config.yml"
