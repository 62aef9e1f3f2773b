import logging
import os
from pathlib import Path

import tomlkit

from domain.models import ScannerSettings
from shared.constants import APP_NAME, SETTINGS_FILE

logger = logging.getLogger(__name__)


def _user_config_dir() -> Path:
    """
    Determine the configuration directory.

    1) If <project_root>/configs exists, use it (run-from-repo setups).
    2) Otherwise fall back to %APPDATA%/ElevationScanner/configs, or
       ~/AppData/Roaming/ElevationScanner/configs when APPDATA is not set.
    """
    project_root = Path(__file__).resolve().parent.parent.parent
    local_configs = project_root / Path(SETTINGS_FILE).parent
    if local_configs.exists():
        return local_configs

    return (
        Path(os.getenv('APPDATA') or (Path.home() / 'AppData' / 'Roaming'))
        / APP_NAME
        / 'configs'
    )


def default_settings_path() -> Path:
    return _user_config_dir() / Path(SETTINGS_FILE).name


def load_settings(path: str | Path | None = None) -> ScannerSettings:
    """
    Load and validate scanner settings from TOML.

    A missing file yields the defaults; invalid values raise pydantic's
    ValidationError.
    """
    path = Path(path) if path is not None else default_settings_path()
    if not path.exists():
        logger.info('Settings file %s not found, using defaults', path)
        return ScannerSettings()
    data = tomlkit.parse(path.read_text(encoding='utf-8'))
    settings = ScannerSettings.model_validate(data.unwrap())
    logger.info('Loaded settings from %s', path)
    return settings


def save_settings(settings: ScannerSettings, path: str | Path | None = None) -> Path:
    """Write settings as TOML (no atomic replace, no backup)."""
    path = Path(path) if path is not None else default_settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tomlkit.dumps(settings.model_dump()), encoding='utf-8')
    return path
