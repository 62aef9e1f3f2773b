"""Domain layer - settings and catalog models."""
from domain.config import load_settings, save_settings
from domain.models import BodyDefinition, HillDefinition, ScannerSettings

__all__ = [
    'BodyDefinition',
    'HillDefinition',
    'ScannerSettings',
    'load_settings',
    'save_settings',
]
