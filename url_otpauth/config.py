import logging
import os

from .utils.file_io import read_json

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "URL_OTPAUTH_SETTINGS"

DEFAULT_SETTINGS = {
    "strict_issuer": False,
    "log_level": "WARNING",
}


def default_settings_path():
    """Settings file location, overridable through URL_OTPAUTH_SETTINGS"""
    override = os.environ.get(SETTINGS_ENV_VAR)
    if override:
        return override
    return os.path.join(os.path.expanduser('~'), '.url_otpauth', 'settings.json')


def load_settings(path=None):
    """Load settings, filling in defaults for missing keys

    Args:
        path (str, optional): Settings file. Defaults to default_settings_path().

    Returns:
        dict: The merged settings. Keys unknown to this version are kept.
    """
    settings_path = path or default_settings_path()
    settings = dict(DEFAULT_SETTINGS)
    if os.path.exists(settings_path):
        settings.update(read_json(settings_path))
    else:
        logger.debug(f"No settings file at {settings_path}, using defaults")
    return settings
