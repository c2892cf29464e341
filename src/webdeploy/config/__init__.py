"""Deploy settings model and chainable builder."""

from .extensions import MissingSettingsError
from .settings import DeploySettings, RemoteAgent, TraceLevel, load_settings, save_settings

__all__ = [
    "DeploySettings",
    "RemoteAgent",
    "TraceLevel",
    "MissingSettingsError",
    "load_settings",
    "save_settings",
]
