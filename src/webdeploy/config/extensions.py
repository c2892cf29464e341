"""Chainable setters for deploy settings.

Every function takes the settings instance first, assigns one field and
returns the same instance so calls can be chained.
"""

from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from .settings import DeploySettings, RemoteAgent, TraceLevel


class MissingSettingsError(ValueError):
    """Raised when a setter is called without a settings instance."""

    def __init__(self, argument: str = "settings"):
        super().__init__(f"Argument '{argument}' must not be None")
        self.argument = argument


def _assign(settings: "DeploySettings", field_name: str, value) -> "DeploySettings":
    if settings is None:
        raise MissingSettingsError("settings")

    setattr(settings, field_name, value)
    logger.debug(f"DeploySettings.{field_name} updated")
    return settings


def set_publish_url(settings: "DeploySettings", url: str) -> "DeploySettings":
    """Set the url to publish the package to."""
    return _assign(settings, "publish_url", url)


def use_agent_type(settings: "DeploySettings", agent_type: "RemoteAgent") -> "DeploySettings":
    """Set the type of remote agent to connect to."""
    return _assign(settings, "agent_type", agent_type)


def use_ntlm(settings: "DeploySettings", ntlm: bool = True) -> "DeploySettings":
    """Set whether NTLM authentication should be used."""
    return _assign(settings, "ntlm", ntlm)


def set_allow_untrusted(settings: "DeploySettings", untrusted: bool = True) -> "DeploySettings":
    """Set whether untrusted certificates are accepted."""
    return _assign(settings, "allow_untrusted", untrusted)


def use_computer_name(settings: "DeploySettings", name: str) -> "DeploySettings":
    """Set the computer name to publish to."""
    return _assign(settings, "computer_name", name)


def use_port(settings: "DeploySettings", port: int) -> "DeploySettings":
    """Set the remote port to connect on."""
    return _assign(settings, "port", port)


def use_site_name(settings: "DeploySettings", name: str) -> "DeploySettings":
    """Set the name of the website to publish.

    The site name shares the ``computer_name`` slot, so whichever of
    ``use_site_name`` and ``use_computer_name`` runs last wins.
    """
    return _assign(settings, "computer_name", name)


def use_username(settings: "DeploySettings", username: str) -> "DeploySettings":
    """Set the username to connect with."""
    return _assign(settings, "username", username)


def use_password(settings: "DeploySettings", password: str) -> "DeploySettings":
    """Set the password to connect with."""
    return _assign(settings, "password", password)


def set_trace_level(settings: "DeploySettings", level: "TraceLevel") -> "DeploySettings":
    """Set the trace level handed to the executor."""
    return _assign(settings, "trace_level", level)


def set_delete(settings: "DeploySettings", delete: bool = True) -> "DeploySettings":
    """Set whether files missing from the source are deleted remotely."""
    return _assign(settings, "delete", delete)


def set_what_if(settings: "DeploySettings", what_if: bool = True) -> "DeploySettings":
    """Set whether operations are only simulated (events still fire)."""
    return _assign(settings, "what_if", what_if)


def from_source_path(settings: "DeploySettings", path: str) -> "DeploySettings":
    """Set the path of the package to publish."""
    return _assign(settings, "source_path", path)


def to_destination_path(settings: "DeploySettings", path: str) -> "DeploySettings":
    """Set the path where the package should end up."""
    return _assign(settings, "destination_path", path)


__all__ = [
    "MissingSettingsError",
    "set_publish_url",
    "use_agent_type",
    "use_ntlm",
    "set_allow_untrusted",
    "use_computer_name",
    "use_port",
    "use_site_name",
    "use_username",
    "use_password",
    "set_trace_level",
    "set_delete",
    "set_what_if",
    "from_source_path",
    "to_destination_path",
]
