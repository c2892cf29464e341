"""Deploy settings model and persistence."""

import json
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Dict, Any

from dotenv import find_dotenv, load_dotenv
from loguru import logger

from . import extensions


PASSWORD_MASK = "********"
ENV_PREFIX = "WEBDEPLOY_"
_TRUTHY = {"1", "true", "yes", "on"}


class _CaseInsensitiveEnum(str, Enum):
    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None


class RemoteAgent(_CaseInsensitiveEnum):
    """Remote agent used to reach the publish target."""
    WMSVC = "wmsvc"
    MSDEPSVC = "msdepsvc"

    @property
    def default_port(self) -> int:
        return 8172 if self is RemoteAgent.WMSVC else 80


class TraceLevel(_CaseInsensitiveEnum):
    """Logging verbosity passed to the deployment executor."""
    OFF = "off"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    VERBOSE = "verbose"

    @property
    def log_level(self) -> Optional[str]:
        """Matching loguru level name, None when tracing is off."""
        return {
            TraceLevel.OFF: None,
            TraceLevel.ERROR: "ERROR",
            TraceLevel.WARNING: "WARNING",
            TraceLevel.INFO: "INFO",
            TraceLevel.VERBOSE: "DEBUG",
        }[self]


@dataclass
class DeploySettings:
    """Settings describing how and where a package is published."""
    publish_url: Optional[str] = None
    agent_type: RemoteAgent = RemoteAgent.WMSVC
    ntlm: bool = False
    allow_untrusted: bool = False
    computer_name: Optional[str] = None
    port: Optional[int] = None
    username: Optional[str] = None
    password: Optional[str] = None
    trace_level: TraceLevel = TraceLevel.OFF
    delete: bool = False
    what_if: bool = False
    source_path: Optional[str] = None
    destination_path: Optional[str] = None

    # Chainable setters, see ``extensions`` for the function forms.
    def set_publish_url(self, url: str) -> "DeploySettings":
        return extensions.set_publish_url(self, url)

    def use_agent_type(self, agent_type: RemoteAgent) -> "DeploySettings":
        return extensions.use_agent_type(self, agent_type)

    def use_ntlm(self, ntlm: bool = True) -> "DeploySettings":
        return extensions.use_ntlm(self, ntlm)

    def set_allow_untrusted(self, untrusted: bool = True) -> "DeploySettings":
        return extensions.set_allow_untrusted(self, untrusted)

    def use_computer_name(self, name: str) -> "DeploySettings":
        return extensions.use_computer_name(self, name)

    def use_port(self, port: int) -> "DeploySettings":
        return extensions.use_port(self, port)

    def use_site_name(self, name: str) -> "DeploySettings":
        return extensions.use_site_name(self, name)

    def use_username(self, username: str) -> "DeploySettings":
        return extensions.use_username(self, username)

    def use_password(self, password: str) -> "DeploySettings":
        return extensions.use_password(self, password)

    def set_trace_level(self, level: TraceLevel) -> "DeploySettings":
        return extensions.set_trace_level(self, level)

    def set_delete(self, delete: bool = True) -> "DeploySettings":
        return extensions.set_delete(self, delete)

    def set_what_if(self, what_if: bool = True) -> "DeploySettings":
        return extensions.set_what_if(self, what_if)

    def from_source_path(self, path: str) -> "DeploySettings":
        return extensions.from_source_path(self, path)

    def to_destination_path(self, path: str) -> "DeploySettings":
        return extensions.to_destination_path(self, path)

    def to_dict(self, mask_password: bool = False) -> Dict[str, Any]:
        """Convert settings to a JSON-friendly dictionary."""
        password = self.password
        if mask_password and password:
            password = PASSWORD_MASK

        return {
            "publish_url": self.publish_url,
            "agent_type": getattr(self.agent_type, "value", self.agent_type),
            "ntlm": self.ntlm,
            "allow_untrusted": self.allow_untrusted,
            "computer_name": self.computer_name,
            "port": self.port,
            "username": self.username,
            "password": password,
            "trace_level": getattr(self.trace_level, "value", self.trace_level),
            "delete": self.delete,
            "what_if": self.what_if,
            "source_path": self.source_path,
            "destination_path": self.destination_path,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DeploySettings":
        """Create settings from a dictionary, missing keys keep their defaults."""
        defaults = cls()
        return cls(
            publish_url=data.get("publish_url", defaults.publish_url),
            agent_type=RemoteAgent(data.get("agent_type", defaults.agent_type)),
            ntlm=data.get("ntlm", defaults.ntlm),
            allow_untrusted=data.get("allow_untrusted", defaults.allow_untrusted),
            computer_name=data.get("computer_name", defaults.computer_name),
            port=data.get("port", defaults.port),
            username=data.get("username", defaults.username),
            password=data.get("password", defaults.password),
            trace_level=TraceLevel(data.get("trace_level", defaults.trace_level)),
            delete=data.get("delete", defaults.delete),
            what_if=data.get("what_if", defaults.what_if),
            source_path=data.get("source_path", defaults.source_path),
            destination_path=data.get("destination_path", defaults.destination_path),
        )


def _env_flag(value: str) -> bool:
    return value.strip().lower() in _TRUTHY


def _apply_environment(settings: DeploySettings) -> DeploySettings:
    """Apply WEBDEPLOY_* overrides through the chainable setters."""
    overrides = [
        ("PUBLISH_URL", extensions.set_publish_url, str),
        ("AGENT_TYPE", extensions.use_agent_type, RemoteAgent),
        ("NTLM", extensions.use_ntlm, _env_flag),
        ("ALLOW_UNTRUSTED", extensions.set_allow_untrusted, _env_flag),
        ("COMPUTER_NAME", extensions.use_computer_name, str),
        ("PORT", extensions.use_port, int),
        ("USERNAME", extensions.use_username, str),
        ("PASSWORD", extensions.use_password, str),
        ("TRACE_LEVEL", extensions.set_trace_level, TraceLevel),
        ("DELETE", extensions.set_delete, _env_flag),
        ("WHAT_IF", extensions.set_what_if, _env_flag),
        ("SOURCE_PATH", extensions.from_source_path, str),
        ("DESTINATION_PATH", extensions.to_destination_path, str),
    ]

    for suffix, setter, convert in overrides:
        value = os.getenv(ENV_PREFIX + suffix)
        if value:
            logger.debug(f"Applying {ENV_PREFIX}{suffix} from environment")
            setter(settings, convert(value))

    return settings


def load_settings(config_file: Optional[str] = None) -> DeploySettings:
    """Load settings from file and environment variables."""
    # Load environment variables from the working directory's .env
    load_dotenv(find_dotenv(usecwd=True))

    settings = DeploySettings()

    if config_file and Path(config_file).exists():
        with open(config_file, 'r') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a JSON object: {config_file}")
        settings = DeploySettings.from_dict(data)
        logger.info(f"Loaded deploy settings from {config_file}")
    elif config_file:
        logger.warning(f"Config file not found, using defaults: {config_file}")

    return _apply_environment(settings)


def save_settings(settings: DeploySettings, config_file: str, mask_password: bool = False) -> None:
    """Save settings to file."""
    config_path = Path(config_file)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w') as f:
        json.dump(settings.to_dict(mask_password=mask_password), f, indent=2)

    logger.info(f"Saved deploy settings to {config_path}")
