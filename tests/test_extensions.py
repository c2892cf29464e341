"""Tests for the chainable settings builder."""

import pytest

from webdeploy.config import DeploySettings, RemoteAgent, TraceLevel, MissingSettingsError
from webdeploy.config import extensions


SETTERS = [
    (extensions.set_publish_url, "publish_url", "https://deploy.example.com:8172/msdeploy.axd"),
    (extensions.use_agent_type, "agent_type", RemoteAgent.MSDEPSVC),
    (extensions.use_ntlm, "ntlm", True),
    (extensions.set_allow_untrusted, "allow_untrusted", True),
    (extensions.use_computer_name, "computer_name", "web01"),
    (extensions.use_port, "port", 8080),
    (extensions.use_site_name, "computer_name", "Default Web Site"),
    (extensions.use_username, "username", "deployer"),
    (extensions.use_password, "password", "s3cret"),
    (extensions.set_trace_level, "trace_level", TraceLevel.VERBOSE),
    (extensions.set_delete, "delete", True),
    (extensions.set_what_if, "what_if", True),
    (extensions.from_source_path, "source_path", "./build/site.zip"),
    (extensions.to_destination_path, "destination_path", "Default Web Site/app"),
]

BOOLEAN_SETTERS = [
    (extensions.use_ntlm, "ntlm"),
    (extensions.set_allow_untrusted, "allow_untrusted"),
    (extensions.set_delete, "delete"),
    (extensions.set_what_if, "what_if"),
]


@pytest.mark.parametrize("setter,field_name,value", SETTERS)
def test_setter_assigns_field_and_returns_same_instance(settings, setter, field_name, value):
    """Each setter stores the value untouched and returns its input."""
    result = setter(settings, value)

    assert result is settings
    assert getattr(settings, field_name) == value


@pytest.mark.parametrize("setter,field_name,value", SETTERS)
def test_setter_rejects_missing_settings(setter, field_name, value):
    """A None settings instance aborts the call."""
    with pytest.raises(MissingSettingsError) as exc_info:
        setter(None, value)

    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.argument == "settings"
    assert "settings" in str(exc_info.value)


@pytest.mark.parametrize("setter,field_name", BOOLEAN_SETTERS)
def test_boolean_setters_default_to_true(settings, setter, field_name):
    assert getattr(settings, field_name) is False
    setter(settings)
    assert getattr(settings, field_name) is True


@pytest.mark.parametrize("setter,field_name", BOOLEAN_SETTERS)
def test_boolean_setters_accept_false(setter, field_name):
    settings = DeploySettings()
    setattr(settings, field_name, True)

    setter(settings, False)

    assert getattr(settings, field_name) is False


def test_setter_leaves_other_fields_untouched(settings):
    before = settings.to_dict()

    extensions.use_port(settings, 21)

    after = settings.to_dict()
    assert after.pop("port") == 21
    before.pop("port")
    assert after == before


def test_values_are_not_transformed(settings):
    """Strings are stored verbatim, including surrounding whitespace."""
    extensions.use_username(settings, "  DOMAIN\\user  ")
    extensions.set_publish_url(settings, "")

    assert settings.username == "  DOMAIN\\user  "
    assert settings.publish_url == ""


def test_method_chain_example():
    """settings.use_port(21).use_ntlm().set_what_if(False)"""
    settings = DeploySettings(what_if=True)
    untouched = settings.to_dict()

    result = settings.use_port(21).use_ntlm().set_what_if(False)

    assert result is settings
    assert settings.port == 21
    assert settings.ntlm is True
    assert settings.what_if is False

    for key in ("port", "ntlm", "what_if"):
        untouched.pop(key)
    current = settings.to_dict()
    assert {k: current[k] for k in untouched} == untouched


def test_full_chain_applies_every_setter():
    settings = (
        DeploySettings()
        .set_publish_url("https://web01:8172/msdeploy.axd")
        .use_agent_type(RemoteAgent.MSDEPSVC)
        .use_ntlm()
        .set_allow_untrusted()
        .use_computer_name("web01")
        .use_port(443)
        .use_username("deployer")
        .use_password("s3cret")
        .set_trace_level(TraceLevel.INFO)
        .set_delete()
        .set_what_if()
        .from_source_path("site.zip")
        .to_destination_path("Default Web Site")
    )

    assert settings.to_dict() == {
        "publish_url": "https://web01:8172/msdeploy.axd",
        "agent_type": "msdepsvc",
        "ntlm": True,
        "allow_untrusted": True,
        "computer_name": "web01",
        "port": 443,
        "username": "deployer",
        "password": "s3cret",
        "trace_level": "info",
        "delete": True,
        "what_if": True,
        "source_path": "site.zip",
        "destination_path": "Default Web Site",
    }


def test_site_name_and_computer_name_share_a_slot(settings):
    """Whichever of the two runs last decides computer_name."""
    settings.use_computer_name("web01").use_site_name("Default Web Site")
    assert settings.computer_name == "Default Web Site"

    settings.use_site_name("Default Web Site").use_computer_name("web02")
    assert settings.computer_name == "web02"


def test_later_calls_override_earlier_ones(settings):
    settings.use_port(80).use_port(8172).set_delete().set_delete(False)

    assert settings.port == 8172
    assert settings.delete is False
