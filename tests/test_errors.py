from __future__ import annotations

import pickle

import pytest

from formatview import messages
from formatview.errors import ConfigurationError, LocalizedError, MessageContainer


def test_message_container_localizes():
    container = MessageContainer(messages.CONFIG_FILE_NOT_FOUND, {"path": "sitemap.json"})

    assert container.localize() == "Sitemap configuration 'sitemap.json' does not exist."
    assert container.localize("de") == "Die Sitemap-Konfiguration 'sitemap.json' existiert nicht."


def test_message_container_freezes_arguments():
    arguments = {"path": "a.json"}
    container = MessageContainer(messages.CONFIG_FILE_NOT_FOUND, arguments)
    arguments["path"] = "b.json"

    assert container.arguments["path"] == "a.json"
    with pytest.raises(TypeError):
        container.arguments["path"] = "c.json"  # type: ignore[index]


def test_message_container_requires_key():
    with pytest.raises(ValueError):
        MessageContainer("")


def test_configuration_error_carries_container_and_cause():
    cause = OSError("boom")
    container = MessageContainer(messages.CONFIG_FILE_NOT_FOUND, {"path": "x.json"})
    error = ConfigurationError(container, cause)

    assert isinstance(error, LocalizedError)
    assert isinstance(error, RuntimeError)
    assert error.container is container
    assert error.cause is cause
    assert error.__cause__ is cause
    assert str(error) == "Sitemap configuration 'x.json' does not exist."
    assert error.localized_message("de").startswith("Die Sitemap-Konfiguration")


def test_configuration_error_without_cause():
    error = ConfigurationError(MessageContainer(messages.CONFIG_FILE_NOT_FOUND, {"path": "x"}))
    assert error.cause is None


def test_create_exception_keeps_type():
    original = ConfigurationError(MessageContainer(messages.CONFIG_FILE_NOT_FOUND, {"path": "x"}))
    cause = ValueError("inner")
    replacement = original.create_exception(
        MessageContainer(messages.CONFIG_INVALID_SCHEMA, {"path": "x", "errors": ["a", "b"]}), cause
    )

    assert type(replacement) is ConfigurationError
    assert replacement.cause is cause
    assert str(replacement) == "Sitemap configuration 'x' is invalid: a, b"


def test_message_container_is_hashable_with_list_arguments():
    container = MessageContainer(messages.CONFIG_INVALID_SCHEMA, {"path": "x", "errors": ["a"]})
    same = MessageContainer(messages.CONFIG_INVALID_SCHEMA, {"path": "x", "errors": ["a"]})

    assert hash(container) == hash(same)
    assert len({container, same}) == 1


def test_message_container_survives_pickling():
    container = MessageContainer(messages.CONFIG_FILE_NOT_FOUND, {"path": "x.json"})
    restored = pickle.loads(pickle.dumps(container))

    assert restored == container
    assert restored.localize("de") == container.localize("de")


def test_configuration_error_survives_pickling():
    cause = OSError("boom")
    error = ConfigurationError(MessageContainer(messages.CONFIG_FILE_NOT_FOUND, {"path": "x.json"}), cause)
    restored = pickle.loads(pickle.dumps(error))

    assert type(restored) is ConfigurationError
    assert restored.container == error.container
    assert str(restored) == str(error)
    assert isinstance(restored.cause, OSError)
    assert restored.cause.args == ("boom",)
