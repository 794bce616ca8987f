from datetime import datetime, timezone

import pytest

from aap_provider.core import config_validation
from aap_provider.core.config import Settings


@pytest.fixture(autouse=True)
def restore_config_validation(monkeypatch):
    monkeypatch.setattr(config_validation, "settings", Settings(), raising=False)
    monkeypatch.setattr(
        config_validation,
        "set_config_validation_result",
        lambda result: None,
        raising=False,
    )
    monkeypatch.setattr(
        config_validation,
        "get_config_validation_result",
        lambda: None,
        raising=False,
    )
    yield


def _messages(issues):
    return {issue.message for issue in issues}


def test_run_config_checks_requires_host():
    # Defaults leave the controller URL unset, which should surface an error
    result = config_validation.run_config_checks(force=True)

    assert result.has_errors
    assert any("AAP_HOST" in message for message in _messages(result.errors))
    assert any("credentials" in message for message in _messages(result.warnings))


def test_run_config_checks_clean_configuration(monkeypatch):
    custom_settings = Settings(
        aap_host="https://controller.example.com",
        aap_username="admin",
        aap_password="secret",
    )
    monkeypatch.setattr(config_validation, "settings", custom_settings, raising=False)

    result = config_validation.run_config_checks(force=True)

    assert not result.has_errors
    assert not result.has_warnings


def test_run_config_checks_flags_partial_credentials(monkeypatch):
    custom_settings = Settings(aap_host="https://controller.example.com", aap_password="secret")
    monkeypatch.setattr(config_validation, "settings", custom_settings, raising=False)

    result = config_validation.run_config_checks(force=True)

    assert any("AAP_USERNAME is missing" in message for message in _messages(result.errors))


def test_run_config_checks_warns_on_insecure_transport(monkeypatch):
    custom_settings = Settings(
        aap_host="http://controller.example.com",
        aap_username="admin",
        aap_password="secret",
        aap_insecure_skip_verify=True,
    )
    monkeypatch.setattr(config_validation, "settings", custom_settings, raising=False)

    result = config_validation.run_config_checks(force=True)

    warnings = _messages(result.warnings)
    assert "AAP_HOST uses plain HTTP." in warnings
    assert "AAP_INSECURE_SKIP_VERIFY is enabled." in warnings
    assert not result.has_errors


def test_run_config_checks_rejects_non_positive_timeout(monkeypatch):
    custom_settings = Settings(
        aap_host="https://controller.example.com",
        aap_username="admin",
        aap_password="secret",
        aap_timeout_seconds=0,
    )
    monkeypatch.setattr(config_validation, "settings", custom_settings, raising=False)

    result = config_validation.run_config_checks(force=True)

    assert any("AAP_TIMEOUT_SECONDS" in message for message in _messages(result.errors))
    hints = {issue.hint for issue in result.errors if issue.hint}
    assert any("seconds" in hint for hint in hints)


def test_run_config_checks_returns_cached_result(monkeypatch):
    cached_result = config_validation.ConfigValidationResult(
        checked_at=datetime.now(timezone.utc)
    )

    def fake_get_cached():
        return cached_result

    def fail_if_called(_):
        raise AssertionError("set_config_validation_result should not be called when cached")

    monkeypatch.setattr(config_validation, "get_config_validation_result", fake_get_cached, raising=False)
    monkeypatch.setattr(config_validation, "set_config_validation_result", fail_if_called, raising=False)

    result = config_validation.run_config_checks()
    assert result is cached_result
