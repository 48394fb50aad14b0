from __future__ import annotations

import pydantic
import pytest

from marathon_deployer.infrastructure import config as config_module
from marathon_deployer.infrastructure.config import DeployOptions, default_user, load_config
from marathon_deployer.shared.infrastructure_exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path) -> None:
    monkeypatch.chdir(tmp_path)
    for key in ("API_VERSION", "USER", "TASK_FILE", "IMAGE", "TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(f"MARATHON_{key}", raising=False)


def test_defaults() -> None:
    config = load_config()

    assert config.options.api_version == 2
    assert config.options.task_file == "marathon.json"
    assert config.options.image == ""
    assert config.options.delete_image_file is False
    assert config.options.user
    assert config.options.hostname
    assert config.log_level == "INFO"


def test_environment_values_are_read(monkeypatch) -> None:
    monkeypatch.setenv("MARATHON_API_VERSION", "3")
    monkeypatch.setenv("MARATHON_USER", "deployer")
    monkeypatch.setenv("MARATHON_IMAGE", "registry/app:1.2")

    options = load_config().options

    assert (options.api_version, options.user, options.image) == (3, "deployer", "registry/app:1.2")


def test_overrides_win_and_none_is_ignored(monkeypatch) -> None:
    monkeypatch.setenv("MARATHON_USER", "deployer")

    config = load_config(user="bob", task_file=None, log_level="debug")

    assert config.options.user == "bob"
    assert config.options.task_file == "marathon.json"
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize(
    "overrides",
    [{"api_version": 0}, {"log_level": "LOUD"}, {"timeout": -1}],
)
def test_invalid_values_raise_configuration_error(overrides) -> None:
    with pytest.raises(ConfigurationError):
        load_config(**overrides)


def test_options_are_immutable() -> None:
    options = DeployOptions(user="alice")

    with pytest.raises(pydantic.ValidationError):
        options.user = "mallory"


@pytest.mark.parametrize("error", [OSError("no tty"), KeyError("LOGNAME")])
def test_default_user_falls_back_when_unknown(monkeypatch, error) -> None:
    def fail():
        raise error

    monkeypatch.setattr(config_module.getpass, "getuser", fail)

    assert default_user() == "unknown"


def test_default_user_propagates_unexpected_errors(monkeypatch) -> None:
    def fail():
        raise RuntimeError("boom")

    monkeypatch.setattr(config_module.getpass, "getuser", fail)

    with pytest.raises(RuntimeError):
        default_user()
