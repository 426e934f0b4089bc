"""
Property-based tests for configuration loading and saving.
"""

import json
from pathlib import Path

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from namecheap_sdk.config import (
    PRODUCTION_ENDPOINT,
    SANDBOX_ENDPOINT,
    ClientConfig,
    CredentialsConfig,
    LoggingConfig,
    TransportConfig,
    load_config_from_env,
    load_config_from_file,
    save_config_to_file,
)
from namecheap_sdk.enums import LogLevel
from namecheap_sdk.exceptions import ConfigurationError
from namecheap_sdk.sdk import Namecheap, create_logger

from conftest import RecordingTransport


ENV_VARS = (
    "NAMECHEAP_API_USER",
    "NAMECHEAP_API_KEY",
    "NAMECHEAP_USERNAME",
    "NAMECHEAP_CLIENT_IP",
    "NAMECHEAP_SANDBOX",
    "NAMECHEAP_ENDPOINT",
    "NAMECHEAP_TIMEOUT",
    "NAMECHEAP_LOG",
    "NAMECHEAP_LOG_LEVEL",
)

word_strategy = st.text(
    alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyz0123456789"),
    min_size=1,
    max_size=20,
)


@st.composite
def client_config_strategy(draw) -> ClientConfig:
    """Generate valid ClientConfig objects."""
    return ClientConfig(
        credentials=CredentialsConfig(
            api_user=draw(word_strategy),
            api_key=draw(word_strategy),
            user_name=draw(st.one_of(st.none(), word_strategy)),
            client_ip=draw(st.sampled_from(["203.0.113.7", "198.51.100.1"])),
        ),
        transport=TransportConfig(
            timeout_seconds=draw(st.floats(min_value=0.5, max_value=300.0)),
            verify_tls=draw(st.booleans()),
            user_agent=draw(st.one_of(st.none(), word_strategy)),
        ),
        logging=LoggingConfig(
            enabled=draw(st.booleans()),
            level=draw(st.sampled_from(["debug", "info", "warn", "error"])),
            output_format=draw(st.sampled_from(["json", "text", "both"])),
        ),
        sandbox=draw(st.booleans()),
        endpoint=draw(st.one_of(st.none(), st.just("https://api.example.test/xml.response"))),
    )


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Clear NAMECHEAP_* variables and run from an empty directory."""
    for name in ENV_VARS:
        # setenv first so values loaded by python-dotenv are undone on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestConfigFileRoundTrip:
    """Tests for JSON file persistence."""

    @given(config=client_config_strategy())
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_round_trip_preserves_config(self, tmp_path: Path, config: ClientConfig) -> None:
        """
        *For any* valid ClientConfig, saving and loading SHALL produce an
        equal ClientConfig.
        """
        path = tmp_path / "nested" / "config.json"

        assert save_config_to_file(config, path)
        assert load_config_from_file(path) == config

    def test_missing_file_returns_none(self, tmp_path: Path) -> None:
        assert load_config_from_file(tmp_path / "absent.json") is None

    def test_invalid_json_returns_none(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")

        assert load_config_from_file(path) is None

    def test_partial_file_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"credentials": {"api_user": "u"}, "sandbox": True}), encoding="utf-8")

        config = load_config_from_file(path)

        assert config.credentials.api_user == "u"
        assert config.credentials.user_name is None
        assert config.transport.timeout_seconds == 30.0
        assert config.resolved_endpoint() == SANDBOX_ENDPOINT


class TestEndpointResolution:
    """Tests for resolved_endpoint()."""

    def test_default_is_production(self) -> None:
        assert ClientConfig().resolved_endpoint() == PRODUCTION_ENDPOINT

    def test_explicit_endpoint_wins(self) -> None:
        config = ClientConfig(sandbox=True, endpoint="https://api.example.test/xml.response")
        assert config.resolved_endpoint() == "https://api.example.test/xml.response"


class TestEnvironmentConfig:
    """Tests for load_config_from_env()."""

    def test_reads_variables(self, clean_env) -> None:
        clean_env.setenv("NAMECHEAP_API_USER", "apiuser")
        clean_env.setenv("NAMECHEAP_API_KEY", " key ")
        clean_env.setenv("NAMECHEAP_CLIENT_IP", "203.0.113.7")
        clean_env.setenv("NAMECHEAP_SANDBOX", "true")
        clean_env.setenv("NAMECHEAP_TIMEOUT", "12.5")
        clean_env.setenv("NAMECHEAP_LOG", "1")
        clean_env.setenv("NAMECHEAP_LOG_LEVEL", "DEBUG")

        config = load_config_from_env()

        assert config.credentials.api_user == "apiuser"
        assert config.credentials.api_key == "key"
        assert config.credentials.user_name is None
        assert config.transport.timeout_seconds == 12.5
        assert config.logging.enabled
        assert config.logging.level == "debug"
        assert config.resolved_endpoint() == SANDBOX_ENDPOINT

    def test_defaults_without_variables(self, clean_env) -> None:
        config = load_config_from_env()

        assert config.credentials.api_user == ""
        assert not config.sandbox
        assert not config.logging.enabled
        assert config.resolved_endpoint() == PRODUCTION_ENDPOINT

    def test_env_file_loaded(self, clean_env, tmp_path: Path) -> None:
        env_file = tmp_path / "namecheap.env"
        env_file.write_text("NAMECHEAP_API_USER=fromfile\nNAMECHEAP_USERNAME=owner\n", encoding="utf-8")

        config = load_config_from_env(env_file)

        assert config.credentials.api_user == "fromfile"
        assert config.credentials.user_name == "owner"

    def test_environment_wins_over_env_file(self, clean_env, tmp_path: Path) -> None:
        env_file = tmp_path / "namecheap.env"
        env_file.write_text("NAMECHEAP_API_USER=fromfile\n", encoding="utf-8")
        clean_env.setenv("NAMECHEAP_API_USER", "fromenv")

        assert load_config_from_env(env_file).credentials.api_user == "fromenv"

    def test_invalid_timeout(self, clean_env) -> None:
        clean_env.setenv("NAMECHEAP_TIMEOUT", "soon")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config_from_env()

        assert exc_info.value.code == "invalid_timeout"

    @pytest.mark.parametrize("raw, expected", [
        ("WARNING", "warn"),
        ("warning", "warn"),
        ("Warn", "warn"),
        (" ERROR ", "error"),
    ])
    def test_log_level_normalized(self, clean_env, raw: str, expected: str) -> None:
        clean_env.setenv("NAMECHEAP_LOG", "1")
        clean_env.setenv("NAMECHEAP_LOG_LEVEL", raw)

        config = load_config_from_env()

        assert config.logging.level == expected
        assert create_logger(config).level is LogLevel(expected)
        Namecheap.from_config(config, transport=RecordingTransport()).close()

    def test_invalid_log_level(self, clean_env) -> None:
        clean_env.setenv("NAMECHEAP_LOG_LEVEL", "verbose")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config_from_env()

        assert exc_info.value.code == "invalid_log_level"


class TestFileValueNormalization:
    """Tests for values written by hand into config files."""

    def _write(self, tmp_path: Path, data: dict) -> Path:
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    @pytest.mark.parametrize("raw, expected", [("INFO", "info"), ("Warning", "warn"), ("debug", "debug")])
    def test_log_level_normalized(self, tmp_path: Path, raw: str, expected: str) -> None:
        path = self._write(tmp_path, {"logging": {"enabled": True, "level": raw, "output_format": "JSON"}})

        config = load_config_from_file(path)

        assert config.logging.level == expected
        assert config.logging.output_format == "json"
        assert create_logger(config).level is LogLevel(expected)

    @pytest.mark.parametrize("logging_data", [{"level": "verbose"}, {"output_format": "xml"}])
    def test_invalid_logging_rejected(self, tmp_path: Path, capsys, logging_data: dict) -> None:
        path = self._write(tmp_path, {"logging": logging_data})

        assert load_config_from_file(path) is None
        assert "Error loading config" in capsys.readouterr().err

    def test_string_booleans(self, tmp_path: Path) -> None:
        path = self._write(tmp_path, {
            "sandbox": "false",
            "transport": {"verify_tls": "false"},
            "logging": {"enabled": "true"},
        })

        config = load_config_from_file(path)

        assert config.sandbox is False
        assert config.transport.verify_tls is False
        assert config.logging.enabled is True
        assert config.resolved_endpoint() == PRODUCTION_ENDPOINT

    def test_unknown_logging_in_code_config(self) -> None:
        config = ClientConfig(logging=LoggingConfig(enabled=True, level="loud"))

        with pytest.raises(ConfigurationError) as exc_info:
            create_logger(config)

        assert exc_info.value.code == "invalid_logging"
