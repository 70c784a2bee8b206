"""Tests for Settings loading."""

import pytest

from evidence_search.config import Settings
from evidence_search.shared.exceptions import ConfigurationError


class TestSettingsFromEnv:
    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings == Settings()
        assert settings.openai_model == "gpt-4o"
        assert settings.provider_timeout == 10.0
        assert settings.enrichment_timeout == 30.0
        assert settings.result_limit == 5
        assert settings.enrichment_enabled is False

    def test_values_read(self):
        settings = Settings.from_env(
            {
                "SEMANTIC_SCHOLAR_API_KEY": "s2",
                "PUBMED_API_KEY": "ncbi",
                "NCBI_EMAIL": "me@example.com",
                "OPENAI_API_KEY": "sk-test",
                "OPENAI_MODEL": "gpt-4o-mini",
                "EVIDENCE_PROVIDER_TIMEOUT": "2.5",
                "EVIDENCE_RESULT_LIMIT": "8",
                "EVIDENCE_API_PORT": "9000",
                "LOG_LEVEL": "debug",
            }
        )
        assert settings.semantic_scholar_api_key == "s2"
        assert settings.pubmed_api_key == "ncbi"
        assert settings.ncbi_email == "me@example.com"
        assert settings.openai_model == "gpt-4o-mini"
        assert settings.provider_timeout == 2.5
        assert settings.result_limit == 8
        assert settings.api_port == 9000
        assert settings.log_level == "DEBUG"
        assert settings.enrichment_enabled is True

    def test_blank_values_are_unset(self):
        settings = Settings.from_env({"OPENAI_API_KEY": "  ", "EVIDENCE_RESULT_LIMIT": ""})
        assert settings.openai_api_key is None
        assert settings.result_limit == 5

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("EVIDENCE_PROVIDER_TIMEOUT", "soon"),
            ("EVIDENCE_RESULT_LIMIT", "2.5"),
            ("EVIDENCE_RESULT_LIMIT", "0"),
            ("EVIDENCE_ENRICHMENT_TIMEOUT", "-1"),
            ("EVIDENCE_PROVIDER_TIMEOUT", "nan"),
            ("EVIDENCE_PROVIDER_TIMEOUT", "inf"),
            ("EVIDENCE_ENRICHMENT_TIMEOUT", "-inf"),
        ],
    )
    def test_invalid_numbers(self, name, value):
        with pytest.raises(ConfigurationError):
            Settings.from_env({name: value})

    def test_invalid_number_names_variable(self):
        with pytest.raises(ConfigurationError, match="EVIDENCE_PROVIDER_TIMEOUT") as exc_info:
            Settings.from_env({"EVIDENCE_PROVIDER_TIMEOUT": "nan"})
        assert exc_info.value.to_dict()["input"] == "nan"
        assert exc_info.value.category == "config"

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("EVIDENCE_API_HOST", "0.0.0.0")
        assert Settings.from_env().api_host == "0.0.0.0"

    def test_to_dict_keys(self):
        assert set(Settings().to_dict()) == {
            "semantic_scholar_api_key",
            "pubmed_api_key",
            "ncbi_email",
            "openai_api_key",
            "openai_model",
            "provider_timeout",
            "enrichment_timeout",
            "result_limit",
            "api_host",
            "api_port",
            "log_level",
        }
