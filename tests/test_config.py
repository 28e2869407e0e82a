# SPDX-License-Identifier: MIT
"""Tests for settings and source configuration models."""

import json

import pytest
from pydantic import ValidationError

from maplify.config import MaplifySettings
from maplify.errors import ConfigurationError
from maplify.sources import FieldSelector, SelectorSet, SourceConfig, SourceKind, load_source_configs


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("MAPLIFY_LOG_LEVEL", raising=False)
        monkeypatch.delenv("MAPLIFY_MIN_SCORE", raising=False)
        settings = MaplifySettings(_env_file=None)
        assert settings.http_timeout == 30.0
        assert settings.max_search_depth == 64
        assert settings.min_score == 0.0
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("MAPLIFY_HTTP_TIMEOUT", "5")
        monkeypatch.setenv("MAPLIFY_LOG_LEVEL", "debug")
        settings = MaplifySettings(_env_file=None)
        assert settings.http_timeout == 5.0
        assert settings.log_level == "DEBUG"

    def test_min_score_is_bounded(self):
        with pytest.raises(ValidationError):
            MaplifySettings(_env_file=None, min_score=1.5)

    def test_default_headers_use_user_agent(self):
        settings = MaplifySettings(_env_file=None, user_agent="custom/1.0")
        assert settings.default_headers["User-Agent"] == "custom/1.0"


class TestFieldSelector:
    """Test selector@attribute parsing."""

    def test_plain_selector(self):
        assert FieldSelector.parse("h3.title") == FieldSelector(selector="h3.title", attribute=None)

    def test_selector_with_attribute(self):
        assert FieldSelector.parse("a.title@href") == FieldSelector(selector="a.title", attribute="href")

    def test_only_first_attribute_is_used(self):
        assert FieldSelector.parse("a@href@title") == FieldSelector(selector="a", attribute="href")

    def test_trailing_at_has_no_attribute(self):
        assert FieldSelector.parse("a@").attribute is None


class TestSourceConfig:
    """Test source kinds and selector sets."""

    def test_kinds(self):
        assert SourceConfig(url="u", query="{ x }", variables={}).kind is SourceKind.GRAPHQL
        assert SourceConfig(url="u", variables={"a": 1}).kind is SourceKind.GRAPHQL
        assert SourceConfig(url="u", isRestAPI=True).kind is SourceKind.REST
        assert SourceConfig(url="u").kind is SourceKind.HTML

    def test_api_sources(self):
        assert SourceConfig(url="u", is_rest_api=True).is_api
        assert not SourceConfig(url="u").is_api

    def test_identifier_defaults_to_position(self):
        assert SourceConfig(url="u").identifier(0) == "source1"
        assert SourceConfig(url="u", name="anilist").identifier(0) == "anilist"

    def test_selector_fields_keep_declaration_order(self):
        selectors = SelectorSet.model_validate(
            {"mainSelector": ".item", "title": "h3", "url": "a@href", "image": "img@src"}
        )
        assert selectors.main_selector == ".item"
        assert list(selectors.fields()) == ["title", "url", "image"]
        assert selectors.fields()["image"] == FieldSelector(selector="img", attribute="src")

    def test_selector_values_must_be_strings(self):
        with pytest.raises(ValidationError):
            SelectorSet.model_validate({"mainSelector": ".item", "rank": 3})

    def test_string_variables_are_kept(self):
        config = SourceConfig(url="u", query="{ x }", variables='{"search": "x"}')
        assert config.variables == '{"search": "x"}'


class TestLoadSourceConfigs:
    """Test loading sources from JSON files."""

    def test_loads_sources_in_order(self, tmp_path):
        path = tmp_path / "sources.json"
        path.write_text(
            json.dumps(
                [
                    {"url": "https://graphql.example.org", "query": "{ x }", "variables": {"search": "x"}},
                    {"url": "https://example.org/?q=", "selectors": {"mainSelector": ".item", "title": "h3"}},
                ]
            )
        )
        configs = load_source_configs(path)
        assert [config.kind for config in configs] == [SourceKind.GRAPHQL, SourceKind.HTML]
        assert configs[1].selectors.title == "h3"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_source_configs(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "sources.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="not valid JSON"):
            load_source_configs(path)

    def test_must_be_a_list(self, tmp_path):
        path = tmp_path / "sources.json"
        path.write_text(json.dumps({"url": "x"}))
        with pytest.raises(ConfigurationError, match="JSON list"):
            load_source_configs(path)

    def test_invalid_source(self, tmp_path):
        path = tmp_path / "sources.json"
        path.write_text(json.dumps([{"name": "no url"}]))
        with pytest.raises(ConfigurationError, match="Source #1"):
            load_source_configs(path)
