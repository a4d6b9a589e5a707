"""Tests for SiteConfig resolution"""

from config import SiteConfig


class TestDefaults:
    def test_unset_keys_resolve_to_defaults(self, stub_config):
        config = SiteConfig.from_pulumi_config(stub_config())
        assert config == SiteConfig(
            path="./www",
            index_document="index.html",
            error_document="error.html",
        )

    def test_empty_value_resolves_to_default(self, stub_config):
        config = SiteConfig.from_pulumi_config(stub_config({"path": ""}))
        assert config.path == "./www"


class TestOverrides:
    def test_set_keys_returned_verbatim(self, stub_config):
        values = {
            "path": "../site/dist",
            "indexDocument": "home.htm",
            "errorDocument": "404.html",
        }
        config = SiteConfig.from_pulumi_config(stub_config(values))
        assert config.path == "../site/dist"
        assert config.index_document == "home.htm"
        assert config.error_document == "404.html"

    def test_partial_override_keeps_other_defaults(self, stub_config):
        config = SiteConfig.from_pulumi_config(stub_config({"errorDocument": "oops.html"}))
        assert config.error_document == "oops.html"
        assert config.path == "./www"
        assert config.index_document == "index.html"

    def test_value_with_whitespace_not_trimmed(self, stub_config):
        config = SiteConfig.from_pulumi_config(stub_config({"indexDocument": " index.html"}))
        assert config.index_document == " index.html"
