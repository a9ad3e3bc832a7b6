"""
Tests for the tags payload inserted into every message of a source.
"""
import pytest

from logs_agent.config.integrations import build_tags_payload


class TestBuildTagsPayload:

    def test_all_fields(self):
        payload = build_tags_payload("env:prod", "nginx", "webserver")
        assert payload == b'[dd ddsource="nginx"][dd ddsourcecategory="webserver"][dd ddtags="env:prod"]'

    def test_empty_is_dash(self):
        assert build_tags_payload("", "", "") == b"-"

    @pytest.mark.parametrize("tags, source, source_category, expected", [
        ("", "nginx", "", b'[dd ddsource="nginx"]'),
        ("", "", "webserver", b'[dd ddsourcecategory="webserver"]'),
        ("env:prod,team:web", "", "", b'[dd ddtags="env:prod,team:web"]'),
        ("env:prod", "nginx", "", b'[dd ddsource="nginx"][dd ddtags="env:prod"]'),
        ("env:prod", "", "webserver", b'[dd ddsourcecategory="webserver"][dd ddtags="env:prod"]'),
    ])
    def test_partial_fields_keep_order(self, tags, source, source_category, expected):
        assert build_tags_payload(tags, source, source_category) == expected

    def test_returns_bytes(self):
        assert isinstance(build_tags_payload("a", "b", "c"), bytes)
