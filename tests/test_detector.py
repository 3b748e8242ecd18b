"""Tests for content-based format detection."""
import pytest

from core import ConfigFormat, detect_format


class TestDetectFormat:
    @pytest.mark.parametrize("content", [
        '{"k":1}',
        '  { "nested": { "key": 1 } }  ',
        "[1, 2, 3]",
    ])
    def test_json(self, content):
        assert detect_format(content) == ConfigFormat.JSON

    @pytest.mark.parametrize("content", [
        "key: value",
        "database:\n  host: localhost",
    ])
    def test_yaml(self, content):
        assert detect_format(content) == ConfigFormat.YAML

    @pytest.mark.parametrize("content", [
        "<a/>",
        '<?xml version="1.0"?><root/>',
        "<config><key>value</key></config>",
    ])
    def test_xml(self, content):
        assert detect_format(content) == ConfigFormat.XML

    def test_xml_declaration_anywhere_wins_over_yaml(self):
        assert detect_format("title: x\n# <?XML version") == ConfigFormat.XML

    def test_valid_toml_is_toml(self):
        assert detect_format('[s]\nk = "v"') == ConfigFormat.TOML
        assert detect_format('[database]\nhost = "localhost"\nport = 5432') == ConfigFormat.TOML

    def test_sections_rejected_by_toml_are_ini(self):
        assert detect_format("[client]\nhost = localhost") == ConfigFormat.INI

    def test_invalid_json_array_falls_through_to_ini(self):
        # Starts with "[" but is not JSON; TOML rejects the bare value too
        assert detect_format("[section]\nkey = some value") == ConfigFormat.INI

    @pytest.mark.parametrize("content", [
        "server.port=8080",
        "db.url = jdbc:mysql://localhost",
        "# comment\napp.name = demo\napp.debug = false",
    ])
    def test_properties(self, content):
        assert detect_format(content) == ConfigFormat.PROPERTIES

    def test_dotted_keys_under_a_section_are_not_properties(self):
        assert detect_format("[s]\nserver.port=8080") is None

    @pytest.mark.parametrize("content", ["", "   ", "\n\t\n"])
    def test_blank_content(self, content):
        assert detect_format(content) is None

    def test_undetectable(self):
        assert detect_format("not json and not anything else @#$") is None

    def test_unterminated_json_is_not_json(self):
        assert detect_format('{"a": 1') is None

    @pytest.mark.parametrize("content", [
        '{"a": NaN}',
        "[1, Infinity]",
        '{"a": -Infinity}',
    ])
    def test_non_finite_literals_are_not_json(self, content):
        assert detect_format(content) is None

    def test_deterministic(self):
        content = "[s]\nk = v"
        assert detect_format(content) == detect_format(content)
