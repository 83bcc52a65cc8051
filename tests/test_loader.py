from pathlib import Path

import pytest

from serverless_openapi.errors import ConfigError
from serverless_openapi.generator import DefinitionGenerator
from serverless_openapi.loader import load_config_file

FIXTURES = Path(__file__).parent / "fixtures"


class TestLoadConfigFile:
    def test_petstore_yaml(self):
        documentation, functions = load_config_file(FIXTURES / "petstore.yml")
        assert documentation["title"] == "Petstore"
        assert [f["_functionName"] for f in functions] == ["getPet", "createPet", "health"]

    def test_serverless_custom_documentation(self, tmp_path):
        f = tmp_path / "serverless.yml"
        f.write_text(
            "service: pets\n"
            "custom:\n"
            "  documentation:\n"
            "    title: Pets\n"
            "functions:\n"
            "  - name: listPets\n"
            "    events: []\n"
        )
        documentation, functions = load_config_file(f)
        assert documentation == {"title": "Pets"}
        assert functions == [{"name": "listPets", "events": []}]

    def test_json_file(self, tmp_path):
        f = tmp_path / "docs.json"
        f.write_text('{"documentation": {"title": "Pets"}, "functions": {"ping": null}}')
        documentation, functions = load_config_file(f)
        assert documentation == {"title": "Pets"}
        assert functions == [{"_functionName": "ping"}]

    def test_missing_documentation_section(self, tmp_path):
        f = tmp_path / "empty.yml"
        f.write_text("functions: {}\n")
        with pytest.raises(ConfigError, match="documentation"):
            load_config_file(f)

    def test_invalid_yaml(self, tmp_path):
        f = tmp_path / "bad.yml"
        f.write_text("documentation: [invalid\n")
        with pytest.raises(ConfigError, match="Cannot parse"):
            load_config_file(f)

    def test_top_level_must_be_mapping(self, tmp_path):
        f = tmp_path / "list.yml"
        f.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config_file(f)

    def test_unreadable_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config_file(tmp_path / "missing.yml")

    def test_numeric_version_is_kept_as_text(self, tmp_path):
        f = tmp_path / "serverless.yml"
        f.write_text(
            "documentation:\n"
            "  title: T\n"
            "  version: 1.0\n"
            "functions: {}\n"
        )
        documentation, functions = load_config_file(f)
        definition = DefinitionGenerator(documentation).generate(functions)
        assert definition["info"]["version"] == "1.0"
