import pytest

from serverless_openapi.config import DefinitionConfig, SecurityDefinition, snapshot_config
from serverless_openapi.errors import ConfigError
from serverless_openapi.events import FunctionConfig, FunctionEvent, load_functions, normalize_event


class TestDefinitionConfig:
    def test_defaults(self):
        config = DefinitionConfig()
        assert config.title == ""
        assert config.description == ""
        assert config.version is None
        assert config.servers == []
        assert config.models == []

    def test_null_lists_become_empty(self):
        config = DefinitionConfig.model_validate({"models": None, "security": None, "servers": None})
        assert config.models == []
        assert config.security == []

    def test_ts_schema_alias(self):
        config = DefinitionConfig.model_validate(
            {"models": [{"name": "Pet", "tsSchema": {"filePath": "a.py", "typeName": "Pet"}}]}
        )
        assert config.models[0].type_schema.type_name == "Pet"

    def test_security_scheme_drops_authorizer_name(self):
        definition = SecurityDefinition.model_validate(
            {"name": "Auth", "type": "http", "scheme": "bearer", "authorizerName": "jwt"}
        )
        assert definition.authorizer_name == "jwt"
        assert definition.to_scheme() == {"name": "Auth", "type": "http", "scheme": "bearer"}


class TestSnapshotConfig:
    def test_snapshot_does_not_alias_caller_state(self):
        examples = {"fido": {"value": {"name": "Fido"}}}
        raw = {"models": [{"name": "Pet", "schema": {"type": "object"}, "examples": examples}]}

        snapshot = snapshot_config(raw)
        snapshot.models[0].examples["fido"]["value"]["name"] = "Rex"
        snapshot.models[0].schema_["type"] = "string"

        assert examples["fido"]["value"]["name"] == "Fido"
        assert raw["models"][0]["schema"] == {"type": "object"}

    def test_snapshot_of_model_instance_is_a_copy(self):
        config = DefinitionConfig.model_validate({"servers": [{"url": "https://a"}]})
        snapshot = snapshot_config(config)
        snapshot.servers[0]["url"] = "https://b"
        assert config.servers[0]["url"] == "https://a"

    def test_invalid_config(self):
        with pytest.raises(ConfigError, match="Invalid documentation config"):
            snapshot_config({"models": [{"schema": {}}]})


class TestEvents:
    def test_http_event(self):
        event = FunctionEvent.model_validate(
            {"http": {"path": "pets", "method": "GET", "authorizer": "auth", "documentation": {}}}
        )
        normalized = normalize_event(event)
        assert normalized.kind == "http"
        assert normalized.path == "pets"
        assert normalized.authorizer_name == "auth"
        assert normalized.documentation is not None

    def test_http_api_event_with_named_authorizer(self):
        event = FunctionEvent.model_validate(
            {"httpApi": {"path": "/pets", "method": "post", "authorizer": {"name": "jwt", "scopes": []}}}
        )
        normalized = normalize_event(event)
        assert normalized.kind == "httpApi"
        assert normalized.authorizer_name == "jwt"
        assert normalized.documentation is None

    def test_shorthand_http_event(self):
        normalized = normalize_event(FunctionEvent.model_validate({"http": "GET health"}))
        assert normalized.method == "GET"
        assert normalized.path == "health"

    def test_non_http_event(self):
        assert normalize_event(FunctionEvent.model_validate({"schedule": "rate(1 hour)"})) is None

    def test_function_name_prefers_internal_name(self):
        function = FunctionConfig.model_validate({"name": "svc-dev-getPet", "_functionName": "getPet"})
        assert function.name == "getPet"
        assert FunctionConfig.model_validate({"name": "getPet"}).name == "getPet"

    def test_load_functions_rejects_invalid(self):
        with pytest.raises(ConfigError):
            load_functions([{"name": "getPet", "events": "not-a-list"}])

    def test_function_name_is_optional(self):
        assert FunctionConfig.model_validate({"events": []}).name is None


class TestDefinitionConfigCoercion:
    def test_numeric_info_fields_become_strings(self):
        config = DefinitionConfig.model_validate({"title": 42, "version": 1})
        assert config.title == "42"
        assert config.version == "1"
