import time

import pytest
from src.modules.host import ConfiguredHost, CoreConfig, PluginConfig, ScannerConfig
from src.modules.scanner import ApiScanner, PluginNotFoundError

ROOT_URL = "http://host.example.com/"


@pytest.fixture
def config():
    return ScannerConfig(
        root_url=ROOT_URL,
        core=CoreConfig(packages=["tests.fixtures.sample_host"]),
        plugins=[
            PluginConfig(
                short_name="sample-plugin",
                display_name="Sample Plugin",
                version="2.1",
                package="tests.fixtures.sample_plugin"
            ),
            PluginConfig(short_name="disabled", package="tests.fixtures.sample_plugin", active=False),
            PluginConfig(short_name="empty", package="no_such_plugin_package"),
        ]
    )


@pytest.fixture
def scanner(config, module_introspector, logger, registry):
    return ApiScanner(ConfiguredHost(config), module_introspector, logger, registry, config)


class TestApiScanner:
    """Test cases for the scanner entry points."""

    def test_scan_core(self, scanner):
        document = scanner.scan_core()
        assert document.info.title == "Core REST API"
        assert document.info.version == "1.0.0"
        assert document.servers[0].url == ROOT_URL
        assert "/widget/name" in document.paths

    def test_scan_namespace(self, scanner):
        document = scanner.scan_namespace("sample-plugin")
        data = document.to_dict()
        assert data["info"] == {
            "title": "Sample Plugin REST API",
            "description": "REST API endpoints provided by the Sample Plugin plugin",
            "version": "2.1"
        }
        assert set(data["paths"]) == {
            "/sample-plugin/project-info-action/projects",
            "/sample-plugin/project-info-action/add-project",
            "/sample-plugin/project-detail/name",
            "/sample-plugin/project-detail/description",
        }
        projects = data["paths"]["/sample-plugin/project-info-action/projects"]["get"]
        schema = projects["responses"]["200"]["content"]["application/json"]["schema"]
        assert schema["type"] == "array"
        assert schema["items"]["properties"] == {"name": {"type": "string"}, "description": {"type": "string"}}
        assert "post" in data["paths"]["/sample-plugin/project-info-action/add-project"]

    def test_scan_unknown_namespace(self, scanner):
        with pytest.raises(PluginNotFoundError, match="nope"):
            scanner.scan_namespace("nope")

    def test_scans_are_independent(self, scanner):
        first = scanner.scan_core()
        second = scanner.scan_core()
        assert first is not second
        assert first.to_dict() == second.to_dict()

    def test_scan_installed_plugins(self, scanner):
        documents = scanner.scan_installed_plugins()
        assert set(documents) == {"sample-plugin", "empty"}
        assert documents["empty"].paths == {}

    def test_api_list_registers_versions(self, scanner, registry):
        api_list = scanner.api_list()
        assert api_list == {
            "core": f"{ROOT_URL}swagger-ui/core-api",
            "sample-plugin": f"{ROOT_URL}swagger-ui/plugin-api?plugin=sample-plugin",
            "empty": f"{ROOT_URL}swagger-ui/plugin-api?plugin=empty",
        }
        assert registry.get_versions("core") == {"1.0": f"{ROOT_URL}swagger-ui/rest/api/1.0"}
        assert registry.get_versions("sample-plugin") == {
            "1.0": f"{ROOT_URL}swagger-ui/plugin/sample-plugin/rest/api/1.0"
        }
        assert registry.plugins_with_apis() == ["empty", "sample-plugin"]

    def test_deadline_from_config(self, config, module_introspector, logger, registry, monkeypatch):
        config.scan_timeout = 5
        scanner = ApiScanner(ConfiguredHost(config), module_introspector, logger, registry, config)
        # First reading sets the deadline, later readings are past it
        clock = iter([100.0])
        monkeypatch.setattr(time, "monotonic", lambda: next(clock, 200.0))
        document = scanner.scan_core()
        assert document.partial is True
        assert document.paths == {}
        assert any("Scan deadline exceeded" in message for message in logger.messages("WARNING"))
