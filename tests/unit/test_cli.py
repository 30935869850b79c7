import json

import pytest
from click.testing import CliRunner
from src.main import cli

CONFIG = """
root_url: http://ci.example.com
core:
  packages:
    - tests.fixtures.sample_host
plugins:
  - short_name: sample-plugin
    package: tests.fixtures.sample_plugin
"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "restscope.yaml"
    path.write_text(CONFIG)
    return str(path)


def _invoke(runner, *args):
    return runner.invoke(cli, ["-o", "plain", "-l", "ERROR", *args])


class TestCli:
    """End-to-end tests of the command line."""

    def test_scan_core(self, runner, config_file):
        result = _invoke(runner, "-c", config_file, "scan", "core")
        assert result.exit_code == 0
        document = json.loads(result.output)
        assert document["openapi"] == "3.0.1"
        assert document["servers"][0]["url"] == "http://ci.example.com/"
        assert "/widget/name" in document["paths"]

    def test_root_url_override(self, runner, config_file):
        result = _invoke(runner, "-c", config_file, "--root-url", "http://other.example.com", "scan", "core")
        assert result.exit_code == 0
        assert json.loads(result.output)["servers"][0]["url"] == "http://other.example.com/"

    def test_scan_plugin_yaml(self, runner, config_file):
        result = _invoke(runner, "-c", config_file, "scan", "--format", "yaml", "plugin", "sample-plugin")
        assert result.exit_code == 0
        assert "/sample-plugin/project-detail/name:" in result.output

    def test_scan_unknown_plugin(self, runner, config_file):
        result = _invoke(runner, "-c", config_file, "scan", "plugin", "missing")
        assert result.exit_code == 1

    def test_scan_list(self, runner, config_file):
        result = _invoke(runner, "-c", config_file, "scan", "list")
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "core": "http://ci.example.com/swagger-ui/core-api",
            "sample-plugin": "http://ci.example.com/swagger-ui/plugin-api?plugin=sample-plugin",
        }

    def test_scan_versions(self, runner, config_file):
        result = _invoke(runner, "-c", config_file, "scan", "versions", "sample-plugin")
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "sample-plugin": {"1.0": "http://ci.example.com/swagger-ui/plugin/sample-plugin/rest/api/1.0"}
        }

    def test_invalid_config(self, runner, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("scan_timeout: 0\n")
        result = _invoke(runner, "-c", str(path), "scan", "core")
        assert result.exit_code == 2

    def test_missing_config_file(self, runner, tmp_path):
        result = _invoke(runner, "-c", str(tmp_path / "nope.yaml"), "scan", "core")
        assert result.exit_code == 2
