"""Tests for the command line interface."""

import json

from typer.testing import CliRunner

from pom_scope.cli.main import app

runner = CliRunner()


class TestExtractCommand:
    """Test the extract command."""

    def test_extract_project(self, maven_project):
        result = runner.invoke(app, ["extract", str(maven_project)])

        assert result.exit_code == 0
        assert "Found 2 descriptor files" in result.stdout
        assert "com.example:lib" in result.stdout
        assert "Dependencies: 4" in result.stdout

    def test_extract_to_json(self, maven_project, tmp_path):
        output = tmp_path / "result.json"
        result = runner.invoke(app, ["extract", str(maven_project), "--output", str(output)])

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        files = {pkg["packageFile"]: pkg for pkg in data["packageFiles"]}
        assert set(files) == {"child/pom.xml", "parent/pom.xml"}
        assert files["child/pom.xml"]["parent"] == "parent/pom.xml"
        lib = [dep for dep in files["parent/pom.xml"]["deps"] if dep["depName"] == "com.example:lib"]
        assert lib[0]["currentValue"] == "2.0"

    def test_custom_registry(self, maven_project, tmp_path):
        output = tmp_path / "result.json"
        result = runner.invoke(app, [
            "extract", str(maven_project),
            "--registry", "https://mirror.example.org/maven2",
            "-o", str(output),
        ])

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        for pkg in data["packageFiles"]:
            for dep in pkg["deps"]:
                assert dep["registryUrls"][0] == "https://mirror.example.org/maven2"

    def test_missing_path(self, tmp_path):
        result = runner.invoke(app, ["extract", str(tmp_path / "missing")])

        assert result.exit_code == 1
        assert "Path does not exist" in result.stdout

    def test_no_descriptors(self, tmp_path):
        result = runner.invoke(app, ["extract", str(tmp_path)])

        assert result.exit_code == 0
        assert "No pom.xml files found" in result.stdout

    def test_invalid_concurrency(self, maven_project):
        result = runner.invoke(app, ["extract", str(maven_project), "--concurrency", "0"])

        assert result.exit_code == 1
        assert "max_concurrent" in result.stdout


def test_info():
    result = runner.invoke(app, ["info"])

    assert result.exit_code == 0
    assert "PomScope" in result.stdout
    assert "Default registry:" in result.stdout
