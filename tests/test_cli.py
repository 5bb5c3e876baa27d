import json

from typer.testing import CliRunner

from sigscan.cli import app

runner = CliRunner()


def test_app_has_extract_command():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "extract" in result.stdout


def test_app_has_languages_command():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "languages" in result.stdout


def test_extract_command_requires_files():
    result = runner.invoke(app, ["extract"])

    assert result.exit_code != 0


def test_extract_outputs_json(tmp_path):
    source = tmp_path / "service.py"
    source.write_text('class Service:\n    def run(self):\n        """Run it."""\n        pass\n')

    result = runner.invoke(app, ["extract", str(source), "--config-root", str(tmp_path)])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert len(data) == 1
    assert data[0]["path"] == str(source)
    sigs = data[0]["signatures"]
    assert [s["name"] for s in sigs] == ["Service", "run"]
    assert sigs[1]["is_method"] is True
    assert sigs[1]["docstring"] == "Run it."
    assert sigs[1]["parameters"] == ["self"]


def test_extract_multiple_files_with_workers(tmp_path):
    (tmp_path / "b.go").write_text("func B() {\n}\n")
    (tmp_path / "a.rs").write_text("fn a() {}\n")

    result = runner.invoke(app, [
        "extract",
        str(tmp_path / "b.go"),
        str(tmp_path / "a.rs"),
        "--workers", "2",
        "--config-root", str(tmp_path),
    ])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [entry["signatures"][0]["name"] for entry in data] == ["a", "B"]


def test_extract_missing_file(tmp_path):
    result = runner.invoke(app, ["extract", str(tmp_path / "nope.py")])

    assert result.exit_code == 1
    assert "File not found" in result.output


def test_extract_uses_config_aliases(tmp_path):
    (tmp_path / ".sigscan").write_text("extraction:\n  extension_aliases:\n    .es6: .js\n")
    source = tmp_path / "app.es6"
    source.write_text("function start() {\n}\n")

    result = runner.invoke(app, ["extract", str(source), "--config-root", str(tmp_path)])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [s["name"] for s in data[0]["signatures"]] == ["start"]


def test_languages_lists_extensions():
    result = runner.invoke(app, ["languages"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data[".rs"] == "Rust"
    assert data[".py"] == "Python"
    assert data[".kt"] == "Java/Kotlin/C#/Scala"


def test_version_flag():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert "sigscan version" in result.stdout
