import json

from typer.testing import CliRunner

from oneliner_cli.main import app

runner = CliRunner()

SOURCE = "a {\n  color: red;\n}\n"
FORMATTED = "a { color: red; }\n\n"


def _write(tmp_path, name="style.css", text=SOURCE):
    file_path = tmp_path / name
    file_path.write_text(text, encoding="utf-8")
    return file_path


def _no_config(tmp_path):
    return ["--config", str(tmp_path / "missing.toml")]


def test_cli_format_help():
    result = runner.invoke(app, ["format", "--help"])
    assert result.exit_code == 0
    assert "Format CSS files" in result.stdout


def test_cli_format_in_place(tmp_path):
    file_path = _write(tmp_path)

    result = runner.invoke(app, ["format", str(file_path), *_no_config(tmp_path)])
    assert result.exit_code == 0
    assert "Reformatted" in result.stdout
    assert file_path.read_text(encoding="utf-8") == FORMATTED


def test_cli_check(tmp_path):
    file_path = _write(tmp_path)

    result = runner.invoke(app, ["format", str(file_path), "--check", *_no_config(tmp_path)])
    assert result.exit_code == 1
    assert "Would reformat" in result.stdout
    assert file_path.read_text(encoding="utf-8") == SOURCE


def test_cli_check_clean_file(tmp_path):
    file_path = _write(tmp_path, text=FORMATTED)

    result = runner.invoke(app, ["format", str(file_path), "--check", *_no_config(tmp_path)])
    assert result.exit_code == 0


def test_cli_stdout(tmp_path):
    file_path = _write(tmp_path)

    result = runner.invoke(app, ["format", str(file_path), "--stdout", *_no_config(tmp_path)])
    assert result.exit_code == 0
    assert result.stdout == FORMATTED
    assert file_path.read_text(encoding="utf-8") == SOURCE


def test_cli_json_report(tmp_path):
    file_path = _write(tmp_path)

    result = runner.invoke(app, ["format", str(file_path), "--json", *_no_config(tmp_path)])
    assert result.exit_code == 0
    reports = json.loads(result.stdout)
    assert reports[0]["modified"] is True
    assert reports[0]["mode"] == "css"
    assert reports[0]["errors"] == []


def test_cli_max_line_length(tmp_path):
    file_path = _write(tmp_path)

    result = runner.invoke(
        app, ["format", str(file_path), "--stdout", "--no-tabs", "--max-line-length", "10", *_no_config(tmp_path)]
    )
    assert result.exit_code == 0
    assert result.stdout == SOURCE


def test_cli_config_file(tmp_path):
    file_path = _write(tmp_path)
    config = tmp_path / "config.toml"
    config.write_text("[tool.oneliner-css]\nmax-line-length = 10\nconvert-indentation = false\n")

    result = runner.invoke(app, ["format", str(file_path), "--stdout", "--config", str(config)])
    assert result.exit_code == 0
    assert result.stdout == SOURCE


def test_cli_forced_mode(tmp_path):
    file_path = _write(tmp_path, name="page.txt", text="<style>\n  a {\n    color: red;\n  }\n</style>\n")

    result = runner.invoke(app, ["format", str(file_path), "--mode", "html", "--stdout", *_no_config(tmp_path)])
    assert result.exit_code == 0
    assert result.stdout == "<style>\n  a { color: red; }\n\n</style>\n"


def test_cli_unsupported_file(tmp_path):
    file_path = _write(tmp_path, name="notes.txt")

    result = runner.invoke(app, ["format", str(file_path), *_no_config(tmp_path)])
    assert result.exit_code == 1
    assert "unsupported file type" in result.output


def test_cli_unknown_mode(tmp_path):
    file_path = _write(tmp_path)

    result = runner.invoke(app, ["format", str(file_path), "--mode", "scss", *_no_config(tmp_path)])
    assert result.exit_code == 1
    assert "Unknown mode" in result.output


def test_cli_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "oneliner-css" in result.stdout


def test_cli_length_guard_still_converts_tabs(tmp_path):
    file_path = _write(tmp_path)

    result = runner.invoke(
        app, ["format", str(file_path), "--stdout", "--max-line-length", "10", *_no_config(tmp_path)]
    )
    assert result.exit_code == 0
    assert result.stdout == "a {\n\tcolor: red;\n}\n"
