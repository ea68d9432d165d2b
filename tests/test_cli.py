# tests/test_cli.py
import pytest
import yaml
from typer.testing import CliRunner

from tagbridge.cli import app

runner = CliRunner()


# ---------------------------------------------------------
# Smoke test: CLI loads
# ---------------------------------------------------------
@pytest.mark.tier1
def test_cli_root_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "external parser" in result.output


@pytest.mark.tier1
def test_all_commands_help():
    for cmd in app.registered_commands:
        result = runner.invoke(app, [cmd.name, "--help"])
        assert result.exit_code == 0, f"Help failed for '{cmd.name}'"


@pytest.mark.tier1
def test_cli_version():
    from tagbridge import __version__

    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert f"tagbridge version {__version__}" in result.output


# ---------------------------------------------------------
# kinds
# ---------------------------------------------------------
@pytest.mark.tier1
def test_kinds_table():
    result = runner.invoke(app, ["kinds", "--kinds", "function:f:d,call:c:r:@"])
    assert result.exit_code == 0
    assert "function" in result.output
    assert "call" in result.output
    assert "reference" in result.output


@pytest.mark.tier1
def test_kinds_empty():
    result = runner.invoke(app, ["kinds"])
    assert result.exit_code == 0
    assert "No kinds configured." in result.output


@pytest.mark.tier1
def test_kinds_rejects_duplicates():
    result = runner.invoke(app, ["kinds", "--kinds", "a:a:d,a:b:d"])
    assert result.exit_code == 1
    assert "Error" in result.output


@pytest.mark.tier1
def test_kinds_from_config_file(tmp_path):
    config = tmp_path / "tagbridge.yaml"
    config.write_text(
        "kinds:\n"
        "  - name: section\n"
        "    letter: s\n",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["kinds", "--config", str(config)])
    assert result.exit_code == 0
    assert "section" in result.output


@pytest.mark.tier1
def test_invalid_config_file(tmp_path):
    config = tmp_path / "tagbridge.yaml"
    config.write_text("unknown_key: 1\n", encoding="utf-8")

    result = runner.invoke(app, ["kinds", "--config", str(config)])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


# ---------------------------------------------------------
# run
# ---------------------------------------------------------
@pytest.mark.tier2
def test_run_prints_xref_lines(tmp_path, tagger_command):
    source = tmp_path / "a.c"
    source.write_text("@function:main\n@call:main\n", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "run",
            str(source),
            "--parser",
            tagger_command(),
            "--kinds",
            "function:f:d,call:c:r:@",
            "--xformat",
            "%R %{Extern.encodedName} %n",
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["D main 1", "R @main 2"]


@pytest.mark.tier2
def test_run_disable_role(tmp_path, tagger_command):
    source = tmp_path / "a.c"
    source.write_text("@function:main\n@call:main\n", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "run",
            str(source),
            "-p",
            tagger_command(),
            "-k",
            "function:f:d,call:c:r",
            "-x",
            "%N %n",
            "--disable-role",
            "call.ref",
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["main 1"]


@pytest.mark.tier2
def test_run_settings_from_config_file(tmp_path, tagger_command):
    source = tmp_path / "a.c"
    source.write_text("@function:main\n", encoding="utf-8")
    config = tmp_path / "tagbridge.yaml"
    config.write_text(
        yaml.safe_dump({"parser": tagger_command(), "kinds": "function:f:d", "xformat": "%K %N"}),
        encoding="utf-8",
    )

    result = runner.invoke(app, ["run", str(source), "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["function main"]


@pytest.mark.tier1
def test_run_without_parser_fails(tmp_path):
    source = tmp_path / "a.c"
    source.write_text("int x;\n", encoding="utf-8")

    result = runner.invoke(app, ["run", str(source), "--kinds", "function:f:d"])

    assert result.exit_code == 1
    assert "No parser command" in result.output


@pytest.mark.tier1
def test_run_missing_file(tmp_path):
    result = runner.invoke(app, ["run", str(tmp_path / "missing.c"), "-p", "true"])
    assert result.exit_code != 0


@pytest.mark.tier2
def test_run_skips_file_with_invalid_unicode_tags(tmp_path, tagger_command):
    first = tmp_path / "a.c"
    first.write_text("int x;\n", encoding="utf-8")
    second = tmp_path / "b.c"
    second.write_text("@function:main\n", encoding="utf-8")
    canned = '[{"name": "a\\udc00", "kind": "function", "line": 1}]'

    result = runner.invoke(
        app,
        [
            "run",
            str(first),
            str(second),
            "-p",
            tagger_command({"a.c": canned}),
            "-k",
            "function:f:d",
            "-x",
            "%N %n",
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.stdout_bytes.decode("utf-8").splitlines() == ["main 1"]


@pytest.mark.tier2
def test_run_writes_non_utf8_source_bytes_unchanged(tmp_path, tagger_command):
    source = tmp_path / "a.c"
    source.write_bytes(b"caf\xe9 @function:cafe\n")

    result = runner.invoke(app, ["run", str(source), "-p", tagger_command(), "-k", "function:f:d", "-x", "%C"])

    assert result.exit_code == 0, result.output
    assert result.stdout_bytes == b"caf\xe9 @function:cafe\n"
