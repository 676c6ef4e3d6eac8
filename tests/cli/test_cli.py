from typer.testing import CliRunner

from docprep.cli.main import app

runner = CliRunner()


def test_help_lists_commands():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "prepare" in result.stdout
    assert "list" in result.stdout
    assert "config" in result.stdout


def test_prepare_writes_docs(source_dir, target_dir):
    result = runner.invoke(app, ["prepare", "--source", str(source_dir), "--target", str(target_dir)])

    assert result.exit_code == 0, result.stdout
    assert "Prepared 2 document(s)" in result.stdout
    assert (target_dir / "README.md").read_text(encoding="utf-8").startswith("---\nid: index\n")


def test_prepare_reads_env(source_dir, target_dir, monkeypatch):
    monkeypatch.setenv("DOCPREP_SOURCE_DIR", str(source_dir))
    monkeypatch.setenv("DOCPREP_TARGET_DIR", str(target_dir))

    result = runner.invoke(app, ["prepare"])

    assert result.exit_code == 0, result.stdout
    assert (target_dir / "10-design.md").exists()


def test_prepare_missing_source_exits_nonzero(tmp_path):
    result = runner.invoke(
        app, ["prepare", "--source", str(tmp_path / "missing"), "--target", str(tmp_path / "out")]
    )

    assert result.exit_code == 1
    assert "Source Missing" in result.stdout


def test_prepare_debug_reraises(tmp_path):
    result = runner.invoke(
        app,
        ["prepare", "--source", str(tmp_path / "missing"), "--target", str(tmp_path / "out"), "--debug"],
    )

    assert result.exit_code != 0
    assert result.exception is not None
    assert type(result.exception).__name__ == "SourceDirectoryNotFoundError"


def test_list_shows_positions(source_dir, tmp_path):
    result = runner.invoke(app, ["list", "--source", str(source_dir)])

    assert result.exit_code == 0, result.stdout
    assert "10-design" in result.stdout
    assert "Overview" in result.stdout
    assert not (tmp_path / "website").exists()


def test_config_shows_commit(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DOCPREP_COMMIT_SHA", "deadbeefcafe")

    result = runner.invoke(app, ["config"])

    assert result.exit_code == 0, result.stdout
    assert "deadbee" in result.stdout


def test_debug_level_shows_config_lookup(monkeypatch, tmp_path):
    (tmp_path / ".docprep.toml").write_text('source_dir = "docs"\n', encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DOCPREP_LOG_LEVEL", "DEBUG")

    result = runner.invoke(app, ["config"])

    assert result.exit_code == 0, result.stdout
    assert "Loading config from" in result.stdout


def test_info_level_hides_config_lookup(monkeypatch, tmp_path):
    (tmp_path / ".docprep.toml").write_text('source_dir = "docs"\n', encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DOCPREP_LOG_LEVEL", raising=False)

    result = runner.invoke(app, ["config"])

    assert result.exit_code == 0, result.stdout
    assert "Loading config from" not in result.stdout
