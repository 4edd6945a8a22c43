import json
import zipfile

from deploy_archive import cli


def test_cli_builds_archive(testdata, capsys):
    rc = cli.main([
        "--work-dir", str(testdata),
        "--app-path", "only-files",
        "--source", ".",
        "--output-name", "out.zip",
        "--ignore", "file1.txt",
        "--collapse-top-level-folder",
    ])
    assert rc == 0

    out = capsys.readouterr().out.strip()
    assert out == str(testdata / "only-files" / "out.zip")
    with zipfile.ZipFile(out) as zf:
        assert zf.namelist() == ["file2.txt", "file3.txt", "file4.txt"]


def test_cli_flags_override_config_file(testdata, tmp_path):
    config = tmp_path / "build.json"
    config.write_text(json.dumps({"sources": ["dir2"], "output_name": "from-file.zip"}))

    rc = cli.main([
        "--config", str(config),
        "--work-dir", str(testdata),
        "--app-path", "nested-dirs",
        "--output-name", "from-flag.zip",
    ])
    assert rc == 0
    assert (testdata / "nested-dirs" / "from-flag.zip").exists()
    assert not (testdata / "nested-dirs" / "from-file.zip").exists()


def test_cli_invalid_options_fail():
    assert cli.main(["--output-name", "out.zip"]) == 1


def test_cli_missing_config_file_fails(tmp_path):
    assert cli.main(["--config", str(tmp_path / "missing.json")]) == 1


def test_cli_conflict_fails(testdata):
    (testdata / "only-files" / "out.zip").write_bytes(b"old")
    rc = cli.main(["--work-dir", str(testdata), "--app-path", "only-files", "--source", ".", "--output-name", "out.zip"])
    assert rc == 1


def test_cli_describe(capsys):
    assert cli.main(["--describe"]) == 0
    doc = json.loads(capsys.readouterr().out)
    assert "collapse_top_level_folder" in doc["fields"]


def test_cli_invalid_log_level_fails(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    assert cli.main(["--source", ".", "--output-name", "out.zip"]) == 1


def test_cli_non_utf8_config_file_fails(tmp_path):
    config = tmp_path / "build.json"
    config.write_bytes(b'{"sources": ["\xff\xfe"], "output_name": "out.zip"}')
    assert cli.main(["--config", str(config)]) == 1
