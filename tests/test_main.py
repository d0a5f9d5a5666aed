"""
Tests for the command-line interface.
"""

import json

from ifstack.main import main


def write(tmp_path, text):
    path = tmp_path / "input.txt"
    path.write_text(text)
    return str(path)


class TestMain:

    def test_trace_table(self, tmp_path, capsys):
        path = write(tmp_path, "IF 1\nshown\nELSE\nhidden\nENDIF\n")
        assert main([path]) == 0
        out = capsys.readouterr().out
        assert f'Parsing "{path}"' in out
        assert "line  source" in out
        assert "[1]" in out
        assert "[0]" in out

    def test_quiet_prints_only_output(self, tmp_path, capsys):
        path = write(tmp_path, "IF no\nhidden\nELSE\nshown\nENDIF\n")
        assert main([path, "--quiet"]) == 0
        assert capsys.readouterr().out.splitlines() == ["shown"]

    def test_errors_set_exit_status(self, tmp_path, capsys):
        path = write(tmp_path, "ENDIF\n")
        assert main([path]) == 1
        assert "ENDIF without preceding IF" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.txt")]) == 1
        assert "failed to open" in capsys.readouterr().out

    def test_strict(self, tmp_path, capsys):
        path = write(tmp_path, "ELSE\ntext\n")
        assert main([path, "--strict", "--quiet"]) == 1
        captured = capsys.readouterr()
        assert "ELSE without IF" in captured.err
        assert captured.out == ""

    def test_strict_prints_rows_before_error(self, tmp_path, capsys):
        """Rows handled before a strict-mode error are still shown."""
        path = write(tmp_path, "IF 1\nshown\nENDIF\nENDIF\nafter\n")
        assert main([path, "--strict"]) == 1
        captured = capsys.readouterr()
        assert "shown" in captured.out
        assert "after" not in captured.out
        assert ":4: " in captured.err
        assert "ENDIF without preceding IF" in captured.err

    def test_strict_quiet_prints_output_before_error(self, tmp_path, capsys):
        path = write(tmp_path, "one\nELSE\ntwo\n")
        assert main([path, "--strict", "--quiet"]) == 1
        assert capsys.readouterr().out.splitlines() == ["one"]

    def test_malformed_config(self, tmp_path, capsys):
        path = write(tmp_path, "text\n")
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"definitions": ["A"]}))
        assert main([path, "--config", str(config)]) == 1
        assert "Error loading config" in capsys.readouterr().out

    def test_define_and_report(self, tmp_path):
        path = write(tmp_path, "IF FEATURE\non\nELSE\noff\nENDIF\n")
        report = tmp_path / "report.json"
        assert main([path, "--define", "FEATURE=false", "--output", str(report), "--quiet"]) == 0
        data = json.loads(report.read_text())
        assert data["output"] == ["off"]
        assert data["summary"]["errors"] == 0
        assert data["diagnostics"] == []

    def test_unknown_false(self, tmp_path, capsys):
        path = write(tmp_path, "IF maybe\ntext\nENDIF\n")
        assert main([path, "--unknown-false", "--quiet"]) == 0
        assert capsys.readouterr().out == ""
