"""Tests for the log verifier entry point."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest
import yaml

from log_verifier.main import build_request, main, parse_args

BASE_LOG = (
    "[INFO] Scanning for projects...\n"
    "[INFO] TestA Time elapsed: 1.5 s\n"
    "[ERROR] TestB Time elapsed: 0.3 s <<< FAILURE!\n"
)
PASSING_LOG = "[INFO] TestA Time elapsed: 1 s\n[INFO] TestB Time elapsed: 1 s\n"


def _write(tmpdir: Path, name: str, content: str) -> Path:
    path = tmpdir / name
    path.write_text(content)
    return path


class TestParseArgs:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = parse_args([])
        assert args.request is None
        assert args.base_log is None
        assert args.main_tests is None
        assert args.format is None
        assert args.quiet is False
        assert args.config_file == Path(".log_verifier_config")

    def test_log_paths(self):
        args = parse_args([
            "--base-log", "/logs/base.txt",
            "--post-agent-patch-log", "/logs/post.txt",
        ])
        assert args.base_log == Path("/logs/base.txt")
        assert args.post_agent_patch_log == Path("/logs/post.txt")

    def test_format_choices(self):
        assert parse_args(["--format", "yaml"]).format == "yaml"
        with pytest.raises(SystemExit):
            parse_args(["--format", "xml"])


class TestBuildRequest:
    """Tests for assembling the request from files and options."""

    def test_from_log_files(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            base = _write(tmp, "base.txt", BASE_LOG)
            tests = _write(tmp, "tests.txt", "TestA\nTestB\n")
            args = parse_args([
                "--base-log", str(base),
                "--main-tests-file", str(tests),
                "--report-tests", "TestR",
            ])
            request = build_request(args)
            assert request.base_log == BASE_LOG
            assert request.main_json_tests == "TestA\nTestB\n"
            assert request.report_json_tests == "TestR"
            assert request.before_log is None

    def test_request_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            req = _write(tmp, "request.json", json.dumps({
                "baseLog": BASE_LOG,
                "mainJsonTests": "TestA",
            }))
            request = build_request(parse_args(["--request", str(req)]))
            assert request.base_log == BASE_LOG
            assert request.main_json_tests == "TestA"

    def test_options_override_request_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            req = _write(tmp, "request.json", json.dumps({
                "baseLog": "old",
                "mainJsonTests": "Old",
            }))
            base = _write(tmp, "base.txt", BASE_LOG)
            args = parse_args([
                "--request", str(req),
                "--base-log", str(base),
                "--main-tests", "TestA",
            ])
            request = build_request(args)
            assert request.base_log == BASE_LOG
            assert request.main_json_tests == "TestA"

    def test_request_file_not_object(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            req = _write(Path(tmpdir), "request.json", "[1, 2]")
            with pytest.raises(ValueError, match="JSON object"):
                build_request(parse_args(["--request", str(req)]))


class TestMain:
    """Tests for the main() entry point."""

    def test_passing_run(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            log = _write(tmp, "log.txt", PASSING_LOG)
            exit_code = main([
                "--base-log", str(log),
                "--before-log", str(log),
                "--after-log", str(log),
                "--main-tests", "TestA,TestB",
                "--config-file", str(tmp / "missing_config"),
            ])
            assert exit_code == 0
            out = capsys.readouterr().out
            assert "TestA [base_log]: OK (Passed)" in out
            assert "TestB [after_log]: OK (Passed)" in out

    def test_failure_exit_code(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            base = _write(tmp, "base.txt", BASE_LOG)
            exit_code = main([
                "--base-log", str(base),
                "--main-tests", "TestA\nTestB",
                "--config-file", str(tmp / "missing_config"),
            ])
            assert exit_code == 1
            out = capsys.readouterr().out
            assert "TestB [base_log]: NOT OK (Failed)" in out
            assert "SystemCheck [before_log]: ERROR" in out

    def test_not_found_warns_on_stderr(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            log = _write(tmp, "post.txt", PASSING_LOG)
            exit_code = main([
                "--post-agent-patch-log", str(log),
                "--report-tests", "TestZ",
                "--config-file", str(tmp / "missing_config"),
            ])
            assert exit_code == 0
            assert "Warning: TestZ: no execution line in post_agent_patch_log" in (
                capsys.readouterr().err
            )

    def test_config_blocking_statuses(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            config = _write(tmp, "config.json", json.dumps({
                "blocking_statuses": ["NotFound"],
            }))
            log = _write(tmp, "post.txt", PASSING_LOG)
            exit_code = main([
                "--post-agent-patch-log", str(log),
                "--report-tests", "TestZ",
                "--config-file", str(config),
                "--quiet",
            ])
            assert exit_code == 1

    def test_quiet(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            log = _write(tmp, "post.txt", PASSING_LOG)
            main([
                "--post-agent-patch-log", str(log),
                "--report-tests", "TestA",
                "--config-file", str(tmp / "missing_config"),
                "--quiet",
            ])
            assert capsys.readouterr().out == ""

    def test_json_report(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            base = _write(tmp, "base.txt", BASE_LOG)
            output = tmp / "out" / "report.json"
            main([
                "--base-log", str(base),
                "--main-tests", "TestA",
                "--output", str(output),
                "--config-file", str(tmp / "missing_config"),
                "--quiet",
            ])
            report = json.loads(output.read_text())
            assert report["summary"]["total"] == 3
            assert report["request"] == {"base_log": str(base)}
            assert report["outcomes"][0]["summary"] == "TestA [base_log]: OK (Passed)"

    def test_yaml_report_from_config(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            config = _write(tmp, "config.json", json.dumps({"output_format": "yaml"}))
            base = _write(tmp, "base.txt", BASE_LOG)
            output = tmp / "report.yaml"
            main([
                "--base-log", str(base),
                "--main-tests", "TestA",
                "--output", str(output),
                "--config-file", str(config),
                "--quiet",
            ])
            report = yaml.safe_load(output.read_text())
            assert report["outcomes"][0]["result"] == "Passed"

    def test_format_flag_overrides_config(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            config = _write(tmp, "config.json", json.dumps({"output_format": "yaml"}))
            base = _write(tmp, "base.txt", BASE_LOG)
            output = tmp / "report.json"
            main([
                "--base-log", str(base),
                "--main-tests", "TestA",
                "--output", str(output),
                "--format", "json",
                "--config-file", str(config),
                "--quiet",
            ])
            assert json.loads(output.read_text())["summary"]["total"] == 3

    def test_missing_log_file(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            exit_code = main([
                "--base-log", str(tmp / "nope.txt"),
                "--main-tests", "TestA",
                "--config-file", str(tmp / "missing_config"),
            ])
            assert exit_code == 1
            assert "File not found" in capsys.readouterr().err

    def test_invalid_request_json(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            req = _write(tmp, "request.json", "{ not json")
            exit_code = main([
                "--request", str(req),
                "--config-file", str(tmp / "missing_config"),
            ])
            assert exit_code == 1
            assert "Invalid JSON" in capsys.readouterr().err

    def test_request_wrong_type(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            tmp = Path(tmpdir)
            req = _write(tmp, "request.json", json.dumps({"baseLog": 42}))
            exit_code = main([
                "--request", str(req),
                "--config-file", str(tmp / "missing_config"),
            ])
            assert exit_code == 1
            assert "baseLog" in capsys.readouterr().err

    def test_nothing_to_verify(self, capsys):
        with tempfile.TemporaryDirectory() as tmpdir:
            exit_code = main(["--config-file", str(Path(tmpdir) / "missing_config")])
            assert exit_code == 0
            assert "nothing to verify" in capsys.readouterr().err
