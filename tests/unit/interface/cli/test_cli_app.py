from __future__ import annotations

"""
Unit tests for the CLI application controller.

Verifies:
1. Exit codes for success, configuration errors and run failures.
2. Dry-run rendering of 'original -> result' lines on stdout.
3. JSON and config dump output modes.
"""

import json

import pytest

from sourcemap_rebase.interface.cli import app


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Keep the root logger untouched by the controller."""
    monkeypatch.setattr(app, "configure_logging", lambda cfg: None)


def test_dry_run_prints_mappings(in_package, write_sourcemap, capsys):
    path = write_sourcemap(in_package / "lib" / "a.js.map", ["../../src/a.js", "../../src/b.js"])
    before = path.read_bytes()

    code = app.main(["--auto", "--include", "lib/*.js.map", "--dryrun"])

    out = capsys.readouterr().out
    assert code == 0
    assert out.splitlines() == [
        "../../src/a.js -> mylib/a.js",
        "../../src/b.js -> mylib/b.js",
    ]
    assert path.read_bytes() == before


def test_summary_after_write(in_package, write_sourcemap, capsys):
    write_sourcemap(in_package / "lib" / "a.js.map", ["/w/a.js", "x.js"])

    code = app.main(["-p", "/w/", "--include", "lib/*.js.map"])

    assert code == 0
    assert "Rewrote 1/2 source(s) in 1 file(s)." in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ["--include", "lib/*.js.map"],
    ["--include", "lib/*.js.map", "--auto", "--prefix", "/w/"],
])
def test_prefix_auto_conflict_exits_with_usage_error(in_package, argv, capsys):
    assert app.main(argv) == 2
    assert "Specify either prefix or auto" in capsys.readouterr().err


def test_parse_error_exits_non_zero(in_package, capsys):
    (in_package / "lib" / "bad.js.map").write_text("{", encoding="utf-8")

    assert app.main(["--auto", "--include", "lib/*.js.map"]) == 1
    assert "Cannot parse sourcemap" in capsys.readouterr().err


def test_json_output(in_package, write_sourcemap, capsys):
    write_sourcemap(in_package / "lib" / "a.js.map", ["/w/a.js"])

    code = app.main(["-p", "/w/", "--include", "lib/*.js.map", "--json", "--dryrun"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["prefix"] == "/w/"
    assert payload["entries"] == [
        {"file_path": "lib/a.js.map", "original": "/w/a.js", "result": "mylib/a.js"}
    ]
    assert payload["summary"]["rewritten"] == 1


def test_dump_config_skips_pipeline(in_package, monkeypatch, capsys):
    def _boom(*a, **kw):
        raise AssertionError("pipeline must not run")

    monkeypatch.setattr(app, "run_pipeline", _boom)

    code = app.main(["-a", "--include", "lib/*.js.map", "--exclude", "x.map", "--dump-config"])

    dumped = json.loads(capsys.readouterr().out)
    assert code == 0
    assert dumped["auto"] is True
    assert dumped["exclude_patterns"] == ["x.map"]


def test_keyboard_interrupt_exit_code(in_package, monkeypatch):
    def _interrupt(*a, **kw):
        raise KeyboardInterrupt

    monkeypatch.setattr(app, "run_pipeline", _interrupt)

    assert app.main(["-a", "--include", "lib/*.js.map"]) == 130
