from __future__ import annotations

import json
import runpy
from pathlib import Path

import botstatus_app.__main__ as app_main
import botstatus_app.cli as cli


def test_main_defaults_to_render(monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(app_main, "_cli_main", lambda argv=None: calls.append(list(argv or [])) or 0)

    rc = app_main.main([])
    assert rc == 0
    assert calls == [["render"]]


def test_main_passes_through_args(monkeypatch) -> None:
    calls: list[list[str]] = []
    monkeypatch.setattr(app_main, "_cli_main", lambda argv=None: calls.append(list(argv or [])) or 0)

    rc = app_main.main(["doctor"])
    assert rc == 0
    assert calls == [["doctor"]]


def test_main_module_runpath_without_package_context() -> None:
    main_path = Path(__file__).resolve().parents[1] / "apps" / "bot" / "botstatus_app" / "__main__.py"
    result = runpy.run_path(str(main_path))
    assert "main" in result


def test_render_command_writes_png(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda **_kwargs: None)
    snapshot = {
        "cpu_used_percent": 91.0,
        "cpu_cores": 4,
        "cpu_info": "",
        "mem_all_mb": 4096,
        "mem_used_mb": 1024,
        "mem_used_percent": 25.0,
        "disks": [],
        "uptime": {"days": 1},
        "bot_uptime": {"minutes": 5},
        "os": "linux",
        "arch": "arm64",
        "backend": "console",
        "sent_total": 0,
        "received_total": 0,
    }
    snap_path = tmp_path / "snap.json"
    snap_path.write_text(json.dumps(snapshot), encoding="utf-8")
    out = tmp_path / "status.png"
    config = tmp_path / "config.json"

    rc = cli.main(["--config", str(config), "render", "--snapshot", str(snap_path), "--out", str(out)])
    assert rc == 0
    assert out.read_bytes().startswith(b"\x89PNG")
    assert json.loads(capsys.readouterr().out)["path"] == str(out)


def test_render_command_fails_on_missing_font(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda **_kwargs: None)
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"render": {"font_path": str(tmp_path / "missing.ttf")}}), encoding="utf-8")
    snap_path = tmp_path / "snap.json"
    snap_path.write_text(
        json.dumps(
            {
                "cpu_used_percent": 1.0,
                "cpu_cores": 1,
                "cpu_info": "",
                "mem_all_mb": 1,
                "mem_used_mb": 1,
                "mem_used_percent": 100.0,
                "uptime": {},
                "bot_uptime": {},
                "os": "linux",
                "arch": "x86_64",
                "backend": "console",
                "sent_total": 0,
                "received_total": 0,
            }
        ),
        encoding="utf-8",
    )

    rc = cli.main(["--config", str(config), "render", "--snapshot", str(snap_path)])
    assert rc == 3
