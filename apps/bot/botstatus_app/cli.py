"""CLI entrypoints for rendering, snapshots, diagnostics, and the chat loop."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from botstatus_core import build_doctor_payload, configure_logging, get_logger, install_crash_hooks, load_config
from botstatus_core.config import AppConfig
from botstatus_renderer import DashboardRenderer, ResourceLoadError, decode_image_ref
from botstatus_telemetry import BotCounters, SystemSnapshot, TelemetryProvider

from .command import StatusCommand, layout_from_config, resource_cache_from_config


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str, ensure_ascii=False))


def _load(args: argparse.Namespace) -> AppConfig:
    return load_config(Path(args.config).expanduser() if args.config else None)


def _provider(cfg: AppConfig) -> TelemetryProvider:
    return TelemetryProvider(
        counters=BotCounters(backend=cfg.bot.backend),
        cpu_sample_ms=cfg.telemetry.cpu_sample_ms,
        all_partitions=cfg.telemetry.all_partitions,
    )


def cmd_render(args: argparse.Namespace) -> int:
    cfg = _load(args)
    if args.snapshot:
        raw = json.loads(Path(args.snapshot).read_text(encoding="utf-8"))
        snapshot = SystemSnapshot.from_dict(raw)
    else:
        snapshot = _provider(cfg).poll()

    try:
        resources = resource_cache_from_config(cfg).get()
    except ResourceLoadError as exc:
        get_logger().critical(str(exc), extra={"event": "resources_failed"})
        return 3

    renderer = DashboardRenderer(
        resources,
        bot_name=args.bot_name or cfg.bot.name,
        constants=layout_from_config(cfg),
        scheme=cfg.render.image_scheme,
    )
    if args.data_url:
        print(renderer.preview_data_url(snapshot))
        return 0

    ref = renderer.render(snapshot)
    if args.out:
        out = Path(args.out).expanduser()
        out.write_bytes(decode_image_ref(ref, cfg.render.image_scheme))
        _print_json({"success": True, "path": str(out), "disks": len(snapshot.disks)})
    else:
        print(ref)
    return 0


def cmd_snapshot(args: argparse.Namespace) -> int:
    _print_json(_provider(_load(args)).poll().to_dict())
    return 0


def cmd_doctor(args: argparse.Namespace) -> int:
    _print_json(build_doctor_payload(_load(args)))
    return 0


def cmd_chat(args: argparse.Namespace) -> int:
    cfg = _load(args)
    command = StatusCommand.from_config(cfg)
    try:
        command.resources.get()
    except ResourceLoadError as exc:
        get_logger().critical(str(exc), extra={"event": "resources_failed"})
        return 3

    install_crash_hooks()
    for line in sys.stdin:
        reply = command.handle(line)
        if reply is not None:
            print(reply, flush=True)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="botstatus", description="Bot status dashboard renderer and tools")
    parser.add_argument("--config", default=None, help="Optional config file path")
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Render the status dashboard")
    render_cmd.add_argument("--snapshot", default=None, help="Render a saved snapshot JSON instead of polling")
    render_cmd.add_argument("--out", default=None, help="Write the PNG to this path")
    render_cmd.add_argument("--bot-name", default=None, help="Override the configured bot name")
    render_cmd.add_argument("--data-url", action="store_true", help="Print a data: URL instead of the image reference")
    render_cmd.set_defaults(func=cmd_render)

    snap_cmd = sub.add_parser("snapshot", help="Print the current system snapshot as JSON")
    snap_cmd.set_defaults(func=cmd_snapshot)

    doctor_cmd = sub.add_parser("doctor", help="Print diagnostics")
    doctor_cmd.set_defaults(func=cmd_doctor)

    chat_cmd = sub.add_parser("chat", help="Answer status commands read from stdin")
    chat_cmd.set_defaults(func=cmd_chat)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = _load(args)
    configure_logging(keep_files=cfg.logging.keep_log_files, console=False, level=cfg.logging.level)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
