"""CLI entry point."""

from __future__ import annotations

import argparse
import os
from datetime import datetime

from .config import Config, load_config, save_config
from .controller import SessionController
from .renderer import render_session_summary
from .session_io import load_session
from .storage import build_export_basename, ensure_structure, write_text


def _resolve_state_path(args) -> str:
    if args.state:
        return args.state
    cfg = Config()
    if os.path.exists(args.config):
        cfg = load_config(args.config)
    paths = ensure_structure(cfg.base_dir)
    return os.path.join(paths["sessions"], cfg.session.state_file)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="turnkeeper")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("gui")

    show_cmd = sub.add_parser("show")
    show_cmd.add_argument("--state", help="Path to a saved session .json file.")
    show_cmd.add_argument("--config", default="turnkeeper_config.yml", help="Config.")
    show_cmd.add_argument("--title", help="Heading for the summary.")

    export_cmd = sub.add_parser("export")
    export_cmd.add_argument("--state", help="Path to a saved session .json file.")
    export_cmd.add_argument("--config", default="turnkeeper_config.yml", help="Config.")
    export_cmd.add_argument("--out", help="CSV file to write. Defaults to Exports/.")
    export_cmd.add_argument("--title", default="Speeches", help="Export file title.")

    config_cmd = sub.add_parser("config")
    config_cmd.add_argument("--path", default="turnkeeper_config.yml", help="Config.")
    config_cmd.add_argument(
        "--force", action="store_true", help="Overwrite an existing config file."
    )

    args = parser.parse_args(argv)

    if args.command == "show":
        controller = SessionController(load_session(_resolve_state_path(args)))
        print(
            render_session_summary(
                elapsed_seconds=controller.elapsed(),
                running=controller.is_running,
                current=controller.current_speaker(),
                upcoming=controller.next_speaker(),
                queued=controller.queued_speakers(),
                speakers=controller.speakers(),
                speeches=controller.speeches(),
                totals=controller.category_totals(),
                title=args.title,
            )
        )
        return 0

    if args.command == "export":
        controller = SessionController(load_session(_resolve_state_path(args)))
        out_path = args.out
        if not out_path:
            cfg = load_config(args.config) if os.path.exists(args.config) else Config()
            paths = ensure_structure(cfg.base_dir)
            basename = build_export_basename(args.title, datetime.now())
            out_path = os.path.join(paths["exports"], f"{basename}.csv")
        write_text(out_path, controller.export_text())
        print(f"Wrote {out_path} ({len(controller.speeches())} speeches)")
        return 0

    if args.command == "config":
        if os.path.exists(args.path) and not args.force:
            print(f"{args.path} already exists. Use --force to overwrite.")
            return 1
        save_config(args.path, Config())
        print(f"Wrote {args.path}")
        return 0

    if args.command == "gui":
        from .gui import launch_gui

        launch_gui()
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
