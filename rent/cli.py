"""CLI entry point for the rent presentation viewer."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from pptx.util import Pt
from pydantic import ValidationError

from .config import load_config
from .logging_utils import log_event
from .models.config import ViewerConfig
from .models.slide import Presentation
from .parse.parser import ParseError, load_presentation
from .render.console_host import ConsoleHost, run
from .render.pptx_host import PptxHost
from .viewer import ViewerController

COMMANDS = ("check", "export", "show")


def _error(message: str) -> int:
    print(f"ERROR: {message}", file=sys.stderr)
    return 1


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("document", type=str, help="Path to the slide document")
    parser.add_argument(
        "--config", type=str, default=None, help="Path to a JSON viewer config"
    )
    parser.add_argument(
        "--log", type=str, default=None, help="Append JSONL events to this file"
    )


def _load(args: argparse.Namespace, **overrides) -> tuple[ViewerConfig, Presentation]:
    config = load_config(
        Path(args.config) if args.config else None, log_path=args.log, **overrides
    )
    presentation = load_presentation(Path(args.document))
    log_event(
        Path(config.log_path) if config.log_path else None,
        "DOCUMENT_PARSED",
        {"source": presentation.source, "slide_count": len(presentation)},
    )
    return config, presentation


def _run_command(handler, args: argparse.Namespace) -> int:
    try:
        return handler(args)
    except (FileNotFoundError, IsADirectoryError, PermissionError, UnicodeDecodeError) as exc:
        return _error(f"cannot read input: {exc}")
    except ParseError as exc:
        return _error(str(exc))
    except ValidationError as exc:
        return _error(f"invalid config: {exc}")


def cmd_check(args: argparse.Namespace) -> int:
    """Parse a document and summarize its slides."""
    _, presentation = _load(args)
    print(f"{len(presentation)} slides in {presentation.source}")
    for index, slide in enumerate(presentation.slides):
        detail = slide.uri if slide.kind == "image" else slide.text.split("\n", 1)[0]
        print(f"  {index + 1:>3} {slide.kind:<9} {detail}")
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Render every slide of a document to PPTX."""
    config, presentation = _load(args, viewport_width=args.width)
    viewer = ViewerController(presentation, config)
    host = PptxHost(slide_width=Pt(config.viewport_width))
    output_path = Path(args.output)
    drawn = host.render(viewer, output_path)
    log_event(viewer.log_path, "EXPORT_DONE", {
        "output_path": str(output_path),
        "slides_rendered": drawn,
    })
    print(f"Rendered {drawn} slides to: {output_path}")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Step through a document in the terminal."""
    config, presentation = _load(args, viewport_width=args.width)
    viewer = ViewerController(presentation, config)
    host = ConsoleHost(config.viewport_width)
    print(
        f"keys: previous={','.join(config.previous_keys)} "
        f"next={','.join(config.next_keys)} quit=q"
    )
    frames = run(viewer, host, sys.stdin)
    log_event(viewer.log_path, "SHOW_DONE", {"frames": frames, "last_index": viewer.index})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rent", description="rent - plain-text presentation viewer (`rent DOCUMENT` is short for `rent show DOCUMENT`)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="Parse a document and list its slides")
    _add_common_args(check_parser)
    check_parser.set_defaults(func=cmd_check)

    export_parser = subparsers.add_parser("export", help="Render a document to PPTX")
    _add_common_args(export_parser)
    export_parser.add_argument(
        "--output", type=str, required=True, help="Path of the PPTX to write"
    )
    export_parser.add_argument(
        "--width", type=float, default=None,
        help="Slide width in points (default: config viewport_width; height stays 540)",
    )
    export_parser.set_defaults(func=cmd_export)

    show_parser = subparsers.add_parser("show", help="Step through a document in the terminal")
    _add_common_args(show_parser)
    show_parser.add_argument(
        "--width", type=float, default=None, help="Viewport width in points"
    )
    show_parser.set_defaults(func=cmd_show)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    # A bare document path runs the viewer.
    if argv and argv[0] not in COMMANDS and not argv[0].startswith("-"):
        argv.insert(0, "show")
    parser = build_parser()
    args = parser.parse_args(argv)
    return _run_command(args.func, args)


if __name__ == "__main__":
    raise SystemExit(main())
