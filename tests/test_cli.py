"""CLI tests."""

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

from pptx import Presentation as PptxPresentation

from helpers import write_png
from rent.cli import build_parser, cmd_check, cmd_export, main
from rent.logging_utils import read_events


class MockArgs:
    """Mock argparse.Namespace for testing."""
    def __init__(self, **kwargs):
        defaults = {"config": None, "log": None, "width": None}
        defaults.update(kwargs)
        for k, v in defaults.items():
            setattr(self, k, v)


class TestCLI(unittest.TestCase):
    def setUp(self) -> None:
        self._temp = tempfile.TemporaryDirectory()
        self.temp_dir = Path(self._temp.name)
        image = write_png(self.temp_dir / "pic.png")
        self.document = self.temp_dir / "deck.txt"
        self.document.write_text(f"Title\n\n!{image}\n\nThe end\nthanks", encoding="utf-8")

    def tearDown(self) -> None:
        self._temp.cleanup()

    def test_check_lists_slides(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out):
            result = cmd_check(MockArgs(document=str(self.document)))
        self.assertEqual(result, 0)
        self.assertIn("3 slides", out.getvalue())
        self.assertIn("image", out.getvalue())

    def test_export_writes_pptx_and_log(self) -> None:
        output_path = self.temp_dir / "out.pptx"
        log_path = self.temp_dir / "run_log.jsonl"
        with redirect_stdout(io.StringIO()):
            result = cmd_export(MockArgs(
                document=str(self.document), output=str(output_path), log=str(log_path),
            ))
        self.assertEqual(result, 0)
        self.assertEqual(len(PptxPresentation(str(output_path)).slides), 3)
        events = [e["event_type"] for e in read_events(log_path)]
        self.assertEqual(events, ["DOCUMENT_PARSED", "EXPORT_DONE"])

    def test_export_width_sets_slide_width(self) -> None:
        output_path = self.temp_dir / "wide.pptx"
        with redirect_stdout(io.StringIO()):
            cmd_export(MockArgs(document=str(self.document), output=str(output_path), width=1200.0))
        prs = PptxPresentation(str(output_path))
        self.assertAlmostEqual(prs.slide_width.pt, 1200.0)

    def test_main_missing_document_is_fatal(self) -> None:
        err = io.StringIO()
        with redirect_stderr(err):
            result = main(["check", str(self.temp_dir / "missing.txt")])
        self.assertEqual(result, 1)
        self.assertIn("ERROR", err.getvalue())

    def test_main_empty_document_is_fatal(self) -> None:
        self.document.write_text("  \n\n ", encoding="utf-8")
        err = io.StringIO()
        with redirect_stderr(err):
            result = main(["check", str(self.document)])
        self.assertEqual(result, 1)
        self.assertIn("no slides", err.getvalue())

    def test_main_bad_image_is_fatal(self) -> None:
        self.document.write_text("Hi\n\n!nope/missing.png", encoding="utf-8")
        err = io.StringIO()
        with redirect_stderr(err):
            result = main(["check", str(self.document)])
        self.assertEqual(result, 1)
        self.assertIn("nope/missing.png", err.getvalue())

    def test_main_invalid_config_is_fatal(self) -> None:
        config_path = self.temp_dir / "rent.json"
        config_path.write_text(json.dumps({"next_keys": []}), encoding="utf-8")
        err = io.StringIO()
        with redirect_stderr(err):
            result = main(["check", str(self.document), "--config", str(config_path)])
        self.assertEqual(result, 1)
        self.assertIn("invalid config", err.getvalue())

    def test_main_show_reads_keys_from_stdin(self) -> None:
        out = io.StringIO()
        with mock.patch("sys.stdin", io.StringIO("l\nl\nq\n")), redirect_stdout(out):
            result = main(["show", str(self.document), "--width", "400"])
        self.assertEqual(result, 0)
        self.assertIn("-- slide 3/3 --", out.getvalue())
        self.assertIn("The end", out.getvalue())

    def test_main_bare_document_runs_viewer(self) -> None:
        out = io.StringIO()
        with mock.patch("sys.stdin", io.StringIO("l\nq\n")), redirect_stdout(out):
            result = main([str(self.document)])
        self.assertEqual(result, 0)
        self.assertIn("-- slide 2/3 --", out.getvalue())

    def test_main_bare_document_extra_argument_is_usage_error(self) -> None:
        err = io.StringIO()
        with redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
            main([str(self.document), "extra"])
        self.assertNotEqual(ctx.exception.code, 0)
        self.assertIn("usage", err.getvalue())

    def test_wrong_argument_count_prints_usage(self) -> None:
        err = io.StringIO()
        with redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
            main([])
        self.assertNotEqual(ctx.exception.code, 0)
        self.assertIn("usage", err.getvalue())

    def test_parser_structure(self) -> None:
        parser = build_parser()
        args = parser.parse_args(["check", "deck.txt"])
        self.assertEqual(args.command, "check")
        self.assertEqual(args.document, "deck.txt")

        args = parser.parse_args(["export", "deck.txt", "--output", "out.pptx"])
        self.assertEqual(args.command, "export")
        self.assertEqual(args.output, "out.pptx")

        args = parser.parse_args(["show", "deck.txt", "--width", "800"])
        self.assertEqual(args.width, 800.0)


if __name__ == "__main__":
    unittest.main()
