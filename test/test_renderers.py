"""Tests for console and JSON renderers."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PogoSearch.core.models import DetectionStatus, LanguageDetection, TranslationResult
from PogoSearch.core.query import And, Filter, Not, Or
from PogoSearch.query import validate_search_string
from PogoSearch.renderers import (
    ConsoleOutputWriter,
    JsonOutputWriter,
    create_output_writer,
    render_ast,
    render_detection_json,
    render_detection_text,
    render_report_json,
    render_report_text,
    render_translation_text,
)


class TestRenderAst(unittest.TestCase):
    def test_prefix_form(self) -> None:
        node = Or(And(Filter("a"), Not(Filter("b"))), Filter("c"))
        self.assertEqual(render_ast(node), "OR(AND(a, NOT(b)), c)")

    def test_empty(self) -> None:
        self.assertEqual(render_ast(None), "-")


class TestTextRenderers(unittest.TestCase):
    def test_report_text(self) -> None:
        text = render_report_text("shadow,purified", validate_search_string("shadow,purified"))
        lines = text.splitlines()
        self.assertEqual(lines[0], "Search string: shadow,purified")
        self.assertEqual(lines[1], "Valid: no")
        self.assertIn("Included: shadow, purified", lines)
        self.assertIn("Excluded: -", lines)
        self.assertEqual(lines[-2], "Issues:")
        self.assertTrue(lines[-1].startswith("  - Cannot be both shadow and purified"))

    def test_translation_text(self) -> None:
        result = TranslationResult(text="@Vol", source="English", target="French", warnings=("WARNING: x",))
        self.assertEqual(render_translation_text(result), "@Vol\nWARNING: x\n")

    def test_detection_text(self) -> None:
        detection = LanguageDetection(("French",), "French", DetectionStatus.SINGLE)
        self.assertEqual(render_detection_text(detection), "Candidates: French\nLanguage detected: French\n")


class TestJsonRenderers(unittest.TestCase):
    def test_report_json(self) -> None:
        payload = render_report_json("3*&4*", validate_search_string("3*&4*"))
        self.assertFalse(payload["valid"])
        self.assertEqual(payload["syntax_errors"], [])
        self.assertEqual(payload["parse"]["ast"], "AND(3*, 4*)")
        self.assertEqual(payload["parse"]["conflicts"][0]["kind"], "MUTUALLY_EXCLUSIVE")
        self.assertEqual(payload["parse"]["conflicts"][0]["filters"], ["3*", "4*"])

    def test_empty_report_json(self) -> None:
        payload = render_report_json("", validate_search_string(""))
        self.assertTrue(payload["valid"])
        self.assertIsNone(payload["parse"]["ast"])

    def test_detection_json(self) -> None:
        detection = LanguageDetection((), "English", DetectionStatus.NONE)
        payload = render_detection_json(detection)
        self.assertEqual(payload["status"], "none")
        self.assertEqual(payload["candidates"], [])
        self.assertEqual(payload["language"], "English")


class TestCreateOutputWriter(unittest.TestCase):
    def test_formats(self) -> None:
        self.assertIsInstance(create_output_writer("console"), ConsoleOutputWriter)
        self.assertIsInstance(create_output_writer("json"), JsonOutputWriter)
        with self.assertRaisesRegex(ValueError, "Unsupported output format"):
            create_output_writer("markdown")


if __name__ == "__main__":
    unittest.main()
