"""Tests for layered config parsing and validation."""

import sys
import unittest
from copy import deepcopy
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PogoSearch.config import parse_config_dict


def _base_raw_config() -> dict:
    return {
        "log": {"level": "INFO", "to_file": False, "dir": "log"},
        "catalog": {"path": "", "path_env": "POGOSEARCH_CATALOG", "timeout": 30},
        "query": {
            "global_exclusive": [{"name": "shadow states", "terms": ["shadow", "purified"]}],
            "and_exclusive": [{"name": "star ratings", "terms": ["0*", "1*", "2*", "3*", "4*"]}],
        },
        "translation": {
            "source": "auto",
            "target": "English",
            "lowercase": False,
            "skip_unknown_terms": False,
        },
        "output": {"format": "console"},
    }


class TestConfigLayering(unittest.TestCase):
    def test_parse_success_nested_access(self) -> None:
        cfg = parse_config_dict(_base_raw_config())
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.catalog.timeout, 30.0)
        self.assertEqual(cfg.catalog.path_env, "POGOSEARCH_CATALOG")
        self.assertEqual(cfg.query.global_exclusive[0].terms, ("shadow", "purified"))
        self.assertTrue(cfg.translation.auto_detect)
        self.assertEqual(cfg.output.format, "console")

    def test_optional_sections_default(self) -> None:
        raw = {"log": _base_raw_config()["log"]}
        cfg = parse_config_dict(raw)
        self.assertEqual(cfg.catalog.path, "")
        self.assertEqual([g.name for g in cfg.query.global_exclusive], ["shadow states"])
        self.assertEqual([g.name for g in cfg.query.and_exclusive], ["star ratings"])
        self.assertEqual(cfg.translation.target, "English")

    def test_log_section_required(self) -> None:
        raw = _base_raw_config()
        del raw["log"]
        with self.assertRaisesRegex(ValueError, "Missing required config: log"):
            parse_config_dict(raw)

    def test_log_level_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["log"]["level"] = "LOUD"
        with self.assertRaisesRegex(ValueError, "log\\.level"):
            parse_config_dict(raw)

    def test_output_unknown_format_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["output"]["format"] = "markdown"
        with self.assertRaisesRegex(ValueError, "output\\.format"):
            parse_config_dict(raw)

    def test_catalog_timeout_type_error_contains_key(self) -> None:
        raw = _base_raw_config()
        raw["catalog"]["timeout"] = "30"
        with self.assertRaisesRegex(TypeError, "catalog\\.timeout"):
            parse_config_dict(raw)

    def test_catalog_timeout_positive(self) -> None:
        raw = _base_raw_config()
        raw["catalog"]["timeout"] = 0
        with self.assertRaisesRegex(ValueError, "catalog\\.timeout"):
            parse_config_dict(raw)

    def test_query_group_needs_two_terms(self) -> None:
        raw = _base_raw_config()
        raw["query"]["and_exclusive"][0]["terms"] = ["3*", "3*"]
        with self.assertRaisesRegex(ValueError, "query\\.and_exclusive\\[0\\]\\.terms"):
            parse_config_dict(raw)

    def test_query_group_terms_type_error(self) -> None:
        raw = _base_raw_config()
        raw["query"]["global_exclusive"][0]["terms"] = ["shadow", 3]
        with self.assertRaisesRegex(TypeError, "query\\.global_exclusive\\[0\\]\\.terms\\[1\\]"):
            parse_config_dict(raw)

    def test_query_group_terms_lowercased(self) -> None:
        raw = deepcopy(_base_raw_config())
        raw["query"]["global_exclusive"][0]["terms"] = ["Shadow", "PURIFIED"]
        cfg = parse_config_dict(raw)
        self.assertEqual(cfg.query.global_exclusive[0].terms, ("shadow", "purified"))

    def test_query_group_names_unique(self) -> None:
        raw = _base_raw_config()
        raw["query"]["and_exclusive"][0]["name"] = "shadow states"
        with self.assertRaisesRegex(ValueError, "unique"):
            parse_config_dict(raw)

    def test_empty_query_lists_disable_checks(self) -> None:
        raw = _base_raw_config()
        raw["query"] = {"global_exclusive": [], "and_exclusive": []}
        cfg = parse_config_dict(raw)
        self.assertEqual(cfg.query.global_exclusive, ())
        self.assertEqual(cfg.query.and_exclusive, ())

    def test_translation_source_normalized(self) -> None:
        raw = _base_raw_config()
        raw["translation"]["source"] = "AUTO"
        self.assertEqual(parse_config_dict(raw).translation.source, "auto")

    def test_translation_languages_must_differ(self) -> None:
        raw = _base_raw_config()
        raw["translation"]["source"] = "English"
        with self.assertRaisesRegex(ValueError, "translation\\.source"):
            parse_config_dict(raw)

    def test_translation_target_cannot_be_auto(self) -> None:
        raw = _base_raw_config()
        raw["translation"]["target"] = "auto"
        with self.assertRaisesRegex(ValueError, "translation\\.target"):
            parse_config_dict(raw)

    def test_translation_lowercase_type_error(self) -> None:
        raw = _base_raw_config()
        raw["translation"]["lowercase"] = "yes"
        with self.assertRaisesRegex(TypeError, "translation\\.lowercase"):
            parse_config_dict(raw)


if __name__ == "__main__":
    unittest.main()
