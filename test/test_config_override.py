"""Tests for config override behavior with defaults."""

import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PogoSearch.config import load_config, load_config_with_defaults
from PogoSearch.lexicon import create_lexicon


_BASE_YAML = """
log:
  level: INFO
  to_file: false
  dir: log

catalog:
  path: ""
  path_env: POGOSEARCH_TEST_CATALOG
  timeout: 30

query:
  global_exclusive:
    - name: shadow states
      terms: [shadow, purified]
  and_exclusive:
    - name: star ratings
      terms: ["3*", "4*"]

translation:
  source: auto
  target: English

output:
  format: console
"""

_CATALOG_YAML = """
canonical: English
languages: {English: en, French: fr}
concepts:
  - key: fire
    terms: {English: Fire, French: Feu}
"""


class TestConfigOverride(unittest.TestCase):
    def _write(self, tmp: str, name: str, text: str) -> Path:
        path = Path(tmp) / name
        path.write_text(text, encoding="utf-8")
        return path

    def test_override_merges_with_defaults(self) -> None:
        override_yaml = """
log:
  level: DEBUG

translation:
  target: French

query:
  and_exclusive:
    - name: genders
      terms: [male, female]
"""
        with tempfile.TemporaryDirectory() as tmp:
            default_path = self._write(tmp, "default.yml", _BASE_YAML)
            override_path = self._write(tmp, "override.yml", override_yaml)
            cfg = load_config_with_defaults(override_path, default_path=default_path)

        self.assertEqual(cfg.runtime.level, "DEBUG")
        self.assertEqual(cfg.runtime.dir, "log")
        self.assertEqual(cfg.translation.target, "French")
        self.assertEqual(cfg.translation.source, "auto")
        self.assertEqual([g.name for g in cfg.query.global_exclusive], ["shadow states"])
        self.assertEqual([g.name for g in cfg.query.and_exclusive], ["genders"])

    def test_empty_override_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            default_path = self._write(tmp, "default.yml", _BASE_YAML)
            override_path = self._write(tmp, "override.yml", "{}")
            cfg = load_config_with_defaults(override_path, default_path=default_path)

        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.query.and_exclusive[0].terms, ("3*", "4*"))

    def test_bundled_defaults(self) -> None:
        cfg = load_config_with_defaults()
        self.assertEqual(cfg.runtime.level, "INFO")
        self.assertEqual(cfg.catalog.path_env, "POGOSEARCH_CATALOG")
        self.assertEqual(cfg.output.format, "console")
        self.assertTrue(cfg.translation.auto_detect)

    def test_load_config_without_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = self._write(tmp, "config.yml", "log: {level: WARNING, to_file: false, dir: log}\n")
            cfg = load_config(path)
        self.assertEqual(cfg.runtime.level, "WARNING")
        self.assertEqual(cfg.output.format, "console")

    def test_non_mapping_root_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            default_path = self._write(tmp, "default.yml", _BASE_YAML)
            override_path = self._write(tmp, "override.yml", "- a\n- b\n")
            with self.assertRaisesRegex(ValueError, "Config root must be a mapping"):
                load_config_with_defaults(override_path, default_path=default_path)

    def test_catalog_path_env_overrides_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            default_path = self._write(tmp, "default.yml", _BASE_YAML)
            catalog_path = self._write(tmp, "catalog.yml", _CATALOG_YAML)
            cfg = load_config_with_defaults(None, default_path=default_path)
            with patch.dict(os.environ, {"POGOSEARCH_TEST_CATALOG": str(catalog_path)}, clear=False):
                lexicon = create_lexicon(cfg)

        self.assertEqual(lexicon.languages, ("English", "French"))
        self.assertEqual(len(lexicon.catalog), 1)

    def test_catalog_path_used_without_env(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            catalog_path = self._write(tmp, "catalog.yml", _CATALOG_YAML)
            override_path = self._write(tmp, "override.yml", f"catalog:\n  path: '{catalog_path}'\n")
            default_path = self._write(tmp, "default.yml", _BASE_YAML)
            cfg = load_config_with_defaults(override_path, default_path=default_path)
            with patch.dict(os.environ, {}, clear=False):
                os.environ.pop("POGOSEARCH_TEST_CATALOG", None)
                lexicon = create_lexicon(cfg)

        self.assertEqual(len(lexicon.catalog), 1)


if __name__ == "__main__":
    unittest.main()
