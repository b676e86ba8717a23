"""Tests for search-string translation over the bundled catalog."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from PogoSearch.core.models import SegmentOutcome
from PogoSearch.lexicon import load_lexicon
from PogoSearch.lexicon.catalog import ConceptId
from PogoSearch.query import parse_search_string, tokenize
from PogoSearch.translation import Translator

PSYCHIC_SOURCE_WARNING = (
    "WARNING: Psychic could mean either Psychic (type) or Psychic (move)! "
    "This page defaults to @Psychic (Move), please edit the output if you want @Psychic (type)"
)
VOL_TARGET_WARNING = (
    "WARNING: Vol means both Flying (type) and Fly (move) [type taking priority], "
    "so your output may be different than expected"
)


class TestTranslator(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.translator = Translator(load_lexicon())

    def test_basic_translation(self) -> None:
        result = self.translator.translate("Fire&!shiny", "English", "French")
        self.assertEqual(result.text, "Feu&!chromatique")
        self.assertEqual(result.warnings, ())
        self.assertEqual((result.source, result.target), ("English", "French"))

    def test_case_and_accent_insensitive_lookup(self) -> None:
        self.assertEqual(self.translator.translate("FIRE", "English", "French").text, "Feu")
        self.assertEqual(self.translator.translate("purifie", "French", "English").text, "purified")

    def test_prefix_and_postfix_preserved(self) -> None:
        result = self.translator.translate("!Fire&cp10-&4*&+Pikachu", "English", "German")
        self.assertEqual(result.text, "!Feuer&cp10-&4*&+Pikachu")

    def test_overlap_selects_by_search_type(self) -> None:
        self.assertEqual(self.translator.translate("psychic", "English", "French").text, "Psy")
        move = self.translator.translate("@psychic", "English", "French")
        self.assertEqual(move.text, "@Psyko")
        self.assertEqual(move.warnings, (PSYCHIC_SOURCE_WARNING,))

        self.assertEqual(self.translator.translate("Vol", "French", "English").text, "Flying")
        self.assertEqual(self.translator.translate("@Vol", "French", "English").text, "@Fly")

    def test_target_side_warning(self) -> None:
        result = self.translator.translate("@Fly", "English", "French")
        self.assertEqual(result.text, "@Vol")
        self.assertEqual(result.warnings, (VOL_TARGET_WARNING,))

    def test_wildcard_warning_and_untranslatable_overlap(self) -> None:
        result = self.translator.translate("ゴースト", "Japanese", "English")
        self.assertEqual(result.text, "Ghost")
        self.assertEqual(len(result.warnings), 1)
        self.assertIn("ゴースト could mean either Ghost", result.warnings[0])

        # Both Japanese positions are pinned to names, so the move form passes through.
        move = self.translator.translate("@ゴースト", "Japanese", "English")
        self.assertEqual(move.text, "@ゴースト")
        self.assertEqual(move.warnings, ())

    def test_warning_emitted_once(self) -> None:
        result = self.translator.translate("@psychic,@psychic,@Psychic", "English", "French")
        self.assertEqual(result.text, "@Psyko,@Psyko,@Psyko")
        self.assertEqual(result.warnings, (PSYCHIC_SOURCE_WARNING,))

    def test_same_language_is_identity(self) -> None:
        text = "@psychic&Fire,#tag&cp10-"
        result = self.translator.translate(text, "English", "English")
        self.assertEqual(result.text, text)
        self.assertEqual(result.warnings, ())
        self.assertEqual(result.diagnostics, ())

    def test_round_trip(self) -> None:
        text = "Fire,Water&!shiny&cp10-&Pikachu"
        for language in ["German", "Japanese", "Russian", "Korean", "Thai"]:
            with self.subTest(language=language):
                there = self.translator.translate(text, "English", language)
                back = self.translator.translate(there.text, language, "English")
                self.assertEqual(back.text, text)

    def test_operator_shape_preserved(self) -> None:
        text = "Fire,Water&!shiny&cp10-"
        result = self.translator.translate(text, "English", "Japanese")
        self.assertEqual(
            [t.type for t in tokenize(text)],
            [t.type for t in tokenize(result.text)],
        )
        self.assertEqual(len(parse_search_string(result.text).included), 3)

    def test_unknown_terms_pass_through(self) -> None:
        result = self.translator.translate("Fire&Missingno", "English", "French")
        self.assertEqual(result.text, "Feu&Missingno")

    def test_diagnostics(self) -> None:
        result = self.translator.translate("Fire&cp10-&#tag", "English", "French")
        self.assertEqual(
            [d.outcome for d in result.diagnostics],
            [SegmentOutcome.TRANSLATED, SegmentOutcome.UNTRANSLATED, SegmentOutcome.SKIPPED],
        )
        self.assertEqual(result.diagnostics[0].replacement, "Feu")
        self.assertIsNone(result.diagnostics[2].search_type)

    def test_tag_conflict_warning(self) -> None:
        result = self.translator.translate("#Feu&Fire", "English", "French")
        self.assertEqual(result.text, "#Feu&Feu")
        self.assertEqual(result.warnings, ("WARNING: Tag 'Feu' will conflict with a phrase in French",))
        self.assertEqual(self.translator.translate("#mytag", "English", "French").warnings, ())

    def test_lowercase_uses_target_locale(self) -> None:
        self.assertEqual(self.translator.translate("Fire&IV", "English", "Turkish", lowercase=True).text, "ateş&ıv")
        self.assertEqual(self.translator.translate("Fire&IV", "English", "German", lowercase=True).text, "feuer&iv")

    def test_unknown_language(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown language"):
            self.translator.translate("Fire", "English", "Klingon")
        with self.assertRaisesRegex(ValueError, "Unknown language"):
            self.translator.translate("Fire", "Klingon", "English")

    def test_empty_text(self) -> None:
        self.assertEqual(self.translator.translate("", "English", "French").text, "")

    def test_unaccented_source_keeps_warning(self) -> None:
        accented = self.translator.translate("@Psíquico", "Spanish", "English")
        bare = self.translator.translate("@psiquico", "Spanish", "English")
        self.assertEqual(bare.text, "@Psychic")
        self.assertEqual(bare.warnings, accented.warnings)
        self.assertEqual(
            bare.warnings,
            (
                "WARNING: Psíquico could mean either Psychic (type) or Psychic (move)! "
                "This page defaults to @Psychic (Move), please edit the output if you want @Psychic (type)",
                "WARNING: Psychic means both Psychic (type) and Psychic (move) [type taking priority], "
                "so your output may be different than expected",
            ),
        )

    def test_accent_variants_share_one_warning(self) -> None:
        result = self.translator.translate("@Psíquico,@psiquico,@PSIQUICO", "Spanish", "English")
        self.assertEqual(result.text, "@Psychic,@Psychic,@Psychic")
        self.assertEqual(len(result.warnings), 2)


class TestCatalogRoundTrip(unittest.TestCase):
    """Every unambiguous catalog term survives English -> language -> English."""

    @classmethod
    def setUpClass(cls) -> None:
        cls.lexicon = load_lexicon()
        cls.translator = Translator(cls.lexicon)

    def test_every_concept_in_every_language(self) -> None:
        catalog = self.lexicon.catalog
        canonical = catalog.canonical
        for concept in map(ConceptId, range(len(catalog))):
            source_form = catalog.term(concept, canonical)
            if len(catalog.candidates(source_form, canonical)) > 1:
                continue
            for language in catalog.languages:
                if language == canonical:
                    continue
                form = catalog.term(concept, language)
                if len(catalog.candidates(form, language)) > 1:
                    continue
                for prefix in ("", "@"):
                    text = f"{prefix}{source_form}"
                    with self.subTest(concept=catalog.key(concept), language=language, text=text):
                        there = self.translator.translate(text, canonical, language)
                        self.assertEqual(there.text, f"{prefix}{form}")
                        back = self.translator.translate(there.text, language, canonical)
                        self.assertEqual(back.text, text)


if __name__ == "__main__":
    unittest.main()
