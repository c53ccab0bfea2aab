"""Tests for CSL-JSON parsing and field extraction."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from MetaResolver.core.errors import ErrorKind, MalformedMetadata
from MetaResolver.sources.doi.parser import (
    extract_author,
    extract_journal,
    extract_year,
    flatten_name,
    parse_csl_json,
)


class TestParseCslJson(unittest.TestCase):
    def test_parses_object_and_keeps_key_order(self) -> None:
        data = parse_csl_json(b'{"type": "book", "title": "T", "DOI": "10.1/x"}')
        self.assertEqual(list(data), ["type", "title", "DOI"])

    def test_invalid_json_is_malformed(self) -> None:
        with self.assertRaises(MalformedMetadata) as ctx:
            parse_csl_json(b"<html>not json</html>")
        self.assertEqual(ctx.exception.kind, ErrorKind.MALFORMED_METADATA)

    def test_non_object_root_is_malformed(self) -> None:
        with self.assertRaises(MalformedMetadata):
            parse_csl_json(b"[1, 2, 3]")

    def test_invalid_utf8_is_malformed(self) -> None:
        with self.assertRaises(MalformedMetadata):
            parse_csl_json(b"\xff\xfe\xfa")


class TestExtractYear(unittest.TestCase):
    def test_last_date_parts_entry_wins(self) -> None:
        self.assertEqual(extract_year({"issued": {"date-parts": [[1970, 1, 1], [1971, 6]]}}), 1971)

    def test_single_entry(self) -> None:
        self.assertEqual(extract_year({"issued": {"date-parts": [[2022, 6, 24]]}}), 2022)

    def test_missing_keys(self) -> None:
        self.assertIsNone(extract_year({}))
        self.assertIsNone(extract_year({"issued": {}}))

    def test_empty_entries(self) -> None:
        self.assertIsNone(extract_year({"issued": {"date-parts": []}}))
        self.assertIsNone(extract_year({"issued": {"date-parts": [[2020], []]}}))
        self.assertIsNone(extract_year({"issued": {"date-parts": [[None]]}}))

    def test_unexpected_shapes(self) -> None:
        self.assertIsNone(extract_year({"issued": "2020"}))
        self.assertIsNone(extract_year({"issued": {"date-parts": "2020"}}))
        self.assertIsNone(extract_year({"issued": {"date-parts": [[True]]}}))

    def test_numeric_string_year(self) -> None:
        self.assertEqual(extract_year({"issued": {"date-parts": [["2021", "3"]]}}), 2021)


class TestFlattenName(unittest.TestCase):
    def test_literal(self) -> None:
        self.assertEqual(flatten_name({"literal": "World Health Organization"}), "World Health Organization")

    def test_literal_takes_precedence(self) -> None:
        self.assertEqual(flatten_name({"literal": "WHO", "family": "Frank", "given": "Henry"}), "WHO")

    def test_family_and_given(self) -> None:
        self.assertEqual(flatten_name({"family": "Frank", "given": "Henry S."}), "Frank, Henry S.")

    def test_family_only(self) -> None:
        self.assertEqual(flatten_name({"family": "Frank"}), "Frank")

    def test_given_only_is_missing(self) -> None:
        self.assertIsNone(flatten_name({"given": "Henry"}))
        self.assertIsNone(flatten_name({}))

    def test_list_drops_unusable_entries(self) -> None:
        self.assertEqual(flatten_name([{"family": "Frank", "given": "Henry"}, {}]), "Frank, Henry")

    def test_list_joins_in_order(self) -> None:
        value = [
            {"family": "Ernst", "given": "Maximilian S."},
            {"family": "Peikert", "given": "Aaron"},
            {"literal": "SEM Team"},
        ]
        self.assertEqual(flatten_name(value), "Ernst, Maximilian S. & Peikert, Aaron & SEM Team")

    def test_list_without_usable_entries(self) -> None:
        self.assertIsNone(flatten_name([]))
        self.assertIsNone(flatten_name([{}, {"given": "Henry"}, "not a mapping"]))


class TestExtractAuthorAndJournal(unittest.TestCase):
    def test_author(self) -> None:
        item = {"author": [{"family": "Ernst", "given": "Maximilian S."}]}
        self.assertEqual(extract_author(item), "Ernst, Maximilian S.")

    def test_author_missing(self) -> None:
        self.assertIsNone(extract_author({}))
        self.assertIsNone(extract_author({"author": []}))

    def test_journal(self) -> None:
        item = {"container-title": "Journal of Statistical Software"}
        self.assertEqual(extract_journal(item), "Journal of Statistical Software")

    def test_journal_missing(self) -> None:
        self.assertIsNone(extract_journal({}))
        self.assertIsNone(extract_journal({"container-title": None}))

    def test_empty_strings_are_present_values(self) -> None:
        self.assertEqual(extract_journal({"container-title": ""}), "")
        self.assertEqual(extract_author({"author": [{"literal": ""}]}), "")
        self.assertEqual(extract_author({"author": {"family": ""}}), "")

    def test_journal_list_takes_first_title(self) -> None:
        self.assertEqual(extract_journal({"container-title": [7, "Science", "Sci."]}), "Science")


if __name__ == "__main__":
    unittest.main()
