"""Tests for metadata record variants and accessors."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from MetaResolver.core.models import (
    ExtensiveMeta,
    IncompleteMeta,
    MinimalMeta,
    author,
    citation,
    classify,
    completeness,
    journal,
    raw_metadata,
    thaw_json,
    year,
)
from MetaResolver.sources.doi.parser import extract_author, extract_year


class TestClassify(unittest.TestCase):
    def test_all_present_is_minimal(self) -> None:
        meta = classify("Peikert, Aaron", 2022, "Journal of Statistical Software")
        self.assertEqual(meta, MinimalMeta("Peikert, Aaron", 2022, "Journal of Statistical Software"))

    def test_each_missing_field_is_incomplete(self) -> None:
        cases = [
            (None, 2022, "JSS"),
            ("Peikert, Aaron", None, "JSS"),
            ("Peikert, Aaron", 2022, None),
            (None, None, None),
        ]
        for a, y, j in cases:
            with self.subTest(author=a, year=y, journal=j):
                meta = classify(a, y, j)
                self.assertIsInstance(meta, IncompleteMeta)
                self.assertEqual((meta.author, meta.year, meta.journal), (a, y, j))

    def test_missing_values_are_not_coerced(self) -> None:
        meta = classify("Peikert, Aaron", None, None)
        self.assertIsNone(meta.year)
        self.assertIsNone(meta.journal)

    def test_zero_and_empty_string_count_as_present(self) -> None:
        self.assertIsInstance(classify("", 0, ""), MinimalMeta)


class TestVariantInvariants(unittest.TestCase):
    def test_minimal_rejects_missing_field(self) -> None:
        with self.assertRaises(ValueError):
            MinimalMeta("Peikert, Aaron", None, "JSS")  # type: ignore[arg-type]

    def test_incomplete_rejects_full_record(self) -> None:
        with self.assertRaises(ValueError):
            IncompleteMeta("Peikert, Aaron", 2022, "JSS")

    def test_extensive_requires_classified_inner(self) -> None:
        with self.assertRaises(TypeError):
            ExtensiveMeta(meta={"author": "x"})  # type: ignore[arg-type]

    def test_records_are_frozen(self) -> None:
        meta = MinimalMeta("Peikert, Aaron", 2022, "JSS")
        with self.assertRaises(AttributeError):
            meta.year = 2023  # type: ignore[misc]

    def test_extensive_metadata_is_read_only(self) -> None:
        source = {"title": "StructuralEquationModels.jl"}
        record = ExtensiveMeta(meta=IncompleteMeta(), metadata=source)
        with self.assertRaises(TypeError):
            record.metadata["title"] = "changed"  # type: ignore[index]
        source["title"] = "changed"
        self.assertEqual(record.metadata["title"], "StructuralEquationModels.jl")

    def test_extensive_nested_metadata_is_frozen(self) -> None:
        source = {
            "author": [{"family": "Frank", "given": "Henry S."}],
            "issued": {"date-parts": [[2020]]},
        }
        record = ExtensiveMeta(meta=IncompleteMeta(author="Frank, Henry S.", year=2020), metadata=source)
        with self.assertRaises(AttributeError):
            record.metadata["issued"]["date-parts"].append([1999])  # type: ignore[union-attr]
        with self.assertRaises(TypeError):
            record.metadata["author"][0]["family"] = "Other"  # type: ignore[index]
        source["issued"]["date-parts"].append([1999])
        source["author"].clear()
        self.assertEqual(thaw_json(record.metadata), {
            "author": [{"family": "Frank", "given": "Henry S."}],
            "issued": {"date-parts": [[2020]]},
        })
        self.assertEqual(extract_year(record.metadata), year(record))
        self.assertEqual(extract_author(record.metadata), author(record))


class TestAccessors(unittest.TestCase):
    def test_minimal_and_incomplete_return_stored_fields(self) -> None:
        minimal = MinimalMeta("Frank, Henry S.", 1970, "Science")
        incomplete = IncompleteMeta(author="Frank, Henry S.", year=None, journal="Science")
        self.assertEqual((author(minimal), year(minimal), journal(minimal)), ("Frank, Henry S.", 1970, "Science"))
        self.assertEqual((author(incomplete), year(incomplete), journal(incomplete)), ("Frank, Henry S.", None, "Science"))

    def test_extensive_delegates_to_inner(self) -> None:
        inner = IncompleteMeta(author="Ernst, Maximilian S.", year=2022, journal=None)
        record = ExtensiveMeta(meta=inner, citation="Ernst, M. S. (2022).", metadata={"type": "book"})
        self.assertEqual(author(record), "Ernst, Maximilian S.")
        self.assertEqual(year(record), 2022)
        self.assertIsNone(journal(record))
        self.assertEqual(record.author, "Ernst, Maximilian S.")
        self.assertEqual(citation(record), "Ernst, M. S. (2022).")
        self.assertEqual(dict(raw_metadata(record)), {"type": "book"})

    def test_non_extensive_have_no_citation_or_raw_metadata(self) -> None:
        minimal = MinimalMeta("Frank, Henry S.", 1970, "Science")
        self.assertIsNone(citation(minimal))
        self.assertEqual(dict(raw_metadata(minimal)), {})

    def test_completeness_names(self) -> None:
        minimal = MinimalMeta("a", 1, "j")
        self.assertEqual(completeness(minimal), "minimal")
        self.assertEqual(completeness(IncompleteMeta()), "incomplete")
        self.assertEqual(completeness(ExtensiveMeta(meta=minimal)), "extensive")

    def test_unknown_type_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            year({"year": 2022})  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
