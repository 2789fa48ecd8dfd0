"""
Tests for loading the bundled example documents.
"""

import logging

from html_pdf_sandbox.example_store import SAMPLE_NAMES, example_filename, load_examples


class TestExampleStore:
    def test_filename_is_derived_from_identifier(self):
        assert example_filename("hello-world") == "hello-world.htm"

    def test_bundled_samples_load(self):
        """Every bundled sample loads as a non-empty entry keyed by filename."""
        examples = load_examples()
        assert set(examples) == {example_filename(name) for name in SAMPLE_NAMES}
        assert all(content.strip() for content in examples.values())
        assert "Hello world!" in examples["hello-world.htm"]

    def test_non_ascii_samples_are_decoded_as_utf8(self):
        examples = load_examples(["arabic-rtl", "cjk-text"])
        assert "مرحبا" in examples["arabic-rtl.htm"]
        assert "你好" in examples["cjk-text.htm"]

    def test_missing_sample_is_logged_and_skipped(self, tmp_path, caplog):
        """A sample that cannot be read does not stop the others from loading."""
        (tmp_path / "present.htm").write_text("<p>here</p>", encoding="utf-8")

        with caplog.at_level(logging.ERROR, logger="html_pdf_sandbox.example_store"):
            examples = load_examples(["missing", "present"], root=tmp_path)

        assert examples == {"present.htm": "<p>here</p>"}
        assert "missing.htm" in caplog.text

    def test_undecodable_sample_is_skipped(self, tmp_path):
        (tmp_path / "latin1.htm").write_bytes("café".encode("latin-1"))
        (tmp_path / "ok.htm").write_text("ok", encoding="utf-8")

        examples = load_examples(["latin1", "ok"], root=tmp_path)

        assert list(examples) == ["ok.htm"]

    def test_no_samples_gives_empty_mapping(self, tmp_path):
        assert load_examples([], root=tmp_path) == {}
