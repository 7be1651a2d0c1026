"""Unit tests for utility functions (promptsite.utils).

Tests cover:
- slugify / compact_name
- format_bytes / format_duration
- Rich output helpers (print_header, print_summary_table, etc.)
"""

from __future__ import annotations

import pytest
from rich.progress import Progress

from promptsite.utils import (
    compact_name,
    create_progress,
    format_bytes,
    format_duration,
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
    slugify,
)


# ---------------------------------------------------------------------------
# slugify
# ---------------------------------------------------------------------------


class TestSlugify:
    @pytest.mark.unit
    def test_basic(self):
        assert slugify("ProbFixora Labs") == "probfixora-labs"

    @pytest.mark.unit
    def test_collapses_punctuation(self):
        assert slugify("  Café & Co. ") == "caf-co"

    @pytest.mark.unit
    def test_strips_edge_hyphens(self):
        assert slugify("--Hello--World--") == "hello-world"

    @pytest.mark.unit
    def test_empty_uses_default(self):
        assert slugify("!!!") == "my-website"
        assert slugify("", default="site") == "site"


class TestCompactName:
    @pytest.mark.unit
    def test_removes_everything_but_alphanumerics(self):
        assert compact_name("ProbFixora Labs") == "probfixoralabs"

    @pytest.mark.unit
    def test_keeps_digits(self):
        assert compact_name("Studio 54") == "studio54"

    @pytest.mark.unit
    def test_default(self):
        assert compact_name("---") == "example"


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


class TestFormatBytes:
    @pytest.mark.unit
    def test_zero(self):
        assert format_bytes(0) == "0 Bytes"

    @pytest.mark.unit
    def test_bytes(self):
        assert format_bytes(500) == "500 Bytes"

    @pytest.mark.unit
    def test_whole_kilobytes_drop_decimal(self):
        assert format_bytes(1024) == "1 KB"

    @pytest.mark.unit
    def test_fractional_kilobytes(self):
        assert format_bytes(1536) == "1.5 KB"

    @pytest.mark.unit
    def test_megabytes(self):
        assert format_bytes(5 * 1024 * 1024) == "5 MB"


class TestFormatDuration:
    @pytest.mark.unit
    def test_seconds(self):
        assert format_duration(3.7) == "3.7s"

    @pytest.mark.unit
    def test_minutes(self):
        assert format_duration(65.2) == "1m 5s"

    @pytest.mark.unit
    def test_negative(self):
        assert format_duration(-1) == "0.0s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichHelpers:
    @pytest.mark.unit
    def test_print_header(self):
        # Should not raise
        print_header("promptsite")

    @pytest.mark.unit
    def test_print_summary_table(self):
        print_summary_table({"Site": "Acme", "Files": 27}, title="Generated project")

    @pytest.mark.unit
    def test_print_success(self):
        print_success("Generated Acme")

    @pytest.mark.unit
    def test_print_error(self):
        print_error("Something failed")

    @pytest.mark.unit
    def test_print_warning(self):
        print_warning("Careful")

    @pytest.mark.unit
    def test_create_progress(self):
        progress = create_progress()
        assert isinstance(progress, Progress)
