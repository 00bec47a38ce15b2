"""Tests for per-file line classification and scanning."""

import pytest

from xyc.exceptions import FileReadError
from xyc.scanning import FileType, count_lines, scan_file, split_lines
from xyc.scanning.filetypes import XML, YANG


# ---------------------------------------------------------------------------
# Line splitting
# ---------------------------------------------------------------------------


class TestSplitLines:
    def test_empty_content_has_no_lines(self):
        assert split_lines("") == []

    def test_trailing_newline_adds_no_line(self):
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_missing_trailing_newline(self):
        assert split_lines("a\nb") == ["a", "b"]

    def test_single_newline_is_one_blank_line(self):
        assert split_lines("\n") == [""]

    def test_crlf_terminators_are_stripped(self):
        assert split_lines("a\r\nb\r\n") == ["a", "b"]

    def test_other_unicode_breaks_do_not_split(self):
        assert split_lines("a b\x0cc\n") == ["a b\x0cc"]


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


class TestYangClassification:
    def test_reference_example(self):
        content = "// header\n\nleaf foo { type string; }\n/* trailing */\n"
        counts = count_lines(content, YANG)
        assert counts.lines == 4
        assert counts.blanks == 1
        assert counts.comments == 2

    def test_indented_comment_counts(self):
        counts = count_lines("    // indented\n", YANG)
        assert counts.comments == 1

    def test_trailing_comment_is_code(self):
        counts = count_lines("leaf x; // trailing\n", YANG)
        assert counts.comments == 0

    def test_block_continuation_lines_are_not_comments(self):
        content = "/* first\n   second\n*/\n"
        counts = count_lines(content, YANG)
        assert counts.lines == 3
        assert counts.comments == 1

    def test_xml_marker_is_not_a_yang_comment(self):
        counts = count_lines("<!-- not yang -->\n", YANG)
        assert counts.comments == 0

    def test_whitespace_only_lines_are_blank(self):
        counts = count_lines("  \t \n\n", YANG)
        assert counts.blanks == 2
        assert counts.comments == 0

    def test_unicode_whitespace_is_blank(self):
        counts = count_lines("\u3000\u2003\n\xa0\t\u2028\n", YANG)
        assert counts.blanks == 2

    def test_information_separators_are_not_whitespace(self):
        counts = count_lines("\x1c\x1d\x1e\x1f\n", YANG)
        assert counts.lines == 1
        assert counts.blanks == 0


class TestXmlClassification:
    def test_single_comment_line(self):
        counts = count_lines("<!-- note -->", XML)
        assert counts.lines == 1
        assert counts.comments == 1
        assert counts.blanks == 0

    def test_marker_anywhere_in_line(self):
        counts = count_lines("<a/> <!-- trailing -->\n", XML)
        assert counts.comments == 1

    def test_multiline_comment_body_is_code(self):
        content = "<!--\n  body\n-->\n"
        counts = count_lines(content, XML)
        assert counts.lines == 3
        assert counts.comments == 1

    def test_yang_markers_are_not_xml_comments(self):
        counts = count_lines("// not xml\n/* nor this */\n", XML)
        assert counts.comments == 0


@pytest.mark.parametrize("config", [XML, YANG])
@pytest.mark.parametrize(
    "content",
    [
        "",
        "\n\n\n",
        "// a\n<!-- b -->\n\nplain\n",
        "/*\n*/\n  \n<!--x-->",
    ],
)
def test_comments_and_blanks_never_exceed_lines(config, content):
    counts = count_lines(content, config)
    assert counts.comments + counts.blanks <= counts.lines


# ---------------------------------------------------------------------------
# scan_file
# ---------------------------------------------------------------------------


class TestScanFile:
    def test_empty_file(self, write_file):
        record = scan_file(write_file("empty.yang", ""))
        assert record is not None
        assert (record.lines, record.characters, record.blanks, record.comments) == (0, 0, 0, 0)

    def test_yang_record(self, write_file):
        p = write_file("m.yang", "// header\n\nleaf foo { type string; }\n/* trailing */\n")
        record = scan_file(p)
        assert record.file_type is FileType.YANG
        assert record.path == str(p)
        assert record.lines == 4
        assert record.comments == 2
        assert record.blanks == 1
        assert record.code == 1

    def test_characters_include_line_terminators(self, write_file):
        record = scan_file(write_file("a.xml", "<a/>\n<b/>\n"))
        assert record.characters == 10

    def test_characters_count_code_points_not_bytes(self, write_file):
        record = scan_file(write_file("u.xml", "<n>é中</n>"))
        assert record.characters == 9

    def test_crlf_file(self, write_file):
        record = scan_file(write_file("w.xml", "<a/>\r\n\r\n<!-- c -->\r\n"))
        assert record.lines == 3
        assert record.blanks == 1
        assert record.comments == 1
        assert record.characters == 20

    @pytest.mark.parametrize("name", ["FOO.XML", "foo.xml", "Foo.Xml"])
    def test_extension_is_case_insensitive(self, write_file, name):
        record = scan_file(write_file(name, "<a/>\n"))
        assert record.file_type is FileType.XML

    @pytest.mark.parametrize("name", ["notes.txt", "Makefile", ".xml", "model.yang.bak"])
    def test_unsupported_extension_returns_none(self, write_file, name):
        assert scan_file(write_file(name, "x\n")) is None

    def test_filter_xml_rejects_yang(self, write_file):
        p = write_file("m.yang", "x\n")
        assert scan_file(p, "xml") is None
        assert scan_file(p, "yang") is not None
        assert scan_file(p, "all") is not None

    def test_filter_yang_rejects_xml(self, write_file):
        p = write_file("c.xml", "<a/>\n")
        assert scan_file(p, "yang") is None
        assert scan_file(p, "xml") is not None

    def test_filtered_file_is_never_read(self, tmp_path):
        p = tmp_path / "bad.yang"
        p.write_bytes(b"\xff\xfe\x00")
        assert scan_file(p, "xml") is None

    def test_invalid_utf8_raises(self, tmp_path):
        p = tmp_path / "bad.xml"
        p.write_bytes(b"<a>\xff</a>\n")
        with pytest.raises(FileReadError) as exc_info:
            scan_file(p)
        assert "invalid UTF-8" in exc_info.value.reason

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileReadError):
            scan_file(tmp_path / "gone.xml")
