"""Tests for per-type aggregation."""

from xyc.aggregation import TOTAL_LABEL, summarize
from xyc.scanning import FileRecord, FileType


def _record(path, file_type, lines=10, characters=100, comments=2, blanks=1):
    return FileRecord(
        path=path,
        file_type=file_type,
        lines=lines,
        characters=characters,
        comments=comments,
        blanks=blanks,
    )


class TestSummarize:
    def test_empty(self):
        summary = summarize([])
        assert summary.rows == []
        assert summary.total.label == TOTAL_LABEL
        assert summary.total.files == 0

    def test_rows_sorted_by_type_name(self):
        records = [
            _record("b.yang", FileType.YANG),
            _record("a.xml", FileType.XML),
            _record("c.yang", FileType.YANG),
        ]
        summary = summarize(records)
        assert [row.label for row in summary.rows] == ["XML", "YANG"]

    def test_group_sums_match_records(self):
        records = [
            _record("a.yang", FileType.YANG, lines=4, characters=40, comments=2, blanks=1),
            _record("b.yang", FileType.YANG, lines=6, characters=60, comments=0, blanks=3),
            _record("c.xml", FileType.XML, lines=1, characters=13, comments=1, blanks=0),
        ]
        summary = summarize(records)
        by_label = {row.label: row for row in summary.rows}

        for file_type in FileType:
            group = [r for r in records if r.file_type is file_type]
            row = by_label[file_type.value]
            assert row.files == len(group)
            assert row.lines == sum(r.lines for r in group)
            assert row.characters == sum(r.characters for r in group)
            assert row.comments == sum(r.comments for r in group)
            assert row.blanks == sum(r.blanks for r in group)

    def test_total_spans_all_types(self):
        records = [
            _record("a.yang", FileType.YANG, lines=4),
            _record("c.xml", FileType.XML, lines=1),
        ]
        total = summarize(records).total
        assert total.files == 2
        assert total.lines == 5
        assert total.characters == 200

    def test_single_type_has_single_row(self):
        summary = summarize([_record("a.xml", FileType.XML)])
        assert len(summary.rows) == 1
        assert summary.rows[0].to_dict() == {
            "label": "XML",
            "files": 1,
            "lines": 10,
            "characters": 100,
            "comments": 2,
            "blanks": 1,
        }
