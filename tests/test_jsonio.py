"""
Tests for utils/jsonio.py - JSON 配列の逐次書き出し
"""
import json

import pytest
from listup_law.models import Date, LawData
from listup_law.utils.era import Era
from listup_law.utils.jsonio import JsonArrayWriter, load_index


def record(law_id: str) -> LawData:
    return LawData(date=Date(era=Era.SHOWA, year=22, month=5, day=3), file=f"{law_id}/f.xml",
                   name="日本国憲法", num="", id=law_id)


class TestJsonArrayWriter:

    def test_empty_array(self, tmp_path):
        path = tmp_path / "empty.json"
        with JsonArrayWriter(path) as writer:
            pass
        assert writer.count == 0
        assert json.loads(path.read_text(encoding="utf-8")) == []

    def test_records_are_comma_separated(self, tmp_path):
        path = tmp_path / "out.json"
        with JsonArrayWriter(path) as writer:
            writer.write(record("A"))
            writer.write(record("B"))
        text = path.read_text(encoding="utf-8")
        assert "日本国憲法" in text
        assert [r["id"] for r in json.loads(text)] == ["A", "B"]
        assert [r.id for r in load_index(path)] == ["A", "B"]

    def test_error_inside_block_leaves_no_output(self, tmp_path):
        path = tmp_path / "out.json"
        with pytest.raises(RuntimeError):
            with JsonArrayWriter(path) as writer:
                writer.write(record("A"))
                raise RuntimeError("stop")
        assert not path.exists()
        assert not writer.part_path.exists()
