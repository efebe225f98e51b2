"""
インデックス JSON の書き出しと読み込み

書き出しは 1 レコードずつ "[" / "," / "]" を手で書く。
全レコードをメモリに溜めずに済む。
"""
import json
from pathlib import Path
from typing import List, Union

from ..errors import CorpusIOError
from ..models import LawData


class JsonArrayWriter:
    """
    <path>.part に書き、正常終了したときだけ path に置き換える。
    途中で例外が出た場合は .part を消し、path は書き換えない。
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self.part_path = self.path.with_name(self.path.name + ".part")
        self.count = 0
        self._f = None

    def __enter__(self):
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._f = open(self.part_path, "w", encoding="utf-8")
        except OSError as e:
            raise CorpusIOError(f"Cannot open output {self.part_path}: {e}") from e
        self._f.write("[")
        return self

    def write(self, record: LawData):
        text = json.dumps(record.to_dict(), ensure_ascii=False)
        self._f.write(("," if self.count else "") + "\n" + text)
        self.count += 1

    def __exit__(self, exc_type, exc, tb):
        if exc_type is not None:
            self._f.close()
            self.part_path.unlink(missing_ok=True)
            return False
        try:
            try:
                self._f.write("\n]\n" if self.count else "]\n")
            finally:
                self._f.close()
            self.part_path.replace(self.path)
        except OSError as e:
            raise CorpusIOError(f"Cannot write output {self.path}: {e}") from e
        return False


def load_index(path: Union[str, Path]) -> List[LawData]:
    """書き出したインデックスを LawData のリストとして読み戻す"""
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    return [LawData.from_dict(item) for item in raw]
