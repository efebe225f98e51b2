"""
法令 XML からの公布日・法令番号・法令名の抽出

lxml の target パーサに XML をチャンク単位で流し込み、
start / end / text のイベントだけを見て必要なフィールドを拾う。
DOM は構築しない（法令データ一式には巨大なファイルが含まれるため）。

抽出ルール:
- ルート要素 Law の属性 Era / Year / Month|PromulgateMonth / Day|PromulgateDay
- LawNum 内のテキスト
- LawTitle 内のテキスト（ネストした Ruby のふりがなは除く）

テキストはマークアップで区切られた 1 区間を 1 トークンとし、
前後の空白を除去、空トークンは捨てる。LawNum / LawTitle では
トークンが来るたびに値を置き換える（最後のトークンが残る）。
"""
import codecs
import io
import logging
import re
from pathlib import Path
from typing import BinaryIO, Dict, List, Optional, Union

from lxml import etree

from ..config import DEFAULT_READ_CHUNK_SIZE, DEFAULT_XML_ENCODING
from ..errors import (
    CorpusIOError,
    EncodingError,
    InvalidFieldValue,
    ListupLawFileError,
    XmlParseError,
)
from ..models import Date, ExtractedFields
from ..utils.era import Era

logger = logging.getLogger(__name__)

MONTH_ATTRS = ("Month", "PromulgateMonth")
DAY_ATTRS = ("Day", "PromulgateDay")

_UNSIGNED_INT = re.compile(r"[0-9]+")


def _local_name(tag: str) -> str:
    """'{ns}Law' -> 'Law'"""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def _find_attr(attrib: Dict[str, str], names) -> Optional[str]:
    """属性を文書順に走査し、names のいずれかに最初に一致した値を返す"""
    for key, value in attrib.items():
        if _local_name(key) in names:
            return value
    return None


def _parse_optional_int(value: Optional[str], low: int, high: int) -> Optional[int]:
    if value is None or not _UNSIGNED_INT.fullmatch(value):
        return None
    number = int(value)
    if not low <= number <= high:
        return None
    return number


def parse_law_date(attrib: Dict[str, str]) -> Optional[Date]:
    """
    Law 要素の属性から公布日を作る

    Returns:
        Date。Era または Year が無い場合は None

    Raises:
        UnrecognizedEra: Era が既知の 5 元号以外
        InvalidFieldValue: Year が非負整数でない
    """
    era_value = _find_attr(attrib, ("Era",))
    if era_value is None:
        return None
    era = Era.parse(era_value)

    year_value = _find_attr(attrib, ("Year",))
    if year_value is None:
        return None
    if not _UNSIGNED_INT.fullmatch(year_value):
        raise InvalidFieldValue("Year", year_value)
    year = int(year_value)

    month = _parse_optional_int(_find_attr(attrib, MONTH_ATTRS), 1, 12)
    day = _parse_optional_int(_find_attr(attrib, DAY_ATTRS), 1, 31)
    if day is not None and month is None:
        logger.debug(f"Ignoring Day={day} without Month")
        day = None

    return Date(era=era, year=year, month=month, day=day)


class LawFieldTarget:
    """lxml parser target。イベントごとに capture mode を切り替える"""

    def __init__(self):
        self.date: Optional[Date] = None
        self.law_seen = False
        self.num = ""
        self.title = ""
        self.error: Optional[ListupLawFileError] = None

        self._depth = 0
        self._in_law_num = False
        self._in_law_title = False
        self._in_ruby = False
        self._text: List[str] = []

    def _flush_text(self):
        if not self._text:
            return
        text = "".join(self._text).strip()
        self._text.clear()
        if not text or self._in_ruby:
            return
        if self._in_law_num:
            self.num = text
        elif self._in_law_title:
            self.title = text

    def start(self, tag, attrib):
        if self.error is not None:
            return
        self._flush_text()
        name = _local_name(tag)
        if name == "Law" and self._depth == 0:
            self.law_seen = True
            try:
                self.date = parse_law_date(dict(attrib))
            except ListupLawFileError as e:
                self.error = e
        elif name == "LawNum":
            self._in_law_num = True
        elif name == "LawTitle":
            self._in_law_title = True
        elif name == "Ruby":
            self._in_ruby = True
        self._depth += 1

    def end(self, tag):
        if self.error is not None:
            return
        self._flush_text()
        name = _local_name(tag)
        if name == "LawNum":
            self._in_law_num = False
        elif name == "LawTitle":
            self._in_law_title = False
        elif name == "Ruby":
            self._in_ruby = False
        self._depth -= 1

    def data(self, data):
        if self.error is None:
            self._text.append(data)

    def comment(self, text):
        # コメントもテキストの区切りになる
        if self.error is None:
            self._flush_text()

    def pi(self, target, data=None):
        if self.error is None:
            self._flush_text()

    def close(self):
        if self.error is None:
            self._flush_text()
        return self

    def raise_if_failed(self):
        if self.error is not None:
            raise self.error

    def result(self) -> Optional[ExtractedFields]:
        self.raise_if_failed()
        if not self.law_seen:
            logger.debug("No Law element found")
            return None
        if self.date is None:
            logger.debug("Law element has no Era/Year")
            return None
        return ExtractedFields(date=self.date, num=self.num, title=self.title)


def extract_fields(
    stream: BinaryIO,
    encoding: str = DEFAULT_XML_ENCODING,
    chunk_size: int = DEFAULT_READ_CHUNK_SIZE,
) -> Optional[ExtractedFields]:
    """
    バイトストリームから法令のフィールドを抽出する

    Returns:
        ExtractedFields。Law 要素や Era/Year が見つからない場合は None

    Raises:
        EncodingError: 文書のエンコーディングで復号できない
        XmlParseError: XML として解析できない
        UnrecognizedEra / InvalidFieldValue: Law 属性の値が不正
    """
    target = LawFieldTarget()
    parser = etree.XMLParser(target=target, resolve_entities=False, no_network=True, huge_tree=True)
    decoder = codecs.getincrementaldecoder(encoding)()

    try:
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            decoder.decode(chunk)
            parser.feed(chunk)
            target.raise_if_failed()
        decoder.decode(b"", final=True)
        parser.close()
    except UnicodeDecodeError as e:
        raise EncodingError(f"Cannot decode as {encoding}: {e}") from e
    except etree.XMLSyntaxError as e:
        raise XmlParseError(f"XML parse error: {e}") from e

    return target.result()


def extract_fields_from_bytes(data: bytes, **kwargs) -> Optional[ExtractedFields]:
    return extract_fields(io.BytesIO(data), **kwargs)


def extract_fields_from_path(path: Union[str, Path], **kwargs) -> Optional[ExtractedFields]:
    """ファイルを開いて抽出する。ファイル単位のエラーには path を付けて送出"""
    try:
        f = open(path, "rb")
    except OSError as e:
        raise CorpusIOError(f"Cannot open {path}: {e}") from e
    with f:
        try:
            return extract_fields(f, **kwargs)
        except ListupLawFileError as e:
            raise e.with_path(path)
        except OSError as e:
            raise CorpusIOError(f"Cannot read {path}: {e}") from e
