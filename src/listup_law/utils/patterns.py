"""
法令 XML ファイル名のパターン定義

e-Gov 法令データ一式のファイル名は
<法令ID>_<改正日 YYYYMMDD>_<改正法令ID>.xml
の形をしている（例: 123AC0000000001_20190501_000000000000000.xml）。

このモジュールはパターンと薄いヘルパ関数のみを提供し、
ファイルの読み込みは行わない。
"""

import re
from typing import NamedTuple

from ..errors import FilenamePatternMismatch
from ..models import Date, LawPatchInfo

# ==============================================================================
# 法令 XML ファイル名パターン
# ==============================================================================

# グループ: id, ad_year, month, day, patch_id
LAW_XML_FILENAME_PATTERN = re.compile(
    r'(?P<id>[0-9A-Za-z]+)_'
    r'(?P<ad_year>[0-9]{4})(?P<month>[0-9]{2})(?P<day>[0-9]{2})_'
    r'(?P<patch_id>[0-9A-Za-z]+)\.xml'
)


class ParsedFilename(NamedTuple):
    id: str
    year: int
    month: int
    day: int
    patch_id: str


def parse_law_filename(name: str) -> ParsedFilename:
    """
    ファイル名から法令ID・改正日・改正法令IDを取り出す

    Args:
        name: ディレクトリを含まないファイル名

    Returns:
        ParsedFilename

    Raises:
        FilenamePatternMismatch: パターンに一致しない場合
    """
    m = LAW_XML_FILENAME_PATTERN.fullmatch(name)
    if not m:
        raise FilenamePatternMismatch(name)
    return ParsedFilename(
        id=m.group('id'),
        year=int(m.group('ad_year')),
        month=int(m.group('month')),
        day=int(m.group('day')),
        patch_id=m.group('patch_id'),
    )


def law_patch_info_from_path(dir_name: str, file_name: str) -> LawPatchInfo:
    """ファイル名から LawPatchInfo を作る（改正日が範囲外なら DateOutOfRange）"""
    parsed = parse_law_filename(file_name)
    try:
        patch_date = Date.from_ad(parsed.year, parsed.month, parsed.day)
    except ValueError:
        # 月日が 0 や 13 など
        raise FilenamePatternMismatch(file_name)
    return LawPatchInfo(
        dir_name=dir_name,
        file_name=file_name,
        id=parsed.id,
        patch_date=patch_date,
        patch_id=parsed.patch_id,
    )
