"""
法令一覧 CSV（all_law_list.csv）の読み込み

列: 法令種別,法令番号,法令名,法令名読み,旧法令名,公布日,改正法令名,
    改正法令番号,改正法令公布日,施行日,施行日備考,法令ID,本文URL,未施行,所管課確認中

法令番号 -> (法令ID, 法令名) の辞書を作る。ファイルは Shift_JIS (cp932)。
"""
import csv
import logging
from pathlib import Path
from typing import Dict, Union

from ..config import DEFAULT_REGISTRY_ENCODING
from ..errors import CorpusIOError
from ..models import RegistryEntry

logger = logging.getLogger(__name__)

COL_LAW_NUM = 1
COL_LAW_NAME = 2
COL_LAW_ID = 11


def load_registry(
    path: Union[str, Path],
    encoding: str = DEFAULT_REGISTRY_ENCODING,
) -> Dict[str, RegistryEntry]:
    """
    Load the registry CSV keyed by law number.

    The first row is a header. Undecodable bytes are replaced rather than
    failing the whole load. Later rows override earlier rows with the same
    law number.
    """
    try:
        with open(path, "r", encoding=encoding, errors="replace", newline="") as f:
            reader = csv.reader(f)
            next(reader, None)
            registry = {}
            for line_no, row in enumerate(reader, start=2):
                if not row:
                    continue
                if len(row) <= COL_LAW_ID:
                    logger.warning(f"{path}:{line_no}: too few columns ({len(row)}), skipped")
                    continue
                registry[row[COL_LAW_NUM]] = RegistryEntry(id=row[COL_LAW_ID], name=row[COL_LAW_NAME])
    except OSError as e:
        raise CorpusIOError(f"Cannot read registry {path}: {e}") from e

    logger.info(f"Loaded {len(registry)} registry entries from {path}")
    return registry
