"""
抽出結果・パッチチェーン・法令一覧から出力レコードを組み立てる
"""
import logging
from typing import Dict, List, Optional

from ..errors import RegistryLookupMiss
from ..models import ExtractedFields, LawData, LawPatchInfo, RegistryEntry

logger = logging.getLogger(__name__)


class RecordAssembler:
    """
    registry が無ければ法令IDはファイル名、法令名・法令番号は XML から取る。
    registry があれば抽出した法令番号で引いた ID・名称を使い、
    見つからないレコードは警告を出して捨てる。
    """

    def __init__(self, registry: Optional[Dict[str, RegistryEntry]] = None):
        self.registry = registry

    def lookup(self, law_num: str) -> RegistryEntry:
        entry = self.registry.get(law_num) if self.registry is not None else None
        if entry is None:
            raise RegistryLookupMiss(law_num)
        return entry

    def assemble(
        self,
        fields: ExtractedFields,
        source: LawPatchInfo,
        chain: List[LawPatchInfo],
    ) -> Optional[LawData]:
        law_id = source.id
        name = fields.title

        if self.registry is not None:
            try:
                entry = self.lookup(fields.num)
            except RegistryLookupMiss as e:
                logger.warning(f"{source.path}: {e}")
                return None
            law_id = entry.id
            name = entry.name

        return LawData(
            date=fields.date,
            file=source.path,
            name=name,
            num=fields.num,
            id=law_id,
            patch=list(chain),
        )
