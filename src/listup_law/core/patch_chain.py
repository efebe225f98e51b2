"""
改正履歴（パッチチェーン）の組み立て

ディレクトリ走査の順序は不定なので、法令IDごとに LawPatchInfo を
溜めておき、全ファイルを見終わってから改正日順に並べる。
同じ改正日のバージョンは patch_id の辞書順（patch_id なしが先）、
さらに file_name の辞書順で並べる。
"""
import logging
from typing import Dict, Iterable, List, Tuple

from ..models import LawPatchInfo

logger = logging.getLogger(__name__)


def patch_sort_key(info: LawPatchInfo) -> Tuple:
    return (
        info.patch_date.sort_key(),
        info.patch_id is not None,
        info.patch_id or "",
        info.file_name,
    )


class PatchChainBuilder:
    def __init__(self, infos: Iterable[LawPatchInfo] = ()):
        self._chains: Dict[str, List[LawPatchInfo]] = {}
        for info in infos:
            self.add(info)

    def add(self, info: LawPatchInfo):
        chain = self._chains.setdefault(info.id, [])
        chain.append(info)
        logger.debug(f"patch {info.id}: {info.path} ({len(chain)} versions)")

    def law_ids(self) -> List[str]:
        return sorted(self._chains)

    def ordered_chain(self, law_id: str) -> List[LawPatchInfo]:
        """改正日の昇順に並べた履歴（KeyError: 未登録の法令ID）"""
        return sorted(self._chains[law_id], key=patch_sort_key)

    def authoritative_version(self, law_id: str) -> LawPatchInfo:
        """最新の改正日のバージョン。法令名・法令番号はこのファイルから取る"""
        return self.ordered_chain(law_id)[-1]

    def __len__(self):
        return len(self._chains)

    def __contains__(self, law_id):
        return law_id in self._chains
