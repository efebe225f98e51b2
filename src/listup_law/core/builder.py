"""
法令データ一式からインデックス JSON を生成する

1. work_dir/<法令ID>/<バージョン>.xml を走査し、ファイル名から改正履歴を作る
2. 法令IDごとに XML を読み、公布日・法令番号・法令名を取り出す
   - per_law: 最新の改正日のファイル（authoritative version）だけを読む
   - per_file: 全バージョンを読み、ファイルごとに 1 レコード出力する
3. レコードを JSON 配列として書き出す

ファイル単位のエラーは警告を出してスキップし、
ディレクトリやファイルにアクセスできない場合だけ中断する。
"""
import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from tqdm import tqdm

from ..config import STRATEGIES, Settings
from ..errors import ListupLawFileError
from ..models import LawData, LawPatchInfo
from ..utils.fs import iter_law_files
from ..utils.jsonio import JsonArrayWriter
from ..utils.patterns import law_patch_info_from_path
from .assembler import RecordAssembler
from .extractor import extract_fields_from_path
from .patch_chain import PatchChainBuilder
from .registry import load_registry

logger = logging.getLogger(__name__)


@dataclass
class BuildReport:
    written: int = 0
    skipped: int = 0
    dropped: int = 0
    failures: List[Dict[str, str]] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return asdict(self)


class IndexBuilder:
    def __init__(
        self,
        work_dir: Union[str, Path],
        output: Union[str, Path],
        registry_path: Optional[Union[str, Path]] = None,
        strategy: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        self.work_dir = Path(work_dir)
        self.output = Path(output)
        self.settings = settings or Settings()
        self.strategy = strategy or self.settings.strategy
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Invalid strategy: {self.strategy}. Must be one of {STRATEGIES}.")

        registry = None
        if registry_path is not None:
            registry = load_registry(registry_path, encoding=self.settings.registry_encoding)
        self.assembler = RecordAssembler(registry)
        self.report = BuildReport()

    def _skip(self, path: Union[str, Path], reason: str, message: str):
        logger.warning(f"{path}: {message}")
        self.report.skipped += 1
        self.report.failures.append({"file": str(path), "reason": reason, "error": message})

    def _drop(self, path: Union[str, Path], reason: str):
        self.report.dropped += 1
        self.report.failures.append({"file": str(path), "reason": reason})

    def scan(self) -> PatchChainBuilder:
        """ファイル名だけを見て法令IDごとの改正履歴を集める"""
        chains = PatchChainBuilder()
        for dir_name, file_name, path in iter_law_files(self.work_dir):
            try:
                info = law_patch_info_from_path(dir_name, file_name)
            except ListupLawFileError as e:
                self._skip(path, e.reason, str(e))
                continue
            chains.add(info)
        logger.info(f"Found {len(chains)} laws in {self.work_dir}")
        return chains

    def build_record(self, source: LawPatchInfo, chain: List[LawPatchInfo]) -> Optional[LawData]:
        path = self.work_dir / source.dir_name / source.file_name
        try:
            fields = extract_fields_from_path(
                path,
                encoding=self.settings.xml_encoding,
                chunk_size=self.settings.read_chunk_size,
            )
        except ListupLawFileError as e:
            self._skip(path, e.reason, str(e))
            return None

        if fields is None:
            logger.warning(f"{path}: no Law element with Era/Year, skipped")
            self._drop(path, "missing_required_field")
            return None

        record = self.assembler.assemble(fields, source, chain)
        if record is None:
            self._drop(path, "registry_lookup_miss")
        return record

    def build(self) -> BuildReport:
        logger.info("[START] get law list")
        chains = self.scan()
        logger.info("[END] get law list")

        logger.info(f"[START] write json file ({self.strategy})")
        with JsonArrayWriter(self.output) as writer:
            for law_id in tqdm(chains.law_ids(), desc="Building index"):
                chain = chains.ordered_chain(law_id)
                if self.strategy == "per_law":
                    sources = [chains.authoritative_version(law_id)]
                else:
                    sources = chain
                for source in sources:
                    record = self.build_record(source, chain)
                    if record is not None:
                        writer.write(record)
                        self.report.written += 1
        logger.info("[END] write json file")

        logger.info(
            f"Wrote {self.report.written} records to {self.output} "
            f"(skipped {self.report.skipped}, dropped {self.report.dropped})"
        )
        return self.report

    def write_report(self, path: Optional[Union[str, Path]] = None) -> Path:
        path = Path(path) if path else self.output.with_name(self.output.stem + ".report.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.report.to_dict(), f, indent=2, ensure_ascii=False)
        return path
