"""
listup_law のデータモデル

出力 JSON の形:
{
  "date": {"era": "Meiji", "year": 5, "month": 8, "day": 3, "ad_year": 1872},
  "file": "<dir>/<file>",
  "name": "...",
  "num": "...",
  "id": "...",
  "patch": [{"dir": ..., "file": ..., "id": ..., "patch_date": {...}, "patch_id": ...}]
}
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .utils.era import Era, ad_to_era, era_to_ad


@dataclass(frozen=True)
class Date:
    """元号年月日。month/day は省略可能だが day があれば month も必須"""
    era: Era
    year: int
    month: Optional[int] = None
    day: Optional[int] = None
    ad_year: Optional[int] = None

    def __post_init__(self):
        if self.year < 0:
            raise ValueError(f"era year must be non-negative: {self.year}")
        if self.month is not None and not 1 <= self.month <= 12:
            raise ValueError(f"month out of range: {self.month}")
        if self.day is not None:
            if self.month is None:
                raise ValueError("day requires month")
            if not 1 <= self.day <= 31:
                raise ValueError(f"day out of range: {self.day}")
        if self.ad_year is None:
            object.__setattr__(self, "ad_year", era_to_ad(self.era, self.year))

    @classmethod
    def from_ad(cls, year: int, month: int, day: int) -> "Date":
        """西暦の年月日から生成（明治より前は DateOutOfRange）"""
        era, era_year = ad_to_era(year, month, day)
        return cls(era=era, year=era_year, month=month, day=day, ad_year=year)

    def compare(self, other: "Date") -> Optional[int]:
        """
        部分順序での比較。-1/0/1 を返し、比較不能なら None

        西暦年が同じ場合、両方に月があるときだけ月で比較し、
        月も同じなら両方に日があるときだけ日で比較する。
        """
        if self.ad_year != other.ad_year:
            return -1 if self.ad_year < other.ad_year else 1
        if self.month is None or other.month is None:
            return None
        if self.month != other.month:
            return -1 if self.month < other.month else 1
        if self.day is None or other.day is None:
            return None
        if self.day != other.day:
            return -1 if self.day < other.day else 1
        return 0

    def sort_key(self) -> Tuple[int, int, int]:
        """全順序のソートキー。欠けている月日は最小として扱う"""
        return (self.ad_year, self.month or 0, self.day or 0)

    def label(self) -> str:
        """e.g. 明治5年, 平成31年4月30日"""
        year = "元" if self.year == 1 else str(self.year)
        text = f"{self.era.kanji}{year}年"
        if self.month is not None:
            text += f"{self.month}月"
            if self.day is not None:
                text += f"{self.day}日"
        return text

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"era": self.era.value, "year": self.year}
        if self.month is not None:
            data["month"] = self.month
        if self.day is not None:
            data["day"] = self.day
        data["ad_year"] = self.ad_year
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Date":
        return cls(
            era=Era.parse(data["era"]),
            year=int(data["year"]),
            month=data.get("month"),
            day=data.get("day"),
            ad_year=data.get("ad_year"),
        )


@dataclass(frozen=True)
class LawPatchInfo:
    """ディスク上の 1 バージョン（改正履歴の 1 件）"""
    dir_name: str
    file_name: str
    id: str
    patch_date: Date
    patch_id: Optional[str] = None

    @property
    def path(self) -> str:
        return f"{self.dir_name}/{self.file_name}"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "dir": self.dir_name,
            "file": self.file_name,
            "id": self.id,
            "patch_date": self.patch_date.to_dict(),
        }
        if self.patch_id is not None:
            data["patch_id"] = self.patch_id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LawPatchInfo":
        return cls(
            dir_name=data["dir"],
            file_name=data["file"],
            id=data["id"],
            patch_date=Date.from_dict(data["patch_date"]),
            patch_id=data.get("patch_id"),
        )


@dataclass
class LawData:
    """法令 1 件分の出力レコード"""
    date: Date
    file: str
    name: str
    num: str
    id: str
    patch: List[LawPatchInfo] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date.to_dict(),
            "file": self.file,
            "name": self.name,
            "num": self.num,
            "id": self.id,
            "patch": [p.to_dict() for p in self.patch],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LawData":
        return cls(
            date=Date.from_dict(data["date"]),
            file=data["file"],
            name=data["name"],
            num=data["num"],
            id=data["id"],
            patch=[LawPatchInfo.from_dict(p) for p in data.get("patch", [])],
        )


@dataclass(frozen=True)
class RegistryEntry:
    """法令一覧 CSV の 1 行（法令番号で引く）"""
    id: str
    name: str


@dataclass(frozen=True)
class ExtractedFields:
    """XML から取り出した公布日・法令番号・法令名"""
    date: Date
    num: str
    title: str
