"""
和暦（元号）と西暦の変換

元号ごとの西暦オフセットと改元境界はデータとして持つ。
改元日はその日から新元号に属する（例: 1989-01-08 は平成元年）。
"""
from enum import Enum
from typing import Tuple

from ..errors import DateOutOfRange, UnrecognizedEra


class Era(str, Enum):
    """元号"""
    MEIJI = "Meiji"
    TAISHO = "Taisho"
    SHOWA = "Showa"
    HEISEI = "Heisei"
    REIWA = "Reiwa"

    @classmethod
    def parse(cls, value: str) -> "Era":
        """XML 属性値から元号を取得（大文字小文字は区別する）"""
        for era in cls:
            if era.value == value:
                return era
        raise UnrecognizedEra(value)

    @property
    def rank(self) -> int:
        return ERA_RANK[self]

    @property
    def kanji(self) -> str:
        return ERA_KANJI[self]


# 時系列順の序数。宣言順には依存しない
ERA_RANK = {
    Era.MEIJI: 0,
    Era.TAISHO: 1,
    Era.SHOWA: 2,
    Era.HEISEI: 3,
    Era.REIWA: 4,
}

ERA_KANJI = {
    Era.MEIJI: "明治",
    Era.TAISHO: "大正",
    Era.SHOWA: "昭和",
    Era.HEISEI: "平成",
    Era.REIWA: "令和",
}

# 元号年 + オフセット = 西暦年
ERA_AD_OFFSET = {
    Era.MEIJI: 1867,
    Era.TAISHO: 1911,
    Era.SHOWA: 1925,
    Era.HEISEI: 1988,
    Era.REIWA: 2018,
}

# (開始日, 終了日, 元号, 元号年を求めるための減数)
# 減数は ERA_AD_OFFSET と一致させること
# 日付は year*10000 + month*100 + day の整数。終了日 None は上限なし
ERA_BOUNDARIES = [
    (18681023, 19120729, Era.MEIJI, 1867),
    (19120730, 19261224, Era.TAISHO, 1911),
    (19261225, 19890107, Era.SHOWA, 1925),
    (19890108, 20190430, Era.HEISEI, 1988),
    (20190501, None, Era.REIWA, 2018),
]


def era_to_ad(era: Era, era_year: int) -> int:
    """元号年を西暦年に変換する"""
    return ERA_AD_OFFSET[era] + era_year


def ad_to_era(year: int, month: int, day: int) -> Tuple[Era, int]:
    """
    西暦の年月日を (元号, 元号年) に変換する

    Raises:
        DateOutOfRange: 明治改元（1868-10-23）より前の日付
    """
    t = year * 10000 + month * 100 + day
    for start, end, era, base in ERA_BOUNDARIES:
        if start <= t and (end is None or t <= end):
            return era, year - base
    raise DateOutOfRange(year, month, day)
