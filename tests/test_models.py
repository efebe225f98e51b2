"""
Tests for models.py - Date の比較・表示・シリアライズ
"""
import pytest
from listup_law.models import Date, LawData, LawPatchInfo
from listup_law.utils.era import Era


class TestDate:

    def test_ad_year_is_derived(self):
        date = Date(era=Era.MEIJI, year=5)
        assert date.ad_year == 1872
        assert date.month is None
        assert date.day is None

    def test_day_requires_month(self):
        with pytest.raises(ValueError):
            Date(era=Era.SHOWA, year=20, day=15)

    @pytest.mark.parametrize("month", [0, 13])
    def test_month_range(self, month):
        with pytest.raises(ValueError):
            Date(era=Era.SHOWA, year=20, month=month)

    def test_from_ad(self):
        date = Date.from_ad(2019, 5, 1)
        assert date == Date(era=Era.REIWA, year=1, month=5, day=1, ad_year=2019)

    def test_label(self):
        assert Date(era=Era.MEIJI, year=5).label() == "明治5年"
        assert Date.from_ad(2019, 4, 30).label() == "平成31年4月30日"
        assert Date.from_ad(2019, 5, 1).label() == "令和元年5月1日"
        assert Date(era=Era.SHOWA, year=21, month=11).label() == "昭和21年11月"


class TestDateCompare:

    def test_different_years_are_ordered(self):
        a = Date(era=Era.SHOWA, year=20)
        b = Date.from_ad(1989, 1, 8)
        assert a.compare(b) == -1
        assert b.compare(a) == 1

    def test_same_year_without_month_is_incomparable(self):
        a = Date(era=Era.HEISEI, year=1)
        b = Date.from_ad(1989, 3, 1)
        assert a.compare(b) is None

    def test_same_month_without_day_is_incomparable(self):
        a = Date(era=Era.HEISEI, year=1, month=3)
        b = Date.from_ad(1989, 3, 1)
        assert a.compare(b) is None

    def test_full_dates(self):
        assert Date.from_ad(2000, 1, 1).compare(Date.from_ad(2000, 1, 2)) == -1
        assert Date.from_ad(2000, 1, 1).compare(Date.from_ad(2000, 1, 1)) == 0

    def test_sort_key_treats_missing_components_as_minimal(self):
        dates = [
            Date.from_ad(1989, 3, 1),
            Date(era=Era.HEISEI, year=1, month=3),
            Date(era=Era.HEISEI, year=1),
            Date.from_ad(1989, 1, 7),
        ]
        ordered = sorted(dates, key=Date.sort_key)
        assert ordered == [dates[2], dates[3], dates[1], dates[0]]


class TestSerialization:

    def test_date_to_dict_omits_missing_month_day(self):
        assert Date(era=Era.MEIJI, year=5).to_dict() == {"era": "Meiji", "year": 5, "ad_year": 1872}

    def test_patch_info_keys(self):
        info = LawPatchInfo(
            dir_name="123AC0000000001",
            file_name="123AC0000000001_20190501_000000000000000.xml",
            id="123AC0000000001",
            patch_date=Date.from_ad(2019, 5, 1),
            patch_id="000000000000000",
        )
        data = info.to_dict()
        assert set(data) == {"dir", "file", "id", "patch_date", "patch_id"}
        assert data["patch_date"] == {"era": "Reiwa", "year": 1, "month": 5, "day": 1, "ad_year": 2019}

    def test_patch_id_omitted_when_absent(self):
        info = LawPatchInfo("d", "f.xml", "X", Date.from_ad(2000, 1, 1))
        assert "patch_id" not in info.to_dict()

    def test_law_data_from_dict(self):
        info = LawPatchInfo("d", "f.xml", "X", Date.from_ad(2000, 1, 1), "P1")
        law = LawData(
            date=Date(era=Era.MEIJI, year=5, month=8, day=3),
            file="d/f.xml",
            name="学制",
            num="明治五年太政官第二百十四号",
            id="X",
            patch=[info],
        )
        assert LawData.from_dict(law.to_dict()) == law
