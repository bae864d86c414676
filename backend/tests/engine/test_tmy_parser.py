"""Tests for TMY CSV ingestion."""
from dataclasses import replace

import pytest

from solar_engine.weather.tmy_parser import has_hourly_coverage, parse_tmy_csv, records_to_arrays

KOREAN_CSV = """지점:서울
위도:37.57,경도:126.97
년,월,일,시간,풍속(m/s),풍속 불확도,일사량(W/m2),일사량 불확도
2023,1,1,0,2.1,0.3,0,0
2023,1,1,12,3.4,0.3,512.5,12.0
2023,13,1,12,3.4,0.3,500,12.0
2023,1,1
"""

ENGLISH_CSV = """Station;Somewhere
year;month;day;hour;wind_speed;ghi
2023;6;21;11;1.5;845.2
2023;6;21;12;1.7;901
"""


class TestParseTmyCsv:
    def test_korean_headers(self):
        records = parse_tmy_csv(KOREAN_CSV)
        # month 13 and the short row are skipped
        assert len(records) == 2
        noon = records[1]
        assert (noon.year, noon.month, noon.day, noon.hour) == (2023, 1, 1, 12)
        assert noon.ghi == pytest.approx(512.5)
        assert noon.wind_speed == pytest.approx(3.4)
        assert noon.ghi_uncertainty == pytest.approx(12.0)
        assert noon.wind_speed_uncertainty == pytest.approx(0.3)

    def test_semicolon_english_headers(self):
        records = parse_tmy_csv(ENGLISH_CSV)
        assert [r.hour for r in records] == [11, 12]
        assert records[0].ghi == pytest.approx(845.2)
        assert records[1].wind_speed == pytest.approx(1.7)

    def test_empty_text(self):
        assert parse_tmy_csv("") == []
        assert parse_tmy_csv("\n\n") == []

    def test_missing_header(self):
        with pytest.raises(ValueError, match="header"):
            parse_tmy_csv("a,b,c\n1,2,3\n")

    def test_missing_month_column(self):
        with pytest.raises(ValueError, match="required column"):
            parse_tmy_csv("hour,ghi\n1,100\n")

    def test_unparseable_cells_read_as_zero(self):
        records = parse_tmy_csv("year,month,day,hour,wind,ghi\n2023,2,1,9,calm,n/a\n")
        assert records[0].ghi == 0.0
        assert records[0].wind_speed == 0.0


class TestCoverage:
    def test_threshold(self, synthetic_tmy):
        assert has_hourly_coverage(synthetic_tmy)
        assert has_hourly_coverage(synthetic_tmy[:8000])
        assert not has_hourly_coverage(synthetic_tmy[:7999])
        assert not has_hourly_coverage(None)

    def test_out_of_year_months_not_counted(self, synthetic_tmy):
        stray = tuple(replace(r, month=13) for r in synthetic_tmy[:1000])
        assert not has_hourly_coverage(synthetic_tmy[:7500] + stray)
        assert has_hourly_coverage(synthetic_tmy[:8000] + stray)

    def test_records_to_arrays(self, synthetic_tmy):
        cols = records_to_arrays(synthetic_tmy)
        assert cols["ghi"].shape == (8760,)
        assert cols["month"].min() == 1 and cols["month"].max() == 12
        assert cols["hour"].max() == 23
