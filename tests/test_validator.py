# tests/test_validator.py

import pytest
import ganzhi
from ganzhi.core.errors import MalformedReferenceError
from ganzhi.core.types import CivilDateTime
from ganzhi.diagnostics import validate_reference as vr


def test_parse_reference():
    parts = vr.parse_reference("辛未年 丙申月 庚辰日 癸未时")
    assert [str(p) for p in parts] == ["辛未", "丙申", "庚辰", "癸未"]
    # spacing is optional
    assert vr.parse_reference("辛未年丙申月庚辰日癸未时") == parts


@pytest.mark.parametrize(
    "text",
    [
        "",
        "辛未年 丙申月 庚辰日",
        "辛未 丙申 庚辰 癸未",
        "辛未年 丙申月 庚辰时 癸未日",
        "甲丑年 丙申月 庚辰日 癸未时",
    ],
)
def test_malformed_references(text):
    with pytest.raises(MalformedReferenceError):
        vr.parse_reference(text)


def test_validate_match():
    res = ganzhi.validate(CivilDateTime(1991, 9, 7, 14, 30), "辛未年 丙申月 庚辰日 癸未时")
    assert res.is_valid
    assert [c.pillar for c in res.checks] == ["year", "month", "day", "hour"]
    assert res.mismatches == []
    assert res.summary().endswith("OK")


def test_validate_reports_per_pillar_mismatch():
    res = ganzhi.validate(CivilDateTime(1991, 9, 7, 14, 30), "辛未年 丙申月 庚辰日 甲子时")
    assert not res.is_valid
    [bad] = res.mismatches
    assert bad.pillar == "hour"
    assert (bad.expected, bad.actual) == ("甲子", "癸未")
    assert "MISMATCH" in res.summary()


def test_late_zi_reference_depends_on_policy():
    expected = "乙巳年 戊寅月 丙寅日 戊子时"
    moment = CivilDateTime(2025, 2, 25, 23, 30)
    assert ganzhi.validate(moment, expected, engine="zi-rollover").is_valid
    split = ganzhi.validate(moment, expected, engine="standard")
    assert [c.pillar for c in split.mismatches] == ["day"]


def test_builtin_references_pass():
    results = vr.run_references()
    assert len(results) == len(vr.REFERENCE_CASES)
    assert all(r.is_valid for r in results)


def test_validator_main(capsys):
    assert vr.main([]) == 0
    out = capsys.readouterr().out
    assert "3/3 passed" in out
