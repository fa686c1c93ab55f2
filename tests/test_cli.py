# tests/test_cli.py

from ganzhi.cli import main


def test_day_command(capsys):
    assert main(["day", "1991-09-07", "14:30"]) == 0
    out = capsys.readouterr().out
    assert "干支: 辛未年 丙申月 庚辰日 癸未时" in out
    assert "农历: 一九九一年七月廿九" in out
    assert "生肖: 羊" in out


def test_date_shorthand_and_engine(capsys):
    assert main(["2025-02-25", "23:30", "--engine", "zi-rollover"]) == 0
    out = capsys.readouterr().out
    assert "乙巳年 戊寅月 丙寅日 戊子时" in out


def test_day_without_hour(capsys):
    assert main(["day", "2001-12-10", "--attr", "weekday"]) == 0
    out = capsys.readouterr().out
    assert "干支: 辛巳年 庚子月 丁未日\n" in out
    assert "weekday: 0" in out


def test_hours_command(capsys):
    assert main(["hours", "2025-02-25"]) == 0
    out = capsys.readouterr().out
    assert "乙丑日" in out
    assert "00:00-00:59  丙子时" in out
    assert "23:00-23:59  戊子时" in out


def test_terms_command(capsys):
    assert main(["terms", "2025", "--jie-only"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 12
    assert "立春" in lines[1] and "2025-02-04" in lines[1]


def test_lunar_command(capsys):
    assert main(["lunar", "2020-05-23"]) == 0
    assert "闰四月初一" in capsys.readouterr().out
    assert main(["lunar", "--inverse", "2020-4-1", "--leap"]) == 0
    assert "2020-05-23" in capsys.readouterr().out


def test_validate_command(capsys):
    assert main(["validate", "1991-09-07", "14:30", "辛未年 丙申月 庚辰日 癸未时"]) == 0
    assert "OK" in capsys.readouterr().out
    assert main(["validate", "1991-09-07", "14:30", "辛未年 丙申月 庚辰日 甲子时"]) == 1
    assert main(["validate", "--references"]) == 0


def test_errors_exit_with_status_2(capsys):
    assert main(["lunar", "1899-01-01"]) == 2
    assert "ganzhi:" in capsys.readouterr().err
    assert main(["validate", "1991-09-07", "14:30", "nonsense"]) == 2
