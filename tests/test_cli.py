import sqlite3
import zipfile

import pytest

from jobvisualizer.cli import main, parse_args

_WORKBOOK_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<workbook xmlns="http://schemas.openxmlformats.org/spreadsheetml/2006/main" '
    'xmlns:r="http://schemas.openxmlformats.org/officeDocument/2006/relationships">'
    '<sheets><sheet name="Jobs" sheetId="1" r:id="rId1"/></sheets></workbook>'
)
_RELS_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
    '<Relationship Id="rId1" '
    'Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/worksheet" '
    'Target="worksheets/sheet1.xml"/></Relationships>'
)
_COLUMNS = "ABCDEFGHIJ"


def _sheet_xml(rows):
    body = []
    for number, row in enumerate(rows, start=1):
        cells = "".join(
            f'<c r="{_COLUMNS[col]}{number}" t="inlineStr"><is><t>{text}</t></is></c>'
            for col, text in enumerate(row)
            if text
        )
        body.append(f'<row r="{number}">{cells}</row>')
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<worksheet xmlns="http://schemas.openxmlformats.org/spreadsheetml/2006/main">'
        f'<sheetData>{"".join(body)}</sheetData></worksheet>'
    )


def _write_workbook(path, rows):
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr("xl/workbook.xml", _WORKBOOK_XML)
        archive.writestr("xl/_rels/workbook.xml.rels", _RELS_XML)
        archive.writestr("xl/worksheets/sheet1.xml", _sheet_xml(rows))


HEADER = ["company", "date", "id", "country", "location", "x", "max", "min", "period", "title"]
ROWS = [
    HEADER,
    ["Acme", "2024-01-01", "1", "US", "Austin, TX", "", "60000", "40000", "yearly", "Engineer"],
    ["Globex", "2024-02-01", "2", "US", "Boston, MA", "", "30", "20", "hourly", "Analyst"],
]


def test_parse_args_defaults_to_gui():
    assert parse_args([]).headless is False


@pytest.mark.parametrize("flag", ["-headless", "--headless"])
def test_parse_args_headless_flag(flag):
    assert parse_args([flag]).headless is True


def test_parse_args_rejects_unknown_option():
    with pytest.raises(SystemExit):
        parse_args(["--bogus"])


def test_missing_workbook_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["--headless"]) == 1
    assert "jobvisualizer" in capsys.readouterr().err
    assert not (tmp_path / "job_data.sqlite").exists()


def test_headless_run_prints_and_stores_jobs(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    _write_workbook(tmp_path / "JobData.xlsx", ROWS)

    assert main(["--headless"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[1] == "-" * 120
    assert [cell.strip() for cell in out[2].split("|")] == ["1", "Austin, TX", "Engineer", "Acme"]
    assert [cell.strip() for cell in out[3].split("|")] == ["2", "Boston, MA", "Analyst", "Globex"]

    conn = sqlite3.connect(tmp_path / "job_data.sqlite")
    try:
        stored = conn.execute(
            "SELECT id, company_name, job_title, country, salary FROM job_data ORDER BY id"
        ).fetchall()
        links_ids = [row[0] for row in conn.execute("SELECT id FROM links ORDER BY id")]
    finally:
        conn.close()
    assert [row[1] for row in stored] == ["Acme", "Globex"]
    assert stored[0][4] == 50000
    assert links_ids == [row[0] for row in stored]


def test_rerun_replaces_database(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    _write_workbook(tmp_path / "JobData.xlsx", ROWS)
    assert main(["--headless"]) == 0
    assert main(["--headless"]) == 0
    capsys.readouterr()

    conn = sqlite3.connect(tmp_path / "job_data.sqlite")
    try:
        count = conn.execute("SELECT COUNT(*) FROM job_data").fetchone()[0]
    finally:
        conn.close()
    assert count == len(ROWS) - 1


def test_bad_salary_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    bad = [HEADER, ["Acme", "2024-01-01", "1", "US", "Austin", "", "lots", "40000", "yearly", "Eng"]]
    _write_workbook(tmp_path / "JobData.xlsx", bad)
    assert main(["--headless"]) == 1
    assert "salary" in capsys.readouterr().err