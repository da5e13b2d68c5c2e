"""Reading the rows of a worksheet from an .xlsx workbook."""

from __future__ import annotations

import posixpath
import re
import xml.etree.ElementTree as ET
import zipfile
from collections.abc import Iterator
from os import PathLike

DEFAULT_WORKBOOK = "JobData.xlsx"
DEFAULT_SHEET = "Jobs"

_WORKBOOK_PART = "xl/workbook.xml"
_WORKBOOK_RELS = "xl/_rels/workbook.xml.rels"
_SHARED_STRINGS = "xl/sharedStrings.xml"
_CELL_REF = re.compile(r"([A-Za-z]+)(\d+)")


class WorkbookError(Exception):
    """The workbook or the sheet cannot be read."""


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    return (child for child in element if _local(child.tag) == name)


def _first(element: ET.Element, name: str) -> ET.Element | None:
    return next(_children(element, name), None)


def _text_of(element: ET.Element) -> str:
    """Text of a string item, plain or rich, without phonetic runs."""
    parts = []
    for child in element:
        name = _local(child.tag)
        if name == "t":
            parts.append(child.text or "")
        elif name == "r":
            parts.extend(t.text or "" for t in _children(child, "t"))
    return "".join(parts)


def _parse(archive: zipfile.ZipFile, member: str) -> ET.Element:
    try:
        data = archive.read(member)
    except KeyError as exc:
        raise WorkbookError(f"workbook has no part {member}") from exc
    try:
        return ET.fromstring(data)
    except ET.ParseError as exc:
        raise WorkbookError(f"malformed XML in {member}: {exc}") from exc


def _sheet_part(archive: zipfile.ZipFile, sheet: str) -> str:
    workbook = _parse(archive, _WORKBOOK_PART)
    sheets = _first(workbook, "sheets")
    rel_id = None
    for entry in (() if sheets is None else _children(sheets, "sheet")):
        if entry.get("name", "").casefold() == sheet.casefold():
            rel_id = next((v for k, v in entry.attrib.items() if k.endswith("}id")), None)
            break
    else:
        raise WorkbookError(f"sheet {sheet} does not exist")
    rels = _parse(archive, _WORKBOOK_RELS)
    for relationship in _children(rels, "Relationship"):
        if relationship.get("Id") == rel_id:
            target = relationship.get("Target", "")
            if target.startswith("/"):
                return target.lstrip("/")
            return posixpath.normpath(posixpath.join("xl", target))
    raise WorkbookError(f"sheet {sheet} has no worksheet part")


def _shared_strings(archive: zipfile.ZipFile) -> list[str]:
    if _SHARED_STRINGS not in archive.namelist():
        return []
    return [_text_of(item) for item in _children(_parse(archive, _SHARED_STRINGS), "si")]


def _column_index(letters: str) -> int:
    index = 0
    for letter in letters.upper():
        index = index * 26 + ord(letter) - ord("A") + 1
    return index - 1


def _cell_value(cell: ET.Element, shared: list[str]) -> str:
    kind = cell.get("t", "n")
    if kind == "inlineStr":
        inline = _first(cell, "is")
        return "" if inline is None else _text_of(inline)
    value_element = _first(cell, "v")
    value = "" if value_element is None else (value_element.text or "")
    if kind == "s":
        try:
            return shared[int(value)]
        except (ValueError, IndexError) as exc:
            raise WorkbookError(f"bad shared string index {value!r}") from exc
    if kind == "b":
        return "TRUE" if value == "1" else "FALSE"
    return value


def _read_cells(worksheet: ET.Element, shared: list[str]) -> dict[int, dict[int, str]]:
    cells: dict[int, dict[int, str]] = {}
    sheet_data = _first(worksheet, "sheetData")
    if sheet_data is None:
        return cells
    row_number = 0
    for row in _children(sheet_data, "row"):
        row_number = int(row.get("r", row_number + 1))
        column = -1
        values = cells.setdefault(row_number, {})
        for cell in _children(row, "c"):
            match = _CELL_REF.fullmatch(cell.get("r", ""))
            column = _column_index(match.group(1)) if match else column + 1
            values[column] = _cell_value(cell, shared)
    return cells


def read_rows(
    path: str | PathLike[str] = DEFAULT_WORKBOOK, sheet: str = DEFAULT_SHEET
) -> list[list[str]]:
    """Return the sheet's rows as lists of cell text, trailing empty cells and rows dropped."""
    try:
        with zipfile.ZipFile(path) as archive:
            shared = _shared_strings(archive)
            cells = _read_cells(_parse(archive, _sheet_part(archive, sheet)), shared)
    except (OSError, zipfile.BadZipFile) as exc:
        raise WorkbookError(f"cannot open workbook {path}: {exc}") from exc

    rows: list[list[str]] = []
    for number in range(1, max(cells, default=0) + 1):
        values = cells.get(number, {})
        filled = [key for key, text in values.items() if text]
        width = max(filled) + 1 if filled else 0
        rows.append([values.get(column, "") for column in range(width)])
    while rows and not rows[-1]:
        rows.pop()
    return rows