"""Reading rows of a spreadsheet workbook into dataclass models.

A model is a dataclass. Each field is read from the column named by its
``column`` metadata entry, or by the field name when there is none; a column
of ``"-"`` leaves the field out. The value kind comes from a ``kind``
metadata entry or from the field's annotation.
"""

from __future__ import annotations

import dataclasses
import io
import itertools
import os
import posixpath
import re
import types
import typing
import xml.etree.ElementTree as ET
import zipfile
from typing import Any, BinaryIO, Mapping, Union

from .xlsx_values import get_axis, get_sheet_name, string_to_value, zero_value

_DEFAULT_WORKBOOK = "xl/workbook.xml"
_CELL_REF = re.compile(r"([A-Za-z]+)([0-9]+)")
_NAMED_KINDS = {"str": str, "int": int, "float": float, "bool": bool}
_OPTIONAL_PREFIXES = ("typing.Optional[", "Optional[")


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _children(elem: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in elem if _local(child.tag) == name]


def _descendants(elem: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in elem.iter() if _local(child.tag) == name]


def _string_item(elem: ET.Element) -> str:
    parts: list[str] = []
    for child in elem:
        tag = _local(child.tag)
        if tag == "t":
            parts.append(child.text or "")
        elif tag == "r":
            parts.extend(t.text or "" for t in _children(child, "t"))
    return "".join(parts)


def _split_ref(ref: str) -> tuple[int, int]:
    match = _CELL_REF.fullmatch(ref)
    if match is None:
        raise ValueError(f"invalid cell reference {ref}")
    column = 0
    for letter in match.group(1).upper():
        column = column * 26 + (ord(letter) - ord("A") + 1)
    return column, int(match.group(2))


def _resolve(base: str, target: str) -> str:
    if target.startswith("/"):
        return target[1:]
    return posixpath.normpath(posixpath.join(base, target))


def _relationships(archive: zipfile.ZipFile, names: set[str], part: str) -> dict[str, tuple[str, str]]:
    base = posixpath.dirname(part)
    rels_path = posixpath.join(base, "_rels", posixpath.basename(part) + ".rels")
    if rels_path not in names:
        return {}
    root = ET.fromstring(archive.read(rels_path))
    return {
        rel.get("Id", ""): (rel.get("Type", ""), _resolve(base, rel.get("Target", "")))
        for rel in _descendants(root, "Relationship")
        if rel.get("TargetMode") != "External"
    }


def _workbook_part(archive: zipfile.ZipFile, names: set[str]) -> str:
    for rel_type, target in _relationships(archive, names, "").values():
        if rel_type.endswith("/officeDocument"):
            return target
    return _DEFAULT_WORKBOOK


def _shared_strings(archive: zipfile.ZipFile, names: set[str], base: str,
                    rels: dict[str, tuple[str, str]]) -> list[str]:
    path = next(
        (target for rel_type, target in rels.values() if rel_type.endswith("/sharedStrings")),
        posixpath.join(base, "sharedStrings.xml"),
    )
    if path not in names:
        return []
    root = ET.fromstring(archive.read(path))
    return [_string_item(item) for item in _children(root, "si")]


def _relationship_id(sheet: ET.Element) -> str:
    for key, value in sheet.attrib.items():
        if key.startswith("{") and _local(key) == "id":
            return value
    return sheet.get("id", "")


def _cell_text(cell: ET.Element, shared: list[str]) -> str:
    kind = cell.get("t", "n")
    values = _children(cell, "v")
    raw = (values[0].text or "") if values else ""
    if kind == "s":
        return shared[int(raw)] if raw else ""
    if kind == "inlineStr":
        inline = _children(cell, "is")
        return _string_item(inline[0]) if inline else ""
    if kind == "b":
        if not raw:
            return ""
        return "TRUE" if raw == "1" else "FALSE"
    return raw


def _read_cells(data: bytes, shared: list[str]) -> dict[str, str]:
    root = ET.fromstring(data)
    cells: dict[str, str] = {}
    row_number = 0
    for row in _descendants(root, "row"):
        row_ref = row.get("r")
        row_number = int(row_ref) if row_ref else row_number + 1
        column = 0
        for cell in _children(row, "c"):
            ref = cell.get("r")
            if ref:
                column, cell_row = _split_ref(ref)
            else:
                column, cell_row = column + 1, row_number
            text = _cell_text(cell, shared)
            if text:
                cells[get_axis(column, cell_row)] = text
    return cells


def _load(archive: zipfile.ZipFile) -> dict[str, dict[str, str]]:
    names = set(archive.namelist())
    workbook_path = _workbook_part(archive, names)
    base = posixpath.dirname(workbook_path)
    rels = _relationships(archive, names, workbook_path)
    shared = _shared_strings(archive, names, base, rels)
    root = ET.fromstring(archive.read(workbook_path))
    sheets: dict[str, dict[str, str]] = {}
    for sheet in _descendants(root, "sheet"):
        name = sheet.get("name", "")
        rel = rels.get(_relationship_id(sheet))
        path = rel[1] if rel else posixpath.join(base, "worksheets", f"sheet{sheet.get('sheetId', '')}.xml")
        sheets[name] = _read_cells(archive.read(path), shared) if path in names else {}
    return sheets


def _read_source(source: Union[bytes, bytearray, str, "os.PathLike[str]", BinaryIO]) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    if isinstance(source, (str, os.PathLike)):
        with open(source, "rb") as handle:
            return handle.read()
    data = source.read()
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("workbook source must yield bytes")
    return bytes(data)


class Workbook:
    """Cell text of every sheet in a workbook, keyed by sheet name and cell reference."""

    def __init__(self, sheets: Mapping[str, Mapping[str, str]]) -> None:
        self._sheets = {
            name: {axis.upper(): str(value) for axis, value in cells.items()}
            for name, cells in sheets.items()
        }

    @classmethod
    def open(cls, source: Any) -> "Workbook":
        """Read a workbook from bytes, a path or a binary file object."""
        data = _read_source(source)
        try:
            with zipfile.ZipFile(io.BytesIO(data)) as archive:
                return cls(_load(archive))
        except (zipfile.BadZipFile, KeyError, IndexError, ET.ParseError) as exc:
            raise ValueError(f"not a valid workbook: {exc}") from exc

    def has_sheet(self, name: str) -> bool:
        """Return whether the workbook has a sheet of that name."""
        return name in self._sheets

    def cell_value(self, sheet: str, axis: str) -> str:
        """Return the text of a cell, or "" for an empty cell."""
        try:
            cells = self._sheets[sheet]
        except KeyError:
            raise KeyError(f"sheet {sheet} does not exist") from None
        return cells.get(axis.upper(), "")


def _unwrap_optional(hint: Any) -> Any:
    if typing.get_origin(hint) in (Union, types.UnionType):
        args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint


def _named_kind(text: str) -> Any:
    """Map an annotation written as text to a kind, without evaluating it."""
    text = text.strip()
    for prefix in _OPTIONAL_PREFIXES:
        if text.startswith(prefix) and text.endswith("]"):
            text = text[len(prefix):-1].strip()
            break
    parts = [part.strip() for part in text.split("|")]
    parts = [part for part in parts if part != "None"]
    if len(parts) == 1:
        text = parts[0]
    return _NAMED_KINDS.get(text, text)


def _field_kind(field: dataclasses.Field) -> Any:
    kind = field.metadata.get("kind")
    if kind is not None:
        return kind
    if isinstance(field.type, str):
        return _named_kind(field.type)
    return _unwrap_optional(field.type)


def _has_default(field: dataclasses.Field) -> bool:
    return field.default is not dataclasses.MISSING or field.default_factory is not dataclasses.MISSING


def _build(model: type, values: dict[str, Any]) -> Any:
    init_args: dict[str, Any] = {}
    later: dict[str, Any] = {}
    for field in dataclasses.fields(model):
        if field.name in values:
            value = values[field.name]
        elif _has_default(field):
            continue
        else:
            try:
                value = zero_value(_field_kind(field))
            except TypeError:
                value = None
        (init_args if field.init else later)[field.name] = value
    item = model(**init_args)
    for name, value in later.items():
        object.__setattr__(item, name, value)
    return item


def parse_sheet(workbook: Workbook, model: type) -> list[Any]:
    """Read the model's sheet into a list of model instances.

    Row 1 holds column names; rows from 2 on are read until a row in which
    every known column is empty. A missing sheet gives an empty list.
    """
    if not (isinstance(model, type) and dataclasses.is_dataclass(model)):
        raise TypeError("not struct")
    sheet = get_sheet_name(model)
    if not workbook.has_sheet(sheet):
        return []
    columns: dict[str, dataclasses.Field] = {}
    for field in dataclasses.fields(model):
        alias = field.metadata.get("column", "")
        if alias == "-":
            continue
        columns[alias or field.name] = field
    if not columns:
        raise ValueError("empty column struct")

    header: dict[str, int] = {}
    for index in itertools.count(1):
        name = workbook.cell_value(sheet, get_axis(index, 1))
        if name == "":
            break
        if name in columns:
            header[name] = index
    if not header:
        raise ValueError("sheet column empty")

    items: list[Any] = []
    for row in itertools.count(2):
        values: dict[str, Any] = {}
        for column, index in header.items():
            text = workbook.cell_value(sheet, get_axis(index, row))
            if text == "":
                continue
            field = columns[column]
            values[field.name] = string_to_value(text, _field_kind(field))
        if not values:
            break
        items.append(_build(model, values))
    return items


def parse_all(source: Any, *args: type) -> list[list[Any]]:
    """Open a workbook and read one list of instances for each model given."""
    if not args:
        raise ValueError("empty models")
    workbook = Workbook.open(source)
    return [parse_sheet(workbook, model) for model in args]