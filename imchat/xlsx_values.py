"""Spreadsheet cell addressing and conversion of cell text to typed values.

A value kind is either one of the names ``bool``, ``string``, ``int``,
``int8``, ``int16``, ``int32``, ``int64``, ``uint``, ``uint8``, ``uint16``,
``uint32``, ``uint64``, ``float32`` and ``float64``, or one of the Python
types ``bool``, ``int``, ``float`` and ``str``.
"""

from __future__ import annotations

import dataclasses
import math
import re
import struct
import typing
from typing import Any

_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_SIGNED_BITS = {"int": 64, "int8": 8, "int16": 16, "int32": 32, "int64": 64}
_UNSIGNED_BITS = {"uint": 64, "uint8": 8, "uint16": 16, "uint32": 32, "uint64": 64}
_FLOAT_BITS = {"float32": 32, "float64": 64}
_OTHER_KINDS = frozenset({"bool", "string"})
_TYPE_KINDS = {bool: "bool", int: "int", float: "float64", str: "string"}

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"[0-9]+")
_DECIMAL_FLOAT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOAT = re.compile(r"[+-]?(?:infinity|inf)|nan", re.IGNORECASE)

_FALSE_WORDS = frozenset({"false", "f", "0"})
_TRUE_WORDS = frozenset({"true", "t", "1"})


def num_to_az(num: int) -> str:
    """Return the column letters for a 1-based column number (0 gives "")."""
    if num < 0:
        raise ValueError(f"column number {num} is negative")
    letters: list[str] = []
    while num > 0:
        num, rem = divmod(num - 1, len(_LETTERS))
        letters.append(_LETTERS[rem])
    return "".join(reversed(letters))


def get_axis(x: int, y: int) -> str:
    """Return the cell reference for column x and row y, both 1-based."""
    return f"{num_to_az(x)}{y}"


def _kind_name(kind: Any) -> str:
    if isinstance(kind, str):
        if kind in _OTHER_KINDS or kind in _SIGNED_BITS or kind in _UNSIGNED_BITS or kind in _FLOAT_BITS:
            return kind
        raise TypeError(f"not Supported {kind}")
    name = _TYPE_KINDS.get(kind) if isinstance(kind, typing.Hashable) else None
    if name is None:
        raise TypeError(f"not Supported {getattr(kind, '__name__', kind)}")
    return name


def _invalid(s: str) -> ValueError:
    return ValueError(f'parsing "{s}": invalid syntax')


def _out_of_range(s: str) -> ValueError:
    return ValueError(f'parsing "{s}": value out of range')


def _parse_signed(s: str, bits: int) -> int:
    if not _SIGNED.fullmatch(s):
        raise _invalid(s)
    value = int(s)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise _out_of_range(s)
    return value


def _parse_unsigned(s: str, bits: int) -> int:
    if not _UNSIGNED.fullmatch(s):
        raise _invalid(s)
    value = int(s)
    if value >= 1 << bits:
        raise _out_of_range(s)
    return value


def _parse_float(s: str, bits: int) -> float:
    if _SPECIAL_FLOAT.fullmatch(s):
        return float(s)
    if _DECIMAL_FLOAT.fullmatch(s):
        value = float(s)
    elif _HEX_FLOAT.fullmatch(s):
        try:
            value = float.fromhex(s)
        except OverflowError as exc:
            raise _out_of_range(s) from exc
    else:
        raise _invalid(s)
    if math.isinf(value):
        raise _out_of_range(s)
    if bits == 32:
        try:
            (value,) = struct.unpack("<f", struct.pack("<f", value))
        except OverflowError as exc:
            raise _out_of_range(s) from exc
    return value


def _parse_bool(s: str) -> bool:
    word = s.lower()
    if word in _FALSE_WORDS:
        return False
    if word in _TRUE_WORDS:
        return True
    raise ValueError(f"parse {s} to bool error")


def zero_value(kind: Any) -> Any:
    """Return the zero value of a kind."""
    name = _kind_name(kind)
    if name == "bool":
        return False
    if name == "string":
        return ""
    if name in _FLOAT_BITS:
        return 0.0
    return 0


def string_to_value(s: str, kind: Any) -> Any:
    """Convert cell text to a value of the given kind; "" gives the zero value."""
    name = _kind_name(kind)
    if s == "":
        return zero_value(name)
    if name == "bool":
        return _parse_bool(s)
    if name == "string":
        return s
    if name in _SIGNED_BITS:
        return _parse_signed(s, _SIGNED_BITS[name])
    if name in _UNSIGNED_BITS:
        return _parse_unsigned(s, _UNSIGNED_BITS[name])
    return _parse_float(s, _FLOAT_BITS[name])


def _model_class(model: Any) -> Any:
    if typing.get_origin(model) is list:
        args = typing.get_args(model)
        model = args[0] if args else None
    elif isinstance(model, list):
        model = model[0] if model else None
    if not isinstance(model, type):
        model = type(model)
    return model


def get_sheet_name(model: Any) -> str:
    """Return the sheet a dataclass model is read from.

    The model may be the class, an instance, ``list[Model]`` or a list of
    instances. A class method ``sheet_name()`` names the sheet; otherwise the
    class name is used. Anything that is not a dataclass gives "".
    """
    cls = _model_class(model)
    if not dataclasses.is_dataclass(cls):
        return ""
    sheet_name = getattr(cls, "sheet_name", None)
    if callable(sheet_name):
        return str(sheet_name())
    return cls.__name__