from __future__ import annotations

import re
from typing import Optional


def indent(code: str, spaces: int = 4) -> str:
    """指定したスペース数で各行をインデントするユーティリティ."""
    pad = " " * spaces
    return "\n".join(pad + line if line.strip() else line for line in code.splitlines())


_NUMBER_RE = re.compile(r"^\s*[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?\s*$")


def parse_number(value: Optional[str], default: Optional[float] = None) -> Optional[float]:
    """'20' や '40.5' を float に変換する補助.

    解釈できなければ default を返す。
    """
    if value is None or not _NUMBER_RE.match(value):
        return default
    return float(value)


def swift_bool(value: bool) -> str:
    return "true" if value else "false"


def swift_number(value: float) -> str:
    """CGFloat / Double をリテラルにする。整数値でも小数点を付ける."""
    return repr(float(value))
