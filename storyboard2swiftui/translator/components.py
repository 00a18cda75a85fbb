# storyboard2swiftui/translator/components.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


# ============================
# 1. レイアウト矩形
# ============================

@dataclass(frozen=True)
class Rect:
    """<rect key="frame"> に対応する矩形。無い場合は (0, 0, 100, 50)."""
    x: float = 0.0
    y: float = 0.0
    width: float = 100.0
    height: float = 50.0


# ============================
# 2. コンポーネント IR
# ============================

class Component:
    """SwiftUI に変換する UI 部品の基底クラス"""
    element_id: str

    @property
    def y_position(self) -> float:
        return self.frame.y


@dataclass
class Label(Component):
    text: str
    frame: Rect
    constraints: str
    element_id: str


@dataclass
class Button(Component):
    title: str
    frame: Rect
    constraints: str
    element_id: str


@dataclass
class TextField(Component):
    placeholder: str
    frame: Rect
    constraints: str
    element_id: str


@dataclass
class ImageView(Component):
    image_name: str
    frame: Rect
    constraints: str
    element_id: str


@dataclass
class TextView(Component):
    text: str
    frame: Rect
    constraints: str
    element_id: str


@dataclass
class Slider(Component):
    value: float
    frame: Rect
    constraints: str
    element_id: str


@dataclass
class Switch(Component):
    is_on: bool
    frame: Rect
    constraints: str
    element_id: str


@dataclass
class PickerView(Component):
    options: List[str]
    frame: Rect
    constraints: str
    element_id: str


@dataclass
class DatePicker(Component):
    timestamp: float    # 1970-01-01 からの秒数
    frame: Rect
    constraints: str
    element_id: str


@dataclass
class TableView(Component):
    frame: Rect
    constraints: str
    element_id: str


@dataclass
class ScrollView(Component):
    frame: Rect
    constraints: str
    element_id: str


@dataclass
class Spacer(Component):
    """縦方向の余白。frame を持たず、height がそのまま y 位置になる"""
    height: float
    element_id: str

    @property
    def y_position(self) -> float:
        return self.height


@dataclass
class HStack(Component):
    frame: Rect
    constraints: str
    children: List[Component] = field(default_factory=list)
    element_id: str = ""


@dataclass
class VStack(Component):
    frame: Rect
    constraints: str
    children: List[Component] = field(default_factory=list)
    element_id: str = ""
