# storyboard2swiftui/translator/layout_rules.py
from __future__ import annotations

import logging
import time
from typing import Callable, Dict, List, Optional

from ..parser.storyboard_parser import (
    find_by_xpath,
    find_children,
    find_first,
    get_attr,
    iter_elements,
    text_content,
)
from ..utils import parse_number
from .components import (
    Button,
    Component,
    DatePicker,
    HStack,
    ImageView,
    Label,
    PickerView,
    Rect,
    ScrollView,
    Slider,
    Switch,
    TableView,
    TextField,
    TextView,
    VStack,
)


logger = logging.getLogger(__name__)

# NSDate の基準日 (2001-01-01) と UNIX 時刻の差
REFERENCE_DATE_OFFSET = 978307200.0

HORIZONTAL_AXIS = "horizontal"

DEFAULT_PICKER_OPTIONS = ["Option 1", "Option 2"]


# ============================
# 1. frame / constraints
# ============================

def extract_frame(node) -> Rect:
    """<rect key="frame"> を Rect に変換。無ければ既定の (0, 0, 100, 50)."""
    rect = find_first(node, "rect", key="frame")
    if rect is None:
        return Rect()
    default = Rect()
    return Rect(
        x=parse_number(rect.get("x"), default.x),
        y=parse_number(rect.get("y"), default.y),
        width=parse_number(rect.get("width"), default.width),
        height=parse_number(rect.get("height"), default.height),
    )


def constraint_to_modifier(attribute: str, constant: str) -> str:
    """Auto Layout の firstAttribute を SwiftUI の modifier に落とす.

    対応表にない属性は空文字（捨てる）。
    """
    if attribute in ("leading", "top", "bottom", "trailing"):
        return f".padding(.{attribute}, {constant})"
    if attribute == "centerX":
        return ".frame(maxWidth: .infinity, alignment: .center)"
    if attribute == "centerY":
        return ".frame(maxHeight: .infinity, alignment: .center)"
    if attribute == "width":
        return f".frame(width: {constant})"
    if attribute == "height":
        return f".frame(height: {constant})"
    return ""


def extract_constraints(node) -> str:
    """<constraints><constraint .../></constraints> を modifier 文字列にまとめる."""
    container = find_first(node, "constraints")
    if container is None:
        return ""
    modifiers: List[str] = []
    for c in find_children(container, "constraint"):
        mod = constraint_to_modifier(
            c.get("firstAttribute", ""),
            c.get("constant", "0"),
        )
        if mod:
            modifiers.append(mod)
    return "\n".join(modifiers)


# ============================
# 2. 値の取り出し
# ============================

def _first_present(*candidates: Callable[[], Optional[str]], default: str) -> str:
    """候補を順に評価し、最初に None 以外だったものを返す.

    空文字は「存在する」扱いで、そこで打ち切る。
    """
    for cand in candidates:
        value = cand()
        if value is not None:
            return value
    return default


def _button_title(node) -> str:
    return _first_present(
        lambda: get_attr(node, "title"),
        lambda: get_attr(find_first(node, "buttonConfiguration"), "title"),
        lambda: get_attr(find_first(node, "state", key="normal"), "title"),
        default="Button",
    )


def _text_view_text(node) -> str:
    return _first_present(
        lambda: get_attr(node, "text"),
        lambda: text_content(find_first(node, "text")),
        lambda: text_content(find_first(node, "string", key="text")),
        default="",
    )


def _picker_options(node) -> List[str]:
    options = [
        ch.get("title")
        for ch in find_children(node, "pickerOption")
        if ch.get("title") is not None
    ]
    return options or list(DEFAULT_PICKER_OPTIONS)


def _date_timestamp(node) -> float:
    raw = get_attr(node, "timestamp")
    if raw is not None:
        value = parse_number(raw)
        if value is not None:
            return value
    date_el = find_first(node, "date", key="date")
    ref = parse_number(get_attr(date_el, "timeIntervalSinceReferenceDate"))
    if ref is not None:
        return ref + REFERENCE_DATE_OFFSET
    return time.time()


# ============================
# 3. ノード → Component
# ============================

def _map_stack(node, frame: Rect, constraints: str, element_id: str) -> Component:
    axis = node.get("axis", HORIZONTAL_AXIS)
    children: List[Component] = []
    for sub in find_by_xpath(node, ".//subviews/*"):
        child = map_node(sub)
        if child is not None:
            children.append(child)
    if axis == HORIZONTAL_AXIS:
        return HStack(frame, constraints, children, element_id)
    return VStack(frame, constraints, children, element_id)


def map_node(node) -> Optional[Component]:
    """1 つの XML 要素を Component に変換する。対象外のタグは None."""
    if node is None:
        return None

    t = node.tag
    if t not in _SIMPLE_RULES and t != "stackView":
        return None

    frame = extract_frame(node)
    constraints = extract_constraints(node)
    element_id = node.get("id", "")

    if t == "stackView":
        return _map_stack(node, frame, constraints, element_id)
    return _SIMPLE_RULES[t](node, frame, constraints, element_id)


_SIMPLE_RULES: Dict[str, Callable[..., Component]] = {
    "label": lambda n, f, c, i: Label(n.get("text", "Label"), f, c, i),
    "button": lambda n, f, c, i: Button(_button_title(n), f, c, i),
    "textField": lambda n, f, c, i: TextField(n.get("placeholder", ""), f, c, i),
    "imageView": lambda n, f, c, i: ImageView(n.get("image", "photo"), f, c, i),
    "textView": lambda n, f, c, i: TextView(_text_view_text(n), f, c, i),
    "slider": lambda n, f, c, i: Slider(parse_number(n.get("value"), 50.0), f, c, i),
    "switch": lambda n, f, c, i: Switch(n.get("on") == "YES", f, c, i),
    "pickerView": lambda n, f, c, i: PickerView(_picker_options(n), f, c, i),
    "datePicker": lambda n, f, c, i: DatePicker(_date_timestamp(n), f, c, i),
    "tableView": lambda n, f, c, i: TableView(f, c, i),
    "scrollView": lambda n, f, c, i: ScrollView(f, c, i),
}


# ============================
# 4. 画面単位の抽出
# ============================

def _is_placeholder_label(component: Component, placeholder_text: str) -> bool:
    return (
        isinstance(component, Label)
        and component.text == placeholder_text
        and component.frame.height <= 1
    )


def extract_screen_components(node, config) -> List[Component]:
    """画面 (viewController / view) 配下の全要素を Component 化し、y 順に並べる."""
    mapped = [c for c in (map_node(el) for el in iter_elements(node)) if c is not None]
    components = [
        c for c in mapped
        if not _is_placeholder_label(c, config.placeholder_label_text)
    ]
    # sorted は安定ソートなので、同じ y は文書順のまま
    components = sorted(components, key=lambda c: c.y_position)
    logger.debug("Extracted UI components: %s", components)
    return components
