from __future__ import annotations

from typing import Callable, Dict, Optional

from ..utils import indent, swift_bool, swift_number
from .components import (
    Button,
    Component,
    DatePicker,
    HStack,
    ImageView,
    Label,
    PickerView,
    ScrollView,
    Slider,
    Spacer,
    Switch,
    TableView,
    TextField,
    TextView,
    VStack,
)


def _apply_modifiers(
    body: str,
    top_padding: Optional[int],
    constraints: str,
    *fixed: str,
) -> str:
    """View 式の後ろに modifier を並べる（固定 → 上余白 → 制約の順）."""
    mods = list(fixed)
    if top_padding is not None:
        mods.append(f".padding(.top, {top_padding})")
    mods.extend(line for line in constraints.splitlines() if line.strip())
    if not mods:
        return body
    return body + "\n" + indent("\n".join(mods))


def _render_children(stack) -> str:
    # スタック内部では上余白を計算しない
    return "\n".join(render_component(ch) for ch in stack.children)


def _block(head: str, content: str) -> str:
    if not content:
        return f"{head} {{\n}}"
    return f"{head} {{\n{indent(content)}\n}}"


# ============================
# variant ごとのテンプレート
# ============================

def _label(c: Label, top: Optional[int]) -> str:
    return _apply_modifiers(f'Text("{c.text}")', top, c.constraints)


def _button(c: Button, top: Optional[int]) -> str:
    body = _block(f'Button(action: {{ print("{c.title} tapped!") }})', f'Text("{c.title}")')
    return _apply_modifiers(body, top, c.constraints)


def _text_field(c: TextField, top: Optional[int]) -> str:
    return _apply_modifiers(
        f'TextField("{c.placeholder}", text: .constant(""))',
        top, c.constraints,
        ".textFieldStyle(.roundedBorder)",
    )


def _image_view(c: ImageView, top: Optional[int]) -> str:
    return _apply_modifiers(
        f'Image("{c.image_name}")',
        top, c.constraints,
        ".resizable()", ".scaledToFit()",
    )


def _text_view(c: TextView, top: Optional[int]) -> str:
    return _apply_modifiers(f'TextEditor(text: .constant("{c.text}"))', top, c.constraints)


def _slider(c: Slider, top: Optional[int]) -> str:
    return _apply_modifiers(
        f"Slider(value: .constant({swift_number(c.value)}), in: 0...100)",
        top, c.constraints,
    )


def _switch(c: Switch, top: Optional[int]) -> str:
    body = _block(f"Toggle(isOn: .constant({swift_bool(c.is_on)}))", 'Text("Toggle")')
    return _apply_modifiers(body, top, c.constraints)


def _picker_view(c: PickerView, top: Optional[int]) -> str:
    joined = ", ".join(f'"{o}"' for o in c.options)
    loop = (
        f"ForEach(0..<{len(c.options)}, id: \\.self) {{ index in\n"
        f"{indent(f'Text([{joined}][index])')}\n"
        "}"
    )
    body = _block('Picker("Select", selection: .constant(0))', loop)
    return _apply_modifiers(body, top, c.constraints, ".pickerStyle(.wheel)")


def _date_picker(c: DatePicker, top: Optional[int]) -> str:
    return _apply_modifiers(
        'DatePicker("Select Date", selection: '
        f".constant(Date(timeIntervalSince1970: {swift_number(c.timestamp)})))",
        top, c.constraints,
        ".datePickerStyle(.compact)",
    )


def _table_view(c: TableView, top: Optional[int]) -> str:
    return _apply_modifiers(_block("List", ""), top, c.constraints, ".listStyle(.plain)")


def _scroll_view(c: ScrollView, top: Optional[int]) -> str:
    return _apply_modifiers(_block("ScrollView", ""), top, c.constraints)


def _spacer(c: Spacer, top: Optional[int]) -> str:
    return f"Spacer().padding(.vertical, {int(c.height)})"


def _h_stack(c: HStack, top: Optional[int]) -> str:
    return _apply_modifiers(_block("HStack", _render_children(c)), top, c.constraints)


def _v_stack(c: VStack, top: Optional[int]) -> str:
    return _apply_modifiers(_block("VStack", _render_children(c)), top, c.constraints)


_RENDERERS: Dict[type, Callable[[Component, Optional[int]], str]] = {
    Label: _label,
    Button: _button,
    TextField: _text_field,
    ImageView: _image_view,
    TextView: _text_view,
    Slider: _slider,
    Switch: _switch,
    PickerView: _picker_view,
    DatePicker: _date_picker,
    TableView: _table_view,
    ScrollView: _scroll_view,
    Spacer: _spacer,
    HStack: _h_stack,
    VStack: _v_stack,
}


def render_component(component: Component, top_padding: Optional[int] = None) -> str:
    """Component を SwiftUI の View 式に変換する.

    top_padding は兄弟要素との間隔（None なら付けない）。
    """
    renderer = _RENDERERS.get(type(component))
    if renderer is None:
        raise TypeError(f"No SwiftUI renderer for {type(component).__name__}")
    return renderer(component, top_padding)
