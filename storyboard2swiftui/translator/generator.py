from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..config import ConverterConfig
from ..parser.navigation_parser import NavigationFlowModel, TabEntry
from ..parser.storyboard_parser import find_first, find_path, get_attr
from .components import Component, HStack, Spacer
from .layout_rules import extract_screen_components
from .view_rules import render_component


logger = logging.getLogger(__name__)


# ============================
# 1. 出力単位
# ============================

@dataclass
class OutputUnit:
    """生成した SwiftUI ファイル 1 つ分。name は View の型名."""
    name: str
    text: str

    @property
    def file_name(self) -> str:
        return f"{self.name}.swift"


# ============================
# 2. テンプレート
# ============================

# このファイルの 1 つ上が storyboard2swiftui、そこに templates/ がある構成
TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates")

_env: Optional[Environment] = None


def _environment() -> Environment:
    global _env
    if _env is None:
        _env = Environment(
            loader=FileSystemLoader(TEMPLATE_DIR),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
            undefined=StrictUndefined,
        )
    return _env


def _render(template_name: str, **ctx) -> str:
    return _environment().get_template(template_name).render(**ctx)


# ============================
# 3. 並び・余白
# ============================

def remove_hstack_children(components: Sequence[Component]) -> List[Component]:
    """HStack が自分で描画する子を、トップレベルの一覧から除く（VStack は対象外）."""
    owned: Set[str] = set()
    for c in components:
        if isinstance(c, HStack):
            # id の無い子は突き合わせられないので対象外
            owned.update(ch.element_id for ch in c.children if ch.element_id)
    return [c for c in components if c.element_id not in owned]


def top_padding_delta(
    previous_y: float,
    current_y: float,
    config: Optional[ConverterConfig] = None,
) -> int:
    config = config or ConverterConfig()
    delta = max(config.min_top_padding, min(config.max_top_padding, current_y - previous_y))
    return int(delta)


def format_components(
    components: Sequence[Component],
    config: Optional[ConverterConfig] = None,
) -> str:
    """トップレベルの兄弟を順に描画し、空行区切りで連結する."""
    config = config or ConverterConfig()
    fragments: List[str] = []
    previous_y: Optional[float] = None
    for c in components:
        if isinstance(c, Spacer):
            fragments.append(render_component(c))
            continue
        top = None
        if previous_y is not None:
            top = top_padding_delta(previous_y, c.y_position, config)
        fragments.append(render_component(c, top))
        previous_y = c.y_position
    return "\n\n".join(fragments)


def _unique_view_name(base: str, used: Set[str]) -> str:
    """<base>View を返す。既に使われていれば <base>View2, <base>View3 ... とずらす."""
    name = f"{base}View"
    n = 2
    while name in used:
        name = f"{base}View{n}"
        n += 1
    used.add(name)
    return name


def _screen_body(components: Sequence[Component], config: ConverterConfig) -> str:
    return format_components(remove_hstack_children(components), config)


# ============================
# 4. フラット（画面単体）
# ============================

def generate_view_code(
    components: Sequence[Component],
    view_name: str = "GeneratedView",
    config: Optional[ConverterConfig] = None,
) -> str:
    config = config or ConverterConfig()
    return _render(
        "screen.swift.j2",
        view_name=view_name,
        body=_screen_body(components, config),
    )


def _flat_unit(node, view_name: str, config: ConverterConfig) -> Optional[OutputUnit]:
    components = extract_screen_components(node, config)
    if not components:
        logger.warning("No UI components found for %s", view_name)
        return None
    return OutputUnit(view_name, generate_view_code(components, view_name, config))


def generate_flat_units(root, config: Optional[ConverterConfig] = None) -> List[OutputUnit]:
    """viewController ごと（無ければ xib の view ごと）に 1 ファイル生成する."""
    config = config or ConverterConfig()
    units: List[OutputUnit] = []

    view_controllers = find_path(root, "scenes", "scene", "objects", "viewController")
    if view_controllers:
        logger.info("Generating SwiftUI files for view controllers...")
        screens = view_controllers
    else:
        logger.info("Generating SwiftUI files for views...")
        screens = find_path(root, "objects", "view")

    if screens:
        for i, screen in enumerate(screens, 1):
            unit = _flat_unit(screen, f"GeneratedView{i}", config)
            if unit is not None:
                units.append(unit)
        return units

    # view も無い xib は UITableViewCell とみなす
    cells = find_path(root, "objects", "tableViewCell", "tableViewCellContentView")
    if cells:
        unit = _flat_unit(cells[0], "TableCellContentView", config)
        if unit is not None:
            units.append(unit)
    return units


# ============================
# 5. ナビゲーションフロー
# ============================

def generate_flow_units(
    flow: NavigationFlowModel,
    config: Optional[ConverterConfig] = None,
) -> List[OutputUnit]:
    """root 画面を NavigationStack で包み、子画面はプレースホルダだけ生成する."""
    config = config or ConverterConfig()
    root = flow.root
    components = extract_screen_components(root.node, config)
    if not components:
        logger.warning("No UI components found for root screen %s", root.storyboard_id)

    used_names: Set[str] = set()
    root_name = _unique_view_name(root.storyboard_id, used_names)

    # 同じ画面へのセグエが複数あっても 1 ファイルだけ（root 自身も含む）
    seen_screens = {root.id}
    links = []
    child_units: List[OutputUnit] = []
    for child in flow.children:
        if child.id in seen_screens:
            logger.debug("Skipping duplicate flow screen %s", child.id)
            continue
        seen_screens.add(child.id)
        name = _unique_view_name(child.storyboard_id, used_names)
        links.append({"title": child.storyboard_id, "view_name": name})
        child_units.append(
            OutputUnit(
                name,
                _render("flow_child.swift.j2", view_name=name, title=child.storyboard_id),
            )
        )

    root_unit = OutputUnit(
        root_name,
        _render(
            "flow_root.swift.j2",
            view_name=root_name,
            title=root.storyboard_id,
            body=_screen_body(components, config),
            links=links,
        ),
    )
    return [root_unit] + child_units


# ============================
# 6. タブバー
# ============================

def _tab_view_name(entry: TabEntry, index: int, used: Set[str]) -> str:
    base = entry.view_controller_class_name or f"Tab{index}"
    return _unique_view_name(base, used)


def generate_tab_units(
    entries: Sequence[TabEntry],
    config: Optional[ConverterConfig] = None,
) -> List[OutputUnit]:
    """タブごとの画面と、それらを並べる TabContentView を生成する."""
    config = config or ConverterConfig()
    units: List[OutputUnit] = []
    tabs = []
    # TabContentView 自身の名前とも衝突させない
    used_names: Set[str] = {"TabContentView"}
    for i, entry in enumerate(entries, 1):
        view_name = _tab_view_name(entry, i, used_names)
        # 解決できなかったタブも空の画面として出力する（TabContentView から参照するため）
        components = extract_screen_components(entry.node, config)
        units.append(OutputUnit(view_name, generate_view_code(components, view_name, config)))

        item = find_first(entry.node, "tabBarItem")
        tabs.append(
            {
                "view_name": view_name,
                "title": get_attr(item, "title", f"tab {i}"),
                "icon": get_attr(item, "image", config.default_tab_icon),
            }
        )

    units.append(
        OutputUnit(
            "TabContentView",
            _render("tab_container.swift.j2", view_name="TabContentView", tabs=tabs),
        )
    )
    return units
