# storyboard2swiftui/parser/navigation_parser.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ..config import DEFAULT_FLOW_SEGUE_KINDS
from .storyboard_parser import find_by_xpath, find_path, get_attr


logger = logging.getLogger(__name__)


# ============================
# 1. ナビゲーション IR
# ============================

@dataclass(frozen=True)
class NavigationEdge:
    """segue / relationship / viewController などナビゲーション要素 1 つ分"""
    kind: str                       # "viewController" / "navigationController" / "segue" / "relationship"
    id: str
    source_node: Any = None         # kind == "viewController" のときだけ要素を持つ
    attributes: Dict[str, str] = field(default_factory=dict)


@dataclass
class ScreenNode:
    id: str
    storyboard_id: str
    node: Any


@dataclass
class NavigationFlowModel:
    """rootViewController から辿れる画面の集まり"""
    id: str
    root: ScreenNode
    children: List[ScreenNode] = field(default_factory=list)


@dataclass
class TabEntry:
    """tabBarController の子 1 つ分"""
    navigation_id: str
    screen_id: str
    view_controller_class_name: str
    node: Any = None                # 解決できなかった場合は None


# ============================
# 2. 要素の抽出
# ============================

_NAVIGATION_QUERIES = (
    ("navigationController", "//navigationController"),
    ("viewController", "//*[local-name()='viewController']"),
    ("relationship", "//relationship"),
    ("segue", "//segue"),
)


def get_navigation_elements(root) -> List[NavigationEdge]:
    """4 種類のクエリを順に実行して NavigationEdge の平坦なリストを作る."""
    edges: List[NavigationEdge] = []
    for kind, xpath in _NAVIGATION_QUERIES:
        for el in find_by_xpath(root, xpath):
            edges.append(
                NavigationEdge(
                    kind=kind,
                    id=el.get("id", "unknown"),
                    source_node=el if kind == "viewController" else None,
                    attributes=dict(el.attrib),
                )
            )
    logger.info("Navigation elements found: %d", len(edges))
    return edges


def has_navigation_controller(root) -> bool:
    return bool(find_path(root, "scenes", "scene", "objects", "navigationController"))


def get_tab_bar_controllers(root) -> List[Any]:
    return find_path(root, "scenes", "scene", "objects", "tabBarController")


# ============================
# 3. フローグラフの再構築
# ============================

def _screen_from(edge: NavigationEdge) -> ScreenNode:
    return ScreenNode(
        id=edge.id,
        storyboard_id=edge.attributes.get("storyboardIdentifier", "Screen"),
        node=edge.source_node,
    )


def build_navigation_flow(
    edges: Iterable[NavigationEdge],
    flow_segue_kinds: Iterable[str] = DEFAULT_FLOW_SEGUE_KINDS,
) -> Optional[NavigationFlowModel]:
    """rootViewController の relationship を起点にフローを組み立てる.

    root が無い、または root の destination が既知の viewController でなければ None。
    """
    edges = list(edges)
    accepted = set(flow_segue_kinds)
    vcs = {}
    for e in edges:
        if e.kind == "viewController":
            vcs.setdefault(e.id, e)
    segues = [e for e in edges if e.kind == "segue"]

    root_segue = next(
        (s for s in segues if s.attributes.get("relationship") == "rootViewController"),
        None,
    )
    if root_segue is None:
        logger.info("No rootViewController relationship; no navigation flow")
        return None

    root_id = root_segue.attributes.get("destination")
    root_vc = vcs.get(root_id)
    if root_vc is None:
        logger.info("rootViewController destination %r is not a known viewController", root_id)
        return None

    children: List[ScreenNode] = []
    for s in segues:
        kind = s.attributes.get("kind")
        if kind not in accepted:
            if kind == "modal":
                logger.warning(
                    "Segue %s has kind 'modal', which is not in the accepted kinds %s; skipped",
                    s.id, sorted(accepted),
                )
            continue
        dest = vcs.get(s.attributes.get("destination"))
        if dest is not None:
            children.append(_screen_from(dest))

    return NavigationFlowModel(id=root_id, root=_screen_from(root_vc), children=children)


# ============================
# 4. タブ構成の抽出
# ============================

def get_tab_navigation_elements(root) -> List[TabEntry]:
    """tabBarController ごとに viewControllers relationship を順に解決する."""
    entries: List[TabEntry] = []
    for tab in find_by_xpath(root, "//tabBarController"):
        for segue in find_by_xpath(tab, ".//segue[@relationship='viewControllers']"):
            navigation_id = segue.get("destination", "")
            screen_id = segue.get("id", "")
            matches = find_by_xpath(root, "//viewController[@id=$vid]", vid=navigation_id)
            vc_node = matches[0] if matches else None
            entries.append(
                TabEntry(
                    navigation_id=navigation_id,
                    screen_id=screen_id,
                    view_controller_class_name=get_attr(vc_node, "customClass", ""),
                    node=vc_node,
                )
            )
    logger.info("Tab navigation elements: %d", len(entries))
    return entries
