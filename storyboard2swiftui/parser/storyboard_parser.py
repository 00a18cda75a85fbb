# storyboard2swiftui/parser/storyboard_parser.py
from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from lxml import etree


logger = logging.getLogger(__name__)


class ParseError(Exception):
    """storyboard / xib の読み込みに失敗したときに送出する."""


def _make_parser() -> etree.XMLParser:
    # 外部エンティティは解決しない（storyboard には不要）
    return etree.XMLParser(resolve_entities=False, no_network=True)


def parse_storyboard(path: str) -> etree._Element:
    """
    path: .storyboard / .xib ファイル
    return: ルート要素 (<document>)
    """
    try:
        tree = etree.parse(path, _make_parser())
    except etree.XMLSyntaxError as e:
        raise ParseError(f"Malformed storyboard XML in {path}: {e}") from e
    except OSError as e:
        raise ParseError(f"Cannot read storyboard {path}: {e}") from e
    root = tree.getroot()
    logger.debug("Parsed %s (root <%s>)", path, root.tag)
    return root


def parse_storyboard_string(text: str) -> etree._Element:
    """文字列の storyboard XML をパースする（テストや小さな断片用）."""
    data = text.strip().encode("utf-8")
    try:
        return etree.fromstring(data, _make_parser())
    except etree.XMLSyntaxError as e:
        raise ParseError(f"Malformed storyboard XML: {e}") from e


# ============================
# クエリ用ユーティリティ
# ============================

def _is_element(el) -> bool:
    # コメントや処理命令は tag が str ではない
    return isinstance(el.tag, str)


def get_attr(el, name: str, default: Optional[str] = None) -> Optional[str]:
    if el is None:
        return default
    return el.get(name, default)


def text_content(el) -> Optional[str]:
    if el is None:
        return None
    return el.text


def find_children(el, tag: str) -> List[etree._Element]:
    """直下の子要素のうち tag が一致するものを文書順で返す."""
    if el is None:
        return []
    return [ch for ch in el if _is_element(ch) and ch.tag == tag]


def find_first(el, tag: str, **attrs: str) -> Optional[etree._Element]:
    """直下の子要素で tag と属性値が一致する最初の要素."""
    for ch in find_children(el, tag):
        if all(ch.get(k) == v for k, v in attrs.items()):
            return ch
    return None


def find_by_xpath(el, expr: str, **variables: str) -> List[etree._Element]:
    """XPath で要素を検索する。$name 形式の変数は keyword で渡す."""
    if el is None:
        return []
    return [
        n for n in el.xpath(expr, **variables)
        if isinstance(n, etree._Element) and _is_element(n)
    ]


def iter_elements(el) -> Iterator[etree._Element]:
    """子孫要素をすべて文書順で列挙する（el 自身は含まない）."""
    if el is None:
        return
    for node in el.iterdescendants():
        if _is_element(node):
            yield node


def find_path(root, *tags: str) -> List[etree._Element]:
    """root から tags の順に直下の子を辿り、最後の階層の要素をすべて返す.

    例: find_path(root, "scenes", "scene", "objects", "viewController")
    """
    current = [root] if root is not None else []
    for tag in tags:
        nxt: List[etree._Element] = []
        for el in current:
            nxt.extend(find_children(el, tag))
        current = nxt
    return current
