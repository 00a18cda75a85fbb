"""Unit tests for the storyboard reader."""

import pytest

from conftest import SAMPLE_STORYBOARD
from storyboard2swiftui.parser.storyboard_parser import (
    ParseError,
    find_by_xpath,
    find_children,
    find_first,
    find_path,
    get_attr,
    iter_elements,
    parse_storyboard,
    parse_storyboard_string,
    text_content,
)


class TestParseStoryboard:
    """Tests for reading storyboard files."""

    def test_valid_file_returns_document_root(self, write_storyboard):
        """A readable storyboard yields its <document> root."""
        root = parse_storyboard(write_storyboard(SAMPLE_STORYBOARD))
        assert root.tag == "document"

    def test_missing_file_raises_parse_error(self, tmp_path):
        """An unreadable path is reported as ParseError with the cause chained."""
        with pytest.raises(ParseError) as exc_info:
            parse_storyboard(str(tmp_path / "missing.storyboard"))
        assert exc_info.value.__cause__ is not None

    def test_malformed_file_raises_parse_error(self, write_storyboard):
        """Broken XML is reported as ParseError."""
        path = write_storyboard("<document><scenes></document>")
        with pytest.raises(ParseError):
            parse_storyboard(path)

    def test_malformed_string_raises_parse_error(self):
        """Broken XML text is reported as ParseError."""
        with pytest.raises(ParseError):
            parse_storyboard_string("<document>")


class TestQueries:
    """Tests for the query helpers."""

    def test_find_children_keeps_document_order(self):
        """Only direct children with the tag are returned, in order."""
        root = parse_storyboard_string(
            "<a><b id='1'/><c/><b id='2'><b id='nested'/></b></a>"
        )
        assert [el.get("id") for el in find_children(root, "b")] == ["1", "2"]

    def test_find_children_of_none_is_empty(self):
        """A missing node has no children."""
        assert find_children(None, "b") == []

    def test_find_first_matches_attributes(self):
        """Keyword attributes narrow the match."""
        root = parse_storyboard_string(
            "<label><rect key='bounds' y='1'/><rect key='frame' y='2'/></label>"
        )
        assert find_first(root, "rect", key="frame").get("y") == "2"
        assert find_first(root, "rect", key="missing") is None

    def test_get_attr_default(self):
        """Absent attributes and absent nodes fall back to the default."""
        root = parse_storyboard_string("<label text=''/>")
        assert get_attr(root, "text") == ""
        assert get_attr(root, "title") is None
        assert get_attr(None, "title", "x") == "x"

    def test_text_content(self):
        """Raw text of an element is returned verbatim."""
        root = parse_storyboard_string("<textView><text>Lorem</text></textView>")
        assert text_content(find_first(root, "text")) == "Lorem"
        assert text_content(None) is None

    def test_iter_elements_skips_comments(self):
        """Comments are not yielded as elements."""
        root = parse_storyboard_string("<a><!-- note --><b><c/></b><d/></a>")
        assert [el.tag for el in iter_elements(root)] == ["b", "c", "d"]

    def test_find_by_xpath_with_variable(self):
        """XPath variables are passed through as keywords."""
        root = parse_storyboard_string(SAMPLE_STORYBOARD)
        found = find_by_xpath(root, "//viewController[@id=$vid]", vid="vc1")
        assert len(found) == 1
        assert found[0].get("customClass") == "MyViewController"

    def test_find_path_walks_all_scenes(self):
        """find_path collects matching elements from every branch."""
        root = parse_storyboard_string(SAMPLE_STORYBOARD)
        vcs = find_path(root, "scenes", "scene", "objects", "viewController")
        assert [vc.get("id") for vc in vcs] == ["vc1"]
