"""Tests for the XML node wrapper."""

from pom_scope.core.xml_tree import parse_xml


class TestXmlNode:
    """Test node navigation and values."""

    def test_value_joins_text_around_children(self):
        """Test that mixed content reads as the concatenated text."""
        root = parse_xml("<a><version>1.<x/>0</version></a>")
        assert root.value_with_path("version") == "1.0"

    def test_value_of_container_is_blank(self):
        root = parse_xml("<a>\n  <b>x</b>\n</a>")
        assert root.value == ""

    def test_descendant_with_path(self):
        root = parse_xml("<a><parent><relativePath>../p</relativePath></parent></a>")

        assert root.value_with_path("parent.relativePath") == "../p"
        assert root.descendant_with_path("parent.missing") is None
        assert root.value_with_path("missing") is None

    def test_iter_descendants_in_document_order(self):
        root = parse_xml("<a><b><c/></b><d/></a>")
        assert [node.name for node in root.iter_descendants()] == ["b", "c", "d"]

    def test_identity_equality(self):
        root = parse_xml("<a><b/></a>")

        assert root.child_named("b") == root.child_named("b")
        assert root.child_named("b") != root
        assert len({root, root.child_named("b"), root.child_named("b")}) == 2
