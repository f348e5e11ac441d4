"""Tests for the JavadocLinks table."""

import pytest

from javadoc.links import JavadocLinks

GROOVY = "https://docs.groovy-lang.org/2.5.0/html/gapi/"


class TestJavadocLinks:

    def test_insert_and_get(self):
        links = JavadocLinks()
        links.insert("groovy", GROOVY)
        assert links.get("groovy") == GROOVY
        assert "groovy" in links
        assert len(links) == 1

    def test_get_missing_returns_none(self):
        assert JavadocLinks().get("missing") is None

    def test_insert_replaces_existing(self):
        links = JavadocLinks({"groovy": GROOVY})
        links.insert("groovy", "https://example.org/gapi/")
        assert links.get("groovy") == "https://example.org/gapi/"
        assert len(links) == 1

    def test_iteration_keeps_insertion_order(self):
        links = JavadocLinks()
        links.insert("java", "https://docs.oracle.com/javase/8/docs/api/index.html?")
        links.insert("groovy", GROOVY)
        assert [key for key, _ in links] == ["java", "groovy"]

    def test_as_dict_is_a_copy(self):
        links = JavadocLinks({"groovy": GROOVY})
        snapshot = links.as_dict()
        snapshot["other"] = "https://example.org/"
        assert "other" not in links

    @pytest.mark.parametrize("key", ["", "   "])
    def test_rejects_empty_key(self, key):
        with pytest.raises(ValueError):
            JavadocLinks().insert(key, GROOVY)

    @pytest.mark.parametrize("uri", ["", "docs/api", "//example.org/api", None])
    def test_rejects_relative_uri(self, uri):
        with pytest.raises(ValueError):
            JavadocLinks().insert("lib", uri)

    def test_file_uri_is_absolute(self):
        links = JavadocLinks()
        links.insert("local", "file:///opt/javadoc/")
        assert links.get("local") == "file:///opt/javadoc/"

    def test_equality(self):
        assert JavadocLinks({"groovy": GROOVY}) == JavadocLinks({"groovy": GROOVY})
        assert JavadocLinks({"groovy": GROOVY}) != JavadocLinks()
