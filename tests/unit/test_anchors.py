"""Unit tests for in-page link target collection."""

import pytest
from bs4 import BeautifulSoup

from html2org.anchors import collect_fragment_names


@pytest.mark.unit
class TestCollectFragmentNames:
    """Behavior of collect_fragment_names."""

    def test_collects_fragment_links(self):
        soup = BeautifulSoup('<p><a href="#intro">Intro</a> <a href=" #usage ">Usage</a></p>', "html.parser")
        assert collect_fragment_names(soup) == frozenset({"intro", "usage"})

    def test_ignores_other_links(self):
        html = '<a href="#">top</a><a href="http://x.org/#frag">x</a><a href="page.html">p</a><a>none</a>'
        assert collect_fragment_names(BeautifulSoup(html, "html.parser")) == frozenset()

    def test_visits_subtrees_that_are_not_rendered(self):
        html = '<template><a href="#hidden">x</a></template><head><a href="#meta">y</a></head>'
        assert collect_fragment_names(BeautifulSoup(html, "html.parser")) == frozenset({"hidden", "meta"})

    def test_root_anchor_is_included(self):
        soup = BeautifulSoup('<a href="#self">me</a>', "html.parser")
        assert collect_fragment_names(soup.a) == frozenset({"self"})

    def test_text_node_root(self):
        soup = BeautifulSoup("<p>text</p>", "html.parser")
        assert collect_fragment_names(soup.p.string) == frozenset()
