"""
DOM snapshot and focused element metadata tests
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from playwright.async_api import Error as PlaywrightError

from tabcheck.dom import DomDocument
from tabcheck.snapshots import capture_document, capture_focus_target, describe_active_element
from fake_browser import FakePage, el, page_tree


class TestDomDocument:
    """DomDocument / DomElement"""

    def test_from_snapshot_links_parents_and_active(self):
        link = el('a', {'href': '/x'}, "Go")
        tree = page_tree(el('div', {}, link))
        data = FakePage(tree).snapshot(link)
        document = DomDocument.from_snapshot(data)
        active = document.active_element
        assert active.tag == 'a'
        assert active.parent.tag == 'div'
        assert active.parent.parent is document.body
        assert document.body.parent is document.document_element

    def test_no_active_element(self):
        document = DomDocument.from_snapshot(page_tree(el('p', {}, "hi")))
        assert document.active_element is None

    def test_get_element_by_id_first_in_tree_order(self):
        tree = page_tree(el('span', {'id': 'dup'}, "first"), el('span', {'id': 'dup'}, "second"))
        document = DomDocument.from_snapshot(tree)
        assert document.get_element_by_id('dup').text_content == "first"
        assert document.get_element_by_id('') is None

    def test_text_content_includes_descendants(self):
        tree = page_tree(el('p', {'id': 'p'}, "a ", el('b', {}, "b"), " c"))
        assert DomDocument.from_snapshot(tree).get_element_by_id('p').text_content == "a b c"

    def test_outer_html_serialization(self):
        tree = page_tree(el('a', {'id': 'l', 'href': '/?a=1&b="2"'}, "Tom & Jerry <3", el('img', {'src': 'i.png'})))
        link = DomDocument.from_snapshot(tree).get_element_by_id('l')
        assert link.outer_html == '<a id="l" href="/?a=1&amp;b=&quot;2&quot;">Tom &amp; Jerry &lt;3<img src="i.png"></a>'

    def test_raw_text_not_escaped(self):
        tree = page_tree(el('script', {'id': 's'}, "if (a < b && c) {}"))
        script = DomDocument.from_snapshot(tree).get_element_by_id('s')
        assert script.outer_html == '<script id="s">if (a < b && c) {}</script>'


class TestDescribeActiveElement:
    """Focused element metadata"""

    def test_full_descriptor(self):
        button = el('button', {'class': 'cta', 'role': 'switch', 'aria-label': 'Dark mode'}, "Toggle")
        tree = page_tree(el('div', {}, button))
        target = describe_active_element(DomDocument.from_snapshot(FakePage(tree).snapshot(button)))
        assert target.selector == "html > body > div > button.cta"
        assert target.tag == 'button'
        assert target.role == 'switch'
        assert target.name == 'Dark mode'
        assert target.has_accessible_name is True
        assert target.html_snippet.startswith('<button class="cta"')

    def test_missing_name_and_role(self):
        div = el('div', {'tabindex': '0', 'role': ''})
        tree = page_tree(div)
        target = describe_active_element(DomDocument.from_snapshot(FakePage(tree).snapshot(div)))
        assert target.name is None
        assert target.role is None
        assert target.has_accessible_name is False

    def test_snippet_capped_at_160(self):
        link = el('a', {'href': '/' + 'x' * 300}, "long")
        tree = page_tree(link)
        target = describe_active_element(DomDocument.from_snapshot(FakePage(tree).snapshot(link)))
        assert len(target.html_snippet) == 160

    def test_body_and_root_are_not_targets(self):
        tree = page_tree(el('a', {}, "x"))
        body = tree['children'][1]
        assert describe_active_element(DomDocument.from_snapshot(FakePage(tree).snapshot(body))) is None
        assert describe_active_element(DomDocument.from_snapshot(FakePage(tree).snapshot(tree))) is None
        assert describe_active_element(DomDocument.from_snapshot(FakePage(tree).snapshot(None))) is None


class TestCapture:
    """Capture from a page"""

    @pytest.mark.asyncio
    async def test_capture_focus_target(self):
        tree = page_tree(el('a', {'href': '/a', 'aria-label': 'A'}))
        page = FakePage(tree)
        await page.keyboard.press('Tab')
        target = await capture_focus_target(page)
        assert target.name == 'A'

    @pytest.mark.asyncio
    async def test_evaluation_error_yields_none(self):
        page = FakePage(page_tree(el('a', {}, "x")))
        page.snapshot_error = PlaywrightError("Execution context was destroyed")
        assert await capture_focus_target(page) is None

    @pytest.mark.asyncio
    async def test_capture_document_empty(self):
        page = FakePage(page_tree())
        page.tree = None
        page.snapshot = lambda active=None: None
        assert await capture_document(page) is None
