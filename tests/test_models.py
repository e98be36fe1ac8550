"""
Report model and helper tests
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tabcheck.constants import MAX_TAB_ITERATIONS, build_config
from tabcheck.models import AccessibilityCheckState, AriaReport, FocusTarget, MissingAltImage, TabOrderReport
from tabcheck.utils import normalize_url, truncate_snippet, url_from_payload


def target(selector="#a", name="A"):
    return FocusTarget(
        selector=selector, tag="a", role=None, name=name,
        has_accessible_name=bool(name), html_snippet='<a id="a">A</a>',
    )


class TestModels:
    """Dataclasses and serialization"""

    def test_identity_is_selector_and_name(self):
        assert target().identity == ("#a", "A")
        assert target().identity == target().identity
        assert target(name="B").identity != target().identity

    def test_focus_target_is_immutable(self):
        with pytest.raises(Exception):
            target().name = "changed"

    def test_success_serialization(self):
        state = AccessibilityCheckState.success(
            "https://example.com",
            TabOrderReport(visited=[target()], shift_tab_consistent=None),
            AriaReport(aria_attribute_count=2, images_missing_alt=[MissingAltImage(None, '<img>')]),
        )
        assert state.to_dict() == {
            'ok': True,
            'summary': "Accessibility quick-check completed for https://example.com",
            'url': "https://example.com",
            'tabOrder': {
                'visited': [{
                    'selector': "#a", 'tag': "a", 'role': None, 'name': "A",
                    'hasAccessibleName': True, 'htmlSnippet': '<a id="a">A</a>',
                }],
                'cycleDetected': False,
                'limitReached': False,
                'shiftTabConsistent': None,
            },
            'aria': {
                'ariaAttributeCount': 2,
                'imagesMissingAlt': [{'src': None, 'snippet': '<img>'}],
            },
        }

    def test_failure_serialization_omits_reports(self):
        state = AccessibilityCheckState.failure("Please provide a URL to check.", ["Missing URL"])
        assert state.to_dict() == {
            'ok': False,
            'summary': "Please provide a URL to check.",
            'errors': ["Missing URL"],
        }


class TestUtils:
    """URL and snippet helpers"""

    @pytest.mark.parametrize("raw,expected", [
        ("example.com", "https://example.com"),
        ("http://example.com", "http://example.com"),
        ("HTTPS://Example.com/a", "HTTPS://Example.com/a"),
        ("ftp://example.com", "https://ftp://example.com"),
        ("localhost:3000/x", "https://localhost:3000/x"),
    ])
    def test_normalize_url(self, raw, expected):
        assert normalize_url(raw) == expected

    def test_truncate_snippet(self):
        assert truncate_snippet("x" * 200) == "x" * 160
        assert truncate_snippet("short") == "short"

    def test_url_from_payload(self):
        assert url_from_payload({'url': '  example.com '}) == "example.com"
        assert url_from_payload({'url': 42}) == "42"
        assert url_from_payload({}) == ""
        assert url_from_payload("example.com") is None
        assert url_from_payload(None) is None


class TestConfig:
    """build_config"""

    def test_defaults(self):
        config = build_config()
        assert config['max_tab_iterations'] == MAX_TAB_ITERATIONS == 100
        assert config['settle_delay_ms'] == 50
        assert config['navigation_timeout_ms'] == 20000
        assert config['headful'] is False

    def test_overrides_ignore_none(self):
        config = build_config(max_tab_iterations=30, settle_delay_ms=None)
        assert config['max_tab_iterations'] == 30
        assert config['settle_delay_ms'] == 50

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            build_config(max_states=10)
