# models.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class FocusTarget:
    selector: str
    tag: str
    role: Optional[str]
    name: Optional[str]
    has_accessible_name: bool
    html_snippet: str

    @property
    def identity(self) -> Tuple[str, Optional[str]]:
        # Two snapshots are the same element iff selector and name both match
        return (self.selector, self.name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'selector': self.selector,
            'tag': self.tag,
            'role': self.role,
            'name': self.name,
            'hasAccessibleName': self.has_accessible_name,
            'htmlSnippet': self.html_snippet,
        }


@dataclass
class TabOrderReport:
    visited: List[FocusTarget] = field(default_factory=list)
    cycle_detected: bool = False
    limit_reached: bool = False
    shift_tab_consistent: Optional[bool] = None  # None: not attempted

    def to_dict(self) -> Dict[str, Any]:
        return {
            'visited': [target.to_dict() for target in self.visited],
            'cycleDetected': self.cycle_detected,
            'limitReached': self.limit_reached,
            'shiftTabConsistent': self.shift_tab_consistent,
        }


@dataclass(frozen=True)
class MissingAltImage:
    src: Optional[str]
    snippet: str

    def to_dict(self) -> Dict[str, Any]:
        return {'src': self.src, 'snippet': self.snippet}


@dataclass
class AriaReport:
    aria_attribute_count: int
    images_missing_alt: List[MissingAltImage] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'ariaAttributeCount': self.aria_attribute_count,
            'imagesMissingAlt': [image.to_dict() for image in self.images_missing_alt],
        }


@dataclass
class AccessibilityCheckState:
    """Result envelope of one check: either tab_order/aria or errors is set."""
    ok: bool
    summary: str
    url: Optional[str] = None
    tab_order: Optional[TabOrderReport] = None
    aria: Optional[AriaReport] = None
    errors: Optional[List[str]] = None

    @classmethod
    def success(cls, url: str, tab_order: TabOrderReport, aria: AriaReport) -> 'AccessibilityCheckState':
        return cls(
            ok=True,
            summary=f"Accessibility quick-check completed for {url}",
            url=url,
            tab_order=tab_order,
            aria=aria,
        )

    @classmethod
    def failure(cls, summary: str, errors: List[str], url: Optional[str] = None) -> 'AccessibilityCheckState':
        return cls(ok=False, summary=summary, url=url, errors=list(errors))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'ok': self.ok, 'summary': self.summary}
        if self.url is not None:
            data['url'] = self.url
        if self.tab_order is not None:
            data['tabOrder'] = self.tab_order.to_dict()
        if self.aria is not None:
            data['aria'] = self.aria.to_dict()
        if self.errors is not None:
            data['errors'] = list(self.errors)
        return data
