# selectors.py
import re
from typing import List

from .constants import SELECTOR_MAX_DEPTH
from .dom import DomElement

_SPECIAL_CHARS = re.compile(r"""([!"#$%&'()*+,./:;<=>?@\[\\\]^`{|}~ ])""")


def css_escape(value: str) -> str:
    return _SPECIAL_CHARS.sub(r'\\\1', value)


def _segment(element: DomElement) -> str:
    segment = element.tag
    classes = element.class_list
    if classes:
        segment += '.' + '.'.join(css_escape(cls) for cls in classes)

    if element.parent is not None:
        siblings = [child for child in element.parent.element_children if child.tag == element.tag]
        if len(siblings) > 1:
            index = next(i for i, sibling in enumerate(siblings) if sibling is element) + 1
            segment += f':nth-of-type({index})'
    return segment


def build_selector(element: DomElement, max_depth: int = SELECTOR_MAX_DEPTH) -> str:
    """Short CSS path for re-locating element within the same snapshot.

    An id wins outright. Otherwise at most max_depth segments are joined,
    so deep elements can share a selector with their cousins.
    """
    if element.id:
        return f'#{css_escape(element.id)}'

    path: List[str] = []
    current = element
    while current is not None and len(path) < max_depth:
        path.insert(0, _segment(current))
        current = current.parent
    return ' > '.join(path)
