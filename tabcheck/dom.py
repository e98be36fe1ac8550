# dom.py
"""
Python view of a live document.

The page serializes its DOM once with SNAPSHOT_SCRIPT; selector, name and
ARIA logic then run against DomDocument/DomElement, so they can be exercised
without a browser.
"""
import html
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union

# Returns the document element as nested {tag, attrs, children, focused?};
# text nodes are plain strings, comments and other node types are dropped.
SNAPSHOT_SCRIPT = """
() => {
    const active = document.activeElement;
    const walk = (node) => {
        if (node.nodeType === Node.TEXT_NODE) {
            return node.nodeValue;
        }
        if (node.nodeType !== Node.ELEMENT_NODE) {
            return null;
        }
        const out = { tag: node.tagName.toLowerCase(), attrs: {}, children: [] };
        for (const attr of node.attributes) {
            out.attrs[attr.name] = attr.value;
        }
        if (node === active) {
            out.focused = true;
        }
        for (const child of node.childNodes) {
            const converted = walk(child);
            if (converted !== null) {
                out.children.push(converted);
            }
        }
        return out;
    };
    return document.documentElement ? walk(document.documentElement) : null;
}
"""

VOID_TAGS = {
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input', 'link',
    'meta', 'param', 'source', 'track', 'wbr',
}
RAW_TEXT_TAGS = {'script', 'style', 'xmp', 'iframe', 'noembed', 'noframes', 'plaintext', 'noscript'}


@dataclass(eq=False)
class DomElement:
    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List[Union['DomElement', str]] = field(default_factory=list)
    parent: Optional['DomElement'] = field(default=None, repr=False)

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    @property
    def id(self) -> str:
        return self.attributes.get('id', '')

    @property
    def class_list(self) -> List[str]:
        classes: List[str] = []
        for cls in self.attributes.get('class', '').split():
            if cls not in classes:
                classes.append(cls)
        return classes

    @property
    def element_children(self) -> List['DomElement']:
        return [child for child in self.children if isinstance(child, DomElement)]

    @property
    def text_content(self) -> str:
        parts: List[str] = []
        for child in self.children:
            parts.append(child.text_content if isinstance(child, DomElement) else child)
        return ''.join(parts)

    @property
    def outer_html(self) -> str:
        attrs = ''.join(
            f' {name}="{_escape_attribute(value)}"' for name, value in self.attributes.items()
        )
        start = f'<{self.tag}{attrs}>'
        if self.tag in VOID_TAGS:
            return start
        inner = []
        for child in self.children:
            if isinstance(child, DomElement):
                inner.append(child.outer_html)
            elif self.tag in RAW_TEXT_TAGS:
                inner.append(child)
            else:
                inner.append(html.escape(child, quote=False))
        return f"{start}{''.join(inner)}</{self.tag}>"

    def iter(self) -> Iterator['DomElement']:
        """Yield this element and all descendant elements in tree order."""
        yield self
        for child in self.element_children:
            yield from child.iter()


def _escape_attribute(value: str) -> str:
    return value.replace('&', '&amp;').replace('"', '&quot;').replace('\u00a0', '&nbsp;')


class DomDocument:
    def __init__(self, root: DomElement, active_element: Optional[DomElement] = None):
        self.root = root
        self.active_element = active_element
        self._ids: Dict[str, DomElement] = {}
        for element in root.iter():
            element_id = element.id
            if element_id and element_id not in self._ids:
                self._ids[element_id] = element

    @classmethod
    def from_snapshot(cls, data: Dict[str, Any]) -> 'DomDocument':
        active: List[DomElement] = []

        def build(node: Dict[str, Any], parent: Optional[DomElement]) -> DomElement:
            element = DomElement(
                tag=node['tag'],
                attributes=dict(node.get('attrs') or {}),
                parent=parent,
            )
            if node.get('focused'):
                active.append(element)
            for child in node.get('children') or []:
                if isinstance(child, str):
                    element.children.append(child)
                else:
                    element.children.append(build(child, element))
            return element

        root = build(data, None)
        return cls(root, active[0] if active else None)

    @property
    def document_element(self) -> DomElement:
        return self.root

    @property
    def body(self) -> Optional[DomElement]:
        for child in self.root.element_children:
            if child.tag == 'body':
                return child
        return None

    def get_element_by_id(self, element_id: str) -> Optional[DomElement]:
        return self._ids.get(element_id)

    def iter_elements(self) -> Iterator[DomElement]:
        return self.root.iter()
