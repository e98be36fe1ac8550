# names.py
"""
Simplified accessible-name computation.

Checks aria-label, aria-labelledby, title, img alt, input placeholder/name and
finally text content. <label for>, fieldset/legend and table headers are not
considered.
"""
from typing import Optional

from .dom import DomDocument, DomElement

TEXT_INPUT_TAGS = ('input', 'textarea')


def _trimmed(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _labelledby_text(element: DomElement, document: DomDocument) -> Optional[str]:
    labelledby = element.get_attribute('aria-labelledby')
    if not labelledby:
        return None
    texts = []
    for ref_id in labelledby.split():
        ref = document.get_element_by_id(ref_id)
        if ref is not None:
            texts.append(ref.text_content.strip())
    return _trimmed(' '.join(texts))


def derive_accessible_name(element: DomElement, document: DomDocument) -> Optional[str]:
    name = _trimmed(element.get_attribute('aria-label'))
    if name:
        return name

    name = _labelledby_text(element, document)
    if name:
        return name

    name = _trimmed(element.get_attribute('title'))
    if name:
        return name

    if element.tag == 'img':
        name = _trimmed(element.get_attribute('alt'))
        if name:
            return name

    if element.tag in TEXT_INPUT_TAGS:
        for attribute in ('placeholder', 'name'):
            name = _trimmed(element.get_attribute(attribute))
            if name:
                return name

    return _trimmed(element.text_content)
