# snapshots.py
from typing import Optional

from playwright.async_api import Page, Error as PlaywrightError

from .constants import logger
from .dom import SNAPSHOT_SCRIPT, DomDocument, DomElement
from .models import FocusTarget
from .names import derive_accessible_name
from .selectors import build_selector
from .utils import truncate_snippet


async def capture_document(page: Page) -> Optional[DomDocument]:
    data = await page.evaluate(SNAPSHOT_SCRIPT)
    if not data:
        return None
    return DomDocument.from_snapshot(data)


def describe_element(element: Optional[DomElement], document: DomDocument) -> Optional[FocusTarget]:
    # body/html focus means focus has left the page content
    if element is None or element is document.document_element or element is document.body:
        return None
    if element.tag in ('body', 'html'):
        return None

    name = derive_accessible_name(element, document)
    return FocusTarget(
        selector=build_selector(element),
        tag=element.tag,
        role=element.get_attribute('role') or None,
        name=name,
        has_accessible_name=bool(name and name.strip()),
        html_snippet=truncate_snippet(element.outer_html),
    )


def describe_active_element(document: DomDocument) -> Optional[FocusTarget]:
    return describe_element(document.active_element, document)


async def capture_focus_target(page: Page) -> Optional[FocusTarget]:
    """Snapshot the page and describe whatever holds focus.

    Evaluation failures (e.g. the key press triggered a navigation) are
    reported as no target.
    """
    try:
        document = await capture_document(page)
    except PlaywrightError as e:
        logger.warning(f"Could not read focused element: {e}")
        return None
    if document is None:
        return None
    return describe_active_element(document)
