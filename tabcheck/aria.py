# aria.py
import logging

from playwright.async_api import Page

from .constants import MAX_MISSING_ALT_IMAGES
from .dom import DomDocument, DomElement
from .models import AriaReport, MissingAltImage
from .snapshots import capture_document
from .utils import truncate_snippet

logger = logging.getLogger(__name__)

ARIA_ATTRIBUTES = ('aria-label', 'aria-labelledby', 'aria-describedby', 'role')


def is_missing_alt(image: DomElement) -> bool:
    alt = image.get_attribute('alt')
    if alt is None:
        return True
    # Empty alt is flagged unless a role is given; see DESIGN.md on decorative images
    return not alt.strip() and not image.get_attribute('role')


def scan_aria(document: DomDocument, limit: int = MAX_MISSING_ALT_IMAGES) -> AriaReport:
    aria_count = 0
    missing = []
    for element in document.iter_elements():
        if any(element.has_attribute(attr) for attr in ARIA_ATTRIBUTES):
            aria_count += 1
        if element.tag == 'img' and len(missing) < limit and is_missing_alt(element):
            missing.append(MissingAltImage(
                src=element.get_attribute('src'),
                snippet=truncate_snippet(element.outer_html),
            ))
    return AriaReport(aria_attribute_count=aria_count, images_missing_alt=missing)


async def get_aria_report(page: Page) -> AriaReport:
    document = await capture_document(page)
    if document is None:
        return AriaReport(aria_attribute_count=0)
    report = scan_aria(document)
    logger.info(
        f"ARIA scan: {report.aria_attribute_count} annotated elements, "
        f"{len(report.images_missing_alt)} images missing alt"
    )
    return report
