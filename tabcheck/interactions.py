# interactions.py
import logging

from playwright.async_api import Page, Error as PlaywrightError

logger = logging.getLogger(__name__)

RESET_FOCUS_SCRIPT = """
() => {
    const active = document.activeElement;
    if (active && typeof active.blur === 'function') {
        active.blur();
    }
    window.scrollTo(0, 0);
}
"""

# True only when the element exists and actually became the active element.
FOCUS_SELECTOR_SCRIPT = """
(selector) => {
    let el;
    try {
        el = document.querySelector(selector);
    } catch (e) {
        return false;
    }
    if (!(el instanceof HTMLElement) && !(el instanceof SVGElement)) {
        return false;
    }
    el.focus();
    return document.activeElement === el;
}
"""


async def reset_focus(page: Page):
    await page.evaluate(RESET_FOCUS_SCRIPT)


async def press_and_settle(page: Page, key: str, settle_ms: int):
    await page.keyboard.press(key)
    # focus changes can expand menus or reveal elements asynchronously
    await page.wait_for_timeout(settle_ms)


async def focus_selector(page: Page, selector: str) -> bool:
    try:
        focused = await page.evaluate(FOCUS_SELECTOR_SCRIPT, selector)
    except PlaywrightError as e:
        logger.warning(f"Could not focus {selector}: {e}")
        return False
    return bool(focused)
