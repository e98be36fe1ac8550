# tab_order.py
import logging
from typing import Any, Dict, List, Optional

from playwright.async_api import Page

from .constants import MAX_TAB_ITERATIONS, SETTLE_DELAY_MS
from .interactions import focus_selector, press_and_settle, reset_focus
from .models import FocusTarget, TabOrderReport
from .snapshots import capture_focus_target

logger = logging.getLogger(__name__)


async def walk_tab_order(page: Page, max_iterations: int = MAX_TAB_ITERATIONS,
                         settle_ms: int = SETTLE_DELAY_MS) -> TabOrderReport:
    """Press Tab until focus leaves the page, repeats, or the budget runs out."""
    await reset_focus(page)

    report = TabOrderReport()
    seen = set()

    for i in range(max_iterations):
        await press_and_settle(page, 'Tab', settle_ms)
        target = await capture_focus_target(page)
        if target is None:
            logger.debug(f"Focus left the page after {i + 1} Tab presses")
            break
        if target.identity in seen:
            logger.debug(f"Revisited {target.selector} after {i + 1} Tab presses")
            report.cycle_detected = True
            break
        logger.debug(f"Tab {i + 1}: {target.selector} ({target.name!r})")
        seen.add(target.identity)
        report.visited.append(target)
    else:
        report.limit_reached = True
        logger.warning(f"Tab walk hit the {max_iterations} iteration limit")

    return report


async def verify_shift_tab(page: Page, visited: List[FocusTarget],
                           settle_ms: int = SETTLE_DELAY_MS) -> Optional[bool]:
    """Walk Shift+Tab back from the last visited element.

    None when there is too little to compare or the last element cannot be
    focused again; otherwise whether the reverse path mirrors visited exactly.
    """
    if len(visited) <= 1:
        return None

    last = visited[-1]
    if not await focus_selector(page, last.selector):
        logger.info(f"Could not re-focus {last.selector}, skipping Shift+Tab check")
        return None

    for position in range(len(visited) - 2, -1, -1):
        await press_and_settle(page, 'Shift+Tab', settle_ms)
        target = await capture_focus_target(page)
        expected = visited[position]
        if target is None or target.identity != expected.identity:
            logger.info(
                f"Shift+Tab mismatch at position {position}: expected {expected.selector}, "
                f"got {target.selector if target else None}"
            )
            return False

    return True


async def build_tab_order_report(page: Page, config: Dict[str, Any]) -> TabOrderReport:
    settle_ms = config['settle_delay_ms']
    report = await walk_tab_order(page, config['max_tab_iterations'], settle_ms)
    report.shift_tab_consistent = await verify_shift_tab(page, report.visited, settle_ms)
    logger.info(
        f"Tab order: {len(report.visited)} elements, cycle={report.cycle_detected}, "
        f"limit={report.limit_reached}, shift_tab_consistent={report.shift_tab_consistent}"
    )
    return report
