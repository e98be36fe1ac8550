# constants.py
import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)

# Constants
# Two deployments of the original checker disagreed (30 vs 100); 100 is authoritative.
MAX_TAB_ITERATIONS = 100
SETTLE_DELAY_MS = 50
NAVIGATION_TIMEOUT_MS = 20_000
POST_NAVIGATION_WAIT_MS = 250

SNIPPET_LENGTH = 160
SELECTOR_MAX_DEPTH = 4
MAX_MISSING_ALT_IMAGES = 20

MISSING_URL_ERROR = "Missing URL"
MISSING_URL_SUMMARY = "Please provide a URL to check."
INVALID_PAYLOAD_ERROR = "Expected JSON body with a url field."
INVALID_PAYLOAD_SUMMARY = "Invalid request payload."


def build_config(**overrides: Any) -> Dict[str, Any]:
    config = {
        'max_tab_iterations': MAX_TAB_ITERATIONS,
        'settle_delay_ms': SETTLE_DELAY_MS,
        'navigation_timeout_ms': NAVIGATION_TIMEOUT_MS,
        'post_navigation_wait_ms': POST_NAVIGATION_WAIT_MS,
        'headful': False,
    }
    unknown = set(overrides) - set(config)
    if unknown:
        raise KeyError(f"Unknown config keys: {sorted(unknown)}")
    config.update({k: v for k, v in overrides.items() if v is not None})
    return config
