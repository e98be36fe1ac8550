# main.py
import asyncio
import argparse
import json
import logging
import sys

import yaml

from .checker import check_accessibility
from .constants import MAX_TAB_ITERATIONS, NAVIGATION_TIMEOUT_MS, SETTLE_DELAY_MS, build_config


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Keyboard focus order and ARIA smoke test for a web page')
    parser.add_argument('urls', nargs='+', help='Page URL(s) to check; https:// is assumed when no scheme is given')
    parser.add_argument('--limit', type=int, default=MAX_TAB_ITERATIONS, help='Max Tab presses per page')
    parser.add_argument('--settle-ms', type=int, default=SETTLE_DELAY_MS, help='Wait after each key press')
    parser.add_argument('--timeout-ms', type=int, default=NAVIGATION_TIMEOUT_MS, help='Navigation timeout')
    parser.add_argument('--headful', action='store_true', help='Show browser')
    parser.add_argument('--verbose', action='store_true', help='Debug logging')
    parser.add_argument('--format', choices=('json', 'yaml'), default='json', help='Output format')
    return parser.parse_args(argv)


def render(results, fmt: str) -> str:
    data = [state.to_dict() for state in results]
    if len(data) == 1:
        data = data[0]
    if fmt == 'yaml':
        return yaml.safe_dump(data, allow_unicode=True, default_flow_style=False, sort_keys=False)
    return json.dumps(data, ensure_ascii=False, indent=2)


async def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if (args.verbose or args.headful) else logging.INFO,
        format='%(asctime)s %(levelname)-5s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr,
    )

    config = build_config(
        max_tab_iterations=args.limit,
        settle_delay_ms=args.settle_ms,
        navigation_timeout_ms=args.timeout_ms,
        headful=args.headful,
    )

    # One browser session per URL, run one after another
    results = []
    for url in args.urls:
        results.append(await check_accessibility(url, config))

    print(render(results, args.format))
    return 0 if all(state.ok for state in results) else 1


def run():
    sys.exit(asyncio.run(main()))


if __name__ == '__main__':
    run()
