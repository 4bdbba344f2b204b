"""
Command-line entry point for the Order Upload Client.
Uploads one CSV file, waits for processing and prints the order listing.
"""
import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional
from order_client.core import config
from order_client.core.config import setup_logging
from order_client.core.dependencies import get_controller
from order_client.models.selected_file import SelectedFile
from order_client.services.controller import ClientState
from order_client.utils.render_utils import render_orders_table, render_pagination, render_status

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Upload an orders CSV file and show the processed orders",
        epilog="Waits until the service reports COMPLETED. A FAILED status is logged "
               "but does not end the wait; interrupt with Ctrl+C."
    )
    parser.add_argument("file", help="Path of the .csv file to upload")
    parser.add_argument(
        "-p", "--page",
        dest="page",
        type=int,
        default=1,
        help="Page of the order listing to show once processing completes"
    )
    return parser.parse_args(argv)


def render_state(state: ClientState) -> str:
    parts = []
    if state.notice:
        parts.append(state.notice)
    status_block = render_status(state.processing_status)
    if status_block:
        parts.append(status_block)
    parts.append("Orders")
    parts.append(render_orders_table(state.order_page.orders))
    parts.append(render_pagination(
        state.current_page,
        state.order_page.total_pages,
        state.previous_disabled,
        state.next_disabled
    ))
    return "\n\n".join(parts)


async def run(file_path: str, page: int = 1) -> int:
    controller = get_controller()
    try:
        await controller.start()
        with open(file_path, "rb") as source:
            selected_file = SelectedFile(os.path.basename(file_path), source)
            session = await controller.select_file(selected_file)

        if session is None or session.failed:
            print(render_state(controller.state))
            return 1

        await controller.wait_for_processing()
        if page != controller.state.current_page:
            await controller.go_to_page(page)
        print(render_state(controller.state))
        return 0
    finally:
        await controller.aclose()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(config.settings.log_level)

    if not os.path.isfile(args.file):
        logger.error("File not found: %s", args.file)
        return 2

    return asyncio.run(run(args.file, args.page))


if __name__ == "__main__":
    sys.exit(main())
