"""
Plain-text rendering of the client state.
"""
from typing import List, Optional
from order_client.models.processing_status import ProcessingStatus

ORDER_COLUMNS = [
    ("Order ID", "id"),
    ("Customer ID", "customer_id"),
    ("Product Name", "product_name"),
    ("Product ID", "product_id"),
    ("Quantity", "quantity"),
    ("Price", "price"),
    ("Order Date", "order_date"),
    ("Category", "category"),
]


def render_status(status: Optional[ProcessingStatus]) -> str:
    if status is None:
        return ""
    return "\n".join([
        f"Status: {status.status}",
        f"Total Orders: {status.total_orders}",
        f"Duplicate Orders: {status.duplicate_orders_count}",
        f"Validation Failed Orders: {status.validation_failed_orders_count}",
        f"Successfully Processed Orders: {status.successfully_processed_count}",
    ])


def render_orders_table(orders: List) -> str:
    """Render orders as an aligned text table."""
    headers = [title for title, _ in ORDER_COLUMNS]
    if not orders:
        return " | ".join(headers) + "\nNo orders found"

    rows = [[str(getattr(order, field)) for _, field in ORDER_COLUMNS] for order in orders]
    widths = [max(len(cell) for cell in column) for column in zip(headers, *rows)]

    lines = [" | ".join(cell.ljust(width) for cell, width in zip(headers, widths))]
    lines.append("-+-".join("-" * width for width in widths))
    for row in rows:
        lines.append(" | ".join(cell.ljust(width) for cell, width in zip(row, widths)))
    return "\n".join(lines)


def render_pagination(page: int, total_pages: int, previous_disabled: bool, next_disabled: bool) -> str:
    previous_label = "(Previous)" if previous_disabled else "[Previous]"
    next_label = "(Next)" if next_disabled else "[Next]"
    return f"{previous_label} Page {page} of {total_pages} {next_label}"
