"""
Shared test fixtures and utilities.
"""
import math
import re
import httpx
import pytest
from fastapi import FastAPI, File, Form, HTTPException, Query, UploadFile
from fastapi.responses import StreamingResponse
from order_client.core import config

MULTIPART_PART = re.compile(
    rb'name="(?P<name>[^"]+)"(?:; filename="[^"]*")?\r\n(?:Content-Type: [^\r]*\r\n)?\r\n(?P<value>.*?)\r\n--',
    re.DOTALL
)


@pytest.fixture(autouse=True)
def reset_settings():
    """Give every test fresh settings with a fast polling interval."""
    config.settings = config.Settings(poll_interval_ms=10)
    yield
    config.settings = config.Settings()


def parse_multipart(request: httpx.Request) -> dict:
    """Extract multipart form fields from a captured request body."""
    return {
        match.group('name').decode(): match.group('value')
        for match in MULTIPART_PART.finditer(request.content)
    }


def make_order(order_id: int) -> dict:
    return {
        "id": order_id,
        "customer_id": 1000 + order_id,
        "product_id": 500 + order_id,
        "product_name": f"Product {order_id}",
        "quantity": order_id % 5 + 1,
        "price": 9.99,
        "order_date": "2024-01-15",
        "category": "Electronics",
    }


@pytest.fixture
def orders_25():
    """A 25-order dataset."""
    return [make_order(i) for i in range(1, 26)]


def create_fake_order_service(orders=None, status_sequence=None, fail_chunk_index=None) -> FastAPI:
    """
    In-process stand-in for the order-processing service.

    Every request is appended to ``app.state.events`` so tests can check the
    order in which the client talked to the service.
    """
    app = FastAPI()
    app.state.events = []
    app.state.received_chunks = []
    app.state.orders = orders or []
    app.state.status_sequence = list(status_sequence or ["COMPLETED"])

    @app.post("/orders/upload")
    async def upload_chunk(
        file_chunk: UploadFile = File(..., alias="fileChunk"),
        file_name: str = Form(..., alias="fileName"),
        file_chunk_index: int = Form(..., alias="fileChunkIndex"),
        total_chunks: int = Form(..., alias="totalChunks"),
        is_last_chunk: str = Form(..., alias="isLastChunk")
    ):
        app.state.events.append(("upload", file_chunk_index))
        if file_chunk_index == fail_chunk_index:
            raise HTTPException(status_code=500, detail="Chunk storage failed")

        content = await file_chunk.read()
        app.state.received_chunks.append({
            "file_name": file_name,
            "index": file_chunk_index,
            "total": total_chunks,
            "is_last": is_last_chunk,
            "content": content,
        })

        async def progress():
            yield f"chunk {file_chunk_index + 1}/{total_chunks} ".encode()
            yield f"received {len(content)} bytes".encode()

        return StreamingResponse(progress(), media_type="text/plain")

    @app.get("/orders/processing/{file_identifier}")
    async def processing_status(file_identifier: str):
        sequence = app.state.status_sequence
        status = sequence.pop(0) if len(sequence) > 1 else sequence[0]
        app.state.events.append(("status", status))
        total = len(app.state.orders)
        return {
            "status": status,
            "totalOrders": total,
            "duplicateOrdersCount": 0,
            "validationFailedOrdersCount": 0,
            "successfullyProcessedCount": total if status == "COMPLETED" else 0,
        }

    @app.get("/orders")
    async def list_orders(
        page: int = Query(1),
        number_of_items_per_page: int = Query(10, alias="numberOfItemsPerPage")
    ):
        app.state.events.append(("orders", page))
        all_orders = app.state.orders
        total_pages = max(math.ceil(len(all_orders) / number_of_items_per_page), 1)
        start = (page - 1) * number_of_items_per_page
        return {
            "orders": all_orders[start:start + number_of_items_per_page],
            "page": page,
            "totalNumberOfPages": total_pages,
        }

    return app


def asgi_client(app: FastAPI) -> httpx.AsyncClient:
    """AsyncClient routed to an in-process ASGI app."""
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")


@pytest.fixture
def multipart_fields():
    """Parser for multipart bodies captured by httpx.MockTransport."""
    return parse_multipart


@pytest.fixture
def fake_order_service():
    """Factory for in-process fake order services."""
    return create_fake_order_service


@pytest.fixture
def client_for():
    """Factory for AsyncClients bound to an ASGI app."""
    return asgi_client
