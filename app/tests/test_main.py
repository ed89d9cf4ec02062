import pytest
from httpx import AsyncClient, ASGITransport
from fastapi import status
from sqlalchemy.exc import IntegrityError

from app.main import app


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "route,method,expected_status",
    [
        ("/ping", "GET", status.HTTP_200_OK),
        ("/version", "GET", status.HTTP_200_OK),
        ("/openapi.json", "GET", status.HTTP_200_OK),
        ("/invalid-route", "GET", status.HTTP_404_NOT_FOUND),
    ],
)
async def test_routes(route, method, expected_status):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        response = await getattr(client, method.lower())(route)
        assert response.status_code == expected_status


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "exception,expected_detail",
    [
        (IntegrityError("INSERT", params=None, orig=Exception("UNIQUE constraint failed: headings.name")),
         "This headings.name already exists."),
        (IntegrityError("INSERT", params=None, orig=Exception("NOT NULL constraint failed: announcements.title")),
         "NOT NULL constraint failed: announcements.title"),
        (ValueError("Page index must not be less than zero"), "Page index must not be less than zero"),
    ],
)
async def test_exception_handlers(exception, expected_detail):
    """Integrity and value errors are answered with a 400."""
    async def raise_exception():
        raise exception

    app.add_api_route("/test-exception", raise_exception, methods=["GET"], tags=["test"])
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
            response = await client.get("/test-exception")
    finally:
        app.router.routes.pop()
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == expected_detail
