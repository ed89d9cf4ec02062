"""Tests for the email utilities."""
import smtplib
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch
import pytest
from fastapi import HTTPException

from app.core.config import settings
from app.core.email import send_announcement_email, send_email, send_mj_email, send_smtp_email

ANNOUNCEMENT = SimpleNamespace(id=7, title="Red bike", description="Almost new", price=120.0)


@pytest.mark.asyncio
async def test_send_email_none_method():
    """No email is sent when the method is 'none'."""
    with patch.object(settings, "EMAIL_METHOD", "none"):
        assert await send_email("bob@example.com", "Subject", "<p>Hello</p>") is False


@pytest.mark.asyncio
@pytest.mark.parametrize("method, target", [
    ("smtp", "app.core.email.send_smtp_email"),
    ("mj", "app.core.email.send_mj_email"),
])
async def test_send_email_dispatch(method, target):
    """The email is handed to the configured provider."""
    with patch.object(settings, "EMAIL_METHOD", method), \
            patch(target, new_callable=AsyncMock, return_value=True) as mock_send:
        assert await send_email(["bob@example.com"], "Subject", "<p>Hello</p>")
    mock_send.assert_awaited_once_with(["bob@example.com"], "Subject", "<p>Hello</p>")


@pytest.mark.asyncio
async def test_send_smtp_email():
    """One message is sent per recipient."""
    with patch("app.core.email.smtplib.SMTP") as mock_smtp:
        server = mock_smtp.return_value.__enter__.return_value
        assert await send_smtp_email(["a@example.com", "b@example.com"], "Subject", "<p>Hi</p>")
    assert server.sendmail.call_count == 2


@pytest.mark.asyncio
async def test_send_smtp_email_failure():
    """SMTP failures become a 500."""
    with patch("app.core.email.smtplib.SMTP", side_effect=smtplib.SMTPException("down")):
        with pytest.raises(HTTPException) as exc_info:
            await send_smtp_email("a@example.com", "Subject", "<p>Hi</p>")
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code, succeeds", [(200, True), (401, False)])
async def test_send_mj_email(status_code, succeeds):
    """MailJet answers other than 200 become a 500."""
    with patch("app.core.email.Client") as mock_client:
        mock_client.return_value.send.create.return_value = MagicMock(
            status_code=status_code, json=MagicMock(return_value={}))
        if succeeds:
            assert await send_mj_email("a@example.com", "Subject", "<p>Hi</p>")
        else:
            with pytest.raises(HTTPException):
                await send_mj_email("a@example.com", "Subject", "<p>Hi</p>")


@pytest.mark.asyncio
async def test_send_announcement_email():
    """The notification is rendered from the announcement."""
    with patch("app.core.email.send_email", new_callable=AsyncMock, return_value=True) as mock_send:
        assert await send_announcement_email(["bob@example.com"], ANNOUNCEMENT)
    recipients, subject, html = mock_send.await_args.args
    assert recipients == ["bob@example.com"]
    assert "Red bike" in subject
    assert "Almost new" in html
    assert "/announcement/7" in html


@pytest.mark.asyncio
async def test_send_announcement_email_without_recipient():
    """Nothing is sent without recipients."""
    with patch("app.core.email.send_email", new_callable=AsyncMock) as mock_send:
        assert await send_announcement_email([], ANNOUNCEMENT) is False
    mock_send.assert_not_called()
