"""
Email-related utilities.

This module contains the functions to send emails. It can use SMTP or
Mailjet to send emails, depending on the EMAIL_METHOD setting. The
notification sent to the authors whose suitable ads match a new
announcement is built here from an HTML template.
"""
import os
import smtplib
import ssl
from email.mime.text import MIMEText
from fastapi.exceptions import HTTPException
from mailjet_rest import Client

from app.core.config import settings, logger
from app.core.utils import app_path, render_html_template


async def send_mj_email(recipients: list[str] | str, subject: str, html_content: str) -> bool:
    """
    Send an email to a single recipient or a list of recipients using MailJet's API.

    :param list[str] | str recipients: the recipient(s) of the email.
    :param str subject: the subject of the email.
    :param str html_content: the content of the email.
    :return bool: True if the email is sent successfully.
    :raises HTTPException: 500 if MailJet refuses the messages.
    """
    if isinstance(recipients, str):
        recipients = [recipients]
    mailjet = Client(auth=(settings.MJ_APIKEY_PUBLIC,
                           settings.MJ_APIKEY_PRIVATE), version='v3.1')
    data = {
        'Messages': []
    }
    for recipient in recipients:
        data["Messages"].append(
            {
                "From": {
                    "Email": settings.MJ_SENDER_EMAIL,
                    "Name": settings.PROJECT_NAME
                },
                "To": [
                    {
                        "Email": recipient
                    }
                ],
                "Subject": subject,
                "HTMLPart": html_content
            }
        )
    result = mailjet.send.create(data=data)
    if result.status_code == 200:
        logger.info(
            f"""Email Sent with MailJet API
            - To {recipients}
            - From {settings.MJ_SENDER_EMAIL}
            - Subject: {subject}""")
        return True
    logger.error(f"Failed to send email to {recipients}")
    logger.error(result.json())
    raise HTTPException(
        status_code=500, detail=f"Failed to send email. {result.json()}")


async def send_smtp_email(recipients: list[str] | str, subject: str, html_content: str) -> bool:
    """
    Send an email to a single recipient or a list of recipients using an SMTP server.

    :param list[str] | str recipients: the recipient(s) of the email.
    :param str subject: the subject of the email.
    :param str html_content: the content of the email.
    :return bool: True if the email is sent successfully.
    :raises HTTPException: 500 if the SMTP exchange fails.
    """
    if isinstance(recipients, str):
        recipients = [recipients]
    try:
        context = ssl.create_default_context()
        with smtplib.SMTP(host=settings.SMTP_HOST, port=settings.SMTP_PORT) as server:
            server.ehlo()
            if settings.SMTP_TLS:
                server.starttls(context=context)
                server.ehlo()
            server.login(settings.SMTP_USER, settings.SMTP_PASSWORD)
            for recipient in recipients:
                html_message = MIMEText(html_content, "html")
                html_message["Subject"] = subject
                html_message["From"] = f"{settings.PROJECT_NAME} <{settings.SMTP_SENDER_EMAIL}>"
                html_message["To"] = recipient
                server.sendmail(settings.SMTP_SENDER_EMAIL, recipient,
                                html_message.as_string())
        logger.info(
            f"""Email Sent with SMTP Server
                - Host: {settings.SMTP_HOST}
                - To {recipients}
                - From {settings.SMTP_SENDER_EMAIL}
                - Subject: {subject}""")
        return True
    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"Failed to send email to {recipients}")
        logger.error(e)
        raise HTTPException(
            status_code=500, detail=f"Failed to send email. {e}") from e


async def send_email(recipients: list[str] | str, subject: str, html_content: str) -> bool:
    """
    Send an email to a single recipient or a list of recipients.

    :param list[str] | str recipients: the recipient(s) of the email.
    :param str subject: the subject of the email.
    :param str html_content: the content of the email.
    :return bool: True if an email was handed to a provider, False if the
        email method is 'none'.
    :raises HTTPException: 500 if the email could not be sent.
    """
    match settings.EMAIL_METHOD:
        case "smtp":
            logger.debug("Email sent via SMTP")
            return await send_smtp_email(recipients, subject, html_content)
        case "mj":
            logger.debug("Email sent via MailJet API")
            return await send_mj_email(recipients, subject, html_content)
        case "none":
            logger.warning("Email Method is set to 'none', NO EMAIL SENT")
            return False
        case _:
            logger.critical("Invalid Email Method")
            raise HTTPException(status_code=500, detail="Invalid Email Method")


async def send_announcement_email(recipients: list[str], announcement) -> bool:
    """
    Notify the given recipients that an announcement matching one of their
    suitable ads was published.

    :param list[str] recipients: the recipients of the email.
    :param Announcement announcement: the newly saved announcement.
    :return bool: the result of `send_email`, False if there is no recipient.
    """
    if not recipients:
        return False
    with open(app_path(os.path.join("app", "templates", "html",
                                    "email_announcement.html")), "r", encoding="utf-8") as f:
        html_content = f.read()
    context = {
        "TITLE": announcement.title,
        "DESCRIPTION": announcement.description or "",
        "PRICE": announcement.price,
        "ENDPOINT": f"/announcement/{announcement.id}",
    }
    html = render_html_template(html_content, context)
    logger.debug(f"Sending Announcement Email to {len(recipients)} recipient(s)")
    return await send_email(recipients, f"{settings.PROJECT_NAME} - New announcement: {announcement.title}", html)
