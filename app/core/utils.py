"""
This module contains miscellaneous utilities such as validators for different types
of data (e.g. email addresses, names, passwords), a timestamp generator, a helper to
render HTML templates and a function to build unique IDs for the FastAPI routes.
"""
from datetime import datetime, timezone
import os
import re
import time
from email_validator import EmailNotValidError
from email_validator import validate_email as email_validation
from fastapi import HTTPException
from fastapi.routing import APIRoute
from jinja2 import DebugUndefined, Template

from app.core.config import logger, settings


def validate_name(name: str) -> str:
    """
    Validates the provided author name.

    :param str name: The name to validate.
    :return str: The validated name.
    :raises HTTPException: If the name is invalid.
    """
    name_pattern = r"^[A-Za-z0-9_.-]{3,32}$"
    if bool(re.match(name_pattern, name)):
        return name
    if settings.ENVIRONMENT == "local":
        logger.warning(f"Invalid name format: {name}")
        return name
    raise HTTPException(
        status_code=400,
        detail="""
        Name must be 3 to 32 characters long, contain only letters, numbers, dots, dashes and underscores.
        """
    )


def validate_email(email: str, raise_error: bool = True, check_deliverability: bool = False) -> str:
    """
    Validates the provided email address.

    :param str email: The email address to validate.
    :param bool raise_error: Whether to raise an error or return False on invalid emails.
    :param bool check_deliverability: Whether to check the domain of the email with DNS.
    :return str: The validated (normalized) email address.
    :raises HTTPException: If the email address is invalid.
    """
    try:
        email_info = email_validation(
            email, check_deliverability=check_deliverability)
    except EmailNotValidError as e:
        if not raise_error:
            logger.debug(f"Invalid email format: {email}")
            return False
        if settings.ENVIRONMENT == "local":
            logger.warning(f"Invalid email format: {email}")
            return email
        raise HTTPException(
            status_code=400, detail="Email is not valid. " + str(e)) from e
    return email_info.normalized


def validate_password(password: str) -> str:
    """
    Validates the provided password.

    :param str password: The password to validate.
    :return str: The validated password.
    :raises HTTPException: If the password is invalid.
    """
    regex = r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*#?&])[A-Za-z\d@$!%*#?&]{10,}$"
    if bool(re.match(regex, password)):
        return password
    if settings.ENVIRONMENT == "local":
        logger.warning("Invalid password format")
        return password
    raise HTTPException(
        status_code=400,
        detail="Password must be at least 10 characters long, contain at least one uppercase letter, \
            one lowercase letter, one number, and one special character (@$!%*#?&)."
    )


def generate_timestamp() -> int:
    """
    Generates a timestamp representing the current time.

    :return: An integer timestamp.
    """
    return int(time.time())


def custom_generate_unique_id(route: APIRoute) -> str:
    """Generate a unique ID for a route by combining its first tag with its name."""
    return f"{route.tags[0]}-{route.name}"


def render_html_template(html_content: str, context: dict = None) -> str:
    """
    Renders an HTML template with the given content and context.

    :param str html_content: The HTML content to be rendered.
    :param dict context: A dictionary of context variables to be used in rendering the template.
    :return str: The rendered HTML as a string.
    """
    base_context = {
        "PROJECT_NAME": settings.PROJECT_NAME,
        "FRONTEND_URL": settings.FRONTEND_URL,
        "COPYRIGHT_YEAR": datetime.now(timezone.utc).year,
        "SUPPORT_EMAIL": settings.CONTACT_EMAIL,
        "BASE_URL": settings.BASE_URL,
        "API_STR": settings.API_STR,
    }
    base_context.update(context or {})
    return Template(
        html_content, undefined=DebugUndefined).render(base_context)


def app_path(path: str) -> str:
    """Returns the absolute path of the given path relative to the app root directory."""
    return os.path.normpath(os.path.join(settings.APP_ROOT_DIR, path))
