"""
Authentication logic for the API.

This module contains the login route handing out the bearer token of an
author from its name and password.
"""
from fastapi import APIRouter
from fastapi.params import Depends
from fastapi.security import OAuth2PasswordRequestFormStrict
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_async_db
from app.core.security import Token
from app.db_objects.author import get_current_author
from app.db_objects.db_models import Author as Author_DB
from app.services import author as author_service
from app.templates.schemas.author import AuthorLogin, AuthorRead


router = APIRouter()


@router.post("/login", response_model=Token)
async def login(
    form_data: OAuth2PasswordRequestFormStrict = Depends(),
    db: AsyncSession = Depends(get_async_db)
):
    """
    Login an author and return an access token.

    Parameters
    ----------
    form_data : OAuth2PasswordRequestFormStrict
        Form with the name (as `username`) and the password of the author.

    Returns
    -------
    Token
        The access token of the author.
    """
    return await author_service.authentication(
        db, AuthorLogin(name=form_data.username, password=form_data.password))


@router.get("/me", response_model=AuthorRead)
async def read_current_author(current_author: Author_DB = Depends(get_current_author)):
    """Return the author the bearer token was issued to."""
    return AuthorRead.model_validate(current_author)
