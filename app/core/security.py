"""
Security utilities for the API.

This module contains the utilities for the authentication of the authors.
It includes the functions to hash and verify passwords with bcrypt and to
generate and decode the JSON Web Tokens (JWT) handed out at login.
"""
from datetime import datetime, timedelta, timezone
import re
from authlib.jose import jwt
from authlib.jose.errors import JoseError
import bcrypt
from fastapi.exceptions import HTTPException
from fastapi.security import OAuth2PasswordBearer
from pydantic import BaseModel, ValidationError

from app.core.config import settings


ALGORITHM = settings.JWT_ALGORITHM
SECRET_KEY = settings.JWT_SECRET_KEY
ACCESS_TOKEN_EXPIRE_MINUTES = settings.JWT_EXP


oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.API_STR}/auth/login",
    auto_error=True
)


class Token(BaseModel):
    """
    A token returned from the authentication endpoint.

    Attributes
    ----------
    access_token : str
        The actual token to use in the Authorization header.
    token_type : str
        The type of the token, always bearer.
    """
    access_token: str
    token_type: str

    def __str__(self) -> str:
        return f"{self.token_type} {self.access_token}"


class TokenData(BaseModel):
    """
    The data encoded in a JSON Web Token (JWT).

    Attributes
    ----------
    name : str
        The name of the author the token was issued to.
    """
    name: str


def hash_password(password: str) -> str:
    """
    Hashes a password using bcrypt.

    :param str password: The password to hash.
    :return str: The hashed password.

    :raises HTTPException: If the password cannot be encoded.
    """
    try:
        hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt())
    except UnicodeEncodeError as e:
        raise HTTPException(
            status_code=400,
            detail=f"Password must be a string. {e.reason}",
        ) from e
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verifies a password against a hashed password using bcrypt.

    :param str plain_password: The password to verify.
    :param str hashed_password: The hashed password to compare with.
    :return bool: True if the password matches the hash, False otherwise.
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Not a bcrypt hash
        return False


def create_access_token(
    sub: TokenData,
    exp: int = ACCESS_TOKEN_EXPIRE_MINUTES,
    key: str = SECRET_KEY
) -> Token:
    """
    Creates an access token for a given subject.

    :param TokenData sub: The subject to encode in the token.
    :param int, optional exp: The time to live of the token in minutes.
    :param str, optional key: The secret key to use for encoding.
    :return Token: The encoded token.
    """
    headers = {"alg": ALGORITHM, "typ": "JWT"}
    now = datetime.now(timezone.utc)
    payload = {
        "iss": settings.PROJECT_NAME,
        "sub": sub.name,
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(minutes=exp)).timestamp()),
    }
    encoded_jwt = jwt.encode(headers, payload, key)
    return Token(access_token=encoded_jwt.decode("utf-8"), token_type="bearer")


def generate_token(name: str) -> Token:
    """
    Issue a login token for the author with the given name.

    :param str name: The name of the author.
    :return Token: The encoded token.
    """
    return create_access_token(sub=TokenData(name=name))


def decode_access_token(token: str, key: str = SECRET_KEY) -> TokenData:
    """
    Decodes a JSON Web Token (JWT), with or without its "Bearer " prefix.

    :param str token: The JWT to decode.
    :param str key: The secret key used to decode the JWT. Defaults to SECRET_KEY.
    :return TokenData: The decoded JWT data.

    :raises HTTPException: If the token is invalid, expired, or has an invalid issuer.
    """
    insensitive_token = re.compile(re.escape("bearer "), re.IGNORECASE)
    token = insensitive_token.sub("", token, count=1)
    try:
        claims = jwt.decode(token, key)
    except JoseError as e:
        raise HTTPException(
            status_code=401,
            detail=f"Invalid token. {e}",
        ) from e
    if not claims:
        raise HTTPException(
            status_code=401,
            detail="Could not validate credentials",
        )
    if claims.get("iss") != settings.PROJECT_NAME:
        raise HTTPException(
            status_code=401,
            detail="Could not validate credentials | Invalid issuer",
        )
    now = datetime.now(timezone.utc)
    iat = datetime.fromtimestamp(int(claims["iat"]), tz=timezone.utc)
    if iat > now + timedelta(seconds=5):
        raise HTTPException(
            status_code=401,
            detail="Token not yet valid",
        )
    exp = datetime.fromtimestamp(int(claims["exp"]), tz=timezone.utc)
    if exp < now:
        raise HTTPException(
            status_code=401,
            detail="Token expired",
        )
    try:
        return TokenData(name=claims.get("sub"))
    except ValidationError as e:
        raise HTTPException(
            status_code=401,
            detail=f"Invalid token. {e}",
        ) from e
