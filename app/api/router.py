"""
Main API router for the application

This module contains the main API router for the application. It includes all
the routes for the application: the authentication, author, heading,
announcement and suitable ad routes.
"""
from fastapi import APIRouter

from app.api.routes import (
    auth,
    author,
    heading,
    announcement,
    suitable_ad,
)


api_router = APIRouter()
# Important
api_router.include_router(auth.router, prefix="/auth", tags=["Auth"])
# Main Functions
api_router.include_router(author.router, prefix="/author", tags=["Author"])
api_router.include_router(announcement.router, prefix="/announcement", tags=["Announcement"])
# Secondary Functions
api_router.include_router(heading.router, prefix="/heading", tags=["Heading"])
api_router.include_router(suitable_ad.router, prefix="/suitable-ad", tags=["SuitableAd"])

tags_metadata = [
    {
        "name": "Auth",
        "description": "The **Authentication** logic is implemented here.",
    }, {
        "name": "Author",
        "description": "The **Author** logic (registration and CRUD operations) is implemented here.",
    }, {
        "name": "Announcement",
        "description": "The **Announcement** logic (CRUD operations, pagination and purge) is implemented here.",
    }, {
        "name": "Heading",
        "description": "The **Heading** logic is implemented here. Its changes are only accessible to admins.",
    }, {
        "name": "SuitableAd",
        "description": "The **Suitable Ad** logic (saved searches notified by email) is implemented here.",
    }
]
