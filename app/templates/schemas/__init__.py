"""
Schemas for the application.

This module contains the pydantic models (DTOs) of the application. The models
include the Author, Announcement, Heading and SuitableAd models.
"""
