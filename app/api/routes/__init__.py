"""
API routes module.

This module contains the routers of the application: the authentication,
author, heading, announcement and suitable ad routes.
"""
