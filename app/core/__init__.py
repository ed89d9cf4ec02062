"""
Core module for the application.

This module contains the core logic for the application, including the
config, db, email, permissions, security, and utils modules.
"""
