"""Userdesk backend: user account management API."""

from userdesk_backend.settings import BackendSettings, get_settings

__all__ = ["BackendSettings", "get_settings"]
