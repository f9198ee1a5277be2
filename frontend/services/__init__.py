"""
Backend access and formatting helpers for the dashboard views.
"""

from frontend.services.api import ApiService

__all__ = ['ApiService']
