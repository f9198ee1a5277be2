"""
Frontend package for the crypto price dashboard.

This package contains the Streamlit UI and the client side of the backend API:
- Async API client and formatting helpers (services)
- Per-page view controllers holding selection and fetched data (state)
- Presentational components and the pages that compose them
"""

__version__ = "1.0.0"
