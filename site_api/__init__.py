"""Business Site API.

Backend for a small business website. Run with:

    uvicorn site_api.main:app --port 5000
"""

__version__ = "0.1.0"
