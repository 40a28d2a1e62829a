"""
HTTP surface (FastAPI) over the AuthClient.
"""

from tokengate.api.app import create_app

__all__ = ["create_app"]
