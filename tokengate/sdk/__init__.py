"""
SDK - High-level client for embedding the service.
"""

from tokengate.sdk.client import AuthClient

__all__ = ["AuthClient"]
