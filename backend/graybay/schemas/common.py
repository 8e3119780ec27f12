"""
Small schemas embedded in several responses.
"""

from graybay.schemas.base import APIModel


class ClientSummary(APIModel):
    """Client reference embedded in other resources."""
    id: int
    name: str
