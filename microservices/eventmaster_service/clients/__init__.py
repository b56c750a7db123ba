"""
Eventmaster Service Clients
"""

from .eventmaster_client import EventMasterClient

__all__ = ["EventMasterClient"]
