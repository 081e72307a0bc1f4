from .address import Address
from .client import Client

__all__ = ['Address', 'Client']
