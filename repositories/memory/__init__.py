from .client import MemoryClientRepository

__all__ = ['MemoryClientRepository']
