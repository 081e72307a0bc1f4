from .data import clients

__all__ = ['clients']
