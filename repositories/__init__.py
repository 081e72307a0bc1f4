from .client import ClientRepository
from .errors import ClientNotFoundError, DuplicateIdError

__all__ = ['ClientRepository', 'ClientNotFoundError', 'DuplicateIdError']
