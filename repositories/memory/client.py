import logging
import threading
from dataclasses import asdict
from typing import Any

import dacite

from models import Client
from repositories import ClientRepository
from repositories.errors import ClientNotFoundError, DuplicateIdError


class MemoryClientRepository(ClientRepository):
    """Client store kept in process memory.

    Records are held as plain dicts and rebuilt on the way out, so callers never share
    state with the store. Every operation runs under a single lock.
    """

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.clients: dict[int, dict[str, Any]] = {}
        self.logger = logging.getLogger(self.__class__.__name__)

    def dict_to_client(self, data: dict[str, Any]) -> Client:
        return dacite.from_dict(data_class=Client, data=data)

    def create(self, client: Client) -> Client:
        client_dict = asdict(client)

        with self.lock:
            if client.id in self.clients:
                self.logger.info('Rejected client with duplicate id %d', client.id)
                raise DuplicateIdError(client.id)

            self.clients[client.id] = client_dict

        self.logger.debug('Stored client %d', client.id)
        return client

    def delete(self, client_id: int) -> int:
        with self.lock:
            if self.clients.pop(client_id, None) is None:
                self.logger.info('Client %d not found for deletion', client_id)
                raise ClientNotFoundError(client_id)

        self.logger.debug('Deleted client %d', client_id)
        return client_id

    def get_all(self) -> dict[int, Client]:
        with self.lock:
            snapshot = list(self.clients.items())

        return {client_id: self.dict_to_client(data) for client_id, data in snapshot}

    def delete_all(self) -> None:
        with self.lock:
            count = len(self.clients)
            self.clients.clear()

        self.logger.debug('Deleted %d clients', count)
