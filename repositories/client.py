from models import Client


class ClientRepository:
    def create(self, client: Client) -> Client:
        raise NotImplementedError  # pragma: no cover

    def delete(self, client_id: int) -> int:
        raise NotImplementedError  # pragma: no cover

    def get_all(self) -> dict[int, Client]:
        raise NotImplementedError  # pragma: no cover

    def delete_all(self) -> None:
        raise NotImplementedError  # pragma: no cover
