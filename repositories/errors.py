class DuplicateIdError(Exception):
    def __init__(self, client_id: int) -> None:
        self.client_id = client_id
        super().__init__(f"A client with the ID '{client_id}' already exists.")


class ClientNotFoundError(Exception):
    def __init__(self, client_id: int) -> None:
        self.client_id = client_id
        super().__init__(f"No client with the ID '{client_id}' exists.")
