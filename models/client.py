from dataclasses import dataclass
from datetime import datetime

from .address import Address


@dataclass
class Client:
    id: int
    name: str
    age: int
    register_date: datetime
    fav_coffee: str
    address: Address
