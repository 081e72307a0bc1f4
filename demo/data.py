from datetime import UTC, datetime

from models import Address, Client

clients = [
    Client(
        id=1,
        name='Anna Nilsen',
        age=30,
        register_date=datetime(2024, 1, 1, 0, 0, 0, tzinfo=UTC),
        fav_coffee='Latte',
        address=Address(city='Oslo', street='Karl Johans gate 12'),
    ),
    Client(
        id=2,
        name='Bernardo Lima Abreu',
        age=41,
        register_date=datetime(2024, 3, 14, 9, 26, 53, tzinfo=UTC),
        fav_coffee='Espresso',
        address=Address(city='Lisboa', street='Rua Augusta 148'),
    ),
    Client(
        id=3,
        name='Mariana Sanchez Torres',
        age=27,
        register_date=datetime(2024, 6, 2, 17, 5, 11, tzinfo=UTC),
        fav_coffee='Cortado',
        address=Address(city='Quito', street='Avenida Amazonas 2210'),
    ),
    Client(
        id=4,
        name='Lucas Gabriel Ferreira',
        age=35,
        register_date=datetime(2024, 10, 17, 11, 52, 35, tzinfo=UTC),
        fav_coffee='Flat White',
        address=Address(city='Curitiba', street='Rua XV de Novembro 700'),
    ),
]
