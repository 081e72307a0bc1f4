from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

import marshmallow.fields
import marshmallow.validate
import marshmallow_dataclass
from dependency_injector.wiring import Provide, inject
from flask import Blueprint, Response, request
from flask.views import MethodView
from marshmallow import ValidationError
from werkzeug.exceptions import MethodNotAllowed

from containers import Container
from models import Address, Client
from repositories import ClientRepository
from repositories.errors import ClientNotFoundError, DuplicateIdError

from .util import (
    INT64_MAX,
    INT64_MIN,
    class_route,
    error_response,
    format_datetime,
    json_response,
    parse_int,
    text_response,
    validation_error_response,
)

blp = Blueprint('Clients', __name__)


def client_to_dict(client: Client) -> dict[str, Any]:
    return {
        'id': client.id,
        'name': client.name,
        'age': client.age,
        'registerDate': format_datetime(client.register_date),
        'favCoffee': client.fav_coffee,
        'address': {
            'city': client.address.city,
            'street': client.address.street,
        },
    }


INT64_RANGE = marshmallow.validate.Range(min=INT64_MIN, max=INT64_MAX)

# Omitted fields take zero values, only the id is mandatory
ZERO_DATETIME = datetime(1, 1, 1, tzinfo=UTC)


@dataclass
class AddressBody:
    city: str = ''
    street: str = ''

    class Meta:
        unknown = marshmallow.EXCLUDE


@dataclass
class AddClientBody:
    id: int = field(metadata={'strict': True, 'validate': INT64_RANGE})
    name: str = ''
    age: int = field(default=0, metadata={'strict': True, 'validate': INT64_RANGE})
    registerDate: datetime = field(  # noqa: N815
        default=ZERO_DATETIME,
        metadata={'marshmallow_field': marshmallow.fields.AwareDateTime(required=False)},
    )
    favCoffee: str = ''  # noqa: N815
    address: AddressBody = field(default_factory=AddressBody)

    class Meta:
        unknown = marshmallow.EXCLUDE


@class_route(blp, '/addClient')
class AddClient(MethodView):
    init_every_request = False
    provide_automatic_options = False

    @inject
    def post(self, client_repo: ClientRepository = Provide[Container.client_repo]) -> Response:
        client_schema = marshmallow_dataclass.class_schema(AddClientBody)()
        req_json = request.get_json(silent=True, force=True)

        if not isinstance(req_json, dict):
            return error_response('The request body could not be parsed as valid JSON.', 400)

        try:
            data: AddClientBody = client_schema.load(req_json)
        except ValidationError as err:
            return validation_error_response(err)

        client = Client(
            id=data.id,
            name=data.name,
            age=data.age,
            register_date=data.registerDate,
            fav_coffee=data.favCoffee,
            address=Address(city=data.address.city, street=data.address.street),
        )

        try:
            client = client_repo.create(client)
        except DuplicateIdError:
            return error_response('Client with this ID already exists', 409)

        return json_response(client_to_dict(client), 201)


@class_route(blp, '/deleteClient')
class DeleteClient(MethodView):
    init_every_request = False
    provide_automatic_options = False

    @inject
    def delete(self, client_repo: ClientRepository = Provide[Container.client_repo]) -> Response:
        client_id = parse_int(request.args.get('id'))

        if client_id is None:
            return error_response('Invalid or missing ID', 400)

        try:
            client_id = client_repo.delete(client_id)
        except ClientNotFoundError:
            return error_response('Client not found', 404)

        return text_response(f'Client with ID {client_id} deleted successfully', 200)


@class_route(blp, '/getClients')
class ListClients(MethodView):
    init_every_request = False
    provide_automatic_options = False

    @inject
    def get(self, client_repo: ClientRepository = Provide[Container.client_repo]) -> Response:
        clients = {str(client_id): client_to_dict(client) for client_id, client in client_repo.get_all().items()}

        return json_response(clients, 200)

    def head(self) -> Response:
        raise MethodNotAllowed(valid_methods=['GET'])
