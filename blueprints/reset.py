from dependency_injector.wiring import Provide, inject
from flask import Blueprint, Response, request
from flask.views import MethodView

import demo
from containers import Container
from repositories import ClientRepository

from .util import class_route, json_response

blp = Blueprint('Reset database', __name__)


@class_route(blp, '/reset')
class ResetDB(MethodView):
    init_every_request = False

    @inject
    def post(self, client_repo: ClientRepository = Provide[Container.client_repo]) -> Response:
        client_repo.delete_all()

        if request.args.get('demo', 'false') == 'true':
            for client in demo.clients:
                client_repo.create(client)

        return json_response({'status': 'Ok'}, 200)
