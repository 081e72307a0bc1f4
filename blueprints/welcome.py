from datetime import datetime

from dependency_injector.wiring import Provide, inject
from flask import Blueprint, render_template, request
from flask.views import MethodView

from containers import Container

from .util import class_route

blp = Blueprint('Welcome', __name__)

TIME_FORMAT = '%b %d %H:%M:%S'


@class_route(blp, '/')
class Welcome(MethodView):
    init_every_request = False

    @inject
    def get(
        self,
        default_name: str = Provide[Container.config.welcome.name],
        started_at: datetime = Provide[Container.config.started_at],
    ) -> str:
        name = request.values.get('name') or default_name

        return render_template('main.html', name=name, time=started_at.strftime(TIME_FORMAT))

    def post(self) -> str:
        return self.get()
