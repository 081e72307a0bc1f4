import logging
import os
from datetime import UTC, datetime

from flask import Flask
from werkzeug.exceptions import HTTPException, InternalServerError

import demo
from blueprints import BlueprintClient, BlueprintHealth, BlueprintReset, BlueprintWelcome
from blueprints.util import http_error_response, internal_error_response
from containers import Container

LOG_FORMAT = '[%(asctime)s] %(levelname)s %(name)s: %(message)s'


class FlaskMicroservice(Flask):
    container: Container


def setup_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def create_app() -> FlaskMicroservice:
    setup_logging(os.getenv('LOG_LEVEL', 'INFO'))

    app = FlaskMicroservice(__name__)
    app.container = Container()

    app.container.config.welcome.name.from_env('WELCOME_NAME', 'Guest')
    app.container.config.started_at.from_value(datetime.now(UTC))

    if os.getenv('SEED_DEMO_DATA') == '1':
        client_repo = app.container.client_repo()
        for client in demo.clients:
            client_repo.create(client)

    app.register_error_handler(InternalServerError, internal_error_response)
    app.register_error_handler(HTTPException, http_error_response)

    app.register_blueprint(BlueprintClient)
    app.register_blueprint(BlueprintHealth)
    app.register_blueprint(BlueprintReset)
    app.register_blueprint(BlueprintWelcome)

    return app
