import json
import re
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

from flask import Blueprint, Response
from flask.views import View
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException, InternalServerError, MethodNotAllowed

INT_PATTERN = re.compile(r'[+-]?[0-9]+')
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def class_route(blueprint: Blueprint, rule: str, **options: Any) -> Callable[[type[View]], type[View]]:  # noqa: ANN401
    def decorator(cls: type[View]) -> type[View]:
        blueprint.add_url_rule(rule, view_func=cls.as_view(cls.__name__), **options)
        return cls

    return decorator


def json_response(data: Any, status: int) -> Response:  # noqa: ANN401
    return Response(json.dumps(data), status=status, mimetype='application/json')


def text_response(message: str, status: int) -> Response:
    return Response(message, status=status, mimetype='text/plain')


def error_response(message: str, status: int) -> Response:
    return text_response(message, status)


def validation_error_response(err: ValidationError) -> Response:
    messages = err.normalized_messages()
    field, errors = next(iter(messages.items()))

    # Nested schemas report a dict of field errors
    while isinstance(errors, dict):
        sub_field, errors = next(iter(errors.items()))
        if sub_field != '_schema':
            field = f'{field}.{sub_field}'

    message = errors[0] if isinstance(errors, list) else str(errors)
    return error_response(f'Invalid value for {field}: {message}', 400)


def http_error_response(err: HTTPException) -> Response:
    if isinstance(err, MethodNotAllowed):
        resp = error_response('Invalid request method', 405)
        if err.valid_methods:
            resp.headers['Allow'] = ', '.join(err.valid_methods)
        return resp

    return error_response(err.description or err.name, err.code or 500)


def internal_error_response(_err: InternalServerError) -> Response:
    return error_response('Internal server error', 500)


def parse_int(value: str | None) -> int | None:
    if value is None or INT_PATTERN.fullmatch(value) is None:
        return None

    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        return None

    return number


def format_datetime(value: datetime) -> str:
    whole = value.replace(microsecond=0)
    text = whole.replace(tzinfo=None).isoformat()

    # Fractional seconds without trailing zeros
    if value.microsecond:
        text += f'.{value.microsecond:06d}'.rstrip('0')

    if value.utcoffset() == timedelta(0):
        return text + 'Z'

    return text + whole.isoformat()[len(whole.replace(tzinfo=None).isoformat()) :]
