import json
from typing import cast
from unittest.mock import Mock

from unittest_parametrize import ParametrizedTestCase, parametrize

import demo
from app import create_app
from repositories import ClientRepository


class TestReset(ParametrizedTestCase):
    API_ENDPOINT = '/reset'

    def setUp(self) -> None:
        self.app = create_app()
        self.client = self.app.test_client()

    def tearDown(self) -> None:
        self.app.container.unwire()

    @parametrize(
        'arg,expected',
        [
            (None, False),
            ('true', True),
            ('false', False),
            ('foo', False),
        ],
    )
    def test_reset(self, arg: str | None, expected: bool) -> None:  # noqa: FBT001
        client_repo_mock = Mock(ClientRepository)
        call_order = []

        cast(Mock, client_repo_mock.delete_all).side_effect = lambda: call_order.append('client:delete_all')
        cast(Mock, client_repo_mock.create).side_effect = lambda _x: call_order.append('client:create')

        with self.app.container.client_repo.override(client_repo_mock):
            resp = self.client.post(self.API_ENDPOINT + (f'?demo={arg}' if arg is not None else ''))

        cast(Mock, client_repo_mock.delete_all).assert_called_once()

        if not expected:
            self.assertEqual(call_order, ['client:delete_all'])
        else:
            self.assertEqual(call_order, ['client:delete_all'] + ['client:create'] * len(demo.clients))

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(json.loads(resp.get_data()), {'status': 'Ok'})

    def test_reset_store(self) -> None:
        self.client.post(self.API_ENDPOINT + '?demo=true')
        resp = self.client.get('/getClients')
        self.assertEqual(sorted(json.loads(resp.get_data())), sorted(str(c.id) for c in demo.clients))

        self.client.post(self.API_ENDPOINT)
        resp = self.client.get('/getClients')
        self.assertEqual(json.loads(resp.get_data()), {})
