import os
from unittest.mock import patch

from faker import Faker
from unittest_parametrize import ParametrizedTestCase, parametrize

from app import create_app


class TestWelcome(ParametrizedTestCase):
    def setUp(self) -> None:
        self.faker = Faker()
        self.app = create_app()
        self.client = self.app.test_client()

    def tearDown(self) -> None:
        self.app.container.unwire()

    def test_default_name(self) -> None:
        resp = self.client.get('/')

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.mimetype, 'text/html')
        self.assertIn('Hello, Guest!', resp.get_data(as_text=True))

    def test_configured_default_name(self) -> None:
        self.app.container.unwire()
        with patch.dict(os.environ, {'WELCOME_NAME': 'Barista'}):
            self.app = create_app()
        self.client = self.app.test_client()

        resp = self.client.get('/')

        self.assertIn('Hello, Barista!', resp.get_data(as_text=True))

    @parametrize(
        'method',
        [
            ('get',),
            ('post',),
        ],
    )
    def test_name(self, method: str) -> None:
        name = self.faker.first_name()

        if method == 'get':
            resp = self.client.get('/', query_string={'name': name})
        else:
            resp = self.client.post('/', data={'name': name})

        self.assertEqual(resp.status_code, 200)
        self.assertIn(f'Hello, {name}!', resp.get_data(as_text=True))

    def test_name_is_escaped(self) -> None:
        resp = self.client.get('/', query_string={'name': '<b>Anna</b>'})

        self.assertIn('Hello, &lt;b&gt;Anna&lt;/b&gt;!', resp.get_data(as_text=True))

    def test_start_time(self) -> None:
        started_at = self.app.container.config.started_at()

        resp = self.client.get('/')

        self.assertIn(started_at.strftime('%b %d %H:%M:%S'), resp.get_data(as_text=True))

    def test_static(self) -> None:
        resp = self.client.get('/static/style.css')

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.mimetype, 'text/css')
        resp.close()
