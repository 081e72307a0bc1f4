import json
from unittest import TestCase

from app import create_app


class TestHealth(TestCase):
    def setUp(self) -> None:
        self.app = create_app()
        self.client = self.app.test_client()

    def tearDown(self) -> None:
        self.app.container.unwire()

    def test_health(self) -> None:
        resp = self.client.get('/health')

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(json.loads(resp.get_data()), {'status': 'Ok'})
