import unittest
import uuid

import mongomock

from app import create_app


def make_config(**extra):
    config = {
        "TESTING": True,
        "APP_ENV": "testing",
        "MONGO_URI": "mongodb://localhost",
        "DB_NAME": f"news_test_{uuid.uuid4().hex[:8]}",
        "MONGO_CLIENT_OPTIONS": {"mongo_client_class": mongomock.MongoClient},
        "JWT_SECRET": "test-secret",
    }
    config.update(extra)
    return config


def token_from_response(response):
    for header in response.headers.getlist("Set-Cookie"):
        name, _, rest = header.partition("=")
        if name == "token":
            return rest.split(";", 1)[0]
    return None


class AppTestCase(unittest.TestCase):
    """Flask app wired to an in-memory mongomock database."""

    def setUp(self):
        self.app = create_app(make_config())
        self.client = self.app.test_client()
        self.db = self.app.extensions["database"]

    def tearDown(self):
        handle = self.db.connect()
        handle.client.drop_database(handle.name)
        self.db.close()

    def login(self, client=None, username="admin", password="admin123"):
        client = client or self.client
        return client.post("/api/admin/login", json={"username": username, "password": password})
