import os

import pytest
import requests

HTTP_AUTH_USER = os.getenv("HTTP_AUTH_USER")
HTTP_AUTH_PASSWORD = os.getenv("HTTP_AUTH_PASSWORD")
CONSOLE_URL = os.getenv("CONSOLE_URL", "http://localhost:8000")
CONSOLE_USER = os.getenv("CONSOLE_USER")
CONSOLE_PASSWORD = os.getenv("CONSOLE_PASSWORD")

kwargs = {}
if HTTP_AUTH_USER and HTTP_AUTH_PASSWORD:
    kwargs["auth"] = (HTTP_AUTH_USER, HTTP_AUTH_PASSWORD)


class Client:
    def __init__(self, token=None):
        self.headers = {"Authorization": f"Bearer {token}"} if token else {}

    def _url(self, path):
        assert path[0] == "/", "URL must start with /"
        return f"{CONSOLE_URL}{path}"

    def get(self, url):
        return requests.get(self._url(url), headers=self.headers, **kwargs)

    def post(self, url, data=None, headers=None):
        return requests.post(
            self._url(url), json=data, headers={**self.headers, **(headers or {})}, **kwargs
        )

    def delete(self, url):
        return requests.delete(self._url(url), headers=self.headers, **kwargs)


@pytest.fixture(scope="session")
def client():
    return Client()


@pytest.fixture(scope="session")
def console_client(client):
    if not (CONSOLE_USER and CONSOLE_PASSWORD):
        pytest.skip("CONSOLE_USER and CONSOLE_PASSWORD are not set")

    response = requests.post(
        client._url("/login"), auth=(CONSOLE_USER, CONSOLE_PASSWORD)
    )
    assert response.status_code == 200, response.text
    return Client(response.json()["token"])
