"""Pytest fixtures: fake transports that record calls and replay bodies."""

import pytest

from etherpad_lite_client import AsyncEPLiteClient, EPLiteClient

BASE_URL = "http://pad.example.com:9001/api"
API_KEY = "s3cr3t key&="


class FakeTransport:
    def __init__(self, body='{"code":0,"message":"ok","data":null}'):
        self.body = body
        self.sent = []
        self.error = None

    def send(self, call):
        self.sent.append(call)
        if self.error is not None:
            raise self.error
        return self.body


class AsyncFakeTransport(FakeTransport):
    async def send(self, call):
        return FakeTransport.send(self, call)


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    return EPLiteClient(BASE_URL, API_KEY, transport=transport)


@pytest.fixture
def async_transport():
    return AsyncFakeTransport()


@pytest.fixture
def async_client(async_transport):
    return AsyncEPLiteClient(BASE_URL, API_KEY, transport=async_transport)
