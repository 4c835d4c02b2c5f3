import pytest
from fastapi.testclient import TestClient

from tickcount.globalstate import GlobalState
from tickcount.module import TickCountServer


@pytest.fixture
def gstate() -> GlobalState:
    return GlobalState()


@pytest.fixture
def app(gstate: GlobalState):
    return TickCountServer(gstate=gstate).create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
