import pytest
import json
from fastapi.testclient import TestClient

from filetree.main import app
from filetree.schemas.events import NodeSelected
from filetree.schemas.tree import Point
from filetree.websocket import RendererConnections


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def connections():
    """Fresh renderer pool for each test"""
    return RendererConnections()


@pytest.fixture
def selection():
    return NodeSelected(name="a.txt", path="/tmp/a.txt", is_dir=False, position=Point(x=5.0, y=400.0))


class MockWebSocket:
    def __init__(self, fail=False):
        self.sent_messages = []
        self.fail = fail

    async def send_text(self, message: str):
        if self.fail:
            raise RuntimeError("connection closed")
        self.sent_messages.append(message)


def test_websocket_connection(client):
    """Test that WebSocket connection can be established"""
    with client.websocket_connect("/ws") as websocket:
        assert websocket is not None


def test_pool_starts_empty(connections):
    assert connections.sockets == []


@pytest.mark.asyncio
async def test_send_selection(connections, selection):
    """Selections arrive wrapped in a typed envelope"""
    mock_ws = MockWebSocket()
    connections.sockets.append(mock_ws)

    delivered = await connections.send_selection(selection)

    assert delivered == 1
    message = json.loads(mock_ws.sent_messages[0])
    assert message["type"] == "node_selected"
    assert message["data"]["path"] == "/tmp/a.txt"
    assert message["data"]["position"] == {"x": 5.0, "y": 400.0}


@pytest.mark.asyncio
async def test_failed_renderer_dropped(connections, selection):
    """Sockets that fail to send are removed, others still receive"""
    good = MockWebSocket()
    bad = MockWebSocket(fail=True)
    connections.sockets.extend([bad, good])

    delivered = await connections.send_selection(selection)

    assert delivered == 1
    assert connections.sockets == [good]
    assert len(good.sent_messages) == 1


def test_disconnect_unknown_socket_is_noop(connections):
    connections.disconnect(MockWebSocket())
    assert connections.sockets == []
