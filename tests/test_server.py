import asyncio
import json
import random

from websockets.datastructures import Headers
from websockets.http11 import Request

from service.config import ServerConfig
from service.handlers import CribbageApi
from service.server import ApiServer

from .helpers import DummyWebSocket


def make_server() -> ApiServer:
    config = ServerConfig()
    return ApiServer(config, api=CribbageApi(config, rng=random.Random(1)))


def test_request_message_gets_response_with_same_id():
    server = make_server()
    ws = DummyWebSocket()
    raw = json.dumps({"type": "request", "id": 7, "path": "/api/scorecountedcards/FiveOfDiamonds/5/FiveOfHearts"})

    asyncio.run(server._handle_message(ws, raw))

    (reply,) = ws.messages()
    assert reply["v"] == 1
    assert reply["type"] == "response"
    assert reply["id"] == 7
    assert reply["status"] == 200
    assert reply["body"]["Score"] == 2


def test_engine_errors_come_back_as_responses():
    server = make_server()
    ws = DummyWebSocket()
    asyncio.run(server._handle_message(ws, json.dumps({"type": "request", "path": "/api/cutcards/99,1"})))

    (reply,) = ws.messages()
    assert reply["status"] == 400
    assert reply["body"]["error_kind"] == "BadCard"


def test_bad_messages_get_error_codes():
    server = make_server()
    ws = DummyWebSocket()

    asyncio.run(server._handle_message(ws, "not json"))
    asyncio.run(server._handle_message(ws, json.dumps([1, 2])))
    asyncio.run(server._handle_message(ws, json.dumps({"type": "hello"})))
    asyncio.run(server._handle_message(ws, json.dumps({"type": "request", "path": 5})))

    assert [msg["code"] for msg in ws.messages()] == ["BAD_JSON", "BAD_JSON", "UNKNOWN_TYPE", "BAD_SCHEMA"]
    assert all(msg["type"] == "error" for msg in ws.messages())


def test_unexpected_failures_are_reported_as_internal(monkeypatch):
    server = make_server()
    ws = DummyWebSocket()

    def explode(path):
        raise RuntimeError("boom")

    monkeypatch.setattr(server.api, "dispatch", explode)
    asyncio.run(server._handle_message(ws, json.dumps({"type": "request", "path": "/api/cutcards"})))

    (reply,) = ws.messages()
    assert reply["code"] == "INTERNAL"


def test_plain_get_is_answered_with_json():
    server = make_server()
    response = server._process_request(None, Request("/api/cutcards/0,51", Headers()))

    assert response is not None
    assert response.status_code == 200
    assert response.headers["Content-Type"] == "application/json"
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    body = json.loads(response.body)
    assert body["CutCards"]["Player"]["cardName"] == "AceOfClubs"


def test_plain_get_errors_keep_their_status():
    server = make_server()
    missing = server._process_request(None, Request("/api/nowhere", Headers()))
    bad = server._process_request(None, Request("/api/scorehand/Nope/FiveOfDiamonds/false", Headers()))

    assert missing.status_code == 404
    assert bad.status_code == 400
    assert json.loads(bad.body)["error_kind"] == "ParseError"


def test_health_check_and_websocket_upgrade():
    server = make_server()
    health = server._process_request(None, Request("/health", Headers()))
    assert health.status_code == 200
    assert health.body == b"cribbage api running\n"

    upgrade = server._process_request(None, Request("/", Headers([("Upgrade", "websocket")])))
    assert upgrade is None


def test_config_reads_environment():
    config = ServerConfig.from_env({"CRIBBAGE_PORT": "9000", "CRIBBAGE_HOST_NAME": "cards.example.com/api/"})
    assert config.port == 9000
    assert config.host_name == "cards.example.com/api"

    defaults = ServerConfig.from_env({})
    assert defaults.port == 8080
    assert defaults.host_name == "localhost:8080/api"
