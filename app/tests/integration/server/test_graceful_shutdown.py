"""Graceful shutdown against a real uvicorn listener.

The server runs on a worker thread, where uvicorn leaves signal handling
alone; setting ``should_exit`` triggers the same drain path a SIGTERM does.
"""

import socket
import threading
import time

import httpx
import pytest
import uvicorn

from server.server import create_app


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def _wait_until(predicate, timeout=5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.05)
    return False


@pytest.fixture
def live_server(settings, geo_database):
    port = _free_port()
    app = create_app(settings=settings, geo_database=geo_database)
    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host="127.0.0.1",
            port=port,
            timeout_graceful_shutdown=settings.server.SHUTDOWN_GRACE_SECONDS,
            log_config=None,
        )
    )
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()
    assert _wait_until(lambda: server.started), "server did not start"

    yield server, f"http://127.0.0.1:{port}"

    server.should_exit = True
    thread.join(timeout=10)


@pytest.mark.integration
def test_live_server_answers_requests(live_server):
    _, base_url = live_server

    assert httpx.get(f"{base_url}/healthz", timeout=5).text == "OK"
    response = httpx.get(f"{base_url}/geo/point", params={"ip": "8.8.8.8"}, timeout=5)
    assert response.json() == {"point": [37.4, -122.1]}


@pytest.mark.integration
def test_in_flight_request_completes_during_shutdown(
    live_server, mock_reader, city_records
):
    server, base_url = live_server
    lookup_started = threading.Event()

    def slow_city(ip_address):
        lookup_started.set()
        time.sleep(0.5)
        return city_records[ip_address]

    mock_reader.city.side_effect = slow_city
    responses = []

    def request():
        responses.append(
            httpx.get(f"{base_url}/geo/zip", params={"ip": "8.8.8.8"}, timeout=10)
        )

    client_thread = threading.Thread(target=request)
    client_thread.start()
    assert lookup_started.wait(timeout=5)

    server.should_exit = True
    client_thread.join(timeout=10)

    assert len(responses) == 1
    assert responses[0].status_code == 200
    assert responses[0].json() == {"zip": "94043"}
