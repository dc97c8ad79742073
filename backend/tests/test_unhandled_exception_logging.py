import logging
import os
import sys
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Ensure the tenpin package is importable
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

# Avoid startup validation error when importing the app
os.environ.setdefault("ALLOW_CREDENTIALS", "false")
os.environ.setdefault("ALLOWED_ORIGINS", "http://localhost:3000")
from tenpin.exceptions import FrameAlreadyComplete
from tenpin.main import domain_exception_handler, unhandled_exception_handler


def test_unhandled_exception_logs_traceback(caplog):
    app = FastAPI()
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/boom")
    def boom():
        raise ValueError("boom")

    client = TestClient(app, raise_server_exceptions=False)
    with caplog.at_level(logging.ERROR):
        response = client.get("/boom")

    assert response.status_code == 500
    assert response.json()["code"] == "internal_server_error"
    record = next((r for r in caplog.records if r.message == "Unhandled exception"), None)
    assert record is not None
    assert record.exc_info[0] is ValueError
    assert "ValueError: boom" in caplog.text


def test_domain_exception_is_not_logged_as_error(caplog):
    app = FastAPI()
    app.add_exception_handler(FrameAlreadyComplete, domain_exception_handler)

    @app.get("/over")
    def over():
        raise FrameAlreadyComplete(final=True)

    client = TestClient(app, raise_server_exceptions=False)
    with caplog.at_level(logging.ERROR):
        response = client.get("/over")

    assert response.status_code == 409
    assert response.json()["detail"] == "a completed final frame cannot have additional rolls"
    assert not [r for r in caplog.records if r.levelno >= logging.ERROR]
