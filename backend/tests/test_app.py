import json
import logging

from app.core.logging_config import JsonFormatter, get_logging_config


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_unknown_route_is_404(client):
    response = client.get("/api/v1/nowhere")

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not Found"}


def test_json_log_formatter():
    record = logging.LogRecord("app.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.company_id = "c1"

    entry = json.loads(JsonFormatter().format(record))

    assert entry["message"] == "hello world"
    assert entry["level"] == "INFO"
    assert entry["extra"] == {"company_id": "c1"}


def test_logging_config_formats():
    assert "()" in get_logging_config(fmt="json")["formatters"]["default"]
    assert get_logging_config(level="DEBUG")["loggers"]["app"]["level"] == "DEBUG"
