"""
HTTP surface tests using FastAPI's TestClient.
"""

import pytest
from fastapi.testclient import TestClient

from luach_agent.services.http import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "OK"}


def test_lists_functions(client):
    functions = client.get("/api/functions").json()["functions"]

    assert len(functions) == 4
    convert = next(func for func in functions if func["name"] == "convertDate")
    assert convert["parameters"]["properties"]["fromCalendar"]["enum"] == ["gregorian", "hebrew"]


def test_invokes_function(client):
    response = client.post(
        "/api/functions/convertDate",
        json={"arguments": {"inputDate": "2024-10-03", "fromCalendar": "gregorian"}},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "convertDate"
    assert body["result"]["hebrewDate"]["formatted"] == "1 Tishrei 5785"


def test_unknown_function_is_404(client):
    assert client.post("/api/functions/nope", json={"arguments": {}}).status_code == 404


def test_invalid_arguments_are_400(client):
    response = client.post("/api/functions/convertDate", json={"arguments": {"inputDate": "2024-10-03"}})

    assert response.status_code == 400


def test_chat_requires_trailing_user_message(client):
    assert client.post("/chat", json={"messages": []}).status_code == 400
    assert client.post("/chat", json={"messages": [{"role": "assistant", "content": "hi"}]}).status_code == 400
