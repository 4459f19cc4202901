from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.exceptions import add_exception_handlers

app = FastAPI()
add_exception_handlers(app)


@app.get("/boom")
async def boom():
    raise RuntimeError("boom")


client = TestClient(app, raise_server_exceptions=False)


def test_unhandled_error_returns_generic_envelope():
    response = client.get("/boom")
    assert response.status_code == 500
    assert response.json() == {"status_code": 500, "message": "Response Error!"}
