import json
import os

from todo_app.generate_openapi import generate_openapi


def test_generate_openapi_writes_schema(tmp_path):
    path = generate_openapi(str(tmp_path / "interfaces"))
    assert path == os.path.join(str(tmp_path / "interfaces"), "openapi.json")

    with open(path, encoding="utf-8") as f:
        schema = json.load(f)

    assert {"/api/v1/auth/signup", "/api/v1/auth/login", "/api/v1/todos/"} <= set(schema["paths"])
    assert {t["name"] for t in schema["tags"]} >= {"health", "auth", "todos"}
