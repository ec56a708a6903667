from fastapi.testclient import TestClient

from backend.app.main import app

client = TestClient(app)


def test_solve_two_variable_system() -> None:
    resp = client.post("/api/solve", json={
        "kind": "Two Variable System",
        "coefficients": [1, 1, 10, 1, -1, 2],
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["final_answer"] == "x = 6.0000, y = 4.0000"
    assert body["outcome"] == "unique"
    assert body["values"] == {"x": 6.0, "y": 4.0}
    assert body["summary"]["validation_status"] == "pass"
    assert body["steps"][0]["step_number"] == 1


def test_solve_degenerate_single_variable() -> None:
    resp = client.post("/api/solve", json={
        "kind": "single_variable",
        "coefficients": [0, 0],
    })
    assert resp.status_code == 200
    assert resp.json()["final_answer"] == "Infinite solutions"


def test_wrong_arity_is_bad_request() -> None:
    resp = client.post("/api/solve", json={
        "kind": "Three Variable System",
        "coefficients": [1, 2, 3],
    })
    assert resp.status_code == 400
    assert resp.json()["detail"] == (
        "Error: Three Variable System expects 9 coefficients, got 3."
    )


def test_empty_coefficients_is_arity_mismatch() -> None:
    resp = client.post("/api/solve", json={"kind": "Single Variable", "coefficients": []})
    assert resp.status_code == 400
    assert "expects 2 coefficients, got 0" in resp.json()["detail"]


def test_unknown_kind_is_bad_request() -> None:
    resp = client.post("/api/solve", json={"kind": "Quadratic", "coefficients": [1, 2]})
    assert resp.status_code == 400
    assert resp.json()["detail"].startswith("Error: Unknown equation type")


def test_kinds_listing() -> None:
    resp = client.get("/api/kinds")
    assert resp.status_code == 200
    kinds = resp.json()
    assert [k["arity"] for k in kinds] == [2, 6, 9]
    assert kinds[2]["variables"] == ["x", "y", "z"]


def test_overflowing_values_serialize_as_null() -> None:
    resp = client.post("/api/solve", json={
        "kind": "Two Variable System",
        "coefficients": [1e200, 0, 1e200, 0, 1e200, 1e200],
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["values"] == {"x": None, "y": None}
    assert body["final_answer"] == "x = nan, y = nan"
    assert body["summary"]["validation_status"] == "fail"
