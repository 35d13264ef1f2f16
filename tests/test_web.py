import pytest

from sudoku_web import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def test_solve_string_rows(client, puzzle_text, solution):
    board = puzzle_text.strip().split("\n")
    response = client.post("/solve", json={"board": board})
    assert response.status_code == 200
    data = response.get_json()
    assert data["solution"] == solution
    assert "steps" not in data


def test_solve_integer_rows(client, solution):
    solution[8][8] = 0
    response = client.post("/solve", json={"board": solution})
    assert response.status_code == 200
    assert response.get_json()["solution"][8][8] == 9


def test_trace(client, solution):
    solution[0][0] = 0
    response = client.post("/solve", json={"board": solution, "trace": True})
    steps = response.get_json()["steps"]
    assert steps[0]["type"] == "start"
    assert steps[0]["candidates"][0][0] == [5]
    assert steps[0]["candidates"][0][1] == []
    assert steps[1:] == [{"type": "guess", "row": 0, "col": 0, "num": 5}]


@pytest.mark.parametrize("payload", [
    {},
    {"board": ["123"]},
    {"board": [[0] * 9] * 8 + [[0] * 10]},
    {"board": [[0] * 9] * 8 + [[0] * 8 + [12]]},
    {"board": [1, 2, 3, 4, 5, 6, 7, 8, 9]},
])
def test_bad_input(client, payload):
    response = client.post("/solve", json=payload)
    assert response.status_code == 400
    assert "error" in response.get_json()


def test_invalid_and_unsolvable(client, unsolvable_rows):
    rows = [[0] * 9 for _ in range(9)]
    rows[0][0] = rows[8][0] = 3
    assert client.post("/solve", json={"board": rows}).status_code == 422
    assert client.post("/solve", json={"board": unsolvable_rows}).status_code == 422


@pytest.mark.parametrize("body", [[1, 2, 3], "x", 5])
def test_body_not_an_object(client, body):
    response = client.post("/solve", json=body)
    assert response.status_code == 400
    assert "error" in response.get_json()


def test_trace_requires_true(client, solution):
    solution[0][0] = 0
    response = client.post("/solve", json={"board": solution, "trace": "false"})
    assert response.status_code == 200
    assert "steps" not in response.get_json()
