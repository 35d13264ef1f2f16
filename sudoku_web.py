import logging

from flask import Flask, request, jsonify

from sudoku_config import load_config, setup_logging
from sudoku_core import (Grid, InvalidInput, InvalidPuzzle, Unsolvable,
                         SIZE, candidates, solve_puzzle)
from sudoku_text import parse_grid

logger = logging.getLogger(__name__)

app = Flask(__name__)


def get_candidates_state(grid):
    return [[candidates(grid, r, c) for c in range(SIZE)] for r in range(SIZE)]


def board_from_json(data):
    if not isinstance(data, list) or len(data) != SIZE:
        raise InvalidInput("board must be a list of 9 rows")
    if all(isinstance(row, str) for row in data):
        return parse_grid("\n".join(data))
    return Grid.from_rows(data)


@app.route("/solve", methods=["POST"])
def solve():
    payload = request.get_json(silent=True) or {}
    if not isinstance(payload, dict):
        return jsonify({"error": "request body must be a JSON object"}), 400
    try:
        grid = board_from_json(payload.get("board"))
    except InvalidInput as e:
        return jsonify({"error": str(e)}), 400
    except TypeError:
        return jsonify({"error": "board rows must be strings or lists of integers"}), 400

    steps = None
    if payload.get("trace") is True:
        steps = [{"type": "start", "candidates": get_candidates_state(grid)}]

    try:
        solve_puzzle(grid, on_step=steps.append if steps is not None else None)
    except (InvalidPuzzle, Unsolvable) as e:
        logger.info("rejected puzzle: %s", e)
        return jsonify({"error": str(e)}), 422

    result = {"solution": grid.rows()}
    if steps is not None:
        result["steps"] = steps
    return jsonify(result)


def main():
    config = load_config()
    setup_logging(config.log_level)
    app.run(host=config.web_host, port=config.web_port)


if __name__ == "__main__":
    main()
