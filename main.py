"""
main.py — Vertex Traversal Demo (Flask)
========================================
Thin JSON front-end over the traversal registry.  Every request brings its
own graph; nothing is kept between requests.

Routes:
  GET  /healthz                – liveness probe
  GET  /api/operations         – registry cards
  POST /api/run/<op_key>       – build the posted graph and run one operation

Request body for /api/run/<op_key>:
    {
        "graph": "1: 2 3\\n2: 3"                 (adjacency-list text)
                 | {"vertices": […], "edges": […]} (builder dict),
        "start": <vertex id>,
        "end":   <vertex id>                     (path query only)
    }
"""

import io
import logging
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from config import AppConfig
from graph import GraphFormatError, Vertex, from_adjacency_list, from_dict
from traversal import InvalidArgumentError, OpInfo, get_operation, list_operations

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


app = Flask(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------
def build_graph(payload: Any) -> Dict[Any, Vertex]:
    """Adjacency text or builder dict → {id: Vertex}."""
    if isinstance(payload, str):
        return from_adjacency_list(payload)
    if isinstance(payload, dict):
        return from_dict(payload)
    raise GraphFormatError("'graph' must be adjacency-list text or an object with vertices/edges")


def lookup(vertices: Dict[Any, Vertex], key: Any) -> Optional[Vertex]:
    """Find a vertex by id.  "3" and 3 name the same vertex; unknown or boolean → None."""
    if isinstance(key, bool) or not isinstance(key, (str, int)):
        return None
    if key in vertices:
        return vertices[key]
    # adjacency text turns numeric labels into ints, JSON clients may send strings
    for alt in (str(key), _as_int(key)):
        if alt is not None and alt in vertices:
            return vertices[alt]
    return None


def _as_int(key: Any) -> Optional[int]:
    try:
        return int(key)
    except (TypeError, ValueError):
        return None


def run_operation(op: OpInfo, start: Optional[Vertex], end: Optional[Vertex]) -> Any:
    """Call op.fn and turn its result into something jsonify accepts."""
    if op.key == "print_vertex_vals":
        buf = io.StringIO()
        op.fn(start, out=buf)
        return {"lines": buf.getvalue().splitlines()}

    result = op.fn(start, end) if op.needs_end else op.fn(start)
    if isinstance(result, set):
        return sorted((v.data for v in result), key=str)
    return result


def _error(message: str, status: int):
    logger.warning("rejected request (%d): %s", status, message)
    return jsonify({"error": message}), status


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
@app.route("/healthz")
def healthz():
    return jsonify({"status": "ok"})


@app.route("/api/operations")
def api_operations():
    return jsonify([
        {
            "key":         op.key,
            "label":       op.label,
            "needs_end":   op.needs_end,
            "numeric":     op.numeric,
            "description": op.description,
        }
        for op in list_operations()
    ])


@app.route("/api/run/<op_key>", methods=["POST"])
def api_run(op_key: str):
    op = get_operation(op_key)
    if op is None:
        return _error(f"Unknown operation: {op_key}", 404)

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _error("Request body must be a JSON object", 400)

    try:
        vertices = build_graph(data.get("graph", ""))
        start = lookup(vertices, data.get("start"))
        end   = lookup(vertices, data.get("end"))
        result = run_operation(op, start, end)
    except (GraphFormatError, InvalidArgumentError) as e:
        return _error(str(e), 400)
    except TypeError:
        if not op.numeric:
            raise
        return _error(f"{op.key} needs integer vertex values", 400)

    logger.info("ran %s on %d vertices", op.key, len(vertices))
    return jsonify({"op": op.key, "result": result})


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    cfg = AppConfig()
    configure_logging(cfg.log_level)
    logger.info("starting vertex traversal demo on http://%s:%d", cfg.host, cfg.port)
    app.run(debug=cfg.debug, host=cfg.host, port=cfg.port)
