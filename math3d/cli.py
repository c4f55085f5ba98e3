"""Headless entry point for the math3d tool."""

from __future__ import annotations

import json
import logging
import math
import sys
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .parameters import OutputParameters, build_parser, load_parameters, parse_cli_overrides
from .points import Point
from .vector import Vector, standard_basis_vector

Row = List[float]

# JSON result shapes: a single number, one row, or a list of rows.
SCALAR = "scalar"
VECTOR = "vector"
VECTORS = "vectors"


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(format="[%(levelname)s] %(message)s")
    logging.getLogger().setLevel(level)


def _points(parsed: Any) -> tuple[Point, Point]:
    return Point(*parsed.p1), Point(*parsed.p2)


def _run_distance(parsed: Any) -> List[Row]:
    p1, p2 = _points(parsed)
    return [[p1.distance(p2)]]


def _run_delta(parsed: Any) -> List[Row]:
    p1, p2 = _points(parsed)
    return [list(p1.delta_xyz(p2))]


def _run_slope(parsed: Any) -> List[Row]:
    p1, p2 = _points(parsed)
    return [list(p1.slope(p2))]


def _run_line(parsed: Any) -> List[Row]:
    p1, p2 = _points(parsed)
    point_at = p1.point_slope(p2)
    return [list(point_at(t)) for t in parsed.t]


def _vector_command(op: Callable[[Vector], Any]) -> Callable[[Any], List[Row]]:
    def run(parsed: Any) -> List[Row]:
        result = op(Vector(tuple(parsed.components)))
        if isinstance(result, Vector):
            return [list(result)]
        return [[result]]

    return run


def _run_basis(parsed: Any) -> List[Row]:
    return [list(v) for v in standard_basis_vector(parsed.n)]


COMMANDS: Dict[str, Tuple[Callable[[Any], List[Row]], str]] = {
    "distance": (_run_distance, SCALAR),
    "delta": (_run_delta, VECTOR),
    "slope": (_run_slope, VECTOR),
    "line": (_run_line, VECTORS),
    "length": (_vector_command(Vector.length), SCALAR),
    "length-squared": (_vector_command(Vector.length_squared), SCALAR),
    "manhattan": (_vector_command(Vector.manhattan_distance), SCALAR),
    "normalize": (_vector_command(Vector.normalize), VECTOR),
    "basis": (_run_basis, VECTORS),
}


def _json_value(value: float) -> float | None:
    # inf and nan have no JSON spelling.
    return value if math.isfinite(value) else None


def format_rows(command: str, rows: List[Row], params: OutputParameters) -> str:
    """Render command output as text lines or a single JSON document."""

    if params.output_format == "json":
        shape = COMMANDS[command][1]
        cleaned = [[_json_value(value) for value in row] for row in rows]
        result: Any = cleaned
        if shape == SCALAR:
            result = cleaned[0][0]
        elif shape == VECTOR:
            result = cleaned[0]
        return json.dumps({"command": command, "result": result}, allow_nan=False)
    precision = params.precision
    return "\n".join(" ".join(f"{value:.{precision}f}" for value in row) for row in rows)


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    overrides, cli = parse_cli_overrides(argv)
    # Apply the CLI level early so config loading is logged at that level too.
    configure_logging(overrides.get("log_level", "WARNING"))
    if cli.unknown_args:
        logging.info("Ignoring unknown CLI args: %s", " ".join(cli.unknown_args))
    try:
        params = load_parameters(cli.config, overrides)
    except (ValueError, KeyError, FileNotFoundError) as exc:
        build_parser().error(str(exc))
    configure_logging(params.log_level)
    logging.debug("Running %s with %s", cli.command, params)

    runner, _ = COMMANDS[cli.command]
    output = format_rows(cli.command, runner(cli), params)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
