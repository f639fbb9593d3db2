"""Polygon file loading.

Polygons are stored as JSON in native image coordinates, in one of two
shapes:

    [[x, y], [x, y], ...]
    {"points": [{"x": ..., "y": ...}, ...]}
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from parcelsplit.domain import Point
from parcelsplit.exceptions import PolygonFileError


class PointModel(BaseModel):
    """One vertex as stored on disk."""

    x: float
    y: float


class PolygonModel(BaseModel):
    """Polygon document."""

    points: list[PointModel]

    @field_validator("points", mode="before")
    @classmethod
    def _coerce_pairs(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [
                {"x": item[0], "y": item[1]} if isinstance(item, (list, tuple)) and len(item) == 2 else item
                for item in value
            ]
        return value

    def to_points(self) -> list[Point]:
        return [Point(p.x, p.y) for p in self.points]


def parse_polygon(data: Any) -> list[Point]:
    """Validate decoded JSON and convert it to points.

    Raises:
        ValueError: If the document does not describe a vertex list
    """
    if isinstance(data, list):
        data = {"points": data}
    try:
        return PolygonModel.model_validate(data).to_points()
    except ValidationError as e:
        raise ValueError(f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}") from e


def read_polygon(path: Path) -> list[Point]:
    """Load a polygon from a JSON file.

    Args:
        path: Path to the polygon file

    Returns:
        Polygon vertices in file order

    Raises:
        PolygonFileError: If the file is missing, not JSON or malformed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise PolygonFileError(str(path), "file not found") from e
    except OSError as e:
        raise PolygonFileError(str(path), str(e)) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PolygonFileError(str(path), f"not valid JSON ({e.msg})") from e

    try:
        return parse_polygon(data)
    except ValueError as e:
        raise PolygonFileError(str(path), str(e)) from e


def write_polygon(path: Path, points: list[Point]) -> None:
    """Save a polygon in the object form read by read_polygon."""
    document = PolygonModel(points=[PointModel(x=p.x, y=p.y) for p in points])
    path.write_text(document.model_dump_json(indent=2), encoding="utf-8")
