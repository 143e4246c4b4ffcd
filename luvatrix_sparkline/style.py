from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
import json
import math
from pathlib import Path
import re
from typing import Any, Mapping

from luvatrix_sparkline.errors import InvalidInputError


RGBA = tuple[int, int, int, int]

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")

LIGHT_BLUE: RGBA = (3, 169, 244, 255)
LIGHT_BLUE_800: RGBA = (2, 119, 189, 255)
LIGHT_BLUE_200: RGBA = (129, 212, 250, 255)


def _check_rgba(color: Any, *, label: str) -> None:
    if not isinstance(color, tuple) or len(color) != 4:
        raise InvalidInputError(f"{label} must be an RGBA tuple")
    for channel in color:
        if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
            raise InvalidInputError(f"{label} channels must be ints in 0..255, got {color!r}")


class FillMode(str, Enum):
    """Which side of the line is filled, in screen space."""

    NONE = "none"
    ABOVE = "above"
    BELOW = "below"


class PointsMode(str, Enum):
    """Which samples get a marker drawn over the line."""

    NONE = "none"
    ALL = "all"
    LAST = "last"


@dataclass(frozen=True)
class SparklineStyle:
    """Looks of a sparkline.

    `fallback_width`/`fallback_height` are only consulted when the host offers an
    unbounded region, see `luvatrix_sparkline.painter.resolve_region_size`.
    """

    line_width: float = 2.0
    line_color: RGBA = LIGHT_BLUE
    sharp_corners: bool = False
    fill_mode: FillMode = FillMode.NONE
    fill_color: RGBA = LIGHT_BLUE_200
    points_mode: PointsMode = PointsMode.NONE
    point_size: float = 4.0
    point_color: RGBA = LIGHT_BLUE_800
    fallback_width: float = 300.0
    fallback_height: float = 100.0

    def __post_init__(self) -> None:
        for name in ("line_width", "point_size", "fallback_width", "fallback_height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidInputError(f"SparklineStyle.{name} must be a number")
            if not math.isfinite(value) or value <= 0:
                raise InvalidInputError(f"SparklineStyle.{name} must be a positive finite number, got {value!r}")
        for name in ("line_color", "fill_color", "point_color"):
            _check_rgba(getattr(self, name), label=f"SparklineStyle.{name}")
        if not isinstance(self.sharp_corners, bool):
            raise InvalidInputError(f"SparklineStyle.sharp_corners must be a boolean, got {self.sharp_corners!r}")
        if not isinstance(self.fill_mode, FillMode):
            raise InvalidInputError(f"SparklineStyle.fill_mode must be a FillMode, got {self.fill_mode!r}")
        if not isinstance(self.points_mode, PointsMode):
            raise InvalidInputError(f"SparklineStyle.points_mode must be a PointsMode, got {self.points_mode!r}")

    def paint_key(self) -> tuple[Any, ...]:
        """Fields that change what gets painted; fallback sizes are layout-only."""
        return (
            self.line_width,
            self.line_color,
            self.sharp_corners,
            self.fill_mode,
            self.fill_color,
            self.points_mode,
            self.point_size,
            self.point_color,
        )


DEFAULT_STYLE = SparklineStyle()


def parse_color(value: Any, *, label: str = "color") -> RGBA:
    """Accept `#RRGGBB`, `#RRGGBBAA` or an RGB/RGBA sequence of 0..255 ints."""
    if isinstance(value, str):
        if not _HEX_COLOR.match(value):
            raise InvalidInputError(f"`{label}` must be a hex color (#RRGGBB or #RRGGBBAA)")
        r = int(value[1:3], 16)
        g = int(value[3:5], 16)
        b = int(value[5:7], 16)
        a = int(value[7:9], 16) if len(value) == 9 else 255
        return (r, g, b, a)
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        rgba = tuple(value) if len(value) == 4 else (*value, 255)
        _check_rgba(rgba, label=label)
        return rgba  # type: ignore[return-value]
    raise InvalidInputError(f"`{label}` must be a hex string or an RGB(A) sequence, got {value!r}")


def style_from_overrides(overrides: Mapping[str, Any] | None = None) -> SparklineStyle:
    """Merge user overrides onto the default style.

    Colors may be hex strings, modes may be given by name (`"below"`, `"last"`).
    """

    raw: dict[str, Any] = asdict(DEFAULT_STYLE)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise InvalidInputError(f"Unknown style field: {key}")
            raw[key] = value

    for key in ("line_color", "fill_color", "point_color"):
        raw[key] = parse_color(raw[key], label=key)

    if not isinstance(raw["sharp_corners"], bool):
        raise InvalidInputError("Style `sharp_corners` must be a boolean")

    try:
        fill_mode = FillMode(raw["fill_mode"])
    except ValueError as exc:
        raise InvalidInputError(f"Unsupported fill_mode: {raw['fill_mode']!r}") from exc
    try:
        points_mode = PointsMode(raw["points_mode"])
    except ValueError as exc:
        raise InvalidInputError(f"Unsupported points_mode: {raw['points_mode']!r}") from exc

    return SparklineStyle(
        line_width=_as_float(raw["line_width"], "line_width"),
        line_color=raw["line_color"],
        sharp_corners=raw["sharp_corners"],
        fill_mode=fill_mode,
        fill_color=raw["fill_color"],
        points_mode=points_mode,
        point_size=_as_float(raw["point_size"], "point_size"),
        point_color=raw["point_color"],
        fallback_width=_as_float(raw["fallback_width"], "fallback_width"),
        fallback_height=_as_float(raw["fallback_height"], "fallback_height"),
    )


def load_style(path: Path) -> SparklineStyle:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidInputError(f"style file is not valid JSON: {path}") from exc
    if not isinstance(payload, dict):
        raise InvalidInputError(f"style file must contain a JSON object: {path}")
    return style_from_overrides(payload)


def _as_float(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(f"Style `{name}` must be a positive number")
    return float(value)
