"""Fixed (non-random) datasets bundled with the gallery.

The fixed datasets are kept as YAML next to this module so they read like
data rather than code. Parsing is strict: a missing key raises FixtureError
naming the dataset, so a broken fixture fails at startup instead of producing
a half-empty chart.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Any, Final

import yaml

from .dto import (
    ArcDiagramData,
    ArcLink,
    ArcNode,
    BulletMeasure,
    ChordData,
    FlowConnection,
    FlowData,
    FlowLink,
    FlowLocation,
    FlowMapData,
    FunnelStage,
    GanttTask,
    GeoRegion,
    LabeledValue,
    MarimekkoColumn,
    MarimekkoSegment,
    NetworkData,
    NetworkLink,
    NetworkNode,
    PyramidRow,
    SlopeItem,
    TimelineEvent,
    TreeNode,
    VennData,
    VennIntersection,
    VennSet,
    WaffleSlice,
)

FIXTURES_PATH: Final[Path] = Path(__file__).with_name("fixtures.yaml")


class FixtureError(ValueError):
    """Raised when a bundled fixture is missing or malformed."""


def _tree(raw: Mapping[str, Any]) -> TreeNode:
    children = tuple(_tree(child) for child in raw.get("children") or ())
    value = raw.get("value")
    return TreeNode(name=str(raw["name"]), value=float(value) if value is not None else None, children=children)


def _network(raw: Mapping[str, Any]) -> NetworkData:
    return NetworkData(
        nodes=tuple(NetworkNode(id=str(n["id"]), group=int(n["group"])) for n in raw["nodes"]),
        links=tuple(
            NetworkLink(source=str(link["source"]), target=str(link["target"]), value=float(link["value"]))
            for link in raw["links"]
        ),
    )


def _flow(raw: Mapping[str, Any]) -> FlowData:
    return FlowData(
        nodes=tuple(str(name) for name in raw["nodes"]),
        links=tuple(
            FlowLink(source=int(link["source"]), target=int(link["target"]), value=float(link["value"]))
            for link in raw["links"]
        ),
    )


def _labeled(raw: list[Mapping[str, Any]]) -> tuple[LabeledValue, ...]:
    return tuple(LabeledValue(label=str(row["label"]), value=float(row["value"])) for row in raw)


def _funnel(raw: list[Mapping[str, Any]]) -> tuple[FunnelStage, ...]:
    return tuple(FunnelStage(stage=str(row["stage"]), value=float(row["value"])) for row in raw)


def _chord(raw: Mapping[str, Any]) -> ChordData:
    labels = tuple(str(label) for label in raw["labels"])
    matrix = tuple(tuple(float(v) for v in row) for row in raw["matrix"])
    if len(matrix) != len(labels) or any(len(row) != len(labels) for row in matrix):
        raise FixtureError("chord matrix must be square and match the number of labels.")
    return ChordData(labels=labels, matrix=matrix)


def _geo_regions(raw: list[Mapping[str, Any]]) -> tuple[GeoRegion, ...]:
    return tuple(
        GeoRegion(
            id=str(row["id"]),
            name=str(row["name"]),
            points=tuple((float(x), float(y)) for x, y in row["points"]),
            value=float(row["value"]),
            population=float(row["population"]),
        )
        for row in raw
    )


def _waffle(raw: list[Mapping[str, Any]]) -> tuple[WaffleSlice, ...]:
    return tuple(
        WaffleSlice(category=str(row["category"]), value=float(row["value"]), color=row.get("color")) for row in raw
    )


def _as_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


def _gantt(raw: list[Mapping[str, Any]]) -> tuple[GanttTask, ...]:
    return tuple(
        GanttTask(
            id=str(row["id"]),
            name=str(row["name"]),
            start=_as_date(row["start"]),
            end=_as_date(row["end"]),
            progress=float(row["progress"]),
            dependencies=tuple(str(dep) for dep in row.get("dependencies") or ()),
        )
        for row in raw
    )


def _bullet(raw: list[Mapping[str, Any]]) -> tuple[BulletMeasure, ...]:
    return tuple(
        BulletMeasure(
            title=str(row["title"]),
            subtitle=row.get("subtitle"),
            ranges=tuple(float(v) for v in row["ranges"]),
            measures=tuple(float(v) for v in row["measures"]),
            markers=tuple(float(v) for v in row["markers"]),
        )
        for row in raw
    )


def _slope(raw: list[Mapping[str, Any]]) -> tuple[SlopeItem, ...]:
    return tuple(SlopeItem(label=str(row["label"]), start=float(row["start"]), end=float(row["end"])) for row in raw)


def _arc_diagram(raw: Mapping[str, Any]) -> ArcDiagramData:
    return ArcDiagramData(
        nodes=tuple(ArcNode(id=str(n["id"]), label=str(n["label"])) for n in raw["nodes"]),
        links=tuple(
            ArcLink(
                source=str(link["source"]),
                target=str(link["target"]),
                value=float(link["value"]) if link.get("value") is not None else None,
            )
            for link in raw["links"]
        ),
    )


def _marimekko(raw: list[Mapping[str, Any]]) -> tuple[MarimekkoColumn, ...]:
    return tuple(
        MarimekkoColumn(
            category=str(row["category"]),
            segments=tuple(MarimekkoSegment(name=str(s["name"]), value=float(s["value"])) for s in row["segments"]),
        )
        for row in raw
    )


def _venn(raw: Mapping[str, Any]) -> VennData:
    return VennData(
        sets=tuple(VennSet(id=str(s["id"]), label=str(s["label"]), size=float(s["size"])) for s in raw["sets"]),
        intersections=tuple(
            VennIntersection(sets=tuple(str(v) for v in i["sets"]), size=float(i["size"]))
            for i in raw["intersections"]
        ),
    )


def _pyramid(raw: list[Mapping[str, Any]]) -> tuple[PyramidRow, ...]:
    return tuple(
        PyramidRow(age_group=str(row["age_group"]), male=float(row["male"]), female=float(row["female"]))
        for row in raw
    )


def _timeline(raw: list[Mapping[str, Any]]) -> tuple[TimelineEvent, ...]:
    return tuple(
        TimelineEvent(
            id=str(row["id"]),
            label=str(row["label"]),
            date=_as_date(row["date"]),
            description=row.get("description"),
            category=row.get("category"),
        )
        for row in raw
    )


def _flow_map(raw: Mapping[str, Any]) -> FlowMapData:
    return FlowMapData(
        locations=tuple(
            FlowLocation(id=str(loc["id"]), name=str(loc["name"]), x=float(loc["x"]), y=float(loc["y"]))
            for loc in raw["locations"]
        ),
        flows=tuple(
            FlowConnection(source=str(f["source"]), target=str(f["target"]), value=float(f["value"]))
            for f in raw["flows"]
        ),
    )


_PARSERS: Final[dict[str, Callable[[Any], object]]] = {
    "tree": _tree,
    "network": _network,
    "sankey": _flow,
    "alluvial": _flow,
    "waterfall": _labeled,
    "funnel": _funnel,
    "chord": _chord,
    "geo_regions": _geo_regions,
    "waffle": _waffle,
    "gantt": _gantt,
    "bullet": _bullet,
    "slope": _slope,
    "arc_diagram": _arc_diagram,
    "marimekko": _marimekko,
    "venn": _venn,
    "polar_area": _labeled,
    "pyramid": _pyramid,
    "timeline": _timeline,
    "flow_map": _flow_map,
}

FIXTURE_KEYS: Final[tuple[str, ...]] = tuple(_PARSERS)


def parse_fixtures(payload: Mapping[str, Any]) -> dict[str, object]:
    """Convert a raw fixtures mapping into DTOs.

    Args:
        payload: Mapping parsed from YAML.

    Returns:
        Dataset key -> DTO (or tuple of DTOs).

    Raises:
        FixtureError: When a dataset is missing or malformed.
    """

    datasets: dict[str, object] = {}
    for key, parser in _PARSERS.items():
        if key not in payload:
            raise FixtureError(f"Fixture dataset {key!r} is missing.")
        try:
            datasets[key] = parser(payload[key])
        except FixtureError:
            raise
        except (KeyError, TypeError, ValueError) as exc:
            raise FixtureError(f"Fixture dataset {key!r} is malformed: {exc!r}") from exc
    return datasets


@lru_cache(maxsize=4)
def load_fixtures(path: Path = FIXTURES_PATH) -> dict[str, object]:
    """Load and parse the fixtures YAML file.

    Args:
        path: Fixtures file (defaults to the bundled `fixtures.yaml`).

    Returns:
        Dataset key -> DTO mapping. Callers must treat it as read-only.
    """

    try:
        payload = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise FixtureError(f"Fixtures file {path} is not valid YAML.") from exc
    if not isinstance(payload, dict):
        raise FixtureError(f"Fixtures file {path} must contain a mapping at the top level.")
    return parse_fixtures(payload)
