"""Tests for the bundled YAML fixtures."""

from __future__ import annotations

import pytest
import yaml

from mockdata.dto import ChordData, FlowData, TreeNode
from mockdata.fixtures import FIXTURE_KEYS, FIXTURES_PATH, FixtureError, load_fixtures, parse_fixtures

pytestmark = pytest.mark.unit


def _raw_payload() -> dict:
    return yaml.safe_load(FIXTURES_PATH.read_text(encoding="utf-8"))


def test_load_fixtures_parses_every_dataset() -> None:
    """Every fixture key is present and converted into DTOs."""

    fixtures = load_fixtures()
    assert set(fixtures) == set(FIXTURE_KEYS)
    assert isinstance(fixtures["tree"], TreeNode)
    assert isinstance(fixtures["sankey"], FlowData)
    assert isinstance(fixtures["chord"], ChordData)


def test_tree_fixture_has_three_branches_of_three_leaves() -> None:
    """The hierarchy fixture is a root with three groups of three leaves."""

    tree = load_fixtures()["tree"]
    assert tree.name == "root"
    assert [child.name for child in tree.children] == ["Analytics", "Products", "Marketing"]
    assert all(len(child.children) == 3 for child in tree.children)
    assert sum(leaf.value for child in tree.children for leaf in child.children) == 25900


def test_flow_fixture_links_reference_existing_nodes() -> None:
    """Sankey and alluvial links point at valid node indexes."""

    fixtures = load_fixtures()
    for key in ("sankey", "alluvial"):
        flow = fixtures[key]
        assert all(0 <= link.source < len(flow.nodes) for link in flow.links)
        assert all(0 <= link.target < len(flow.nodes) for link in flow.links)


def test_chord_fixture_is_square() -> None:
    """The chord matrix has one row and column per label."""

    chord = load_fixtures()["chord"]
    assert len(chord.matrix) == len(chord.labels)
    assert all(len(row) == len(chord.labels) for row in chord.matrix)


def test_parse_fixtures_reports_missing_dataset() -> None:
    """A missing dataset is named in the error."""

    payload = _raw_payload()
    del payload["venn"]
    with pytest.raises(FixtureError, match="'venn' is missing"):
        parse_fixtures(payload)


def test_parse_fixtures_reports_malformed_dataset() -> None:
    """A dataset with a missing field raises FixtureError naming it."""

    payload = _raw_payload()
    del payload["funnel"][0]["value"]
    with pytest.raises(FixtureError, match="'funnel' is malformed"):
        parse_fixtures(payload)


def test_parse_fixtures_rejects_non_square_chord_matrix() -> None:
    """Chord matrices must match the number of labels."""

    payload = _raw_payload()
    payload["chord"]["matrix"] = payload["chord"]["matrix"][:-1]
    with pytest.raises(FixtureError, match="square"):
        parse_fixtures(payload)


def test_load_fixtures_rejects_invalid_yaml(tmp_path) -> None:
    """Unparseable YAML surfaces as FixtureError."""

    path = tmp_path / "broken.yaml"
    path.write_text("tree: [unclosed\n", encoding="utf-8")
    with pytest.raises(FixtureError, match="not valid YAML"):
        load_fixtures(path)


def test_load_fixtures_rejects_non_mapping_document(tmp_path) -> None:
    """The top level of the fixtures file must be a mapping."""

    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(FixtureError, match="mapping"):
        load_fixtures(path)
