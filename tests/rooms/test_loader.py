"""
Tests for map file loading and validation.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from mansion.core.map import MapSpec, RoomSpec, build_map, default_map_spec
from mansion.io.loaders import LoaderError, load_map

KB_MAP = Path(__file__).resolve().parents[2] / "kb" / "maps" / "mansion.yaml"

VALID_MAP = """
map:
  name: Small House
  root: hall
  rooms:
    - id: hall
      name: Hall
      left: kitchen
    - id: kitchen
      name: Kitchen
"""


class TestLoadMap:
    """Tests for load_map."""

    def test_load_valid_map(self, map_yaml):
        spec = load_map(map_yaml(VALID_MAP))

        assert spec.name == "Small House"
        assert spec.root == "hall"
        assert [room.id for room in spec.rooms] == ["hall", "kitchen"]

    def test_shipped_map_matches_default(self):
        """kb/maps/mansion.yaml describes the built-in mansion."""
        assert load_map(str(KB_MAP)) == default_map_spec()

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoaderError) as exc_info:
            load_map(str(tmp_path / "missing.yaml"))

        assert "Cannot read map file" in str(exc_info.value)

    def test_malformed_yaml(self, map_yaml):
        with pytest.raises(LoaderError) as exc_info:
            load_map(map_yaml("map: [unclosed"))

        assert "Malformed YAML" in str(exc_info.value)

    def test_top_level_must_be_mapping(self, map_yaml):
        with pytest.raises(LoaderError) as exc_info:
            load_map(map_yaml("- just\n- a list\n"))

        assert "mapping" in str(exc_info.value)

    def test_empty_file_is_invalid(self, map_yaml):
        with pytest.raises(LoaderError) as exc_info:
            load_map(map_yaml(""))

        assert "Invalid map definition" in str(exc_info.value)

    def test_error_carries_path_and_cause(self, map_yaml):
        path = map_yaml("map:\n  root: nowhere\n  rooms: []\n")

        with pytest.raises(LoaderError) as exc_info:
            load_map(path)

        err = exc_info.value
        assert err.file_path == path
        assert isinstance(err.cause, ValidationError)
        assert "nowhere" in str(err)


class TestMapSpecValidation:
    """Tests for MapSpec reference checks."""

    def test_unknown_root(self):
        with pytest.raises(ValidationError, match="root 'x' is not a declared room"):
            MapSpec(root="x", rooms=[RoomSpec(id="a", name="A")])

    def test_duplicate_ids(self):
        with pytest.raises(ValidationError, match="duplicate room id"):
            MapSpec(root="a", rooms=[RoomSpec(id="a", name="A"), RoomSpec(id="a", name="B")])

    def test_unknown_exit(self):
        with pytest.raises(ValidationError, match="unknown room 'ghost'"):
            MapSpec(root="a", rooms=[RoomSpec(id="a", name="A", right="ghost")])

    def test_room_with_two_parents(self):
        with pytest.raises(ValidationError, match="attached to both"):
            MapSpec(
                root="a",
                rooms=[
                    RoomSpec(id="a", name="A", left="b", right="c"),
                    RoomSpec(id="b", name="B", left="d"),
                    RoomSpec(id="c", name="C", left="d"),
                    RoomSpec(id="d", name="D"),
                ],
            )

    def test_exit_back_to_root(self):
        with pytest.raises(ValidationError, match="back at the root"):
            MapSpec(root="a", rooms=[RoomSpec(id="a", name="A", left="b"), RoomSpec(id="b", name="B", left="a")])

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            RoomSpec(id="a", name="  ")

    def test_unknown_room_field_rejected(self):
        with pytest.raises(ValidationError):
            RoomSpec(id="a", name="A", up="b")

    def test_detached_cycle_is_not_built(self):
        spec = MapSpec(
            root="a",
            rooms=[
                RoomSpec(id="a", name="A"),
                RoomSpec(id="b", name="B", left="c"),
                RoomSpec(id="c", name="C", left="b"),
            ],
        )

        assert spec.reachable_ids() == ["a"]
        assert build_map(spec).count() == 1

    def test_reachable_ids_preorder(self):
        assert default_map_spec().reachable_ids() == [
            "hall",
            "living_room",
            "kitchen",
            "pantry",
            "master_bedroom",
            "bathroom",
            "library",
            "dining_room",
            "winter_garden",
        ]


class TestLoaderErrorFormatting:
    """Tests for LoaderError messages."""

    def test_many_validation_errors_are_summarised(self, map_yaml):
        text = "map:\n  root: a\n  rooms:\n" + "".join(f"    - id: r{i}\n" for i in range(5))

        with pytest.raises(LoaderError) as exc_info:
            load_map(map_yaml(text))

        assert "more)" in str(exc_info.value)

    def test_plain_message_without_cause(self):
        err = LoaderError("maps/house.yaml", "Something went wrong")

        assert str(err).startswith("Something went wrong (")
        assert err.summary() == ""
