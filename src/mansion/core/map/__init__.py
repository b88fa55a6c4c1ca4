"""
Mansion map: rooms, construction and teardown.

Components:
- Room / Direction: the binary tree of rooms
- create_room / attach / build_map: construction
- release_all: post-order teardown
- MapSpec / default_map_spec: map configuration as data

Example:
    from mansion.core.map import build_map, default_map_spec, release_all

    root = build_map(default_map_spec())
    ...
    release_all(root)
"""

from mansion.core.map.builder import attach, attach_left, attach_right, build_map, create_room
from mansion.core.map.defaults import default_map_spec
from mansion.core.map.file_spec import MapFileSpec, MapSpec, RoomSpec
from mansion.core.map.models import MAX_NAME_LENGTH, Direction, Room
from mansion.core.map.teardown import release_all

__all__ = [
    "MAX_NAME_LENGTH",
    "Direction",
    "Room",
    "RoomSpec",
    "MapSpec",
    "MapFileSpec",
    "create_room",
    "attach",
    "attach_left",
    "attach_right",
    "build_map",
    "default_map_spec",
    "release_all",
]
