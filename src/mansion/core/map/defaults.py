"""Built-in mansion layout used when no map file is supplied."""

from __future__ import annotations

from mansion.core.map.file_spec import MapSpec, RoomSpec


def default_map_spec() -> MapSpec:
    return MapSpec(
        name="Detective Quest Mansion",
        root="hall",
        rooms=[
            RoomSpec(id="hall", name="Hall de Entrada", left="living_room", right="library"),
            RoomSpec(id="living_room", name="Sala de Estar", left="kitchen", right="master_bedroom"),
            RoomSpec(id="library", name="Biblioteca", left="dining_room"),
            RoomSpec(id="kitchen", name="Cozinha", left="pantry"),
            RoomSpec(id="master_bedroom", name="Quarto Principal", left="bathroom"),
            RoomSpec(id="dining_room", name="Sala de Jantar", right="winter_garden"),
            RoomSpec(id="pantry", name="Dispensa"),
            RoomSpec(id="bathroom", name="Banheiro"),
            RoomSpec(id="winter_garden", name="Jardim de Inverno"),
        ],
    )


__all__ = ["default_map_spec"]
