"""Reading the textures and objects of a game state from an XML file."""

from __future__ import annotations

import os
import re
import xml.etree.ElementTree as ET

from .factory import GameObjectFactory
from .game_object import GameContext, GameObject, LoaderParams

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class StateParseError(Exception):
    """A state file is missing, malformed or lacks a required section."""


def _int_attr(element: ET.Element, name: str) -> int:
    """Leading integer of an attribute; 0 when absent or not numeric."""
    value = element.get(name)
    if value is None:
        return 0
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0


def _require(element: ET.Element, name: str) -> str:
    value = element.get(name)
    if value is None:
        raise StateParseError(f"<{element.tag}> has no {name!r} attribute")
    return value


def _section(state_root: ET.Element, tag: str) -> ET.Element:
    section = state_root.find(tag)
    if section is None:
        raise StateParseError(f"state <{state_root.tag}> has no <{tag}>")
    return section


def _parse_textures(textures: ET.Element, context: GameContext) -> list[str]:
    texture_ids = []
    for element in textures:
        file_name = _require(element, "filename")
        texture_id = _require(element, "ID")
        texture_ids.append(texture_id)
        context.textures.load(file_name, texture_id)
    return texture_ids


def _parse_objects(
    objects: ET.Element, context: GameContext, factory: GameObjectFactory
) -> list[GameObject]:
    created = []
    for element in objects:
        params = LoaderParams(
            x=_int_attr(element, "x"),
            y=_int_attr(element, "y"),
            width=_int_attr(element, "width"),
            height=_int_attr(element, "height"),
            texture_id=_require(element, "textureID"),
            num_frames=_int_attr(element, "numFrames"),
            anim_speed=_int_attr(element, "animSpeed"),
        )
        game_object = factory.create(_require(element, "type"), context)
        game_object.load(params)
        created.append(game_object)
    return created


def parse_state(
    path: str | os.PathLike[str],
    state_id: str,
    context: GameContext,
    factory: GameObjectFactory,
) -> tuple[list[GameObject], list[str]]:
    """Load the textures and build the objects of one state.

    Returns the created objects and the IDs of the loaded textures, each in
    file order.
    """
    try:
        root = ET.parse(os.fspath(path)).getroot()
    except (OSError, ET.ParseError) as exc:
        raise StateParseError(f"cannot read state file {os.fspath(path)}: {exc}") from exc

    state_root = next((element for element in root if element.tag == state_id), None)
    if state_root is None:
        raise StateParseError(f"no state {state_id!r} in {os.fspath(path)}")

    texture_ids = _parse_textures(_section(state_root, "TEXTURES"), context)
    objects = _parse_objects(_section(state_root, "OBJECTS"), context, factory)
    return objects, texture_ids