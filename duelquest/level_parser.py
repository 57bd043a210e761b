"""Reading levels from Tiled map files."""

from __future__ import annotations

import base64
import itertools
import logging
import os
import string
import struct
import xml.etree.ElementTree as ET
import zlib
from pathlib import Path

from .factory import GameObjectFactory
from .game_object import GameContext, LoaderParams
from .level import Level, ObjectLayer, TileLayer, Tileset

logger = logging.getLogger(__name__)

_BASE64_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/")


class LevelParseError(Exception):
    """A level file is missing, malformed or uses an unsupported format."""


def encode_base64(data: bytes) -> str:
    """Encode bytes as padded standard base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def decode_base64(text: str) -> bytes:
    """Decode base64 text, stopping at padding or the first foreign character."""
    valid = "".join(itertools.takewhile(_BASE64_ALPHABET.__contains__, text))
    if len(valid) % 4 == 1:
        # A lone trailing character carries no whole byte.
        valid = valid[:-1]
    return base64.b64decode(valid + "=" * (-len(valid) % 4))


def decode_tile_data(text: str, width: int, height: int) -> list[list[int]]:
    """Turn base64, zlib-compressed layer data into rows of tile IDs.

    Missing trailing data reads as empty tiles; extra data is ignored.
    """
    try:
        raw = zlib.decompress(decode_base64(text.strip()))
    except zlib.error as exc:
        raise LevelParseError(f"cannot decompress tile data: {exc}") from exc
    count = width * height
    size = count * 4
    ids = struct.unpack(f"<{count}i", raw[:size].ljust(size, b"\0"))
    return [list(ids[start : start + width]) for start in range(0, count, width)] if width else [
        [] for _ in range(height)
    ]


def _int(value: str | None, what: str, default: int | None = None) -> int:
    if value is None:
        if default is None:
            raise LevelParseError(f"missing {what}")
        return default
    try:
        return int(value)
    except ValueError:
        try:
            return int(float(value))
        except ValueError:
            raise LevelParseError(f"{what} is not a number: {value!r}") from None


def _require(element: ET.Element, name: str) -> str:
    value = element.get(name)
    if value is None:
        raise LevelParseError(f"<{element.tag}> has no {name!r} attribute")
    return value


def _load_textures(properties: ET.Element, context: GameContext) -> None:
    for prop in properties.iter("property"):
        texture_id = _require(prop, "name")
        file_name = _require(prop, "value")
        logger.info("adding texture %s with ID %s", file_name, texture_id)
        context.textures.load(file_name, texture_id)


def _parse_tileset(element: ET.Element, base_dir: Path, context: GameContext) -> Tileset:
    image = element.find("image")
    if image is None:
        raise LevelParseError("<tileset> has no <image>")
    name = _require(element, "name")
    image_path = base_dir / _require(image, "source")
    logger.info("adding tileset %s with ID %s", image_path, name)
    context.textures.load(image_path, name)
    tileset = Tileset(
        first_gid=_int(element.get("firstgid"), "tileset firstgid"),
        tile_width=_int(element.get("tilewidth"), "tileset tilewidth"),
        tile_height=_int(element.get("tileheight"), "tileset tileheight"),
        spacing=_int(element.get("spacing"), "tileset spacing", 0),
        margin=_int(element.get("margin"), "tileset margin", 0),
        width=_int(image.get("width"), "tileset image width"),
        height=_int(image.get("height"), "tileset image height"),
        name=name,
    )
    tileset.num_columns = tileset.width // (tileset.tile_width + tileset.spacing)
    return tileset


def _parse_object_layer(
    element: ET.Element, context: GameContext, factory: GameObjectFactory
) -> ObjectLayer:
    layer = ObjectLayer(context)
    for obj in element.findall("object"):
        x = _int(obj.get("x"), "object x")
        y = _int(obj.get("y"), "object y")
        game_object = factory.create(_require(obj, "type"), context)
        width = height = num_frames = anim_speed = 0
        texture_id = ""
        for prop in obj.findall("properties/property"):
            name = prop.get("name")
            value = prop.get("value")
            if name == "numFrames":
                num_frames = _int(value, "numFrames")
            elif name == "textureID":
                texture_id = value or ""
            elif name == "textureWidth":
                width = _int(value, "textureWidth")
            elif name == "textureHeight":
                height = _int(value, "textureHeight")
            elif name == "animSpeed":
                anim_speed = _int(value, "animSpeed")
        game_object.load(
            LoaderParams(x, y, width, height, texture_id, num_frames, anim_speed)
        )
        layer.game_objects.append(game_object)
    return layer


def _parse_tile_layer(
    element: ET.Element,
    level: Level,
    tile_size: int,
    width: int,
    height: int,
    context: GameContext,
) -> TileLayer:
    layer = TileLayer(tile_size, width, height, level.tilesets, context)
    collidable = any(
        prop.get("name") == "collidable"
        for prop in element.findall("properties/property")
    )
    data = None
    for child in element:
        if child.tag == "data":
            data = child
    if data is None:
        raise LevelParseError("tile layer has no <data>")
    if data.get("encoding") != "base64" or data.get("compression") != "zlib":
        raise LevelParseError(
            "only base64 encoded, zlib compressed tile data is supported"
        )
    layer.tile_ids = decode_tile_data(data.text or "", width, height)
    if collidable:
        level.collision_layers.append(layer)
    return layer


def parse_level(
    path: str | os.PathLike[str], context: GameContext, factory: GameObjectFactory
) -> Level:
    """Read a Tiled map file into a :class:`Level`.

    Textures named in the map's properties are loaded from the paths given;
    tileset images are looked up next to the map file.
    """
    path = Path(path)
    try:
        root = ET.parse(path).getroot()
    except (OSError, ET.ParseError) as exc:
        raise LevelParseError(f"cannot read level {path}: {exc}") from exc

    tile_size = _int(root.get("tilewidth"), "map tilewidth")
    width = _int(root.get("width"), "map width")
    height = _int(root.get("height"), "map height")
    logger.info("loading level: width %d - height %d", width, height)

    level = Level()
    children = list(root)
    if children:
        _load_textures(children[0], context)

    for element in root.findall("tileset"):
        level.tilesets.append(_parse_tileset(element, path.parent, context))

    for element in children:
        if element.tag not in ("objectgroup", "layer"):
            continue
        sub = list(element)
        if not sub:
            continue
        if sub[0].tag == "object":
            level.layers.append(_parse_object_layer(element, context, factory))
        elif sub[0].tag == "data" or (len(sub) > 1 and sub[1].tag == "data"):
            level.layers.append(
                _parse_tile_layer(element, level, tile_size, width, height, context)
            )

    logger.info(
        "%d layers, %d collision layers, %d tilesets",
        len(level.layers),
        len(level.collision_layers),
        len(level.tilesets),
    )
    return level