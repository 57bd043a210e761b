import struct
import zlib

import pygame
import pytest

from duelquest.factory import GameObjectFactory, UnknownObjectTypeError
from duelquest.game_object import GameContext, Npc
from duelquest.level import ObjectLayer, TileLayer
from duelquest.level_parser import (
    LevelParseError,
    decode_base64,
    decode_tile_data,
    encode_base64,
    parse_level,
)


@pytest.mark.parametrize(
    "data", [b"", b"a", b"ab", b"abc", b"abcd", bytes(range(256)), b"\x00\xff" * 7]
)
def test_base64_round_trip(data):
    assert decode_base64(encode_base64(data)) == data


def test_encode_base64_known_value():
    assert encode_base64(b"hello") == "aGVsbG8="


def test_decode_base64_stops_at_padding():
    assert decode_base64("aGVsbG8=" + encode_base64(b"more")) == b"hello"


def test_decode_base64_stops_at_foreign_character():
    prefix = encode_base64(b"abc")
    assert decode_base64(prefix + "!" + encode_base64(b"zzz")) == b"abc"


def test_decode_base64_drops_lone_trailing_character():
    prefix = encode_base64(b"abc")
    assert decode_base64(prefix + "Q") == b"abc"


def _encode_ids(ids):
    return encode_base64(zlib.compress(struct.pack(f"<{len(ids)}i", *ids)))


def test_decode_tile_data_rows():
    ids = [1, 2, 3, 4, 5, 6]
    assert decode_tile_data(_encode_ids(ids), 3, 2) == [[1, 2, 3], [4, 5, 6]]


def test_decode_tile_data_ignores_surrounding_whitespace():
    ids = [7, 0, 0, 9]
    assert decode_tile_data("\n   " + _encode_ids(ids) + "\n  ", 2, 2) == [[7, 0], [0, 9]]


def test_decode_tile_data_pads_short_data_with_empty_tiles():
    assert decode_tile_data(_encode_ids([5, 6]), 2, 2) == [[5, 6], [0, 0]]


def test_decode_tile_data_rejects_bad_compression():
    with pytest.raises(LevelParseError):
        decode_tile_data(encode_base64(b"not compressed"), 2, 2)


MAP = """<?xml version="1.0" encoding="UTF-8"?>
<map version="1.0" orientation="orthogonal" width="3" height="2" tilewidth="2" tileheight="2">
 <properties>
  <property name="npc" value="{npc_path}"/>
 </properties>
 <tileset firstgid="1" name="blocks1" tilewidth="2" tileheight="2" spacing="0" margin="0">
  <image source="blocks1.bmp" width="4" height="2"/>
 </tileset>
 <layer name="Overlay" width="3" height="2">
  <data encoding="base64" compression="zlib">
   {overlay}
  </data>
 </layer>
 <layer name="Collision" width="3" height="2">
  <properties>
   <property name="collidable" value="true"/>
  </properties>
  <data encoding="{encoding}" compression="zlib">{collision}</data>
 </layer>
 <objectgroup name="Object Layer 1" width="3" height="2">
  <object name="npc1" type="Npc" x="4" y="2" width="2" height="2">
   <properties>
    <property name="numFrames" value="4"/>
    <property name="textureHeight" value="2"/>
    <property name="textureID" value="npc"/>
    <property name="textureWidth" value="2"/>
   </properties>
  </object>
 </objectgroup>
</map>
"""

OVERLAY = [1, 0, 2, 0, 2, 0]
COLLISION = [0, 0, 1, 1, 0, 0]


def _write_map(tmp_path, encoding="base64"):
    npc_path = tmp_path / "npc.bmp"
    pygame.image.save(pygame.Surface((2, 2)), str(npc_path))
    pygame.image.save(pygame.Surface((4, 2)), str(tmp_path / "blocks1.bmp"))
    level_path = tmp_path / "level1.tmx"
    level_path.write_text(
        MAP.format(
            npc_path=npc_path,
            overlay=_encode_ids(OVERLAY),
            collision=_encode_ids(COLLISION),
            encoding=encoding,
        )
    )
    return level_path


@pytest.fixture
def factory():
    result = GameObjectFactory()
    result.register("Npc", Npc)
    return result


def test_parse_level_builds_layers(tmp_path, factory):
    context = GameContext(width=8, height=8)
    level = parse_level(_write_map(tmp_path), context, factory)

    assert len(level.layers) == 3
    overlay, collision, objects = level.layers
    assert isinstance(overlay, TileLayer)
    assert isinstance(objects, ObjectLayer)
    assert overlay.tile_ids == [OVERLAY[:3], OVERLAY[3:]]
    assert collision.tile_ids == [COLLISION[:3], COLLISION[3:]]
    assert level.collision_layers == [collision]
    assert collision.tile_size == 2
    assert (collision.map_width, collision.map_height) == (3, 2)
    assert overlay.tilesets is level.tilesets


def test_parse_level_reads_tilesets_and_textures(tmp_path, factory):
    context = GameContext(width=8, height=8)
    level = parse_level(_write_map(tmp_path), context, factory)

    assert len(level.tilesets) == 1
    tileset = level.tilesets[0]
    assert tileset.name == "blocks1"
    assert tileset.first_gid == 1
    assert (tileset.width, tileset.height) == (4, 2)
    assert tileset.num_columns == 2
    assert "blocks1" in context.textures
    assert "npc" in context.textures


def test_parse_level_creates_objects(tmp_path, factory):
    context = GameContext(width=8, height=8)
    level = parse_level(_write_map(tmp_path), context, factory)

    layer = level.object_layer()
    assert layer is level.layers[2]
    assert len(layer.game_objects) == 1
    npc = layer.game_objects[0]
    assert isinstance(npc, Npc)
    assert (npc.position.x, npc.position.y) == (4, 2)
    assert (npc.width, npc.height) == (2, 2)
    assert npc.texture_id == "npc"
    assert npc.num_frames == 4


def test_parse_level_missing_file(tmp_path, factory):
    with pytest.raises(LevelParseError):
        parse_level(tmp_path / "absent.tmx", GameContext(width=8, height=8), factory)


def test_parse_level_unknown_object_type(tmp_path):
    with pytest.raises(UnknownObjectTypeError):
        parse_level(
            _write_map(tmp_path), GameContext(width=8, height=8), GameObjectFactory()
        )


def test_parse_level_rejects_unsupported_encoding(tmp_path, factory):
    with pytest.raises(LevelParseError):
        parse_level(
            _write_map(tmp_path, encoding="csv"), GameContext(width=8, height=8), factory
        )