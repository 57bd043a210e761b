import pygame
import pytest

from duelquest.factory import GameObjectFactory, UnknownObjectTypeError
from duelquest.game_object import GameContext, MenuButton
from duelquest.state_parser import StateParseError, parse_state


@pytest.fixture
def image(tmp_path):
    path = tmp_path / "button.bmp"
    surface = pygame.Surface((8, 8))
    surface.fill((0, 255, 0))
    pygame.image.save(surface, str(path))
    return path


@pytest.fixture
def factory():
    f = GameObjectFactory()
    f.register("MenuButton", MenuButton)
    return f


def write_states(tmp_path, image, objects):
    text = f"""<STATES>
  <PLAY><TEXTURES/><OBJECTS/></PLAY>
  <MAINMENU>
    <TEXTURES>
      <texture filename="{image}" ID="newgamebutton"/>
      <texture filename="{image}" ID="mainmenuscreen"/>
    </TEXTURES>
    <OBJECTS>
      {objects}
    </OBJECTS>
  </MAINMENU>
</STATES>"""
    path = tmp_path / "game.xml"
    path.write_text(text)
    return path


def test_parses_textures_and_objects(tmp_path, image, factory):
    path = write_states(
        tmp_path,
        image,
        '<object type="MenuButton" x="400" y="400" width="400" height="100" '
        'textureID="newgamebutton" numFrames="0"/>',
    )
    context = GameContext(320, 240)
    objects, texture_ids = parse_state(path, "MAINMENU", context, factory)
    assert texture_ids == ["newgamebutton", "mainmenuscreen"]
    assert "newgamebutton" in context.textures
    assert "mainmenuscreen" in context.textures
    assert len(objects) == 1
    button = objects[0]
    assert isinstance(button, MenuButton)
    assert (button.position.x, button.position.y) == (400, 400)
    assert (button.width, button.height) == (400, 100)
    assert button.texture_id == "newgamebutton"


def test_missing_numbers_read_as_zero(tmp_path, image, factory):
    path = write_states(
        tmp_path, image, '<object type="MenuButton" x="12.5" textureID="t"/>'
    )
    objects, _ = parse_state(path, "MAINMENU", GameContext(320, 240), factory)
    assert objects[0].position.x == 12
    assert objects[0].position.y == 0
    assert objects[0].width == 0


def test_other_state_is_empty(tmp_path, image, factory):
    path = write_states(tmp_path, image, "")
    assert parse_state(path, "PLAY", GameContext(320, 240), factory) == ([], [])


def test_unknown_state_raises(tmp_path, image, factory):
    path = write_states(tmp_path, image, "")
    with pytest.raises(StateParseError):
        parse_state(path, "DUEL", GameContext(320, 240), factory)


def test_missing_file_raises(tmp_path, factory):
    with pytest.raises(StateParseError):
        parse_state(tmp_path / "nope.xml", "MAINMENU", GameContext(320, 240), factory)


def test_unknown_object_type_raises(tmp_path, image, factory):
    path = write_states(tmp_path, image, '<object type="Dragon" textureID="t"/>')
    with pytest.raises(UnknownObjectTypeError):
        parse_state(path, "MAINMENU", GameContext(320, 240), factory)


def test_missing_section_raises(tmp_path, factory):
    path = tmp_path / "game.xml"
    path.write_text("<STATES><MAINMENU><TEXTURES/></MAINMENU></STATES>")
    with pytest.raises(StateParseError):
        parse_state(path, "MAINMENU", GameContext(320, 240), factory)