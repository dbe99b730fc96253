import io

import pygame
import pytest

from acpacman import assets, resources
from acpacman.assets import SPRITE_TABLE, ArcadeFont, load_assets
from acpacman.errors import DecodeError, OutOfBoundsError

from conftest import patterned, png_bytes, pixels


def all_sprites(bundle):
    for group in ("characters", "powers", "walls"):
        for r in SPRITE_TABLE[group]:
            yield group, r, getattr(getattr(bundle, group), r.name)


def test_load_assets_fills_every_field():
    bundle = load_assets()
    assert isinstance(bundle.arcade_font, ArcadeFont)
    assert bundle.skin.get_size() == pygame.image.load(
        io.BytesIO(resources.SKIN_PNG), "skin.png").get_size()
    for group, r, spr in all_sprites(bundle):
        assert spr.get_size() == (r.width, r.height), (group, r.name)


def test_two_loads_are_equal_but_independent():
    a, b = load_assets(), load_assets()
    assert a is not b
    assert pixels(a.skin) == pixels(b.skin)
    for (_, r, sa), (_, _, sb) in zip(all_sprites(a), all_sprites(b)):
        assert sa is not sb
        assert sa.get_size() == sb.get_size()
        assert pixels(sa) == pixels(sb), r.name


def test_sprites_come_from_fixed_rectangles():
    bundle = load_assets()
    atlas = pygame.image.load(io.BytesIO(resources.WALLS_PNG), "walls.png")
    side = atlas.subsurface((64, 0, 40, 12))
    assert pixels(bundle.walls.active_side) == pixels(side)


@pytest.mark.parametrize("attr, name", [
    ("SKIN_PNG", "skin"),
    ("CHARACTERS_PNG", "characters"),
    ("POWERS_PNG", "powers"),
    ("WALLS_PNG", "walls"),
])
def test_corrupt_image_fails_whole_load(monkeypatch, attr, name):
    monkeypatch.setattr(resources, attr, b"\x89PNG not really a png")
    with pytest.raises(DecodeError) as exc:
        load_assets()
    assert exc.value.name == name
    assert exc.value.__cause__ is not None


def test_empty_image_fails(monkeypatch):
    monkeypatch.setattr(resources, "WALLS_PNG", b"")
    with pytest.raises(DecodeError):
        load_assets()


def test_corrupt_font_fails(monkeypatch):
    monkeypatch.setattr(resources, "ARCADE_TTF", b"definitely not a font" * 10)
    with pytest.raises(DecodeError) as exc:
        load_assets()
    assert exc.value.name == "arcade_font"
    assert isinstance(exc.value.__cause__, pygame.error)


def test_first_failure_wins(monkeypatch):
    monkeypatch.setattr(resources, "SKIN_PNG", b"junk")
    monkeypatch.setattr(resources, "WALLS_PNG", b"junk")
    with pytest.raises(DecodeError) as exc:
        load_assets()
    assert exc.value.name == "skin"


def test_undersized_atlas_is_out_of_bounds(monkeypatch):
    monkeypatch.setattr(resources, "CHARACTERS_PNG", png_bytes(patterned((290, 64))))
    with pytest.raises(OutOfBoundsError) as exc:
        load_assets()
    assert exc.value.name == "ghost4"


def test_swapped_atlas_bytes_change_sprites(monkeypatch):
    atlas = patterned((131, 64))
    monkeypatch.setattr(resources, "POWERS_PNG", png_bytes(atlas))
    bundle = load_assets()
    assert pixels(bundle.powers.invincibility) == pixels(atlas.subsurface((67, 0, 64, 64)))


def test_font_faces_are_cached_per_size():
    font = load_assets().arcade_font
    assert font.face(20) is font.face(20)
    assert font.face(12) is not font.face(20)
    label = font.render("SCORE: 10", (255, 255, 255))
    assert label.get_width() > 0 and label.get_height() > 0


def test_bundles_are_frozen():
    bundle = load_assets()
    with pytest.raises(AttributeError):
        bundle.skin = None


def test_ghosts_in_order():
    ch = load_assets().characters
    assert ch.ghosts() == (ch.ghost1, ch.ghost2, ch.ghost3, ch.ghost4)


def test_images_converted_once_display_is_set():
    pygame.display.init()
    try:
        pygame.display.set_mode((64, 64))
        bundle = assets.load_assets()
        assert bundle.characters.pacman.get_size() == (61, 64)
    finally:
        pygame.display.quit()
