import pygame
import pytest

from gameresources.images import ImageManager


@pytest.fixture
def manager(tmp_path):
    surface = pygame.Surface((3, 2))
    surface.fill((255, 0, 0))
    pygame.image.save(surface, str(tmp_path / "red.bmp"))
    return ImageManager(tmp_path)


def test_get_image_decodes_file(manager):
    image = manager.get_image("red.bmp")
    assert image.get_size() == (3, 2)
    assert tuple(image.get_at((0, 0)))[:3] == (255, 0, 0)


def test_get_image_is_cached(manager):
    first = manager.get_image("red.bmp")
    assert manager.get_image("red.bmp") is first
    assert manager.get("red.bmp") is first


def test_get_image_missing_file(manager):
    with pytest.raises(FileNotFoundError):
        manager.get_image("absent.png")


def test_get_image_invalid_data(manager, tmp_path):
    (tmp_path / "broken.png").write_bytes(b"definitely not an image")
    with pytest.raises(pygame.error):
        manager.get_image("broken.png")
    assert manager.get("broken.png") is None


def test_put_get_remove(manager):
    surface = pygame.Surface((5, 5))
    manager.put("blank", surface)
    assert manager.get("blank") is surface
    manager.remove("blank")
    assert manager.get("blank") is None


def test_clear_forces_reload(manager):
    first = manager.get_image("red.bmp")
    manager.clear()
    assert manager.get("red.bmp") is None
    second = manager.get_image("red.bmp")
    assert second.get_size() == first.get_size()