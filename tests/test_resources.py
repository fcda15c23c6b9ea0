import pygame
import pytest

from bocchi.resources import MaterialParam, ResourceError, ResourceManager, SoundParam


class FakeLoaders:
    def __init__(self):
        self.image_calls = []
        self.sound_calls = []

    def image(self, file_name, all_num, num_x, num_y, size_x, size_y):
        self.image_calls.append((file_name, all_num, num_x, num_y, size_x, size_y))
        if file_name.startswith("missing"):
            raise FileNotFoundError(file_name)
        return [f"{file_name}#{i}" for i in range(all_num)]

    def sound(self, file_name):
        self.sound_calls.append(file_name)
        if file_name.startswith("missing"):
            raise FileNotFoundError(file_name)
        return f"sound:{file_name}"


@pytest.fixture
def loaders():
    return FakeLoaders()


@pytest.fixture
def manager(loaders):
    return ResourceManager(image_loader=loaders.image, sound_loader=loaders.sound)


@pytest.fixture
def clean_singleton():
    ResourceManager.delete_instance()
    yield
    ResourceManager.delete_instance()


def test_images_are_loaded_once(manager, loaders):
    first = manager.get_images("hero.png", 3, 3, 1, 32, 32)
    second = manager.get_images("hero.png", 3, 3, 1, 32, 32)
    assert first == second
    assert len(first) == 3
    assert loaders.image_calls == [("hero.png", 3, 3, 1, 32, 32)]


def test_grid_arguments_ignored_after_first_load(manager, loaders):
    manager.get_images("hero.png")
    frames = manager.get_images("hero.png", 4, 2, 2, 16, 16)
    assert len(frames) == 1
    assert len(loaders.image_calls) == 1


def test_default_grid_is_single_image(manager, loaders):
    frames = manager.get_images("tile.png")
    assert list(frames) == ["tile.png#0"]
    assert loaders.image_calls == [("tile.png", 1, 1, 1, 0, 0)]


def test_material_param_forwards_every_field(manager, loaders):
    param = MaterialParam("sheet.png", 6, 3, 2, 24, 40)
    frames = manager.get_images_for(param)
    assert loaders.image_calls == [("sheet.png", 6, 3, 2, 24, 40)]
    assert frames == manager.get_images("sheet.png")


def test_missing_image_raises_resource_error(manager):
    with pytest.raises(ResourceError, match="missing.png"):
        manager.get_images("missing.png")


def test_failed_load_is_not_cached(manager, loaders):
    for _ in range(2):
        with pytest.raises(ResourceError):
            manager.get_images("missing.png")
    assert len(loaders.image_calls) == 2


def test_sounds_are_loaded_once(manager, loaders):
    first = manager.get_sound("jump.wav")
    assert manager.get_sound_for(SoundParam("jump.wav")) == first
    assert first == ("sound:jump.wav",)
    assert loaders.sound_calls == ["jump.wav"]


def test_missing_sound_raises_resource_error(manager):
    with pytest.raises(ResourceError):
        manager.get_sound("missing.wav")


def test_unload_clears_caches(manager, loaders):
    manager.get_images("a.png")
    manager.get_sound("a.wav")
    manager.unload_resources_all()
    frames = manager.get_images("a.png")
    sound = manager.get_sound("a.wav")
    assert list(frames) == ["a.png#0"]
    assert sound == ("sound:a.wav",)
    assert len(loaders.image_calls) == 2
    assert loaders.sound_calls == ["a.wav", "a.wav"]


def test_unload_without_images_keeps_sounds(manager, loaders):
    first = manager.get_sound("a.wav")
    manager.unload_resources_all()
    again = manager.get_sound("a.wav")
    assert again == first == ("sound:a.wav",)
    assert loaders.sound_calls == ["a.wav"]


def test_default_loader_cuts_sheet_into_frames(tmp_path):
    sheet = pygame.Surface((4, 2))
    sheet.fill((255, 0, 0), pygame.Rect(0, 0, 2, 2))
    sheet.fill((0, 0, 255), pygame.Rect(2, 0, 2, 2))
    path = tmp_path / "sheet.bmp"
    pygame.image.save(sheet, str(path))

    frames = ResourceManager().get_images(str(path), 2, 2, 1, 2, 2)
    assert [frame.get_size() for frame in frames] == [(2, 2), (2, 2)]
    assert tuple(frames[0].get_at((0, 0)))[:3] == (255, 0, 0)
    assert tuple(frames[1].get_at((1, 1)))[:3] == (0, 0, 255)


def test_default_loader_single_image(tmp_path):
    path = tmp_path / "one.bmp"
    pygame.image.save(pygame.Surface((3, 5)), str(path))
    frames = ResourceManager().get_images(str(path))
    assert [frame.get_size() for frame in frames] == [(3, 5)]


def test_default_loader_rejects_oversized_grid(tmp_path):
    path = tmp_path / "small.bmp"
    pygame.image.save(pygame.Surface((2, 2)), str(path))
    with pytest.raises(ResourceError):
        ResourceManager().get_images(str(path), 4, 2, 2, 2, 2)


def test_default_loader_missing_file(tmp_path):
    with pytest.raises(ResourceError):
        ResourceManager().get_images(str(tmp_path / "absent.bmp"))


def test_singleton_lifecycle(clean_singleton):
    first = ResourceManager.get_instance()
    assert ResourceManager.get_instance() is first
    ResourceManager.delete_instance()
    assert ResourceManager.get_instance() is not first