import pygame
import pytest

from bocchi.objects import Block, CharaBase, Enemy, GameObject, GoalPoint, ObjectType
from bocchi.settings import BOX_SIZE, SCREEN_HEIGHT, SCREEN_WIDTH
from bocchi.vector2d import Vector2D

RED = (255, 0, 0, 255)


def make(cls, x, y, w, h):
    obj = cls()
    obj.initialize(Vector2D(x, y), Vector2D(w, h))
    return obj


@pytest.fixture
def surface():
    return pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))


def test_initialize_copies_location_and_size():
    location = Vector2D(10, 20)
    obj = make(GameObject, 0, 0, 1, 1)
    obj.initialize(location, Vector2D(30, 40))
    location.x = 99
    assert obj.location == Vector2D(10, 20)
    assert obj.box_size == Vector2D(30, 40)


def test_hit_box_is_narrower_and_same_height():
    obj = make(GameObject, 0, 0, 64, 96)
    assert obj.hit_box.y == obj.box_size.y
    assert 0 < obj.hit_box.x < obj.box_size.x


def test_default_type_is_empty():
    assert make(GameObject, 0, 0, 1, 1).object_type == ObjectType.EMPTY
    assert make(Enemy, 0, 0, 1, 1).object_type == ObjectType.EMPTY


def test_block_and_goal_types():
    assert make(Block, 0, 0, BOX_SIZE, BOX_SIZE).object_type == ObjectType.BLOCK
    assert make(GoalPoint, 0, 0, BOX_SIZE, BOX_SIZE).object_type == ObjectType.GOAL


def test_overlapping_boxes_collide():
    a = make(Block, 0, 0, BOX_SIZE, BOX_SIZE)
    b = make(Block, 10, 10, BOX_SIZE, BOX_SIZE)
    assert a.check_box_collision(b)
    assert b.check_box_collision(a)


def test_distant_boxes_do_not_collide():
    a = make(Block, 0, 0, BOX_SIZE, BOX_SIZE)
    b = make(Block, 500, 500, BOX_SIZE, BOX_SIZE)
    assert not a.check_box_collision(b)
    assert not b.check_box_collision(a)


def test_chara_falls_under_gravity():
    chara = make(CharaBase, 5, 0, BOX_SIZE, BOX_SIZE)
    chara.update()
    first_speed = chara.velocity.y
    chara.update()
    assert first_speed > 0
    assert chara.velocity.y > first_speed
    assert chara.location.y > 0
    assert chara.location.x == 5


def test_enemy_falls_like_a_character():
    enemy = make(Enemy, 0, 0, BOX_SIZE, BOX_SIZE)
    enemy.update()
    assert enemy.location.y > 0


def test_collision_with_non_block_is_ignored():
    chara = make(CharaBase, 0, 0, BOX_SIZE, BOX_SIZE)
    goal = make(GoalPoint, 10, 10, BOX_SIZE, BOX_SIZE)
    chara.on_hit_collision(goal)
    assert chara.location == Vector2D(0, 0)


def test_landing_on_block_rests_on_top():
    chara = make(CharaBase, 0, 0, BOX_SIZE, BOX_SIZE)
    chara.velocity.y = 3.0
    chara.g_velocity = 1.0
    chara.jump_flag = True
    block = make(Block, 0, 40, BOX_SIZE, BOX_SIZE)
    chara.on_hit_collision(block)
    assert chara.location.y + chara.box_size.y == block.location.y
    assert chara.velocity.y == 0.0
    assert chara.g_velocity == 0.0
    assert chara.jump_flag is False


def test_side_hit_pushes_left_and_stops():
    chara = make(CharaBase, 0, 0, BOX_SIZE, BOX_SIZE)
    chara.velocity.x = 2.0
    block = make(Block, 40, 0, BOX_SIZE, BOX_SIZE)
    chara.on_hit_collision(block)
    assert chara.location.x + chara.box_size.x == block.location.x
    assert chara.velocity.x == 0.0


def test_side_hit_from_right_pushes_right():
    chara = make(CharaBase, 40, 0, BOX_SIZE, BOX_SIZE)
    block = make(Block, 0, 0, BOX_SIZE, BOX_SIZE)
    chara.on_hit_collision(block)
    assert chara.location.x == block.location.x + block.box_size.x


def test_hit_from_below_keeps_upward_speed():
    chara = make(CharaBase, 0, 40, BOX_SIZE, BOX_SIZE)
    chara.velocity.y = -3.0
    chara.jump_flag = True
    block = make(Block, 0, 0, BOX_SIZE, BOX_SIZE)
    chara.on_hit_collision(block)
    assert chara.location.y == block.location.y + block.box_size.y
    assert chara.velocity.y == -3.0
    assert chara.jump_flag is True


def test_block_draw_outlines_box(surface):
    block = make(Block, 0, 0, BOX_SIZE, BOX_SIZE)
    block.draw(surface, Vector2D(100, 100), 1.0)
    assert tuple(surface.get_at((100, 100))) == RED
    assert tuple(surface.get_at((0, 0))) == RED


def test_offscreen_object_is_not_outlined(surface):
    block = make(Block, 0, 0, BOX_SIZE, BOX_SIZE)
    block.draw(surface, Vector2D(SCREEN_WIDTH + 10, 100), 1.0)
    assert tuple(surface.get_at((SCREEN_WIDTH // 2, 100))) != RED
    assert tuple(surface.get_at((0, 0))) == RED


def test_draw_blits_image(surface):
    obj = make(GameObject, 0, 0, BOX_SIZE, BOX_SIZE)
    image = pygame.Surface((10, 10))
    image.fill((0, 255, 0))
    obj.image = image
    obj.draw(surface, Vector2D(200, 200), 1.0)
    center = (200 + BOX_SIZE // 2, 200 + BOX_SIZE // 2)
    assert tuple(surface.get_at(center)) == (0, 255, 0, 255)


def test_goal_draw_outlines_box(surface):
    goal = make(GoalPoint, 0, 300, BOX_SIZE, BOX_SIZE)
    goal.draw(surface, Vector2D(400, 300), 1.0)
    assert tuple(surface.get_at((400, 300))) == RED