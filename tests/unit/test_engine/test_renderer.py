"""
Unit tests for frame building (fog of war) and surface painting.
"""

import pygame

from engine.renderer import DrawCell, Frame, Layer, SurfaceRenderer, build_frame
from settings import COLOR_ENEMY, COLOR_FOG, COLOR_PLAYER, FOV_RADIUS
from world.tiles import Tile

BIG_ROOM = ["#" * 11] + ["#.........#"] * 9 + ["#" * 11]


class TestBuildFrame:

    def test_full_grid_is_drawn(self, make_world):
        world = make_world(BIG_ROOM, player=(5, 5))
        frame = build_frame(world)
        base = [c for c in frame.cells if c.layer in (Layer.TILE, Layer.FOG)]
        assert len(base) == 11 * 11

    def test_fog_beyond_manhattan_radius(self, make_world):
        world = make_world(BIG_ROOM, player=(5, 5))
        frame = build_frame(world)

        for cell in frame.cells:
            if cell.layer not in (Layer.TILE, Layer.FOG):
                continue
            distance = abs(cell.x - 5) + abs(cell.y - 5)
            if distance > FOV_RADIUS:
                assert cell.layer == Layer.FOG
                assert cell.color == COLOR_FOG
            else:
                assert cell.layer == Layer.TILE

    def test_visible_tiles_use_tile_colors(self, make_world):
        world = make_world(["#####", "#.ck#", "#####"], player=(1, 1))
        frame = build_frame(world)
        assert frame.top_cell_at(2, 1).color == Tile.COIN.color
        assert frame.top_cell_at(3, 1).color == Tile.KEY.color
        assert frame.top_cell_at(0, 0).color == Tile.WALL.color

    def test_enemies_outside_radius_hidden(self, make_world):
        world = make_world(BIG_ROOM, player=(1, 1), enemies=[(3, 2), (8, 8)])
        frame = build_frame(world)
        enemies = [(c.x, c.y) for c in frame.cells_in_layer(Layer.ENEMY)]
        assert enemies == [(3, 2)]

    def test_player_drawn_last(self, make_world):
        world = make_world(BIG_ROOM, player=(4, 4), enemies=[(4, 4)])
        frame = build_frame(world)

        assert frame.cells[-1] == DrawCell(4, 4, COLOR_PLAYER, Layer.PLAYER)
        assert frame.top_cell_at(4, 4).layer == Layer.PLAYER

    def test_custom_radius(self, make_world):
        world = make_world(BIG_ROOM, player=(5, 5))
        frame = build_frame(world, radius=0)
        tiles = frame.cells_in_layer(Layer.TILE)
        assert [(c.x, c.y) for c in tiles] == [(5, 5)]


class TestSurfaceRenderer:

    def test_paints_cells(self):
        surface = pygame.Surface((40, 20))
        renderer = SurfaceRenderer(surface, tile_size=10)
        frame = Frame(
            4,
            2,
            [
                DrawCell(0, 0, (10, 20, 30), Layer.TILE),
                DrawCell(1, 0, COLOR_ENEMY, Layer.ENEMY),
                DrawCell(3, 1, COLOR_PLAYER, Layer.PLAYER),
            ],
        )

        renderer.render(frame)

        assert tuple(surface.get_at((5, 5)))[:3] == (10, 20, 30)
        assert tuple(surface.get_at((15, 5)))[:3] == COLOR_ENEMY
        assert tuple(surface.get_at((35, 15)))[:3] == COLOR_PLAYER

    def test_origin_offset(self):
        renderer = SurfaceRenderer(pygame.Surface((64, 64)), tile_size=8, origin=(4, 2))
        assert renderer.cell_rect(1, 1) == pygame.Rect(12, 10, 8, 8)

    def test_world_frame_on_surface(self, make_world):
        world = make_world(BIG_ROOM, player=(5, 5))
        surface = pygame.Surface((11 * 4, 11 * 4))
        SurfaceRenderer(surface, tile_size=4).render(build_frame(world))

        assert tuple(surface.get_at((5 * 4 + 1, 5 * 4 + 1)))[:3] == COLOR_PLAYER
        assert tuple(surface.get_at((1, 1)))[:3] == COLOR_FOG
