"""Window, drawing and the main loop of the game."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

import pygame

from copydash.game import Game
from copydash.level import (
    PLAYER_X,
    Vertex,
    block_vertices,
    play_vertices,
    player_vertices,
    portal_vertices,
    spike_vertices,
    title_vertices,
)

WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "Geometry Copy Dash"
FRAME_MS = 16
CLEAR_COLOUR = (51, 76, 76)

TEXTURE_FILES = {
    "bg": "bg.png",
    "title": "title.png",
    "play": "play.png",
    "block": "block.png",
    "spike": "spike.png",
    "player": "player.jpg",
    "portal": "portal.png",
}

FALLBACK_COLOURS = {
    "bg": CLEAR_COLOUR,
    "title": (240, 200, 40),
    "play": (60, 200, 60),
    "block": (40, 40, 40),
    "spike": (200, 200, 220),
    "player": (250, 220, 0),
    "portal": (200, 60, 220),
}

Bounds = tuple[float, float, float, float]


def to_screen(x: float, y: float, width: int, height: int) -> tuple[float, float]:
    """Map normalised device coordinates (-1..1, y up) to window pixels (y down)."""
    return (x + 1.0) / 2.0 * width, (1.0 - y) / 2.0 * height


def load_texture(path: str | Path) -> pygame.Surface:
    """Load an image file as a surface; raise FileNotFoundError if it is absent."""
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"texture not found: {path}")
    return pygame.image.load(str(path))


def _load_textures(assets_dir: Path) -> dict[str, pygame.Surface | None]:
    textures: dict[str, pygame.Surface | None] = {}
    for name, filename in TEXTURE_FILES.items():
        path = Path(assets_dir) / filename
        try:
            textures[name] = load_texture(path)
        except (OSError, pygame.error):
            print(f"Error loading texture {path}", file=sys.stderr)
            textures[name] = None
    return textures


def _bounds(vertices: Sequence[Vertex]) -> Bounds:
    xs = [vertex[0] for vertex in vertices]
    ys = [vertex[1] for vertex in vertices]
    return min(xs), max(xs), min(ys), max(ys)


class Renderer:
    """Draws a game onto a pygame surface, with or without loaded textures."""

    def __init__(
        self,
        surface: pygame.Surface,
        textures: Mapping[str, pygame.Surface | None] | None = None,
    ) -> None:
        self.surface = surface
        self.textures = dict(textures or {})
        self._scaled: dict[tuple[str, int, int], pygame.Surface] = {}
        self._player_box = _bounds(player_vertices())
        self._portal_box = _bounds(portal_vertices())
        self._block_box = _bounds(block_vertices())
        self._spike_shape = [(v[0], v[1]) for v in spike_vertices()]
        self._title_box = _bounds(title_vertices())
        self._play_box = _bounds(play_vertices())

    def draw(self, game: Game) -> None:
        """Draw one frame of the game."""
        self.surface.fill(CLEAR_COLOUR)
        self._draw_background(game.bg_offset)

        if game.in_menu:
            self._draw_box("title", self._title_box, 0.0, 0.0)
            self._draw_box("play", self._play_box, 0.0, 0.0, game.play_button_scale())
            return

        if game.show_player:
            self._draw_player(game)
        for obstacle in game.level.obstacles:
            self._draw_spike(obstacle.x, obstacle.y)
        for block in game.level.blocks:
            self._draw_box("block", self._block_box, block.x, block.y)
        self._draw_box("portal", self._portal_box, game.level.portal_x, game.level.portal_y)

    def _rect(self, left: float, right: float, bottom: float, top: float) -> pygame.Rect:
        width, height = self.surface.get_size()
        x0, y0 = to_screen(left, top, width, height)
        x1, y1 = to_screen(right, bottom, width, height)
        ix0, iy0 = round(x0), round(y0)
        return pygame.Rect(ix0, iy0, max(1, round(x1) - ix0), max(1, round(y1) - iy0))

    def _image(self, name: str, size: tuple[int, int]) -> pygame.Surface:
        key = (name, size[0], size[1])
        cached = self._scaled.get(key)
        if cached is None:
            image = pygame.Surface(size, pygame.SRCALPHA)
            texture = self.textures.get(name)
            if texture is None:
                image.fill(FALLBACK_COLOURS[name])
            else:
                image.blit(pygame.transform.scale(texture, size), (0, 0))
            self._scaled[key] = cached = image
        return cached

    def _draw_background(self, offset: float) -> None:
        if self.textures.get("bg") is None:
            return
        size = self.surface.get_size()
        image = self._image("bg", size)
        shift = round((offset % 1.0) * size[0])
        self.surface.blit(image, (-shift, 0))
        self.surface.blit(image, (size[0] - shift, 0))

    def _draw_box(
        self, name: str, box: Bounds, x: float, y: float, scale: float = 1.0
    ) -> None:
        left, right, bottom, top = box
        rect = self._rect(
            (left + x) * scale, (right + x) * scale, (bottom + y) * scale, (top + y) * scale
        )
        if rect.colliderect(self.surface.get_rect()):
            self.surface.blit(self._image(name, rect.size), rect.topleft)

    def _draw_player(self, game: Game) -> None:
        left, right, bottom, top = self._player_box
        rect = self._rect(
            left + PLAYER_X, right + PLAYER_X, bottom + game.player_y, top + game.player_y
        )
        image = self._image("player", rect.size)
        if game.jumping:
            image = pygame.transform.rotate(image, game.angle)
        self.surface.blit(image, image.get_rect(center=rect.center))

    def _draw_spike(self, x: float, y: float) -> None:
        xs = [px + x for px, _ in self._spike_shape]
        ys = [py + y for _, py in self._spike_shape]
        rect = self._rect(min(xs), max(xs), min(ys), max(ys))
        if not rect.colliderect(self.surface.get_rect()):
            return
        width, height = self.surface.get_size()
        points = []
        for px, py in zip(xs, ys):
            sx, sy = to_screen(px, py, width, height)
            points.append((round(sx) - rect.left, round(sy) - rect.top))
        triangle = pygame.Surface(rect.size, pygame.SRCALPHA)
        triangle.fill((0, 0, 0, 0))
        pygame.draw.polygon(triangle, (255, 255, 255, 255), points)
        triangle.blit(
            self._image("spike", rect.size), (0, 0), special_flags=pygame.BLEND_RGBA_MULT
        )
        self.surface.blit(triangle, rect.topleft)


def _handle_key(game: Game, event: pygame.event.Event) -> None:
    if event.key == pygame.K_UP:
        game.press_up()
    elif event.key == pygame.K_ESCAPE:
        game.press_key("\x1b")
    elif event.unicode:
        game.press_key(event.unicode)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="copydash", description="Side-scrolling jump game.")
    parser.add_argument(
        "--assets", type=Path, default=Path("assets"), help="directory holding the textures"
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = Renderer(screen, _load_textures(args.assets))

        def pause(seconds: float) -> None:
            renderer.draw(game)
            pygame.display.flip()
            pygame.time.wait(int(seconds * 1000))

        game = Game(pause=pause, win_width=WINDOW_SIZE[0], win_height=WINDOW_SIZE[1])
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    _handle_key(game, event)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    game.click(*event.pos)
                elif event.type == pygame.VIDEORESIZE:
                    game.resize(event.w, event.h)
                    renderer.surface = pygame.display.get_surface()
            if not running:
                break
            game.tick()
            renderer.draw(game)
            pygame.display.flip()
            clock.tick(1000 / FRAME_MS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())