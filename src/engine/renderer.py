# [file name]: src/engine/renderer.py
# src/engine/renderer.py

import io
from typing import Tuple

from PIL import Image, ImageDraw

ALIVE_BACKGROUND = (0, 255, 0)
DEAD_BACKGROUND = (0, 0, 0)
APPLE_COLOR = (255, 0, 0)
SNAKE_COLOR = (153, 102, 51)


class Renderer:
    """
    Rasterises a game state into two half images, one per display button.

    Grid y grows upwards while image rows grow downwards, so cells are
    flipped vertically when drawn.
    """

    def __init__(self, size, block_size: int):
        self.size = size
        self.block_size = block_size

    @property
    def image_size(self) -> Tuple[int, int]:
        return (self.size.width * self.block_size, self.size.height * self.block_size)

    def cell_box(self, point) -> Tuple[int, int, int, int]:
        """Pixel rectangle (left, top, right, bottom) covered by a grid cell."""
        left = point.x * self.block_size
        top = (self.size.height - 1 - point.y) * self.block_size
        return (left, top, left + self.block_size - 1, top + self.block_size - 1)

    def render_full(self, game_state) -> Image.Image:
        background = ALIVE_BACKGROUND if game_state.is_alive else DEAD_BACKGROUND
        image = Image.new('RGB', self.image_size, background)
        draw = ImageDraw.Draw(image)

        for apple in game_state.apples:
            draw.rectangle(self.cell_box(apple), fill=APPLE_COLOR)
        for part in game_state.snake:
            draw.rectangle(self.cell_box(part), fill=SNAKE_COLOR)

        return image

    def render(self, game_state) -> Tuple[Image.Image, Image.Image]:
        """Return (left, right) halves of the current frame."""
        image = self.render_full(game_state)
        width, height = image.size
        half = width // 2
        return image.crop((0, 0, half, height)), image.crop((half, 0, width, height))


def to_png_bytes(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format='PNG')
    return buf.getvalue()
