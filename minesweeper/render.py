from __future__ import annotations

import io
from typing import Optional

import numpy as np
from matplotlib import image as mpimg

from .assets import AssetBundle


class FrameBuffer:
    """RGB pixel buffer; reads outside the buffer return black, writes are dropped."""

    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)
        self.pixels = np.zeros((self.height, self.width, 3), dtype=np.uint8)

    def get(self, x: int, y: int) -> np.ndarray:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.pixels[y, x].copy()
        return np.zeros(3, dtype=np.uint8)

    def set(self, x: int, y: int, color) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = color

    def blit(self, block: np.ndarray, x0: int, y0: int) -> None:
        h, w = block.shape[:2]
        x_start, y_start = max(0, x0), max(0, y0)
        x_end, y_end = min(self.width, x0 + w), min(self.height, y0 + h)
        if x_start >= x_end or y_start >= y_end:
            return
        self.pixels[y_start:y_end, x_start:x_end] = block[
            y_start - y0 : y_end - y0, x_start - x0 : x_end - x0
        ]


class PixelRenderer:
    """Blits one sprite per tile into a frame buffer sized to the board."""

    def __init__(self, assets: AssetBundle):
        self.assets = assets
        self.buffer: Optional[FrameBuffer] = None
        self.frames_rendered = 0

    def render(self, tiles: np.ndarray, width: int, height: int) -> None:
        ts = self.assets.tile_size
        if self.buffer is None or (self.buffer.width, self.buffer.height) != (width * ts, height * ts):
            self.buffer = FrameBuffer(width * ts, height * ts)
        for y in range(height):
            for x in range(width):
                self.buffer.blit(self.assets.sprite(tiles[y, x]), x * ts, y * ts)
        self.frames_rendered += 1

    @property
    def frame(self) -> Optional[np.ndarray]:
        return None if self.buffer is None else self.buffer.pixels


def encode_png(frame: np.ndarray) -> bytes:
    out = io.BytesIO()
    mpimg.imsave(out, frame, format="png")
    return out.getvalue()
