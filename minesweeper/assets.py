from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from matplotlib import image as mpimg

from .board import TILE_KINDS

log = logging.getLogger(__name__)


class AssetLoadError(RuntimeError):
    """The sprite sheet could not be read; the game cannot start."""


@dataclass
class AssetBundle:
    sprites: np.ndarray  # (TILE_KINDS, tile_size, tile_size, 3) uint8
    tile_size: int

    def sprite(self, tile: int) -> np.ndarray:
        return self.sprites[int(tile)]


def to_rgb8(pixels: np.ndarray) -> np.ndarray:
    """Convert decoded image data (float or integer, gray/RGB/RGBA) to uint8 RGB."""
    arr = np.asarray(pixels)
    if arr.ndim == 2:
        arr = np.stack([arr, arr, arr], axis=-1)
    if arr.ndim != 3 or arr.shape[-1] < 3:
        raise AssetLoadError(f"Unsupported pixel layout with shape {arr.shape}")
    arr = arr[..., :3]
    if np.issubdtype(arr.dtype, np.floating):
        arr = np.clip(np.rint(arr * 255.0), 0, 255)
    return arr.astype(np.uint8)


def slice_sprites(sheet: np.ndarray, tile_size: int) -> np.ndarray:
    H, W = sheet.shape[:2]
    if H < tile_size or W < TILE_KINDS * tile_size:
        raise AssetLoadError(
            f"Sprite sheet {W}x{H} is too small for {TILE_KINDS} tiles of {tile_size}px"
        )
    strip = sheet[:tile_size, : TILE_KINDS * tile_size]
    # (ts, kinds*ts, 3) -> (kinds, ts, ts, 3)
    return np.ascontiguousarray(
        strip.reshape(tile_size, TILE_KINDS, tile_size, 3).transpose(1, 0, 2, 3)
    )


def load_assets(path: str | Path, tile_size: int) -> AssetBundle:
    path = Path(path)
    if not path.exists():
        raise AssetLoadError(f"Sprite sheet not found: {path}")
    try:
        raw = mpimg.imread(path)
    except (OSError, ValueError, SyntaxError) as exc:
        raise AssetLoadError(f"Could not decode sprite sheet {path}: {exc}") from exc
    sprites = slice_sprites(to_rgb8(raw), tile_size)
    log.info("Loaded %d sprites (%dpx) from %s", sprites.shape[0], tile_size, path)
    return AssetBundle(sprites=sprites, tile_size=tile_size)
