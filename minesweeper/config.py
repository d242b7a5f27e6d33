from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml


DEFAULT_SPRITE_SHEET = Path(__file__).parent / "static" / "spritesheet.png"


class ConfigurationError(ValueError):
    """Board parameters that cannot produce a playable game."""


@dataclass
class GameConfig:
    width: int = 10
    height: int = 8
    mine_count: int = 10
    tile_size: int = 8
    sprite_sheet: Path = DEFAULT_SPRITE_SHEET
    seed: Optional[int] = None

    def validate(self) -> "GameConfig":
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"Board size must be positive, got {self.width}x{self.height}")
        if self.tile_size <= 0:
            raise ConfigurationError(f"Tile size must be positive, got {self.tile_size}")
        if self.mine_count < 0:
            raise ConfigurationError(f"Mine count must be non-negative, got {self.mine_count}")
        # worst case: the whole 3x3 safe block lies inside the board
        safe_cells = min(3, self.width) * min(3, self.height)
        capacity = self.width * self.height - safe_cells
        if self.mine_count > capacity:
            raise ConfigurationError(
                f"{self.mine_count} mines do not fit on a {self.width}x{self.height} board "
                f"with a {safe_cells}-cell safe zone (max {capacity})"
            )
        return self


def load_config(cfg_path: str | Path | None) -> GameConfig:
    if cfg_path is None:
        return GameConfig().validate()
    with open(cfg_path, "r") as f:
        data = yaml.safe_load(f) or {}
    board_d = data.get("board", {}) or {}
    assets_d = data.get("assets", {}) or {}
    base = GameConfig()
    sprite_sheet = assets_d.get("sprite_sheet")
    if sprite_sheet is not None:
        sprite_sheet = Path(sprite_sheet)
        if not sprite_sheet.is_absolute():
            sprite_sheet = Path(cfg_path).parent / sprite_sheet
    seed = board_d.get("seed", base.seed)
    cfg = GameConfig(
        width=int(board_d.get("width", base.width)),
        height=int(board_d.get("height", base.height)),
        mine_count=int(board_d.get("mine_count", base.mine_count)),
        tile_size=int(assets_d.get("tile_size", base.tile_size)),
        sprite_sheet=sprite_sheet or base.sprite_sheet,
        seed=int(seed) if seed is not None else None,
    )
    return cfg.validate()
