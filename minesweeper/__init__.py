from .assets import AssetBundle, AssetLoadError, load_assets
from .board import BoardState, Tile, is_won, tile_identity
from .config import ConfigurationError, GameConfig, load_config
from .game import Button, Game, GameState, InputEvent, Outcome, dispatch, pointer_to_tile
from .generator import generate, place_mines
from .render import FrameBuffer, PixelRenderer, encode_png
from .reveal import reveal

__all__ = [
    "AssetBundle",
    "AssetLoadError",
    "load_assets",
    "BoardState",
    "Tile",
    "is_won",
    "tile_identity",
    "ConfigurationError",
    "GameConfig",
    "load_config",
    "Button",
    "Game",
    "GameState",
    "InputEvent",
    "Outcome",
    "dispatch",
    "pointer_to_tile",
    "generate",
    "place_mines",
    "FrameBuffer",
    "PixelRenderer",
    "encode_png",
    "reveal",
]
