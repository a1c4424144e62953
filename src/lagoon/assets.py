from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pyray as rl

from .console import ConsoleState


@dataclass(slots=True)
class TextureAsset:
    name: str
    rel_path: str
    texture: rl.Texture2D | None

    def unload(self) -> None:
        if self.texture is not None:
            rl.unload_texture(self.texture)
            self.texture = None


def load_texture_asset(assets_dir: Path, name: str, rel_path: str, console: ConsoleState) -> TextureAsset:
    """Load a texture from disk; a missing or unreadable file yields a placeholder (`texture=None`)."""
    path = assets_dir / rel_path
    if not path.is_file():
        console.log.log(f"assets: missing {rel_path}, drawing placeholder")
        return TextureAsset(name=name, rel_path=rel_path, texture=None)
    texture = rl.load_texture(str(path))
    if int(texture.id) == 0:
        console.log.log(f"assets: failed to decode {rel_path}, drawing placeholder")
        return TextureAsset(name=name, rel_path=rel_path, texture=None)
    rl.set_texture_filter(texture, rl.TEXTURE_FILTER_BILINEAR)
    return TextureAsset(name=name, rel_path=rel_path, texture=texture)


@dataclass(slots=True)
class TextureCache:
    assets_dir: Path
    console: ConsoleState
    textures: dict[str, TextureAsset] = field(default_factory=dict)

    def texture(self, name: str) -> rl.Texture2D | None:
        asset = self.textures.get(name)
        return asset.texture if asset is not None else None

    def get_or_load(self, name: str, rel_path: str) -> TextureAsset:
        if name in self.textures:
            return self.textures[name]
        asset = load_texture_asset(self.assets_dir, name, rel_path, self.console)
        self.textures[name] = asset
        return asset

    def loaded_count(self) -> int:
        return sum(1 for asset in self.textures.values() if asset.texture is not None)

    def unload(self) -> None:
        for asset in self.textures.values():
            asset.unload()
        self.textures.clear()
