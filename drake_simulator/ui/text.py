"""Font loading and rendering of the text node tree."""

from __future__ import annotations

import logging
import os

import pygame

from ..constants import APP_NAME, ASSETS_DIR
from .nodes import Node, TextNode, TextStyle

logger = logging.getLogger(APP_NAME)


class FontLoadError(RuntimeError):
    """A configured font file could not be found or opened."""


class FontCache:
    """Loads each (file, size) font once."""

    def __init__(self, assets_dir: str = ASSETS_DIR) -> None:
        self.assets_dir = assets_dir
        self._fonts: dict[tuple[str | None, int], pygame.font.Font] = {}

    def get(self, style: TextStyle) -> pygame.font.Font:
        key = (style.font_file, style.font_size)
        if key not in self._fonts:
            self._fonts[key] = self._load(style.font_file, style.font_size)
        return self._fonts[key]

    def _load(self, font_file: str | None, size: int) -> pygame.font.Font:
        if font_file is None:
            return pygame.font.Font(None, size)
        path = os.path.join(self.assets_dir, font_file)
        if not os.path.isfile(path):
            raise FontLoadError(f"Font asset not found: {path}")
        try:
            font = pygame.font.Font(path, size)
        except (OSError, pygame.error) as exc:
            raise FontLoadError(f"Could not load font {path}: {exc}") from exc
        logger.info(f"Loaded font {path} at {size}px")
        return font


class TreeRenderer:
    """Draws a node tree as a column centred in the target surface."""

    def __init__(self, fonts: FontCache) -> None:
        self.fonts = fonts

    def preload(self, root: Node) -> None:
        """Load every font the tree uses, so missing assets fail at startup."""
        for node in root.text_nodes():
            self.fonts.get(node.style)
            for span in node.spans:
                self.fonts.get(span.style)

    def draw(self, surface: pygame.Surface, root: Node) -> None:
        total = self._height(root)
        y = (surface.get_height() - total) // 2
        self._draw_children(surface, root, y)

    def _draw_children(self, surface: pygame.Surface, node: Node, y: int) -> int:
        y += node.margin
        for child in node.children:
            if isinstance(child, Node):
                y = self._draw_children(surface, child, y)
            else:
                y = self._draw_line(surface, child, y)
        return y + node.margin

    def _draw_line(self, surface: pygame.Surface, node: TextNode, y: int) -> int:
        pieces = [self.fonts.get(node.style).render(node.text, True, node.style.color)]
        for span in node.spans:
            pieces.append(self.fonts.get(span.style).render(span.text, True, span.style.color))

        width = sum(p.get_width() for p in pieces)
        height = max(p.get_height() for p in pieces)
        x = (surface.get_width() - width) // 2
        for piece in pieces:
            # Bottom-align pieces of different sizes on a shared baseline row
            surface.blit(piece, (x, y + height - piece.get_height()))
            x += piece.get_width()
        return y + height

    def _height(self, node: Node | TextNode) -> int:
        if isinstance(node, TextNode):
            fonts = [self.fonts.get(node.style)] + [self.fonts.get(s.style) for s in node.spans]
            return max(f.get_height() for f in fonts)
        return 2 * node.margin + sum(self._height(c) for c in node.children)
