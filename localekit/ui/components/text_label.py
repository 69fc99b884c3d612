#!/usr/bin/env python3
"""Single-line text widget rendered with pygame."""

import pygame

# Cache fonts by (name, size)
_font_cache: dict[tuple[str | None, int], pygame.font.Font] = {}
_FONT_CACHE_MAX_SIZE = 50


def get_font(size: int, name: str | None = None) -> pygame.font.Font:
    """Get or create a system font from cache.

    Args:
        size: Font size in points
        name: System font name (None for pygame's default font)

    Returns:
        pygame.Font instance
    """
    key = (name, size)
    if key not in _font_cache:
        if not pygame.font.get_init():
            pygame.font.init()
        # Evict oldest entry if cache is full
        if len(_font_cache) >= _FONT_CACHE_MAX_SIZE:
            _font_cache.pop(next(iter(_font_cache)))
        _font_cache[key] = pygame.font.SysFont(name, size)
    return _font_cache[key]


class TextLabel:
    """Text widget that re-renders only when its text changes."""

    def __init__(
        self,
        text: str = "",
        position: tuple[int, int] = (0, 0),
        color: tuple[int, int, int] = (255, 255, 255),
        font_size: int = 32,
        font_name: str | None = None,
    ):
        """Initialize label.

        Args:
            text: Initial (design-time) text
            position: Top-left corner in screen pixels
            color: RGB color tuple
            font_size: Font size in points
            font_name: System font name (None for default)
        """
        self._text = text
        self.position = position
        self.color = color
        self.font_size = font_size
        self.font_name = font_name
        self._rendered: pygame.Surface | None = None

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str):
        if value != self._text:
            self._text = value
            self._rendered = None

    def render(self) -> pygame.Surface:
        """Render (or reuse) the text surface."""
        if self._rendered is None:
            font = get_font(self.font_size, self.font_name)
            self._rendered = font.render(self._text, True, self.color)
        return self._rendered

    def draw(self, screen: pygame.Surface) -> pygame.Rect:
        """Blit the label onto ``screen``.

        Args:
            screen: Target surface

        Returns:
            Rect covered by the label
        """
        surface = self.render()
        return screen.blit(surface, self.position)

    def __repr__(self) -> str:
        return f"TextLabel(text={self._text!r}, position={self.position})"
