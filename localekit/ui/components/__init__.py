"""UI components.

Example:
    from localekit.ui.components import TextLabel

    label = TextLabel("Play", position=(40, 40))
    label.draw(screen)
"""

from .text_label import TextLabel, get_font

__all__ = ["TextLabel", "get_font"]
