"""UI layer: display widgets and their bindings to the translation store."""

from .bound_label import BoundLabel, TextSurface

__all__ = ["BoundLabel", "TextSurface"]
