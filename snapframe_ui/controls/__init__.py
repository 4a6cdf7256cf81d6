from .container import Container, Spacer
from .panel import EDITOR_PADDING, Panel

__all__ = [
    "Container",
    "EDITOR_PADDING",
    "Panel",
    "Spacer",
]
