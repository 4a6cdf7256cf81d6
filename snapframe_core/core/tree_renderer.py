from __future__ import annotations

import logging
import math

from snapframe_core.render.pixmap import Pixmap
from snapframe_ui.component_schema import ComponentBase, ComponentContext, ComponentStyle
from snapframe_ui.layout import LayoutNode, layout_tree
from snapframe_ui.render_error import RenderError


LOGGER = logging.getLogger(__name__)


class TreeRenderer:
    """Lays out a component tree and paints it depth-first into one pixmap.

    Every node paints itself before its children, and each `draw_self`
    finishes before the next node starts. With `continue_on_error` a failing
    node is logged and skipped; otherwise its `RenderError` propagates.
    """

    def __init__(self, *, continue_on_error: bool = False) -> None:
        self._continue_on_error = continue_on_error
        self._failures: list[tuple[ComponentBase, RenderError]] = []

    @property
    def failures(self) -> tuple[tuple[ComponentBase, RenderError], ...]:
        return tuple(self._failures)

    def render(self, root: ComponentBase, context: ComponentContext) -> Pixmap:
        node = layout_tree(root)
        width = max(1, math.ceil(node.outer_width * context.scale_factor))
        height = max(1, math.ceil(node.outer_height * context.scale_factor))
        pixmap = Pixmap.new(width, height)
        LOGGER.debug("rendering %s into %dx%d pixmap at scale %.3f", type(root).__name__, width, height, context.scale_factor)
        self.draw(node, pixmap, context)
        return pixmap

    def draw(self, root: LayoutNode, pixmap: Pixmap, context: ComponentContext) -> None:
        self._failures = []
        self._draw_node(root, pixmap, context, parent_style=root.style)

    def _draw_node(
        self,
        node: LayoutNode,
        pixmap: Pixmap,
        context: ComponentContext,
        *,
        parent_style: ComponentStyle,
    ) -> None:
        try:
            node.component.draw_self(pixmap, context, node.params, node.style, parent_style)
        except RenderError as exc:
            if not self._continue_on_error:
                raise
            LOGGER.warning("skipping %s paint: %s", type(node.component).__name__, exc)
            self._failures.append((node.component, exc))
        for child in node.children:
            self._draw_node(child, pixmap, context, parent_style=node.style)
