from .tree_renderer import TreeRenderer

__all__ = ["TreeRenderer"]
