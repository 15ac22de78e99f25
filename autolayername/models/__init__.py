"""Data models: scene node handles and rename options."""

from autolayername.models.rename_options import RenameOptions
from autolayername.models.scene_node import Paint, SceneNode, SceneNodeLike, has_children

__all__ = ["Paint", "RenameOptions", "SceneNode", "SceneNodeLike", "has_children"]
