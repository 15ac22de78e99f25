"""Module: media_fill_strategy.py

Author: Michael Economou
Date: 2026-10-13

Names layers filled with an image or a video. A visible video fill wins over
an image fill on the same layer.
"""

from autolayername.domain.node_types import NodeKind
from autolayername.modules.base_strategy import BaseNamingStrategy

# Kinds whose fills make them read as a picture rather than a container
_MEDIA_KINDS = frozenset(
    {
        NodeKind.RECTANGLE.value,
        NodeKind.ELLIPSE.value,
        NodeKind.POLYGON.value,
        NodeKind.STAR.value,
        NodeKind.VECTOR.value,
        NodeKind.FRAME.value,
        NodeKind.MEDIA.value,
    }
)


def _fill_type(fill) -> str:
    if isinstance(fill, dict):
        return str(fill.get("type", ""))
    return str(getattr(fill, "type", ""))


def _fill_visible(fill) -> bool:
    if isinstance(fill, dict):
        return fill.get("visible", True) is not False
    return getattr(fill, "visible", True) is not False


class MediaFillStrategy(BaseNamingStrategy):
    DISPLAY_NAME = "Media Fill"
    DESCRIPTION = "image / video for layers with media fills"

    def _media_token(self, node) -> str | None:
        types = {_fill_type(f) for f in getattr(node, "fills", None) or () if _fill_visible(f)}
        if "VIDEO" in types:
            return "video"
        if "IMAGE" in types:
            return "image"
        return None

    def applies_to(self, node) -> bool:
        return node.type in _MEDIA_KINDS and self._media_token(node) is not None

    def generate(self, node, options) -> str:
        return self.format(self._media_token(node), options)
