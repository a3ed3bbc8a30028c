"""Output root registration for final-merger blocks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

from materialgraph import log

if TYPE_CHECKING:
    from materialgraph.material.block import MaterialBlock
    from materialgraph.material.node_material import NodeMaterial


class OutputRootRegistrar:
    """
    Keeps the material's output roots in step with the visual nodes.

    register() and unregister() are idempotent. Without a material both
    are no-ops.
    """

    def __init__(self, get_material: Callable[[], Optional["NodeMaterial"]]):
        self._get_material = get_material

    def is_registered(self, block: "MaterialBlock") -> bool:
        material = self._get_material()
        return material is not None and material.has_output_node(block)

    def register(self, block: "MaterialBlock") -> None:
        material = self._get_material()
        if material is None or not block.is_final_merger:
            return
        if material.has_output_node(block):
            return
        material.add_output_node(block)
        log.debug(f"Registered output root {block.name}")

    def unregister(self, block: "MaterialBlock") -> None:
        material = self._get_material()
        if material is None or not material.has_output_node(block):
            return
        material.remove_output_node(block)
        log.debug(f"Unregistered output root {block.name}")
