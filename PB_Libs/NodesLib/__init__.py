"""
Paint Bucket Nodes Library.

This module contains the node a host pipeline uses to run a flood fill.

Modules:
    flood_fill_node: Flood fill node with change mask generation
"""

from PB_Libs.NodesLib.flood_fill_node import (
    FloodFillNodeConfig,
    execute_flood_fill_node,
    create_flood_fill_node,
)

__all__ = [
    "FloodFillNodeConfig",
    "execute_flood_fill_node",
    "create_flood_fill_node",
]
