"""
PB_Libs - Paint Bucket Library Modules

This package contains core functionality for the Paint Bucket project,
organized into specialized sub-packages:

- FillLib: Pixel color model, packed pixel buffer and scanline flood fill
- ImageEditingLib: Pillow image adapters and high-level fill operations
- NodesLib: Pipeline node for the flood fill
"""

__version__ = "0.1.0"
