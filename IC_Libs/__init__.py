"""
IC_Libs - Image Combiner Library Modules

This package contains core functionality for the Image Combiner project,
organized into specialized sub-packages:

- ImageIOLib: Decoding input images and encoding the combined output
- PixelOpsLib: Size reconciliation and channel interleaving
- PipelineLib: Run configuration and the combine pipeline
"""

__version__ = "0.1.0"
