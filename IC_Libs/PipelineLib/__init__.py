"""
PipelineLib - The image combine pipeline

Sequences loading, format checking, reconciliation, interleaving and
encoding for a single combine run.
"""

from IC_Libs.PipelineLib.combine_pipeline import (
    PipelineStage,
    CombineResult,
    check_formats,
    combine_image_files,
)

__all__ = [
    "PipelineStage",
    "CombineResult",
    "check_formats",
    "combine_image_files",
]
