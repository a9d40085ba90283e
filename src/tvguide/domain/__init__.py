"""Domain models for guide rows and guide datasets."""

from .schemas import GuideDataset, GuideRow

__all__ = ["GuideDataset", "GuideRow"]
