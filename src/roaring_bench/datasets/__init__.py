from .zip_positions import ZipPositionsDataset, universe_size

__all__ = ["ZipPositionsDataset", "universe_size"]
