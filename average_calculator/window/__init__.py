from .store import MergeResult, WindowStore, mean

__all__ = ["MergeResult", "WindowStore", "mean"]
