"""Classic algorithm exercises, a merge sort benchmark, a bracket checker and a playlist manager."""

__version__ = "0.1.0"
__all__ = ["algorithms", "merge_sort", "brackets", "playlist"]