"""
closest_pair - divide-and-conquer closest pair of points in the plane.

This package provides:
- a 2-D point type and Euclidean distance helpers
- brute-force and O(n log n) divide-and-conquer closest-pair algorithms
- point-file reading and synthetic point generators
- a command-line solver, benchmark orchestration and analysis utilities
"""

__all__ = ["geometry", "algorithms", "datasets"]
