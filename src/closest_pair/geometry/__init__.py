from .euclidean import euclidean_distance, pairwise_euclidean
from .point import Point, as_point_array

__all__ = [
    "Point",
    "as_point_array",
    "euclidean_distance",
    "pairwise_euclidean",
]
