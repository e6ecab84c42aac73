from .io import read_points, write_points
from .synthetic import GENERATORS, generate_points

__all__ = ["GENERATORS", "generate_points", "read_points", "write_points"]
