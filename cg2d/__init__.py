"""
cg2d — мінімальна бібліотека для 2D обходу точок навколо центроїда.
Зараз: покроковий самокоригувальний обхід (IncrementalHull2D) + знімки кадрів.
"""

__version__ = "0.1.0"

from cg2d.geom import Pt, EPS, centroid, same_point, unique_points
from cg2d.predicates import orient2d, oriented_angle
from cg2d.pointset import PointSet, generate_points, parse_points_from_text
from cg2d.hull import (
    IncrementalHull2D, StepResult,
    HullError, NoCandidateError, IterationLimitExceeded,
)

__all__ = [
    "Pt", "EPS", "centroid", "same_point", "unique_points",
    "orient2d", "oriented_angle",
    "PointSet", "generate_points", "parse_points_from_text",
    "IncrementalHull2D", "StepResult",
    "HullError", "NoCandidateError", "IterationLimitExceeded",
    "__version__",
]
