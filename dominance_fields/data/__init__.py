"""
Decision-table facing layer: attribute descriptors and the evaluation parser.
"""

from .attribute import EvaluationAttribute
from .parser import EvaluationParser

__all__ = ["EvaluationAttribute", "EvaluationParser"]
