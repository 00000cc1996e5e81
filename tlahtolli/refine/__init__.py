"""
Refinement module: similarity scoring and suggestion ranking.
"""

from tlahtolli.refine.scoring import similarity_score
from tlahtolli.refine.rerank import rank_suggestions, score_corpus

__all__ = [
    "similarity_score",
    "rank_suggestions",
    "score_corpus",
]
