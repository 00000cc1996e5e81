"""
Suggestion ranking for queries without an exact dictionary hit.

Every entry of the expanded corpus is scored against the query; the best
match per distinct translation is kept and the list is cut to ``top_n``.
Ranking runs over the corpus rather than the exact index, so synonyms that
lost an exact-index key to a later entry still take part.
"""

from __future__ import annotations

from typing import Iterable

from tlahtolli.models import DictionaryEntry, Direction, Suggestion, confidence_label
from tlahtolli.refine.scoring import similarity_score
from tlahtolli.utils import normalize_text


def score_corpus(
    query: str,
    direction: Direction,
    corpus: Iterable[DictionaryEntry],
    min_score: float = 0.2,
) -> list[Suggestion]:
    """Score every corpus entry against ``query``, keeping those above ``min_score``.

    Results are in corpus order.
    """
    query = normalize_text(query)
    scored = []
    for entry in corpus:
        source = entry.source(direction)
        score = similarity_score(query, source)
        if score > min_score:
            scored.append(Suggestion(
                translation=entry.target(direction),
                matched_source=source,
                score=score,
                confidence=confidence_label(score),
            ))
    return scored


def rank_suggestions(
    query: str,
    direction: Direction | str,
    corpus: Iterable[DictionaryEntry],
    top_n: int = 5,
    min_score: float = 0.2,
) -> list[Suggestion]:
    """Return the ``top_n`` best suggestions for ``query``.

    Args:
        query: Text typed by the user
        direction: Translation direction (decides which entry side is compared)
        corpus: Expanded dictionary entries
        top_n: Maximum number of suggestions
        min_score: Scores must be strictly greater than this

    Returns:
        Suggestions sorted by descending score, one per distinct translation.
        Ties keep corpus order.
    """
    direction = Direction.parse(direction)
    scored = score_corpus(query, direction, corpus, min_score)
    scored.sort(key=lambda s: s.score, reverse=True)

    best: list[Suggestion] = []
    seen: set[str] = set()
    for suggestion in scored:
        if len(best) >= top_n:
            break
        if suggestion.translation in seen:
            continue
        seen.add(suggestion.translation)
        best.append(suggestion)
    return best
