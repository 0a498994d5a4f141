"""Fuzzy skill matching and TF-IDF text relevance for job-candidate scoring."""

import logging
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np
from rapidfuzz.distance import JaroWinkler
from sklearn.feature_extraction.text import CountVectorizer

from services.skill_taxonomy import ExpandedSkills, normalize

logger = logging.getLogger(__name__)

# Jaro-Winkler similarity at or above this counts as a match
MATCH_THRESHOLD = 0.85
SOFT_SKILL_WEIGHT = 0.5
TITLE_BOOST_WEIGHT = 0.3
TEXT_RELEVANCE_WEIGHT = 0.1

# Short function-word list; domain words like "full", "front", "back" and
# "system" stay scorable.
STOP_WORDS: frozenset[str] = frozenset(
    """
    about above after again all also am an and another any are as at
    be because been before being below between both but by
    came can cannot come could did do does doing during each few for from further
    get got has had he have her here him himself his how
    if in into is it its itself like make many me might more most much must my myself
    never now of on only or other our ours ourselves out over own
    said same see should since so some still such
    take than that the their theirs them themselves then there these they this those
    through to too under until up very was way we well were what where when which
    while who whom with would why you your yours yourself
    """.split()
) | frozenset("abcdefghijklmnopqrstuvwxyz") | frozenset("123456789") | frozenset({"$", "_"})


def skill_similarity(a: str, b: str) -> float:
    """Jaro-Winkler similarity (0.0-1.0) of two normalized tokens.

    The Winkler prefix bonus (up to 4 chars, weight 0.1) only applies
    above a Jaro score of 0.7.
    """
    if a == b:
        return 1.0
    return JaroWinkler.similarity(a, b, prefix_weight=0.1)


class TermWeighter:
    """Single-document TF-IDF table built from a subject's free text.

    Weights use raw term counts and idf = 1 + ln(N / (1 + df)) with the
    text as the only document, so every term of the text gets the same
    idf and absent terms weigh 0.
    """

    def __init__(self, text: str) -> None:
        vectorizer = CountVectorizer(stop_words=sorted(STOP_WORDS))
        self._analyzer = vectorizer.build_analyzer()
        self._weights: dict[str, float] = {}

        if not text.strip():
            return
        try:
            counts = vectorizer.fit_transform([text.lower()])
        except ValueError:
            # Only stop words or no tokens at all
            return

        n_docs = counts.shape[0]
        tf = counts.toarray()[0]
        df = np.asarray((counts > 0).sum(axis=0)).ravel()
        idf = 1.0 + np.log(n_docs / (1.0 + df))
        for term, idx in vectorizer.vocabulary_.items():
            self._weights[term] = float(tf[idx] * idf[idx])

    def __len__(self) -> int:
        return len(self._weights)

    def weight(self, word: str) -> float:
        """Summed TF-IDF weight of the tokens in word."""
        return sum(self._weights.get(token, 0.0) for token in self._analyzer(word))


def text_relevance(
    subject_text: str | None,
    target_text: str | None,
    weighter: TermWeighter | None = None,
) -> float:
    """Score target_text words against subject_text.

    Every whitespace-separated word of the target contributes its weight,
    repeats included. Pass a prebuilt weighter for subject_text to reuse it
    across targets.
    """
    if not subject_text or not subject_text.strip():
        return 0.0
    if not target_text or not target_text.strip():
        return 0.0

    if weighter is None:
        weighter = TermWeighter(subject_text)
    if not len(weighter):
        return 0.0

    total = 0.0
    for word in target_text.lower().split():
        measure = weighter.weight(word)
        if measure > 0:
            total += measure * TEXT_RELEVANCE_WEIGHT
    return total


@dataclass
class MatchScore:
    score: float = 0.0
    technical_score: float = 0.0
    technical_matches: int = 0
    matched: list[str] = field(default_factory=list)  # requirement tokens, insertion order


def _requirement_tokens(requirements: Sequence[str] | None) -> list[str]:
    return [r for r in (normalize(req) for req in (requirements or [])) if r]


def score_match(
    skills: ExpandedSkills,
    requirements: Sequence[str] | None,
    title: str | None,
    subject_text: str | None,
    target_text: str | None,
    weighter: TermWeighter | None = None,
) -> MatchScore:
    """Score one subject's skills and text against one target.

    1. Greedy skill -> requirement matching: skills outer loop, requirements
       inner loop, first unmatched requirement over MATCH_THRESHOLD wins and
       each skill matches at most once.
    2. Title boost: every (title word, skill) pair over MATCH_THRESHOLD adds
       similarity * TITLE_BOOST_WEIGHT. Pairs are not deduplicated.
    3. Text relevance of target_text against subject_text, using weighter
       when given.
    """
    result = MatchScore()
    reqs = _requirement_tokens(requirements)
    matched: set[str] = set()

    for skill in skills:
        for req in reqs:
            if req in matched:
                continue
            similarity = skill_similarity(skill, req)
            if similarity >= MATCH_THRESHOLD:
                soft = skills.is_soft(skill)
                result.score += similarity * (SOFT_SKILL_WEIGHT if soft else 1.0)
                if not soft:
                    result.technical_score += similarity
                    result.technical_matches += 1
                matched.add(req)
                result.matched.append(req)
                break

    if title:
        for word in normalize(title).split():
            for skill in skills:
                similarity = skill_similarity(skill, word)
                if similarity >= MATCH_THRESHOLD:
                    result.score += similarity * TITLE_BOOST_WEIGHT

    result.score += text_relevance(subject_text, target_text, weighter)
    return result
