"""Vocabulary-based skill extraction and the shared skill-matching primitive.

Matching is a plain substring test on lower-cased text, so a phrase is
found anywhere it occurs, including inside longer words: "java" matches
"javascript" and "git" matches "digital". This over-matching is known and
kept as-is; both the recommendation scorer and the gap analyzer depend on
the same behaviour.
"""

import logging
from collections.abc import Iterable, Sequence

from models.schemas.skill import SkillToken, normalize_skill

logger = logging.getLogger(__name__)

# Ordered: extraction returns skills in this order.
DEFAULT_VOCABULARY: tuple[str, ...] = (
    # Languages
    "java", "python", "javascript",
    # Frontend
    "react", "angular", "vue",
    # Backend
    "spring boot", "spring", "node.js", "express",
    # Cloud & DevOps
    "aws", "azure", "gcp", "docker", "kubernetes",
    # Databases
    "postgresql", "mysql", "mongodb", "redis",
    # Tooling & practices
    "git", "jenkins", "ci/cd", "microservices",
    "rest api", "graphql", "typescript",
)


class SkillExtractor:
    """Finds known skill phrases in free text.

    Holds no state beyond its vocabulary, so one instance can be shared
    across threads.
    """

    def __init__(self, vocabulary: Sequence[str] = DEFAULT_VOCABULARY) -> None:
        phrases = [normalize_skill(p) for p in vocabulary]
        self._vocabulary: tuple[str, ...] = tuple(dict.fromkeys(p for p in phrases if p))

    @property
    def vocabulary(self) -> tuple[str, ...]:
        return self._vocabulary

    def extract(self, text: str | None) -> tuple[SkillToken, ...]:
        """Return the vocabulary phrases found in ``text``, in vocabulary order.

        Always returns a tuple; empty when nothing matches.
        """
        if not text:
            return ()
        text_lower = text.lower()
        found = tuple(
            SkillToken(name=phrase)
            for phrase in self._vocabulary
            if phrase in text_lower
        )
        logger.debug("Extracted %d skills from %d chars of text", len(found), len(text))
        return found


def partition_skills(
    required: Sequence[SkillToken],
    candidate_skills: Iterable[SkillToken],
) -> tuple[list[SkillToken], list[SkillToken]]:
    """Split required skills into (matched, missing), keeping required order.

    Comparison is exact on the canonical lower-case name.
    """
    have = set(candidate_skills)
    matched: list[SkillToken] = []
    missing: list[SkillToken] = []
    for skill in dict.fromkeys(required):
        if skill in have:
            matched.append(skill)
        else:
            missing.append(skill)
    return matched, missing
