"""Curated learning resources and learning-time estimates per skill."""

from collections.abc import Mapping, Sequence
from urllib.parse import quote_plus

from models.schemas.gap_report import LearningResource, ResourceType
from models.schemas.skill import SkillToken

DEFAULT_LEARNING_TIME = "2-4 weeks"
VIDEO_SEARCH_URL = "https://www.youtube.com/results?search_query="

DEFAULT_RESOURCES: dict[str, tuple[LearningResource, ...]] = {
    "aws": (
        LearningResource(
            title="AWS Certified Solutions Architect Course",
            url="https://www.udemy.com/course/aws-certified-solutions-architect-associate/",
            duration="24 hours",
            type=ResourceType.COURSE,
        ),
        LearningResource(
            title="AWS Official Documentation",
            url="https://docs.aws.amazon.com/",
            duration="Self-paced",
            type=ResourceType.DOCUMENTATION,
        ),
    ),
    "docker": (
        LearningResource(
            title="Docker Crash Course",
            url="https://www.youtube.com/watch?v=pg19Z8LL06w",
            duration="4 hours",
            type=ResourceType.VIDEO,
        ),
        LearningResource(
            title="Docker Official Docs",
            url="https://docs.docker.com/",
            duration="Self-paced",
            type=ResourceType.DOCUMENTATION,
        ),
    ),
    "kubernetes": (
        LearningResource(
            title="Kubernetes for Beginners",
            url="https://www.udemy.com/course/learn-kubernetes/",
            duration="8 hours",
            type=ResourceType.COURSE,
        ),
        LearningResource(
            title="Kubernetes Official Tutorial",
            url="https://kubernetes.io/docs/tutorials/",
            duration="Self-paced",
            type=ResourceType.TUTORIAL,
        ),
    ),
    "react": (
        LearningResource(
            title="React - The Complete Guide",
            url="https://www.udemy.com/course/react-the-complete-guide/",
            duration="40 hours",
            type=ResourceType.COURSE,
        ),
        LearningResource(
            title="Official React Documentation",
            url="https://react.dev/",
            duration="Self-paced",
            type=ResourceType.DOCUMENTATION,
        ),
    ),
    "python": (
        LearningResource(
            title="Python for Everybody",
            url="https://www.coursera.org/specializations/python",
            duration="32 hours",
            type=ResourceType.COURSE,
        ),
    ),
}

DEFAULT_LEARNING_TIMES: dict[str, str] = {
    "aws": "4-6 weeks",
    "docker": "1-2 weeks",
    "kubernetes": "3-4 weeks",
    "react": "4-6 weeks",
    "angular": "4-6 weeks",
    "python": "6-8 weeks",
    "microservices": "3-4 weeks",
    "graphql": "2-3 weeks",
}


class LearningCatalog:
    """Skill -> resources and skill -> time lookups with generic fallbacks.

    Keys are canonical (lower-case) skill names.
    """

    def __init__(
        self,
        resources: Mapping[str, Sequence[LearningResource]] | None = None,
        learning_times: Mapping[str, str] | None = None,
        default_learning_time: str = DEFAULT_LEARNING_TIME,
    ) -> None:
        source = DEFAULT_RESOURCES if resources is None else resources
        self._resources = {k.lower(): tuple(v) for k, v in source.items()}
        times = DEFAULT_LEARNING_TIMES if learning_times is None else learning_times
        self._learning_times = {k.lower(): v for k, v in times.items()}
        self._default_learning_time = default_learning_time

    def resources_for(self, skill: SkillToken) -> tuple[LearningResource, ...]:
        """Curated resources, or a single video search when none are curated."""
        curated = self._resources.get(skill.name)
        if curated:
            return curated
        return (
            LearningResource(
                title=f"{skill.display} Tutorial on YouTube",
                url=f"{VIDEO_SEARCH_URL}{quote_plus(skill.display)}+tutorial",
                duration="Varies",
                type=ResourceType.VIDEO,
            ),
        )

    def learning_time_for(self, skill: SkillToken) -> str:
        return self._learning_times.get(skill.name, self._default_learning_time)
