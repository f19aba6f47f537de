"""Tests for GapAnalyzer and the learning catalogue."""

import pytest
from pydantic import ValidationError

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.gap_report import (
    GapReport,
    LearningResource,
    MatchStatus,
    ResourceType,
    SkillPriority,
)
from models.schemas.job_requirement import JobRequirement
from models.schemas.skill import SkillToken
from services.matching.gap_analyzer import GapAnalyzer, match_percentage
from services.matching.learning_catalog import LearningCatalog
from services.skill_extractor import SkillExtractor


def _make_candidate(**overrides):
    defaults = dict(
        candidate_id="c1",
        skills=["Java", "Spring Boot", "PostgreSQL"],
        years_experience=3,
        location="Bengaluru",
    )
    defaults.update(overrides)
    return CandidateProfile.model_validate(defaults)


def _make_job(**overrides):
    defaults = dict(
        job_id="j1",
        title="Software Engineer",
        company="Acme",
        description="java, react, aws",
        experience_level="Senior",
        location="Remote",
    )
    defaults.update(overrides)
    return JobRequirement.model_validate(defaults)


def _gap(report, name):
    return next(g for g in report.missing_skills if g.skill.name == name)


class TestGapScenario:
    def setup_method(self):
        self.report = GapAnalyzer().analyze(_make_candidate(), _make_job())

    def test_match_percentage(self):
        assert self.report.match_percentage == 33

    def test_matching_skills(self):
        assert [m.skill.name for m in self.report.matching_skills] == ["java"]
        match = self.report.matching_skills[0]
        assert match.status is MatchStatus.MATCHES
        assert match.candidate_level == "Advanced"
        assert match.required_level == "Advanced"

    def test_missing_skills_are_high_priority(self):
        assert [g.skill.name for g in self.report.missing_skills] == ["react", "aws"]
        assert _gap(self.report, "react").priority is SkillPriority.HIGH
        assert _gap(self.report, "aws").priority is SkillPriority.HIGH

    def test_recommendations_start_with_stretch_message(self):
        recs = self.report.recommendations
        assert "may be challenging" in recs[0]
        assert recs[-2] == "💪 Your strengths: Java"
        assert recs[-1] == "🎯 Priority skills to learn: React, Aws"

    def test_job_summary(self):
        assert self.report.job.job_id == "j1"
        assert self.report.job.company == "Acme"
        assert self.report.job.experience_level == "Senior"
        assert self.report.job.location == "Remote"
        assert [s.name for s in self.report.job.required_skills] == ["java", "react", "aws"]

    def test_curated_resources_and_time(self):
        aws = _gap(self.report, "aws")
        assert aws.estimated_learning_time == "4-6 weeks"
        assert [r.type for r in aws.learning_resources] == [ResourceType.COURSE, ResourceType.DOCUMENTATION]


class TestRequiredSkills:
    def test_partition_is_exact(self):
        job = _make_job(description="java spring boot react aws docker kubernetes git")
        report = GapAnalyzer().analyze(_make_candidate(), job)
        required = set(SkillExtractor().extract(job.description))
        matched = {m.skill for m in report.matching_skills}
        missing = {g.skill for g in report.missing_skills}
        assert matched | missing == required
        assert not matched & missing
        assert len(report.matching_skills) + len(report.missing_skills) == len(required)

    def test_fallback_when_description_has_no_skills(self):
        job = _make_job(description="Help our platform team with documentation.")
        report = GapAnalyzer().analyze(_make_candidate(), job)
        assert [m.skill.name for m in report.matching_skills] == ["java", "spring boot"]
        assert [g.skill.name for g in report.missing_skills] == ["aws", "docker"]
        assert report.match_percentage == 50
        assert [s.name for s in report.job.required_skills] == ["java", "spring boot", "aws", "docker"]

    def test_fallback_fully_matched_is_full_percentage(self):
        job = _make_job(description="")
        candidate = _make_candidate(skills=["java", "spring boot", "aws", "docker"])
        assert GapAnalyzer().analyze(candidate, job).match_percentage == 100

    def test_custom_fallback(self):
        analyzer = GapAnalyzer(fallback_skills=["Go"])
        report = analyzer.analyze(_make_candidate(), _make_job(description=""))
        assert [g.skill.name for g in report.missing_skills] == ["go"]
        assert report.match_percentage == 0

    def test_disabled_fallback_is_vacuous_match(self):
        analyzer = GapAnalyzer(fallback_skills=[])
        report = analyzer.analyze(_make_candidate(), _make_job(description=""))
        assert report.match_percentage == 100
        assert report.matching_skills == ()
        assert report.missing_skills == ()
        assert "Excellent match" in report.recommendations[0]

    def test_custom_extractor(self):
        analyzer = GapAnalyzer(extractor=SkillExtractor(vocabulary=["rust"]))
        report = analyzer.analyze(_make_candidate(), _make_job(description="Rust and Java"))
        assert [g.skill.name for g in report.missing_skills] == ["rust"]


class TestPriority:
    def setup_method(self):
        self.analyzer = GapAnalyzer()

    def test_title_match_is_high(self):
        job = _make_job(title="Kubernetes Platform Engineer", description="kubernetes")
        assert self.analyzer.priority_for(SkillToken.of("kubernetes"), job) is SkillPriority.HIGH

    def test_critical_skill_not_in_title_is_high(self):
        job = _make_job(title="Backend Engineer", description="python once")
        assert "python" not in job.title.lower()
        assert self.analyzer.priority_for(SkillToken.of("python"), job) is SkillPriority.HIGH

    def test_critical_rule_precedes_mentions(self):
        job = _make_job(title="Cloud Engineer", description="aws lambda, aws s3, aws iam")
        assert self.analyzer.priority_for(SkillToken.of("aws"), job) is SkillPriority.HIGH

    def test_repeated_mentions_are_medium(self):
        job = _make_job(description="docker images, docker compose, docker swarm")
        assert self.analyzer.priority_for(SkillToken.of("docker"), job) is SkillPriority.MEDIUM

    def test_two_mentions_are_low(self):
        job = _make_job(description="Docker images and Docker compose")
        assert self.analyzer.priority_for(SkillToken.of("docker"), job) is SkillPriority.LOW

    def test_title_rule_precedes_mentions(self):
        job = _make_job(title="Docker Specialist", description="docker docker docker")
        assert self.analyzer.priority_for(SkillToken.of("docker"), job) is SkillPriority.HIGH

    def test_custom_critical_list(self):
        analyzer = GapAnalyzer(critical_skills=["graphql"])
        job = _make_job(description="graphql")
        assert analyzer.priority_for(SkillToken.of("graphql"), job) is SkillPriority.HIGH
        assert analyzer.priority_for(SkillToken.of("aws"), job) is SkillPriority.LOW


class TestLearningCatalog:
    def test_generic_fallback_resource(self):
        (resource,) = LearningCatalog().resources_for(SkillToken.of("spring boot"))
        assert resource.title == "Spring Boot Tutorial on YouTube"
        assert resource.url == "https://www.youtube.com/results?search_query=Spring+Boot+tutorial"
        assert resource.duration == "Varies"
        assert resource.type is ResourceType.VIDEO

    def test_default_learning_time(self):
        assert LearningCatalog().learning_time_for(SkillToken.of("redis")) == "2-4 weeks"
        assert LearningCatalog().learning_time_for(SkillToken.of("Python")) == "6-8 weeks"

    def test_custom_tables(self):
        book = LearningResource(title="The Go Book", url="https://example.org/go", duration="300 pages",
                                type=ResourceType.BOOK)
        catalog = LearningCatalog(resources={"Go": [book]}, learning_times={"go": "3 weeks"},
                                  default_learning_time="unknown")
        assert catalog.resources_for(SkillToken.of("go")) == (book,)
        assert catalog.learning_time_for(SkillToken.of("go")) == "3 weeks"
        assert catalog.learning_time_for(SkillToken.of("aws")) == "unknown"
        # curated defaults are replaced, not merged
        assert catalog.resources_for(SkillToken.of("aws"))[0].type is ResourceType.VIDEO


class TestMatchPercentage:
    @pytest.mark.parametrize(
        "matched,required,expected",
        [(0, 0, 100), (0, 3, 0), (1, 3, 33), (2, 3, 67), (1, 8, 13), (3, 4, 75), (4, 4, 100)],
    )
    def test_rounding(self, matched, required, expected):
        assert match_percentage(matched, required) == expected


class TestReportProperties:
    def test_idempotent(self):
        analyzer = GapAnalyzer()
        candidate, job = _make_candidate(), _make_job()
        assert analyzer.analyze(candidate, job) == analyzer.analyze(candidate, job)

    def test_report_is_immutable(self):
        report = GapAnalyzer().analyze(_make_candidate(), _make_job())
        assert isinstance(report, GapReport)
        with pytest.raises(ValidationError):
            report.match_percentage = 99

    def test_serializes_skill_names(self):
        data = GapAnalyzer().analyze(_make_candidate(), _make_job()).model_dump(mode="json")
        assert data["matching_skills"][0]["skill"] == "Java"
        assert data["missing_skills"][0]["priority"] == "HIGH"
