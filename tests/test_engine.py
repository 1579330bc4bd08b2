import pytest

from config import ScoreCaps
from scorer.candidate import CandidateRecord, RankingOptions


def make(**fields):
    return CandidateRecord(name="Test Candidate", **fields)


def score(engine, profile, candidate, **options):
    extractor = engine.extractor
    skills = extractor.normalize_skills(candidate.skills, candidate.title, profile)
    completeness = extractor.calculate_completeness(candidate)
    return engine.score_candidate(candidate, skills, completeness, profile, RankingOptions(**options))


@pytest.fixture
def senior_engineer():
    return make(
        title="Senior Software Engineer", company="Google", experience=8,
        skills=["Python", "AWS"], email="a@b.com",
    )


class TestReferenceCandidate:
    def test_sub_scores(self, engine, tech, senior_engineer):
        details = score(
            engine, tech, senior_engineer,
            required_skills=["Python"], required_experience=5,
        )
        assert details.experience_score == 21
        assert details.title_score == 15
        assert details.company_score == 15
        assert details.skills_score == 17
        assert details.job_fit_score == 8
        assert details.contact_info_score == 5
        assert details.data_quality_score == 8
        assert details.score == 89

    def test_full_data_gives_high_confidence(self, engine, tech):
        candidate = make(
            title="Senior Software Engineer", company="Google", experience=8,
            skills=["Python", "AWS"], email="a@b.com", location="Remote",
            linkedin="https://linkedin.com/in/someone",
            experience_details=[{"company": "Amazon"}],
        )
        ranked = engine.enrich(
            candidate, tech, "tech",
            RankingOptions(required_skills=["Python"], required_experience=5),
        )
        assert ranked.data_completeness == 100
        assert ranked.score == 93
        assert ranked.confidence.level in ("High", "Very High")


class TestExperience:
    def test_capped(self, engine, catalog):
        details = score(engine, catalog.get("legal"), make(experience=10), required_experience=5)
        assert details.experience_score == 25

    def test_bonus_needs_requirement(self, engine, tech):
        assert score(engine, tech, make(experience=4)).experience_score == 8
        assert score(engine, tech, make(experience=4), required_experience=3).experience_score == 13
        assert score(engine, tech, make(experience=2), required_experience=3).experience_score == 4

    def test_multiplier_rounding(self, engine, catalog):
        # 6 * 0.8 = 4.8
        assert score(engine, catalog.get("sales"), make(experience=3)).experience_score == 5

    def test_monotonic(self, engine, catalog):
        for key in catalog.keys():
            profile = catalog.get(key)
            previous = 0
            for years in [0, 0.5, 1, 2, 3, 4, 5, 7.5, 10, 15, 30]:
                current = score(engine, profile, make(experience=years), required_experience=5).experience_score
                assert current >= previous
                previous = current


class TestTitle:
    def test_vocabulary_bonuses(self, engine, tech):
        assert score(engine, tech, make(title="Senior Engineer")).title_score == 15
        assert score(engine, tech, make(title="Engineering Manager")).title_score == 13
        assert score(engine, tech, make(title="Data Analyst")).title_score == 10
        assert score(engine, tech, make(title="Junior Developer")).title_score == 8
        assert score(engine, tech, make(title="Developer")).title_score == 5
        assert score(engine, tech, make()).title_score == 0

    def test_job_description_relevance(self, engine, tech):
        jd = "We need a python engineer with 5+ years of experience"
        # relevance 2/6 -> round(1.67) = 2
        assert score(engine, tech, make(title="Python Engineer"), job_description=jd).title_score == 7


class TestCompany:
    def test_prestige_language(self, engine, tech):
        assert score(engine, tech, make(company="Global Leading Corp")).company_score == 8

    def test_capped(self, engine, tech):
        assert score(engine, tech, make(company="Google International")).company_score == 15

    def test_unknown(self, engine, tech):
        assert score(engine, tech, make(company="Acme")).company_score == 5
        assert score(engine, tech, make()).company_score == 0


class TestSkills:
    def test_industry_overlap(self, engine, tech):
        details = score(engine, tech, make(skills=["Python", "AWS", "Cooking"]))
        assert details.skills_score == 7

    def test_partial_required_match(self, engine, tech):
        details = score(engine, tech, make(skills=["Python", "Golang"]), required_skills=["Python", "Go", "Rust"])
        assert details.skills_score == 12

    def test_no_skills(self, engine, tech):
        assert score(engine, tech, make(), required_skills=["Python"]).skills_score == 0


class TestJobFit:
    def test_blended_relevance(self, engine, tech):
        jd = "We need a python engineer with 5+ years of experience"
        candidate = make(title="Python Engineer", experience=6, skills=["Python", "Kotlin"])
        # skills become Python, Kotlin, backend
        # 0.4 * 1/3 + 0.4 * 1/3 + 0.2 * 1.0 = 0.4667 -> 7
        assert score(engine, tech, candidate, job_description=jd).job_fit_score == 7

    def test_experience_heuristic_without_requirement(self, engine, tech):
        candidate = make(experience=2)
        assert engine.job_relevance(candidate, [], "Looking for a developer") == pytest.approx(0.06)
        candidate = make(experience=5)
        assert engine.job_relevance(candidate, [], "Looking for a developer") == pytest.approx(0.14)

    def test_without_job_description_uses_completeness(self, engine, tech):
        candidate = make(title="Engineer", company="Acme")
        assert score(engine, tech, candidate).job_fit_score == 4


class TestContact:
    def test_email_and_connection(self, engine, tech):
        assert score(engine, tech, make(email="nope")).contact_info_score == 0
        assert score(engine, tech, make(email="a@b.com", connection_degree="1st")).contact_info_score == 7
        assert score(engine, tech, make(connection_degree="2nd")).contact_info_score == 0


class TestBounds:
    CANDIDATES = [
        {},
        {"title": "Chief Executive Officer", "company": "Google Global Leading", "experience": 40,
         "skills": ["Python", "Java", "Go", "AWS", "SQL", "React", "Docker"],
         "email": "ceo@x.com", "connection_degree": "1st", "linkedin": "x", "location": "Remote",
         "experience_details": [{"company": "Meta"}]},
        {"title": "Intern", "experience": 0.2},
        {"title": "Senior Principal Staff Lead Architect", "experience": 100, "skills": ["AI"] * 3},
    ]

    @pytest.mark.parametrize("fields", CANDIDATES)
    @pytest.mark.parametrize("key", ["tech", "legal", "sales"])
    def test_sub_scores_within_caps(self, engine, catalog, fields, key):
        caps = ScoreCaps()
        details = score(
            engine, catalog.get(key), make(**fields),
            job_description="Python engineer, 5+ years of experience",
            required_skills=["Python"], required_experience=3,
        )
        assert 0 <= details.experience_score <= caps.experience
        assert 0 <= details.title_score <= caps.title
        assert 0 <= details.company_score <= caps.company
        assert 0 <= details.skills_score <= caps.skills
        assert 0 <= details.job_fit_score <= caps.job_fit
        assert 0 <= details.contact_info_score <= caps.contact_info
        assert 0 <= details.data_quality_score <= caps.data_quality
        assert 0 <= details.score <= 100
        assert details.score == min(details.subtotal(), 100)


class TestConfidence:
    @pytest.mark.parametrize("total,completeness,expected", [
        (100, 90, "Very High"),
        (80, 100, "High"),
        (50, 100, "Medium"),
        (30, 100, "Low"),
        (24, 100, "Low"),
        (95, 0, "Low"),
    ])
    def test_tiers(self, engine, total, completeness, expected):
        assert engine.determine_confidence(total, completeness).level == expected

    def test_adjusted_score_and_label(self, engine):
        confidence = engine.determine_confidence(89, 75)
        assert confidence.score == pytest.approx(66.75)
        assert confidence.level == "Medium"
        assert confidence.label == "Potential Match"


class TestEnrich:
    def test_name_only(self, engine, tech):
        ranked = engine.enrich(make(), tech, "tech", RankingOptions())
        assert ranked.data_completeness == 0
        assert ranked.seniority_level == "Mid-Level"
        assert ranked.confidence.level == "Low"
        assert ranked.score == 0
        assert "0/100" in ranked.summary

    def test_input_not_mutated(self, engine, tech, senior_engineer):
        before = senior_engineer.model_dump()
        engine.enrich(senior_engineer, tech, "tech", RankingOptions())
        assert senior_engineer.model_dump() == before
