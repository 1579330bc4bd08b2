import threading

import pytest

from scorer.candidate import CandidateRecord, RankingOptions
from scorer.signals import Confidence
from scorer.summary import SummaryEnhancer, build_enhancement_prompt, generate_summary

STRONG = Confidence(level="High", label="Strong Match", score=80.0)
LONG_TEXT = "A seasoned engineer with a strong record of delivery. Match score 80/100 (High)."


def test_full_summary():
    candidate = CandidateRecord(
        name="Ada", title="Senior Software Engineer", company="Google", experience=8,
        experience_details=[{"company": "Amazon"}, {"company": "Amazon"}, {"company": "Meta"}],
    )
    summary = generate_summary(candidate, ["Python", "AWS", "Go", "SQL", "Docker"], "Senior", STRONG, 80)
    assert summary == (
        "8+ years of experience, currently as Senior Software Engineer at Google. "
        "Senior professional with deep industry knowledge. "
        "Past experience includes roles at Amazon and Meta among others. "
        "Key skills include Python, AWS, Go, SQL and more. "
        "Strong Match (80/100)."
    )


def test_single_employer_and_fractional_years():
    candidate = CandidateRecord(name="Ada", title="Analyst", experience=7.5, experience_details=[{"company": "Acme"}])
    summary = generate_summary(candidate, ["Excel"], "Senior", STRONG, 61)
    assert summary.startswith("7.5+ years of experience as Analyst.")
    assert "Past experience includes work at Acme." in summary
    assert "Key skills include Excel." in summary


def test_title_without_experience():
    candidate = CandidateRecord(name="Ada", title="Engineer", company="Acme")
    assert generate_summary(candidate, [], "Mid-Level", None, 40).startswith("Currently Engineer at Acme.")
    candidate = CandidateRecord(name="Ada", title="Engineer")
    assert generate_summary(candidate, [], "Mid-Level", None, 40) == (
        "Current role: Engineer. Mid-level professional with practical expertise. Candidate score: 40/100."
    )


def test_name_only_summary_includes_score():
    summary = generate_summary(CandidateRecord(name="Ada"), [], "Mid-Level", None, 0)
    assert summary == "Mid-level professional with practical expertise. Candidate score: 0/100."


class RecordingGenerator:
    def __init__(self, responses=None):
        self.prompts = []
        self.responses = responses

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.responses is None:
            return LONG_TEXT
        response = self.responses[len(self.prompts) - 1]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def ranked(engine, tech):
    names = ["A", "B", "C", "D", "E", "F", "G"]
    return [
        engine.enrich(CandidateRecord(name=n, title="Engineer", experience=i + 1), tech, "tech", RankingOptions())
        for i, n in enumerate(names)
    ]


def test_enhances_only_top_n(ranked):
    generator = RecordingGenerator()
    result = SummaryEnhancer(generator, top_n=5, delay_seconds=0).enhance(ranked, industry="tech")
    assert len(generator.prompts) == 5
    assert [c.name for c in result] == [c.name for c in ranked]
    assert all(c.summary == LONG_TEXT for c in result[:5])
    assert result[5].summary == ranked[5].summary
    assert result[6] is ranked[6]


def test_failures_keep_template_summary(ranked):
    generator = RecordingGenerator([RuntimeError("timeout"), "too short", LONG_TEXT])
    result = SummaryEnhancer(generator, top_n=3, delay_seconds=0).enhance(ranked)
    assert result[0].summary == ranked[0].summary
    assert result[1].summary == ranked[1].summary
    assert result[2].summary == LONG_TEXT


def test_missing_generator_is_noop(ranked):
    result = SummaryEnhancer(None).enhance(ranked)
    assert result == ranked


def test_pacing_between_calls(ranked, monkeypatch):
    sleeps = []
    monkeypatch.setattr("scorer.summary.time.sleep", sleeps.append)
    SummaryEnhancer(RecordingGenerator(), top_n=3, delay_seconds=1.0).enhance(ranked)
    assert sleeps == [1.0, 1.0]


def test_cancelled_pass_keeps_remaining(ranked):
    cancel = threading.Event()

    class CancellingGenerator(RecordingGenerator):
        def generate(self, prompt):
            cancel.set()
            return super().generate(prompt)

    generator = CancellingGenerator()
    result = SummaryEnhancer(generator, top_n=5, delay_seconds=0).enhance(ranked, cancel_event=cancel)
    assert len(generator.prompts) == 1
    assert result[0].summary == LONG_TEXT
    assert result[1].summary == ranked[1].summary


def test_prompt_context(ranked):
    prompt = build_enhancement_prompt(ranked[0], job_description="x" * 300)
    assert "Job Description: " + "x" * 200 + "..." in prompt
    assert "Name: A" in prompt
    prompt = build_enhancement_prompt(ranked[0], industry="finance")
    assert "Industry: finance" in prompt
