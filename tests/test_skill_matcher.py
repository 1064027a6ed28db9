import logging

import pytest

from talentscreen.errors import ConfigurationError
from talentscreen.matching import SkillMatcher, parse_skills
from talentscreen.matching.skill_matcher import RULE_ANY_WORD, RULE_FIRST_WORD, RULE_PHRASE
from talentscreen.models import SkillStatus


def test_parse_skills_normalises_and_drops_empty_entries():
    assert parse_skills(" Python, , SQL ,Docker,python") == ["python", "sql", "docker"]
    assert parse_skills(["React", " react ", "", "Go"]) == ["react", "go"]


def test_two_of_three_skills_requires_confirmation():
    matcher = SkillMatcher()
    analysis = matcher.analyze("Python, SQL, Docker", "Five years of Python and SQL.")

    assert analysis.matched_count == 2
    assert analysis.total_count == 3
    assert analysis.percent == 67
    assert analysis.strengths == ["python", "sql"]
    assert analysis.weaknesses == ["docker"]
    assert matcher.requires_confirmation(analysis)
    assert not matcher.auto_proceeds(analysis)


def test_match_rules_in_order_of_precision():
    matcher = SkillMatcher()
    assert matcher.match_rule("machine learning", "i do machine learning") == RULE_PHRASE
    assert matcher.match_rule("react native", "built apps in react") == RULE_FIRST_WORD
    assert matcher.match_rule("cloud data platforms", "managed data pipelines") == RULE_ANY_WORD
    assert matcher.match_rule("kubernetes", "managed data pipelines") is None


def test_short_first_word_falls_through_to_any_word():
    matcher = SkillMatcher()
    assert matcher.match_rule("ai ethics", "we said ai") == RULE_ANY_WORD
    assert matcher.match_rule("ui", "nothing relevant here") is None


def test_percent_rounds_half_up():
    skills = "python, rust, haskell, erlang, elixir, scala, kotlin, swift"
    analysis = SkillMatcher().analyze(skills, "python")
    assert analysis.percent == 13


def test_threshold_is_inclusive():
    skills = "alpha, bravo, charlie, delta, echo, foxtrot, golf, hotel, india, juliet"
    resume = "alpha bravo charlie delta echo foxtrot golf"
    matcher = SkillMatcher()
    analysis = matcher.analyze(skills, resume)

    assert analysis.percent == 70
    assert matcher.auto_proceeds(analysis)


def test_every_skill_is_classified_exactly_once(job, resume):
    analysis = SkillMatcher().analyze(job, resume)

    assert list(analysis.skills) == ["python", "sql", "docker"]
    assert set(analysis.strengths).isdisjoint(analysis.weaknesses)
    assert all(status is not SkillStatus.UNKNOWN for status in analysis.skills.values())
    assert analysis.matched_count == len(analysis.strengths)


def test_analysis_is_idempotent(job, resume):
    matcher = SkillMatcher()
    assert matcher.analyze(job, resume) == matcher.analyze(job, resume)


@pytest.mark.parametrize("skills", ["", " , ,", []])
def test_job_without_skills_is_rejected(skills):
    with pytest.raises(ConfigurationError):
        SkillMatcher().analyze(skills, "Python developer")


def test_empty_resume_matches_nothing():
    analysis = SkillMatcher().analyze("Python, SQL", "")
    assert analysis.percent == 0
    assert analysis.weaknesses == ["python", "sql"]


def test_match_decisions_are_traced(caplog):
    caplog.set_level(logging.DEBUG, logger="talentscreen.skill_matcher")
    SkillMatcher().analyze("Python, React Native, Docker", "python and react")

    messages = [r.getMessage() for r in caplog.records if r.name == "talentscreen.skill_matcher"]
    assert "Matched (phrase): python" in messages
    assert "Matched (first_word): react native" in messages
    assert "Not matched: docker" in messages
