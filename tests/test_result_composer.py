import random
import re
from datetime import datetime

import pytest

from conftest import long_answer
from talentscreen.errors import InvalidAnswerError, NoAnswersError
from talentscreen.interview import AnswerScorer, ResultComposer
from talentscreen.interview.result_composer import (
    default_candidate_name,
    generate_result_id,
    redeem_weaknesses
)
from talentscreen.matching import SkillMatcher
from talentscreen.models import AssessmentStatus

ANSWER = long_answer("I built a reporting service in Python backed by SQL over 3 years.")


@pytest.fixture
def analysis(job, resume):
    return SkillMatcher().analyze(job, resume)


def _compose(analysis, answers, **kwargs):
    questions = [f"Question {i}?" for i in range(len(answers))]
    scores = AnswerScorer().score_answers(answers, analysis.strengths)
    return ResultComposer().compose(analysis, questions, answers, scores, **kwargs)


def test_strong_answers_get_selected(analysis):
    assert analysis.percent == 67

    result = _compose(analysis, [ANSWER] * 5, candidate_name="Jane Doe")

    assert [s.score for s in result.answer_scores] == [93] * 5
    assert result.answer_quality_percent == 93
    assert result.composite_score == 77
    assert result.status is AssessmentStatus.SELECTED
    assert result.selected
    assert result.strengths == ("python", "sql")
    assert result.weaknesses == ("docker",)
    assert result.candidate_name == "Jane Doe"


def test_weakness_redeemed_by_any_answer(analysis):
    answers = ["We shipped every service in Docker containers.", "short", "short"]
    result = _compose(analysis, answers)

    assert result.strengths == ("python", "sql", "docker")
    assert result.weaknesses == ()
    assert result.resume_match_percent == 67


def test_redemption_does_not_touch_input(analysis):
    redeemed = redeem_weaknesses(analysis, ["docker everywhere"])
    assert redeemed.strengths == ["python", "sql", "docker"]
    assert analysis.weaknesses == ["docker"]


def test_selection_threshold_is_strict():
    composer = ResultComposer()
    assert composer.status_for(70) is AssessmentStatus.REJECTED
    assert composer.status_for(71) is AssessmentStatus.SELECTED


def test_composite_rounds_half_up():
    composer = ResultComposer()
    assert composer.composite(67, 93) == 77
    assert composer.composite(0, 0) == 0
    assert composer.composite(100, 100) == 100
    # 0.6 * 55 + 0.4 * 50 = 53.0 ; 0.6 * 50 + 0.4 * 55 = 52.0
    assert composer.composite(55, 50) == 53
    assert composer.composite(50, 55) == 52


def test_answer_quality_rounds_mean_half_up(analysis):
    scorer = AnswerScorer()
    scores = scorer.score_answers(["i like cats", " ".join(["word"] * 30)], analysis.strengths)

    assert [s.score for s in scores] == [15, 30]
    # mean 22.5
    assert ResultComposer().answer_quality(scores) == 23


def test_no_answers_raises(analysis):
    with pytest.raises(NoAnswersError):
        ResultComposer().compose(analysis, [], [], [])
    with pytest.raises(NoAnswersError):
        ResultComposer().answer_quality([])


def test_mismatched_lengths_raise(analysis):
    scores = AnswerScorer().score_answers(["a", "b"], analysis.strengths)
    with pytest.raises(InvalidAnswerError):
        ResultComposer().compose(analysis, ["Q?"], ["a", "b"], scores)


def test_defaults_for_name_id_and_timestamp(analysis):
    now = datetime(2024, 5, 1, 9, 30, 0)
    result = _compose(analysis, ["python"], timestamp=now)

    assert result.candidate_name == "Candidate 2024-05-01 09:30:00"
    assert result.timestamp == "2024-05-01T09:30:00"
    assert re.fullmatch(r"id_[a-z0-9]{7}", result.id)


def test_generated_ids_are_short_and_seedable():
    assert generate_result_id(random.Random(5)) == generate_result_id(random.Random(5))
    assert default_candidate_name(datetime(2020, 1, 2, 3, 4, 5)) == "Candidate 2020-01-02 03:04:05"


def test_to_dict_serialises_status(analysis):
    data = _compose(analysis, [ANSWER]).to_dict()
    assert data["status"] == "Selected"
    assert data["answer_scores"][0]["score"] == 93
