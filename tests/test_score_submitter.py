from unittest.mock import MagicMock, patch

import pytest
import requests

from talentscreen.errors import PersistenceError
from talentscreen.persistence import ScoreSubmitter

POST = "talentscreen.persistence.score_submitter.requests.post"


def _response(status_code):
    response = MagicMock()
    response.ok = 200 <= status_code < 300
    response.status_code = status_code
    return response


def test_submit_posts_score_with_session_cookies():
    submitter = ScoreSubmitter(url="http://scores.test/save-score", cookies={"session": "abc"})
    with patch(POST, return_value=_response(200)) as post:
        submitter.submit_score(77)

    args, kwargs = post.call_args
    assert args == ("http://scores.test/save-score",)
    assert kwargs["json"] == {"score": 77}
    assert kwargs["cookies"] == {"session": "abc"}


def test_rejected_submission_keeps_score():
    with patch(POST, return_value=_response(500)):
        with pytest.raises(PersistenceError) as exc_info:
            ScoreSubmitter().submit_score(64)

    assert exc_info.value.score == 64
    assert exc_info.value.status_code == 500


def test_network_failure_is_not_retried():
    with patch(POST, side_effect=requests.ConnectionError("refused")) as post:
        with pytest.raises(PersistenceError) as exc_info:
            ScoreSubmitter().submit_score(50)

    assert post.call_count == 1
    assert exc_info.value.score == 50


@pytest.mark.parametrize("score", [-1, 101])
def test_out_of_range_score_is_refused(score):
    with patch(POST) as post:
        with pytest.raises(ValueError):
            ScoreSubmitter().submit_score(score)
    post.assert_not_called()
