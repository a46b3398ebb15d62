from unittest import mock

import pytest
import requests

from client import AnalysisClient, AnalysisError


def make_response(status_code=200, body=None):
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def session():
    return mock.Mock(spec=requests.Session)


def test_posts_resume_text_as_json(session):
    session.post.return_value = make_response(body={"score": 73, "suggestions": ["Add metrics"]})
    client = AnalysisClient(base_url="http://localhost:8080/", timeout=None, session=session)

    result = client.analyze("my resume")

    session.post.assert_called_once_with(
        "http://localhost:8080/api/analyze",
        json={"resumeText": "my resume"},
        headers={"Content-Type": "application/json"},
        timeout=None,
    )
    assert result.score == 73
    assert result.suggestions == ["Add metrics"]


def test_missing_suggestions_become_empty_list(session):
    session.post.return_value = make_response(body={"score": 50})
    result = AnalysisClient(session=session).analyze("text")
    assert result.suggestions == []


def test_non_2xx_raises_with_status(session):
    session.post.return_value = make_response(status_code=500, body={"detail": "boom"})
    with pytest.raises(AnalysisError) as excinfo:
        AnalysisClient(session=session).analyze("text")
    assert excinfo.value.status_code == 500


def test_transport_error_raises(session):
    session.post.side_effect = requests.ConnectionError("refused")
    with pytest.raises(AnalysisError) as excinfo:
        AnalysisClient(session=session).analyze("text")
    assert excinfo.value.status_code is None


def test_unparseable_body_raises(session):
    session.post.return_value = make_response(body=ValueError("not json"))
    with pytest.raises(AnalysisError):
        AnalysisClient(session=session).analyze("text")


def test_timeout_is_passed_through(session):
    session.post.return_value = make_response(body={"score": 1, "suggestions": []})
    AnalysisClient(timeout=2.5, session=session).analyze("text")
    assert session.post.call_args.kwargs["timeout"] == 2.5


def test_fractional_score_is_accepted(session):
    session.post.return_value = make_response(body={"score": 72.5, "suggestions": ["a"]})
    result = AnalysisClient(session=session).analyze("text")
    assert result.score == 72.5
    assert result.suggestions == ["a"]


def test_non_string_suggestions_are_shown_as_text(session):
    session.post.return_value = make_response(body={"score": 50, "suggestions": [1, "b"]})
    result = AnalysisClient(session=session).analyze("text")
    assert result.score == 50
    assert result.suggestions == ["1", "b"]
