import pytest
import requests
from unittest.mock import patch, MagicMock

from joketeller import api, BlacklistFlag, Category, Joker, StatusCode

SUBMISSION = {
    "formatVersion": 3,
    "category": "Misc",
    "type": "single",
    "joke": "A horse walks into a bar...",
    "flags": {
        "nsfw": True,
        "religious": False,
        "political": True,
        "racist": False,
        "sexist": False,
        "explicit": False,
    },
    "lang": "en",
}


def _response(status_code, payload=None, text=""):
    resp = MagicMock()
    resp.status_code = status_code
    if isinstance(payload, Exception):
        resp.json.side_effect = payload
    else:
        resp.json.return_value = payload
    resp.text = text
    return resp


@patch("joketeller.api.requests.get")
def test_get_joke(mock_get):
    mock_get.return_value = _response(200, {"error": False, "joke": "A joke", "id": 7})

    joker = Joker()
    joker.add_categories([Category.Programming, Category.Pun]).set_amount(3).add_blacklist_flags(
        [BlacklistFlag.Political, BlacklistFlag.Racist]
    )
    result = api.get_joke(joker)

    assert result.ok
    assert result.data["joke"] == "A joke"
    assert result.status is StatusCode.Ok
    mock_get.assert_called_once_with(
        "https://v2.jokeapi.dev/joke/Programming,Pun?blacklistFlags=political,racist&amount=3",
        headers={},
        timeout=5.0,
    )


@patch("joketeller.api.requests.get")
def test_get_joke_sends_authorization_header(mock_get):
    mock_get.return_value = _response(200, {"error": False})

    Joker().set_authorization("testkey").get_joke(timeout=1.5)

    _, kwargs = mock_get.call_args
    assert kwargs["headers"] == {"Authorization": "testkey"}
    assert kwargs["timeout"] == 1.5
    assert "testkey" not in mock_get.call_args[0][0]


@patch("joketeller.api.requests.get")
def test_timeout_from_environment(mock_get, monkeypatch):
    monkeypatch.setenv("JOKEAPI_TIMEOUT", "12")
    mock_get.return_value = _response(200, {})

    api.get_joke(Joker())

    assert mock_get.call_args[1]["timeout"] == 12.0


@patch("joketeller.api.requests.get")
def test_remote_error_body_is_returned(mock_get):
    body = {"error": True, "internalError": False, "code": 106, "message": "No matching joke found"}
    mock_get.return_value = _response(400, body)

    result = api.get_joke(Joker().set_search_string("zzzz"))

    assert not result.ok
    assert result.data == body
    assert result.status_code == 400
    assert result.status is StatusCode.BadRequest
    assert not result.is_transport_error


@patch("joketeller.api.requests.get")
def test_transport_error(mock_get):
    mock_get.side_effect = requests.ConnectionError("name resolution failed")

    result = api.get_joke(Joker())

    assert not result.ok
    assert result.data == {"err": "Transport Error"}
    assert result.status_code is None
    assert result.is_transport_error


@patch("joketeller.api.requests.get")
def test_timeout_is_a_transport_error(mock_get):
    mock_get.side_effect = requests.Timeout("read timed out")
    assert api.get_joke(Joker()).data == {"err": api.TRANSPORT_ERROR}


@pytest.mark.parametrize("status_code", [200, 500])
@patch("joketeller.api.requests.get")
def test_undecodable_body(mock_get, status_code):
    mock_get.return_value = _response(status_code, ValueError("Expecting value"), text="<html>oops</html>")

    result = api.get_joke(Joker())

    assert not result.ok
    assert result.data == {"err": "Decode Error", "body": "<html>oops</html>"}
    assert result.status_code == status_code


@patch("joketeller.api.requests.post")
def test_submit_joke_dryrun(mock_post):
    mock_post.return_value = _response(201, {"error": False, "message": "Dry Run complete!"})

    result = api.submit_joke_dryrun(SUBMISSION)

    assert result.ok
    assert result.data["message"] == "Dry Run complete!"
    mock_post.assert_called_once_with("https://v2.jokeapi.dev/submit?dry-run", json=SUBMISSION, timeout=5.0)


@patch("joketeller.api.requests.post")
def test_submit_joke(mock_post):
    mock_post.return_value = _response(201, {"error": False, "submission": SUBMISSION})

    result = api.submit_joke(SUBMISSION, timeout=2)

    assert result.ok
    mock_post.assert_called_once_with("https://v2.jokeapi.dev/submit", json=SUBMISSION, timeout=2)


@patch("joketeller.api.requests.post")
def test_submit_rejected(mock_post):
    body = {"error": True, "message": "Joke submissions are disabled"}
    mock_post.return_value = _response(403, body)

    result = api.submit_joke({"joke": "incomplete"})

    assert not result.ok
    assert result.data == body
    assert result.status is StatusCode.Forbidden


@patch("joketeller.api.requests.post")
def test_submit_transport_error(mock_post):
    mock_post.side_effect = requests.ConnectionError()
    result = api.submit_joke_dryrun(SUBMISSION)
    assert result.is_transport_error


@patch("joketeller.api.requests.post")
def test_submit_uses_configured_base_url(mock_post, monkeypatch):
    monkeypatch.setenv("JOKEAPI_BASE_URL", "http://localhost:8080")
    mock_post.return_value = _response(201, {})

    api.submit_joke_dryrun(SUBMISSION)

    assert mock_post.call_args[0][0] == "http://localhost:8080/submit?dry-run"


def test_raise_for_error():
    ok = api.JokeResult(ok=True, data={"joke": "x"}, status_code=200)
    assert ok.raise_for_error() is ok

    bad = api.JokeResult(ok=False, data={"err": "Transport Error"})
    with pytest.raises(api.JokeAPIError) as exc:
        bad.raise_for_error()
    assert exc.value.result is bad
