"""Shared fakes for mdrefactor tests."""
import json
from unittest import mock


def chat_response(*contents):
    """Build a chat-completion response body with one choice per content."""
    return json.dumps({
        "id": "chatcmpl-123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-3.5-turbo",
        "choices": [
            {"index": i, "message": {"role": "assistant", "content": c}, "finish_reason": "stop"}
            for i, c in enumerate(contents)
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15},
    })


def fake_response(body, status_code=200):
    response = mock.MagicMock()
    response.text = body
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    return response


def fake_session(body=None, status_code=200, side_effect=None):
    """A stand-in for requests.Session whose post/get return ``body``."""
    session = mock.MagicMock()
    if side_effect is not None:
        session.post.side_effect = side_effect
        session.get.side_effect = side_effect
    else:
        session.post.return_value = fake_response(body, status_code)
        session.get.return_value = fake_response(body, status_code)
    return session
