from types import SimpleNamespace

import pytest
import requests

import api


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def json(self):
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"HTTP {self.status_code}")


@pytest.fixture
def recorder(monkeypatch):
    calls = SimpleNamespace(items=[], response=FakeResponse({}))

    def fake(method):
        def _call(url, **kwargs):
            calls.items.append((method, url, kwargs))
            return calls.response
        return _call

    monkeypatch.setattr(api, "BASE", "http://backend.test")
    monkeypatch.setattr(api.requests, "post", fake("POST"))
    monkeypatch.setattr(api.requests, "delete", fake("DELETE"))
    return calls


def test_analyze_image_posts_multipart(recorder):
    recorder.response = FakeResponse({"ingredients": "eggs, milk"})

    assert api.analyze_image(b"jpeg", "fridge.jpg", "image/jpeg") == "eggs, milk"

    method, url, kwargs = recorder.items[0]
    assert (method, url) == ("POST", "http://backend.test/suggest/ingredients")
    assert kwargs["files"]["file"] == ("fridge.jpg", b"jpeg", "image/jpeg")
    assert kwargs["timeout"] == 120


def test_get_meal_suggestions(recorder):
    meals = [{"name": "Omelette", "description": "Fluffy.", "ingredients": ["eggs"]}]
    recorder.response = FakeResponse({"meals": meals})

    assert api.get_meal_suggestions("eggs") == meals
    assert recorder.items[0][2]["json"] == {"ingredients": "eggs"}


def test_send_chat_sends_full_history(recorder):
    recorder.response = FakeResponse({"reply": "Use ripe tomatoes."})
    messages = [{"role": "model", "content": "Hello!"}, {"role": "user", "content": "Salsa tips?"}]

    assert api.send_chat("tab-1", messages) == "Use ripe tomatoes."
    method, url, kwargs = recorder.items[0]
    assert url == "http://backend.test/chat"
    assert kwargs["json"] == {"session_id": "tab-1", "messages": messages}


def test_reset_chat_deletes_session(recorder):
    recorder.response = FakeResponse({"dropped": True})

    api.reset_chat("tab-1")

    assert recorder.items[0][:2] == ("DELETE", "http://backend.test/chat/tab-1")


def test_generate_image(recorder):
    recorder.response = FakeResponse({"image_url": "data:image/jpeg;base64,AAAA"})

    assert api.generate_image("pizza") == "data:image/jpeg;base64,AAAA"
    assert recorder.items[0][2]["json"] == {"prompt": "pizza"}


def test_http_errors_propagate(recorder):
    recorder.response = FakeResponse({"detail": "Failed to generate image."}, status_code=502)

    with pytest.raises(requests.exceptions.HTTPError):
        api.generate_image("pizza")
