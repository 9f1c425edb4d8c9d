"""Unit tests for SDK helpers."""

from webim.utils import create_server_url_string_by, get_current_time_in_microsecond


class TestCreateServerUrlString:
    def test_account_name(self):
        assert create_server_url_string_by("demo") == "https://demo.webim.ru"

    def test_full_url_kept(self):
        assert create_server_url_string_by("https://chat.example.com") == "https://chat.example.com"

    def test_trailing_slash_stripped(self):
        assert create_server_url_string_by("https://chat.example.com/") == "https://chat.example.com"


def test_current_time_in_microsecond(monkeypatch):
    monkeypatch.setattr("webim.utils.time.time", lambda: 12.5)

    assert get_current_time_in_microsecond() == 12500000
