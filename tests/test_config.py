import pytest

from fruit_inspector.config import env_bool


def test_env_bool_default_when_unset(monkeypatch):
    monkeypatch.delenv("X_FLAG", raising=False)
    assert env_bool("X_FLAG") is False
    assert env_bool("X_FLAG", default=True) is True


@pytest.mark.parametrize("token, expected", [("1", True), ("TRUE", True), (" on ", True), ("yes", True),
                                             ("0", False), ("off", False), ("", False)])
def test_env_bool_tokens(monkeypatch, token, expected):
    monkeypatch.setenv("X_FLAG", token)
    assert env_bool("X_FLAG", default=not expected) is expected
