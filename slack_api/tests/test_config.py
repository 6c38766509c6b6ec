import pytest

from slack_api.client import DEFAULT_URL
from slack_api.config import Config
from slack_api.http import HttpTransport


def test_load_minimal():
    cfg = Config.load_from_env({"SLACK_TOKEN": "xoxb-1"})
    assert cfg == Config(token="xoxb-1", api_url=DEFAULT_URL, verify=None, timeout_s=30.0)


def test_load_all_keys():
    cfg = Config.load_from_env(
        {
            "SLACK_TOKEN": " xoxb-1 ",
            "SLACK_API_URL": "https://slack.example/api/",
            "SLACK_CA_BUNDLE": "/etc/ssl/ca.pem",
            "SLACK_TIMEOUT": "2.5",
        }
    )
    assert cfg.token == "xoxb-1"
    assert cfg.api_url == "https://slack.example/api"
    assert cfg.verify == "/etc/ssl/ca.pem"
    assert cfg.timeout_s == 2.5


@pytest.mark.parametrize("raw", ["false", "0", "No"])
def test_ca_bundle_false_disables_verify(raw):
    assert Config.load_from_env({"SLACK_TOKEN": "x", "SLACK_CA_BUNDLE": raw}).verify is False


@pytest.mark.parametrize("env", [{}, {"SLACK_TOKEN": ""}, {"SLACK_TOKEN": "PLACEHOLDER"}])
def test_missing_or_placeholder_token(env):
    with pytest.raises(RuntimeError):
        Config.load_from_env(env)


def test_bad_timeout():
    with pytest.raises(RuntimeError):
        Config.load_from_env({"SLACK_TOKEN": "x", "SLACK_TIMEOUT": "soon"})


def test_build_client():
    api = Config(token="xoxb-1", api_url="https://slack.example/api", verify=False, timeout_s=3.0).build_client()
    assert isinstance(api.client, HttpTransport)
    assert api.client.timeout_s == 3.0
    assert api.get_ssl_verify_path() is False
    assert api.get_url("auth.test") == "https://slack.example/api/auth.test"
