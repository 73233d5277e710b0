import sys
from os import path

import pytest
from fastapi.testclient import TestClient

from showcase.app import create_app
from showcase.config import Config
from showcase.form.client import ProjectApiClient
from showcase.form.controller import FormController
from showcase.form.draft import Identity
from showcase.form.github import GitHubClient

sys.path.append(path.join(path.dirname(__file__), "helpers"))
from utils import FakeResponse, FakeSession, add_user  # noqa: E402


REPOSITORIES = [
    {
        "name": "showcase",
        "full_name": "octocat/showcase",
        "description": "Student project showcase",
        "html_url": "https://github.com/octocat/showcase",
        "private": False,
    },
    {
        "name": "dotfiles",
        "full_name": "octocat/dotfiles",
        "description": None,
        "html_url": "https://github.com/octocat/dotfiles",
    },
]


@pytest.fixture()
def test_config(tmp_path):
    class TestConfig(Config):
        DATABASE_URL = f"sqlite:///{tmp_path / 'showcase.db'}"
        RESET_DB = True
        LOG_LEVEL = "DEBUG"

    return TestConfig


@pytest.fixture()
def db_uri(test_config):
    return test_config.DATABASE_URL


@pytest.fixture()
def client(test_config):
    with TestClient(create_app(test_config)) as test_client:
        yield test_client


@pytest.fixture()
def owner_id(client, db_uri):
    return add_user(db_uri, "octocat", name="The Octocat")


@pytest.fixture()
def identity():
    return Identity(id=1, github_username="octocat")


@pytest.fixture()
def repositories():
    return REPOSITORIES


@pytest.fixture()
def github_session(repositories):
    return FakeSession(*[FakeResponse(200, repositories) for _ in range(3)])


@pytest.fixture()
def api_session():
    return FakeSession()


@pytest.fixture()
def controller(identity, github_session, api_session):
    return FormController(
        user=identity,
        github=GitHubClient(base_url="https://github.test", session=github_session),
        api=ProjectApiClient(base_url="http://showcase.test", session=api_session),
    )
