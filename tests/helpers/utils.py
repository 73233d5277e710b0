import json

import requests
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import Session

from showcase.form.draft import Field
from showcase.models import User


url_root = "/api/"

projects_url_suffix = "projects"
projects_create_url_suffix = "projects/post-project"


def req_get(client, url_suffix):
    return client.get(url_root + url_suffix)


def req_post(client, url_suffix, data):
    return client.post(url_root + url_suffix, json=data)


def add_user(db_uri, github_username, **fields):
    engine = create_engine(db_uri)
    with Session(engine) as session:
        user = User(github_username=github_username, **fields)
        session.add(user)
        session.commit()
        user_id = user.id
    engine.dispose()
    return user_id


def count_rows(db_uri, table):
    engine = create_engine(db_uri)
    with Session(engine) as session:
        count = session.execute(select(func.count()).select_from(table)).scalar_one()
    engine.dispose()
    return count


def project_payload(owner_id, owner_username="octocat", **overwrite_fields):
    project = {
        "name": "Showcase",
        "description": "A place to show student projects",
        "githubUrl": "https://github.com/octocat/showcase",
        "demoUrl": "https://showcase.example.com",
        "techStack": ["React", "Python"],
        "imageUrl": "",
        "problemStatement": "Projects get lost after graduation",
        "status": "In Development",
        "projectType": "Final Year Project",
        "keyFeatures": ["Upload form", "Listing"],
        "academicHighlights": [{"title": "Best demo", "status": "Won"}],
        "projectImages": [
            {
                "url": "https://i.postimg.cc/example/image.jpg",
                "title": "Home page",
                "description": "Landing view",
            }
        ],
        "users": [{"githubUsername": owner_username, "role": "OWNER"}],
        "ownerId": owner_id,
    }
    project.update(overwrite_fields)
    return project


def fill_draft(controller, **overwrite_fields):
    """Put controller's draft in a submittable state."""
    values = {
        Field.NAME: "Showcase",
        Field.DESCRIPTION: "A place to show student projects",
        Field.PROBLEM_STATEMENT: "Projects get lost after graduation",
        Field.PROJECT_TYPE: "Research Project",
        Field.STATUS: "Completed",
        Field.TECH_STACK: "React, Python",
        Field.GITHUB_URL: "https://github.com/octocat/showcase",
    }
    values.update({Field(k): v for k, v in overwrite_fields.items()})
    for field, value in values.items():
        controller.update_field(field, value)
    controller.update_feature(0, "Upload form")
    return controller


class FakeResponse:
    def __init__(self, status_code=200, data=None):
        self.status_code = status_code
        self._data = data

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._data is None:
            raise json.JSONDecodeError("Expecting value", "", 0)
        return self._data

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Stands in for requests.Session, replaying queued responses."""
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def _reply(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def get(self, url, **kwargs):
        return self._reply("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._reply("POST", url, **kwargs)
