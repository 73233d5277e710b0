from typing import List

import requests

from showcase.config import Config
from showcase.form.draft import Repository


class GitHubClient:
    """Read-only access to a user's public repository listing."""
    def __init__(self, base_url=None, session=None, timeout=None) -> None:
        self.base_url = (base_url or Config.GITHUB_API_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout or Config.REQUEST_TIMEOUT

    def list_repositories(self, username: str) -> List[Repository]:
        response = self.session.get(
            f"{self.base_url}/users/{username}/repos",
            headers={"Accept": "application/vnd.github+json"},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return [Repository.model_validate(repo) for repo in response.json()]
