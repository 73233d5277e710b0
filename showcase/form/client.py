from typing import Any, Dict

import requests

from showcase.config import Config


POST_PROJECT_SUFFIX = "/api/projects/post-project"


class ProjectApiClient:
    """Sends creation requests to the showcase service."""
    def __init__(self, base_url=None, session=None, timeout=None) -> None:
        self.base_url = (Config.PROJECTS_API_URL if base_url is None else base_url).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout or Config.REQUEST_TIMEOUT

    def post_project(self, payload: Dict[str, Any]):
        return self.session.post(
            self.base_url + POST_PROJECT_SUFFIX,
            json=payload,
            timeout=self.timeout,
        )
