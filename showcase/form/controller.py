"""
State of the multi-tab project upload form

FormController owns the draft, the contributor list and the submission
state machine (idle -> submitting -> success | error). It only talks to the
outside world through a GitHubClient (repository picker) and a
ProjectApiClient (creation request), both injectable.
"""
import enum
import logging
import uuid
from typing import Dict, List, Optional, Union

import requests

from showcase.config import Config
from showcase.form.client import ProjectApiClient
from showcase.form.draft import (
    AcademicHighlight,
    Contributor,
    Field,
    Identity,
    ProjectDraft,
    ProjectImage,
    Repository,
    parse_tech_stack,
)
from showcase.form.github import GitHubClient
from showcase.form.notifications import Notifier
from showcase.form.validation import PROJECT_USERS, validate_draft, validate_payload
from showcase.models import Role
from showcase.utils.error_handler import SubmissionError, WrongSchema
from showcase.utils.validators import is_absolute_url


logger = logging.getLogger(__name__)

DUPLICATE_GITHUB_URL = "Project with this GitHub URL already exists"
DUPLICATE_GITHUB_URL_MESSAGE = (
    "A project with this GitHub URL already exists. "
    "Please check the URL or use a different one."
)
SUCCESS_MESSAGE = "Your project has been successfully created!"


class SubmitStatus(str, enum.Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class FormController:
    def __init__(
        self,
        user: Optional[Identity] = None,
        github: Optional[GitHubClient] = None,
        api: Optional[ProjectApiClient] = None,
        notify: Optional[Notifier] = None,
    ) -> None:
        self.github = github or GitHubClient()
        self.api = api or ProjectApiClient()
        self.notify = notify or Notifier()

        self.user: Optional[Identity] = None
        self.repositories: List[Repository] = []
        self.private_repository = False
        self.reset()

        if user is not None:
            self.set_user(user)

    def reset(self) -> None:
        """Back to an empty draft, the owner re-seeded from the current user."""
        self.draft = ProjectDraft()
        self.selected_repository: Optional[Repository] = None
        self.contributors: List[Contributor] = self._owner_seed()
        self.new_contributor = Contributor(id="", github_username="")
        self.new_image = ProjectImage()
        self.errors: Dict[str, str] = {}
        self.status = SubmitStatus.IDLE
        self.error_message = ""

    def _owner_seed(self) -> List[Contributor]:
        if self.user is None or not self.user.github_username:
            return []
        return [
            Contributor(
                id=str(self.user.id),
                github_username=self.user.github_username,
                role=Role.OWNER,
            )
        ]

    # Identity and repositories
    def set_user(self, user: Optional[Identity]) -> None:
        if user == self.user:
            return
        self.user = user
        if user is None or not user.github_username:
            return
        self.contributors = self._owner_seed()
        self.load_repositories(user.github_username)

    def load_repositories(self, username: str) -> None:
        try:
            self.repositories = self.github.list_repositories(username)
        except (requests.RequestException, ValueError) as err:
            logger.error(f"Error fetching repositories for {username}: {err}")

    def select_repository(self, full_name: str) -> None:
        for repo in self.repositories:
            if repo.full_name == full_name:
                self.selected_repository = repo
                self.draft.github_url = repo.html_url
                return

    def set_private_repository(self, enabled: bool) -> None:
        self.private_repository = bool(enabled)

    # Scalar fields
    def update_field(self, name: Union[Field, str], value) -> None:
        try:
            field = Field(name)
        except ValueError:
            raise ValueError(f"Unknown form field: {name}") from None

        if field is Field.TECH_STACK:
            value = parse_tech_stack(value)
        elif isinstance(value, enum.Enum):
            value = value.value
        setattr(self.draft, field.attr, value)
        self.errors.pop(field.value, None)

    # Tech stack
    def add_technology(self, label: str) -> None:
        label = label.strip()
        if label and label not in self.draft.tech_stack:
            self.draft.tech_stack = self.draft.tech_stack + [label]

    def remove_technology(self, label: str) -> None:
        self.draft.tech_stack = [t for t in self.draft.tech_stack if t != label]

    def available_technologies(self) -> List[str]:
        return [t for t in Config.COMMON_TECHNOLOGIES if t not in self.draft.tech_stack]

    # Contributors
    def stage_contributor(self, github_username: str = None, role: Union[Role, str] = None) -> None:
        if github_username is not None:
            self.new_contributor.github_username = github_username
        if role is not None:
            self.new_contributor.role = Role(role)

    def add_contributor(self, username: str = None, role: Union[Role, str] = None) -> Optional[Contributor]:
        """Append a contributor, by default the one in the staging slot."""
        if username is None:
            username = self.new_contributor.github_username
            role = self.new_contributor.role if role is None else role
        if not username:
            return None

        contributor = Contributor(
            id=uuid.uuid4().hex,
            github_username=username,
            role=Role(role or Role.CONTRIBUTOR),
        )
        self.contributors.append(contributor)
        self.new_contributor = Contributor(id="", github_username="")
        self.errors.pop(PROJECT_USERS, None)
        return contributor

    @staticmethod
    def can_remove(contributor: Contributor) -> bool:
        return contributor.role is not Role.OWNER

    def remove_contributor(self, id: str) -> None:
        self.contributors = [
            c for c in self.contributors if c.id != id or not self.can_remove(c)
        ]

    # Key features
    def add_feature(self) -> None:
        self.draft.key_features.append("")

    def update_feature(self, index: int, value: str) -> None:
        self.draft.key_features[index] = value

    def remove_feature(self, index: int) -> None:
        del self.draft.key_features[index]

    # Academic highlights
    def add_highlight(self, title: str, status: str, **extra) -> AcademicHighlight:
        highlight = AcademicHighlight(title=title, status=status, **extra)
        self.draft.academic_highlights.append(highlight)
        return highlight

    def remove_highlight(self, index: int) -> None:
        del self.draft.academic_highlights[index]

    # Images
    def stage_image(self, url: str = None, title: str = None, description: str = None) -> None:
        for key, value in (("url", url), ("title", title), ("description", description)):
            if value is not None:
                setattr(self.new_image, key, value)

    def add_image(self, candidate: Optional[ProjectImage] = None) -> bool:
        """
        Append candidate (the staging slot by default) to the project images.

        Rejected candidates raise a notification and leave the draft and the
        staging slot untouched.
        """
        if candidate is None:
            candidate = self.new_image
        elif isinstance(candidate, dict):
            candidate = ProjectImage(**candidate)

        if not candidate.url or not candidate.title:
            self.notify("Missing information", "Please provide an image URL and title")
            return False

        if not is_absolute_url(candidate.url):
            self.notify("Invalid URL", "Please provide a valid image URL")
            return False

        self.draft.project_images.append(candidate.model_copy())
        self.new_image = ProjectImage()
        return True

    def remove_image(self, index: int) -> None:
        del self.draft.project_images[index]

    # Validation
    def validate(self) -> Dict[str, str]:
        return validate_draft(self.draft, self.contributors, self.private_repository)

    def is_submittable(self) -> bool:
        return not self.validate()

    def serialize(self) -> Dict:
        draft = self.draft
        return {
            "name": draft.name,
            "description": draft.description,
            "githubUrl": draft.github_url,
            "demoUrl": draft.demo_url,
            "techStack": list(draft.tech_stack),
            "imageUrl": draft.image_url,
            "problemStatement": draft.problem_statement,
            "status": draft.status,
            "projectType": draft.project_type,
            "keyFeatures": [f for f in draft.key_features if f.strip() != ""],
            "academicHighlights": [
                h.model_dump(exclude_none=True) for h in draft.academic_highlights
            ],
            "projectImages": [img.model_dump() for img in draft.project_images],
            "users": [
                {"githubUsername": c.github_username, "role": c.role.value}
                for c in self.contributors
            ],
            "ownerId": self.user.id if self.user is not None else None,
        }

    # Submission
    def submit(self) -> bool:
        """Validate then send the draft; True when the project was created."""
        if self.status is SubmitStatus.SUBMITTING:
            return False

        self.errors = self.validate()
        if self.errors or self.user is None:
            return False

        self.status = SubmitStatus.SUBMITTING
        self.error_message = ""
        try:
            payload = self.serialize()
            validate_payload(payload)
            self._send(payload)
        except SubmissionError as err:
            logger.warning(f"Project submission rejected: {err.message}")
            self._fail(err.message)
        except (requests.RequestException, ValueError, WrongSchema) as err:
            logger.error(f"Error creating project: {err}")
            self._fail(str(err))
        else:
            self.status = SubmitStatus.SUCCESS
        return self.status is SubmitStatus.SUCCESS

    def _send(self, payload) -> None:
        response = self.api.post_project(payload)
        if 200 <= response.status_code < 300:
            data = response.json()
            logger.info(f"Project created: {data.get('id') if isinstance(data, dict) else data}")
            return

        error_data = response.json()
        if isinstance(error_data, dict) and error_data.get("error") == DUPLICATE_GITHUB_URL:
            raise SubmissionError(DUPLICATE_GITHUB_URL_MESSAGE, response.status_code)
        raise SubmissionError(
            f"HTTP error! status: {response.status_code}", response.status_code
        )

    def _fail(self, message: str) -> None:
        self.status = SubmitStatus.ERROR
        self.error_message = message or "An unknown error occurred"

    @property
    def status_message(self) -> str:
        if self.status is SubmitStatus.SUCCESS:
            return SUCCESS_MESSAGE
        if self.status is SubmitStatus.ERROR:
            return f"An error occurred: {self.error_message}. Please try again."
        return ""

    def acknowledge(self) -> None:
        """Close the success or error dialog, starting a fresh draft."""
        if self.status in (SubmitStatus.SUCCESS, SubmitStatus.ERROR):
            self.reset()
