"""In-memory draft of a project being submitted through the upload form"""
import enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field as PydanticField

from showcase.models import ProjectStatus, ProjectType, Role


class Field(str, enum.Enum):
    """Scalar inputs of the form, valued by their payload key."""

    NAME = "name"
    DESCRIPTION = "description"
    GITHUB_URL = "githubUrl"
    DEMO_URL = "demoUrl"
    TECH_STACK = "techStack"
    IMAGE_URL = "imageUrl"
    PROBLEM_STATEMENT = "problemStatement"
    STATUS = "status"
    PROJECT_TYPE = "projectType"

    @property
    def attr(self):
        return _FIELD_ATTRS[self]


_FIELD_ATTRS = {
    Field.NAME: "name",
    Field.DESCRIPTION: "description",
    Field.GITHUB_URL: "github_url",
    Field.DEMO_URL: "demo_url",
    Field.TECH_STACK: "tech_stack",
    Field.IMAGE_URL: "image_url",
    Field.PROBLEM_STATEMENT: "problem_statement",
    Field.STATUS: "status",
    Field.PROJECT_TYPE: "project_type",
}


class Identity(BaseModel):
    """The logged-in user the form acts for."""
    id: int
    github_username: str


class Contributor(BaseModel):
    id: str
    github_username: str
    role: Role = Role.CONTRIBUTOR


class ProjectImage(BaseModel):
    url: str = ""
    title: str = ""
    description: str = ""


class AcademicHighlight(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str
    status: str
    conference: Optional[str] = None
    date: Optional[str] = None
    competition: Optional[str] = None


class Repository(BaseModel):
    """Entry of a GitHub repository listing, extra keys ignored."""
    name: str
    full_name: str
    description: Optional[str] = None
    html_url: str


def parse_tech_stack(value):
    """Comma separated text to an ordered list of unique trimmed tokens."""
    if isinstance(value, str):
        value = value.split(",")
    tokens = []
    for token in value or []:
        token = token.strip()
        if token and token not in tokens:
            tokens.append(token)
    return tokens


class ProjectDraft(BaseModel):
    name: str = ""
    description: str = ""
    github_url: str = ""
    demo_url: str = ""
    tech_stack: List[str] = PydanticField(default_factory=list)
    image_url: str = ""
    problem_statement: str = ""
    status: str = ProjectStatus.IN_DEVELOPMENT.value
    project_type: str = ""
    key_features: List[str] = PydanticField(default_factory=lambda: [""])
    academic_highlights: List[AcademicHighlight] = PydanticField(default_factory=list)
    project_images: List[ProjectImage] = PydanticField(default_factory=list)

    @property
    def tech_stack_text(self):
        return ", ".join(self.tech_stack)


# Valid selections, offered by the form's dropdowns
STATUS_CHOICES = [s.value for s in ProjectStatus]
PROJECT_TYPE_CHOICES = [t.value for t in ProjectType]
ROLE_CHOICES = [r.value for r in Role]
