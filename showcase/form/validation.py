"""
Rules checked before a draft may be submitted

The submit gate is derived from validate_draft's result.
"""
from typing import Dict, Sequence

from showcase.form.draft import Contributor, Field, ProjectDraft
from showcase.models import ProjectStatus, ProjectType, Role
from showcase.utils.schema import get_arr_schema, get_enum_schema, get_obj_schema
from showcase.utils.validators import is_http_url, validate_schema


KEY_FEATURES = "keyFeatures"
PROJECT_USERS = "projectUsers"

REQUIRED_TEXT = {
    Field.NAME: "Project name is required",
    Field.DESCRIPTION: "Description is required",
    Field.PROBLEM_STATEMENT: "Problem statement is required",
}

REQUIRED_SELECTION = {
    Field.PROJECT_TYPE: "Project type is required",
    Field.STATUS: "Project status is required",
}

OPTIONAL_URLS = {
    Field.DEMO_URL: "Invalid demo URL format",
    Field.IMAGE_URL: "Invalid image URL format",
}


def validate_draft(
    draft: ProjectDraft,
    contributors: Sequence[Contributor],
    private_repository: bool = False,
) -> Dict[str, str]:
    """Map of failing field to its message; empty when the draft can be sent."""
    errors = {}

    for field, message in REQUIRED_TEXT.items():
        if not getattr(draft, field.attr).strip():
            errors[field.value] = message

    for field, message in REQUIRED_SELECTION.items():
        if not getattr(draft, field.attr):
            errors[field.value] = message

    if not any(feature.strip() for feature in draft.key_features):
        errors[KEY_FEATURES] = "At least one key feature is required"

    if len(contributors) == 0:
        errors[PROJECT_USERS] = "At least one user is required"

    if private_repository and not draft.github_url.strip():
        errors[Field.GITHUB_URL.value] = (
            "GitHub URL is required when private repository is enabled"
        )

    for field, message in OPTIONAL_URLS.items():
        value = getattr(draft, field.attr)
        if value and not is_http_url(value):
            errors[field.value] = message

    return errors


_string = {"type": "string"}

PAYLOAD_SCHEMA = get_obj_schema(
    {
        "name": {"type": "string", "minLength": 1},
        "description": {"type": "string", "minLength": 1},
        "githubUrl": _string,
        "demoUrl": _string,
        "techStack": get_arr_schema(array_of="strings", unique_items=True),
        "imageUrl": _string,
        "problemStatement": {"type": "string", "minLength": 1},
        "status": get_enum_schema(ProjectStatus),
        "projectType": get_enum_schema(ProjectType),
        "keyFeatures": get_arr_schema(array_of="strings", min_items=1),
        "academicHighlights": get_arr_schema(
            props={
                "title": _string,
                "status": _string,
                "conference": _string,
                "date": _string,
                "competition": _string,
            },
            required=["title", "status"],
        ),
        "projectImages": get_arr_schema(
            props={"url": _string, "title": _string, "description": _string},
            required=["url", "title", "description"],
        ),
        "users": get_arr_schema(
            props={
                "githubUsername": {"type": "string", "minLength": 1},
                "role": get_enum_schema(Role),
            },
            required=["githubUsername", "role"],
            min_items=1,
        ),
        "ownerId": {"type": "integer"},
    },
    required=[
        "name",
        "description",
        "githubUrl",
        "demoUrl",
        "techStack",
        "imageUrl",
        "problemStatement",
        "status",
        "projectType",
        "keyFeatures",
        "academicHighlights",
        "projectImages",
        "users",
        "ownerId",
    ],
)


def validate_payload(payload):
    """Raise WrongSchema when a serialized draft is not a valid creation body."""
    validate_schema(payload, PAYLOAD_SCHEMA)
