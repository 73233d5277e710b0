import pytest

from showcase.form.draft import Contributor, ProjectDraft
from showcase.form.validation import validate_draft, validate_payload
from showcase.models import Role
from showcase.utils.error_handler import WrongSchema
from utils import fill_draft


@pytest.fixture()
def owner():
    return [Contributor(id="1", github_username="octocat", role=Role.OWNER)]


@pytest.fixture()
def draft():
    return ProjectDraft(
        name="Showcase",
        description="x",
        problem_statement="x",
        project_type="Research Project",
        status="Completed",
        key_features=["a"],
    )


class TestValidateDraft:
    def test_valid_draft(self, draft, owner):
        assert validate_draft(draft, owner) == {}

    def test_missing_name_only(self, draft, owner):

        draft.name = ""
        assert validate_draft(draft, owner) == {"name": "Project name is required"}

    @pytest.mark.parametrize(
        "attr, value, key, message",
        [
            ("name", "   ", "name", "Project name is required"),
            ("description", "", "description", "Description is required"),
            ("problem_statement", " ", "problemStatement", "Problem statement is required"),
            ("project_type", "", "projectType", "Project type is required"),
            ("status", "", "status", "Project status is required"),
            ("key_features", ["", "  "], "keyFeatures", "At least one key feature is required"),
            ("demo_url", "ftp://demo", "demoUrl", "Invalid demo URL format"),
            ("image_url", "image.png", "imageUrl", "Invalid image URL format"),
        ],
    )
    def test_single_violation(self, draft, owner, attr, value, key, message):

        setattr(draft, attr, value)
        assert validate_draft(draft, owner) == {key: message}

    def test_no_contributors(self, draft):
        assert validate_draft(draft, []) == {"projectUsers": "At least one user is required"}

    def test_github_url_required_when_private(self, draft, owner):

        assert validate_draft(draft, owner, private_repository=False) == {}
        assert validate_draft(draft, owner, private_repository=True) == {
            "githubUrl": "GitHub URL is required when private repository is enabled"
        }

        draft.github_url = "https://github.com/octocat/private"
        assert validate_draft(draft, owner, private_repository=True) == {}

    def test_optional_urls(self, draft, owner):

        draft.demo_url = "http://demo.example.com"
        draft.image_url = "https://img.example.com/a.png"
        assert validate_draft(draft, owner) == {}

    def test_empty_draft(self, owner):

        errors = validate_draft(ProjectDraft(), owner)
        assert set(errors) == {
            "name",
            "description",
            "problemStatement",
            "projectType",
            "keyFeatures",
        }


class TestSubmittable:
    def test_matches_validate(self, controller):

        assert controller.validate()
        assert not controller.is_submittable()

        fill_draft(controller)
        assert controller.validate() == {}
        assert controller.is_submittable()

    def test_image_url_gates_submission(self, controller):

        fill_draft(controller, imageUrl="not-a-url")
        assert controller.validate() == {"imageUrl": "Invalid image URL format"}
        assert not controller.is_submittable()

    def test_private_repository_toggle(self, controller):

        fill_draft(controller, githubUrl="")
        assert controller.is_submittable()

        controller.set_private_repository(True)
        assert not controller.is_submittable()

    def test_does_not_write_errors(self, controller):

        controller.is_submittable()
        assert controller.errors == {}


class TestPayloadSchema:
    def test_serialized_draft_is_valid(self, controller):

        fill_draft(controller)
        validate_payload(controller.serialize())

    def test_unknown_status(self, controller):

        fill_draft(controller, status="Abandoned")
        with pytest.raises(WrongSchema):
            validate_payload(controller.serialize())

    def test_extra_key(self, controller):

        fill_draft(controller)
        payload = controller.serialize()
        payload["secret"] = True
        with pytest.raises(WrongSchema):
            validate_payload(payload)
