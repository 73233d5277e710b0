import logging
from typing import List

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette import status

from showcase.crud import (
    DUPLICATE_GITHUB_URL,
    create,
    read_all,
    read_by_github_url,
    read_user,
)
from showcase.models import ProjectCreateSchema, ProjectSchema
from showcase.utils.error_handler import DataAlreadyPresent, EmptyQuery


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", response_model=List[ProjectSchema], status_code=status.HTTP_200_OK)
async def get_projects(request: Request):
    """List every project with its users, pending users and images."""
    try:
        async with request.app.db.session() as s:
            projects = await read_all(s)
            return [ProjectSchema.model_validate(p) for p in projects]
    except Exception:
        logger.exception("Error fetching projects")
        return JSONResponse(
            {"error": "Internal Server Error"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


@router.post(
    "/post-project",
    response_model=ProjectSchema,
    status_code=status.HTTP_201_CREATED,
)
async def create_project(request: Request, item: ProjectCreateSchema):
    async with request.app.db.session() as s:
        owner = await read_user(s, item.owner_id)
        if owner is None:
            raise EmptyQuery("Owner not found")

        if item.github_url and await read_by_github_url(s, item.github_url):
            raise DataAlreadyPresent(DUPLICATE_GITHUB_URL)

        project = await create(s, item, owner)
        logger.info(f"project {project.id} created by {owner.github_username}")
        return ProjectSchema.model_validate(project)
