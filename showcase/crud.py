from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from showcase.models import (
    PendingUser,
    Project,
    ProjectCreateSchema,
    ProjectImage,
    ProjectUser,
    Role,
    User,
)
from showcase.utils.decorators import db_exception_handler
from showcase.utils.error_handler import DataAlreadyPresent


DUPLICATE_GITHUB_URL = "Project with this GitHub URL already exists"


def _with_relations(stmt):
    return stmt.options(
        selectinload(Project.users).selectinload(ProjectUser.user),
        selectinload(Project.pending_users),
        selectinload(Project.project_images),
    )


async def read(s: AsyncSession, id: int):
    stmt = _with_relations(select(Project).where(Project.id == id)).execution_options(
        populate_existing=True
    )
    return (await s.execute(stmt)).scalars().unique().one_or_none()


async def read_all(s: AsyncSession):
    """Every project with its contributors, pending contributors and images."""
    stmt = _with_relations(select(Project).order_by(Project.id))
    return (await s.execute(stmt)).scalars().unique().all()


async def read_by_github_url(s: AsyncSession, github_url: str):
    stmt = select(Project).where(Project.github_url == github_url)
    return (await s.execute(stmt)).scalars().first()


async def read_user(s: AsyncSession, id: int):
    return await s.get(User, id)


async def read_users_by_username(s: AsyncSession, usernames):
    if not usernames:
        return {}
    stmt = select(User).where(User.github_username.in_(usernames))
    return {u.github_username: u for u in (await s.execute(stmt)).scalars()}


@db_exception_handler
async def create(s: AsyncSession, project: ProjectCreateSchema, owner: User):
    """
    Insert a project with its images and contributors.

    Contributors with an account are linked through PROJECTUSER, the others
    are kept as PENDINGUSER rows. The owner is always linked as OWNER.
    """
    accounts = await read_users_by_username(
        s, [u.github_username for u in project.users]
    )

    db_item = Project(
        name=project.name,
        description=project.description,
        github_url=project.github_url or None,
        demo_url=project.demo_url or None,
        tech_stack=list(project.tech_stack),
        image_url=project.image_url or None,
        problem_statement=project.problem_statement,
        status=project.status.value,
        project_type=project.project_type.value,
        key_features=list(project.key_features),
        academic_highlights=list(project.academic_highlights),
        owner_id=owner.id,
    )
    db_item.users.append(ProjectUser(user=owner, role=Role.OWNER.value))

    linked = {owner.id}
    pending = set()
    for entry in project.users:
        account = accounts.get(entry.github_username)
        if account is not None:
            if account.id in linked:
                continue
            linked.add(account.id)
            db_item.users.append(ProjectUser(user=account, role=entry.role.value))
        elif entry.github_username not in pending:
            pending.add(entry.github_username)
            db_item.pending_users.append(
                PendingUser(github_username=entry.github_username, role=entry.role.value)
            )

    for image in project.project_images:
        db_item.project_images.append(
            ProjectImage(url=image.url, title=image.title, description=image.description)
        )

    s.add(db_item)
    try:
        await s.commit()
    except IntegrityError as err:
        if project.github_url and "github_url" in str(err.orig):
            await s.rollback()
            raise DataAlreadyPresent(DUPLICATE_GITHUB_URL)
        raise
    return await read(s, db_item.id)
