import datetime as dt
import enum
from typing import List, Optional, Dict, Any

from sqlalchemy import (
    Column, String, TIMESTAMP, Text, Integer, ForeignKey, JSON, UniqueConstraint
)
from sqlalchemy.orm import Mapped, relationship

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from datetime import datetime

from showcase.db import Base


def utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class ProjectStatus(str, enum.Enum):
    IN_DEVELOPMENT = "In Development"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"


class ProjectType(str, enum.Enum):
    FINAL_YEAR = "Final Year Project"
    PERSONAL = "Personal Project"
    RESEARCH = "Research Project"
    HACKATHON = "Hackathon Project"


class Role(str, enum.Enum):
    OWNER = "OWNER"
    CONTRIBUTOR = "CONTRIBUTOR"


# Tables
class User(Base):
    """Account known to the showcase, identified by its GitHub handle."""
    id              = Column(Integer, primary_key=True, autoincrement=True)
    github_username = Column(String(100), nullable=False, unique=True)
    name            = Column(String, nullable=True)
    email           = Column(String, nullable=True)
    avatar_url      = Column(String, nullable=True)

    projects: Mapped[List["ProjectUser"]] = relationship(back_populates="user")


class Project(Base):
    id                  = Column(Integer, primary_key=True, autoincrement=True)
    name                = Column(String, nullable=False)
    description         = Column(Text, nullable=False)
    github_url          = Column(String, nullable=True, unique=True)
    demo_url            = Column(String, nullable=True)
    tech_stack          = Column(JSON, nullable=False, default=list)
    image_url           = Column(String, nullable=True)
    problem_statement   = Column(Text, nullable=False)
    status              = Column(String(50), nullable=False)
    project_type        = Column(String(50), nullable=False)
    key_features        = Column(JSON, nullable=False, default=list)
    academic_highlights = Column(JSON, nullable=False, default=list)
    owner_id            = Column(Integer, ForeignKey("USER.id"), nullable=False)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    users: Mapped[List["ProjectUser"]] = relationship(
        back_populates="project", cascade="all, delete-orphan"
    )
    pending_users: Mapped[List["PendingUser"]] = relationship(
        back_populates="project", cascade="all, delete-orphan"
    )
    project_images: Mapped[List["ProjectImage"]] = relationship(
        back_populates="project", cascade="all, delete-orphan"
    )


class ProjectUser(Base):
    """Association between a project and a registered user."""
    id         = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("PROJECT.id"), nullable=False)
    user_id    = Column(Integer, ForeignKey("USER.id"), nullable=False)
    role       = Column(String(20), nullable=False, default=Role.CONTRIBUTOR.value)

    project: Mapped["Project"] = relationship(back_populates="users")
    user: Mapped["User"] = relationship(back_populates="projects")

    __table_args__ = (UniqueConstraint("project_id", "user_id"),)


class PendingUser(Base):
    """Contributor named on a project before owning an account."""
    id              = Column(Integer, primary_key=True, autoincrement=True)
    project_id      = Column(Integer, ForeignKey("PROJECT.id"), nullable=False)
    github_username = Column(String(100), nullable=False)
    role            = Column(String(20), nullable=False, default=Role.CONTRIBUTOR.value)

    project: Mapped["Project"] = relationship(back_populates="pending_users")


class ProjectImage(Base):
    id          = Column(Integer, primary_key=True, autoincrement=True)
    project_id  = Column(Integer, ForeignKey("PROJECT.id"), nullable=False)
    url         = Column(String, nullable=False)
    title       = Column(String, nullable=False)
    description = Column(Text, nullable=True)

    project: Mapped["Project"] = relationship(back_populates="project_images")


# Schemas
class CamelSchema(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class UserSchema(CamelSchema):
    id: int
    github_username: str
    name: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None


class ProjectUserSchema(CamelSchema):
    id: int
    project_id: int
    user_id: int
    role: Role
    user: UserSchema


class PendingUserSchema(CamelSchema):
    id: int
    project_id: int
    github_username: str
    role: Role


class ProjectImageSchema(CamelSchema):
    id: int
    project_id: int
    url: str
    title: str
    description: Optional[str] = None


class ProjectSchema(CamelSchema):
    id: int
    name: str
    description: str
    github_url: Optional[str] = None
    demo_url: Optional[str] = None
    tech_stack: List[str]
    image_url: Optional[str] = None
    problem_statement: str
    status: ProjectStatus
    project_type: ProjectType
    key_features: List[str]
    academic_highlights: List[Dict[str, Any]]
    owner_id: int
    created_at: datetime
    updated_at: datetime
    users: List[ProjectUserSchema]
    pending_users: List[PendingUserSchema]
    project_images: List[ProjectImageSchema]


class ProjectImageCreateSchema(CamelSchema):
    url: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: str = ""


class ProjectUserCreateSchema(CamelSchema):
    github_username: str = Field(min_length=1)
    role: Role = Role.CONTRIBUTOR


class ProjectCreateSchema(CamelSchema):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    github_url: str = ""
    demo_url: str = ""
    tech_stack: List[str] = []
    image_url: str = ""
    problem_statement: str = Field(min_length=1)
    status: ProjectStatus
    project_type: ProjectType
    key_features: List[str] = Field(min_length=1)
    academic_highlights: List[Dict[str, Any]] = []
    project_images: List[ProjectImageCreateSchema] = []
    users: List[ProjectUserCreateSchema] = Field(min_length=1)
    owner_id: int
