from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Index, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from venturedesk.core.database import Base
from venturedesk.models.common import new_id


class Job(Base):
    """Job posting at a portfolio or network company."""

    __tablename__ = "jobs"
    __table_args__ = (
        Index("jobs_company_idx", "company"),
        Index("jobs_category_idx", "category"),
        Index("jobs_featured_idx", "featured"),
    )

    id: Mapped[str] = mapped_column(String, primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    company: Mapped[str] = mapped_column(Text, nullable=False)
    company_logo: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    link: Mapped[str] = mapped_column(Text, nullable=False)
    location: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    remote: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # Remote | Hybrid | On-site
    type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    salary: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    department: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    tags: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    category: Mapped[str] = mapped_column(Text, nullable=False)  # portfolio | network
    featured: Mapped[bool] = mapped_column(Boolean, default=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    responsibilities: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    qualifications: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    benefits: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)

    company_website: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    company_x: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    company_github: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )


class JobTag(Base):
    __tablename__ = "job_tags"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=new_id)
    slug: Mapped[str] = mapped_column(Text, unique=True, nullable=False, index=True)
    label: Mapped[str] = mapped_column(Text, nullable=False)
    color: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())


class JobRole(Base):
    __tablename__ = "job_roles"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=new_id)
    slug: Mapped[str] = mapped_column(Text, unique=True, nullable=False, index=True)
    label: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
