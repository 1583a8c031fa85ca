"""
Pydantic shapes for static source records and admin API payloads.

Source records mirror the hard-coded data the site used before the database
existed; each knows how to turn itself into an insert payload for its table.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from venturedesk.data.reference import (
    ANNOUNCEMENT_PLATFORMS,
    AVAILABILITY_STATUSES,
    EXPERIENCE_LEVELS,
    INVESTMENT_STATUSES,
    INVESTMENT_TIERS,
    RELATIONSHIP_CATEGORIES,
    REMOTE_MODES,
    VISIBILITY_MODES,
    to_slug,
)

# Literal[...] of a tuple expands to its members
RelationshipCategory = Literal[RELATIONSHIP_CATEGORIES]
RemoteMode = Literal[REMOTE_MODES]
Availability = Literal[AVAILABILITY_STATUSES]
Visibility = Literal[VISIBILITY_MODES]
Experience = Literal[EXPERIENCE_LEVELS]
InvestmentStatus = Literal[INVESTMENT_STATUSES]
InvestmentTier = Literal[INVESTMENT_TIERS]
Platform = Literal[ANNOUNCEMENT_PLATFORMS]


# ---------------------------------------------------------------------------
# Static source records
# ---------------------------------------------------------------------------

class SourceCompany(BaseModel):
    name: str
    logo: Optional[str] = None
    website: Optional[str] = None
    category: RelationshipCategory
    x: Optional[str] = None
    github: Optional[str] = None


class SourceJob(BaseModel):
    id: Optional[str] = None
    title: str
    company: SourceCompany
    location: Optional[str] = None
    remote: bool = False
    type: Optional[str] = None
    department: Optional[str] = None
    salary: Optional[str] = None
    link: str
    featured: bool = False
    tags: list[str] = Field(default_factory=list)
    description: Optional[str] = None

    def to_row(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company.name,
            "company_logo": self.company.logo,
            "link": self.link,
            "location": self.location or None,
            "remote": "Remote" if self.remote else None,
            "type": self.type or None,
            "salary": self.salary or None,
            "department": self.department or None,
            "tags": list(self.tags),
            "category": self.company.category,
            "featured": self.featured,
            "description": self.description or None,
            "company_website": self.company.website or None,
            "company_x": self.company.x or None,
            "company_github": self.company.github or None,
        }


class SourceSocials(BaseModel):
    x: Optional[str] = None
    github: Optional[str] = None
    linkedin: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    telegram: Optional[str] = None
    cv: Optional[str] = None


class SourceCandidate(BaseModel):
    id: Optional[str] = None
    visibility: Visibility = "public"
    name: str
    anonymous_alias: Optional[str] = None
    title: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    skills: list[str] = Field(default_factory=list)
    location: Optional[str] = None
    experience: Optional[Experience] = None
    availability: Availability = "looking"
    socials: SourceSocials = Field(default_factory=SourceSocials)
    featured: bool = False

    @property
    def display_name(self) -> str:
        """The one name that is ever stored: alias for anonymous profiles."""
        if self.visibility == "anonymous":
            return self.anonymous_alias or "Anonymous"
        return self.name

    def to_row(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.display_name,
            "title": self.title or None,
            "location": self.location or None,
            "summary": self.bio or None,
            "skills": list(self.skills),
            "experience": self.experience,
            "education": None,
            "image": self.profile_image or None,
            "cv": self.socials.cv,
            "featured": self.featured,
            "available": self.availability != "not-looking",
            "availability": self.availability,
            "email": self.socials.email,
            "telegram": self.socials.telegram,
            "calendly": None,
            "x": self.socials.x,
            "github": self.socials.github,
            "linkedin": self.socials.linkedin,
            "website": self.socials.website,
        }


class SourceCuratedLink(BaseModel):
    id: Optional[str] = None
    title: str
    url: str
    source: str
    date: datetime
    description: Optional[str] = None
    category: str
    featured: bool = False

    def to_row(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "url": self.url,
            "source": self.source,
            "date": self.date,
            "description": self.description or None,
            "category": self.category,
            "featured": self.featured,
        }


class SourceInvestment(BaseModel):
    title: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    logo: Optional[str] = None
    tier: int = Field(ge=1, le=4)
    featured: bool = False
    status: InvestmentStatus = "active"
    x: Optional[str] = None
    github: Optional[str] = None

    def to_row(self) -> dict[str, Any]:
        return {
            "id": to_slug(self.title),
            "title": self.title,
            "description": self.description,
            "image_url": self.image_url,
            "logo": self.logo,
            "tier": str(self.tier),
            "featured": self.featured,
            "status": self.status,
            "x": self.x or None,
            "github": self.github or None,
        }


class SourceAffiliation(BaseModel):
    title: str
    role: str
    date_begin: Optional[str] = None
    date_end: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    logo: Optional[str] = None

    def to_row(self) -> dict[str, Any]:
        return {"id": to_slug(f"{self.title}-{self.role}"), **self.model_dump()}


# ---------------------------------------------------------------------------
# Admin API payloads
# ---------------------------------------------------------------------------

class _Payload(BaseModel):
    # Unknown keys are dropped rather than written to the row.
    model_config = ConfigDict(extra="ignore")


class CuratedLinkCreate(_Payload):
    id: Optional[str] = None
    title: str = Field(min_length=1)
    url: str = Field(min_length=1)
    source: str = Field(min_length=1)
    date: datetime
    description: Optional[str] = None
    category: str = Field(min_length=1)
    featured: bool = False


class AnnouncementCreate(_Payload):
    id: Optional[str] = None
    title: str = Field(min_length=1)
    url: str = Field(min_length=1)
    company: str = Field(min_length=1)
    company_logo: Optional[str] = None
    platform: Platform
    date: datetime
    description: Optional[str] = None
    category: str = Field(min_length=1)
    featured: bool = False


class JobCreate(_Payload):
    id: Optional[str] = None
    title: str = Field(min_length=1)
    company: str = Field(min_length=1)
    company_logo: Optional[str] = None
    link: str = Field(min_length=1)
    location: Optional[str] = None
    remote: Optional[RemoteMode] = None
    type: Optional[str] = None
    salary: Optional[str] = None
    department: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    category: RelationshipCategory
    featured: bool = False
    description: Optional[str] = None
    company_website: Optional[str] = None
    company_x: Optional[str] = None
    company_github: Optional[str] = None


class CandidateCreate(_Payload):
    id: Optional[str] = None
    name: str = Field(min_length=1)
    title: Optional[str] = None
    location: Optional[str] = None
    summary: Optional[str] = None
    skills: list[str] = Field(default_factory=list)
    experience: Optional[Experience] = None
    image: Optional[str] = None
    cv: Optional[str] = None
    featured: bool = False
    availability: Availability = "looking"
    email: Optional[str] = None
    telegram: Optional[str] = None
    x: Optional[str] = None
    github: Optional[str] = None
    linkedin: Optional[str] = None
    website: Optional[str] = None


class InvestmentCreate(_Payload):
    id: Optional[str] = None
    title: str = Field(min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    logo: Optional[str] = None
    tier: Optional[InvestmentTier] = None
    featured: bool = False
    status: InvestmentStatus = "active"
    categories: list[str] = Field(default_factory=list)
    website: Optional[str] = None
    x: Optional[str] = None
    github: Optional[str] = None

    @field_validator("tier", mode="before")
    @classmethod
    def _tier_as_text(cls, value):
        return str(value) if isinstance(value, int) else value


class AffiliationCreate(_Payload):
    id: Optional[str] = None
    title: str = Field(min_length=1)
    role: str = Field(min_length=1)
    date_begin: Optional[str] = None
    date_end: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    logo: Optional[str] = None
    website: Optional[str] = None
