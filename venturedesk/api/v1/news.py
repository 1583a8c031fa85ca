from __future__ import annotations

from flask import Blueprint

from venturedesk.api.v1.resources import Resource, register_resource
from venturedesk.models.news import Announcement, CuratedLink
from venturedesk.schemas import AnnouncementCreate, CuratedLinkCreate

bp = Blueprint("news", __name__)

register_resource(bp, Resource(
    name="Curated link",
    model=CuratedLink,
    path="/news/curated",
    permission="news:write",
    schema=CuratedLinkCreate,
    search_columns=("title", "source", "description"),
    multi_filters={"category": "category"},
    sortable=("date", "title", "created_at"),
    default_sort="-date",
))

register_resource(bp, Resource(
    name="Announcement",
    model=Announcement,
    path="/news/announcements",
    permission="news:write",
    schema=AnnouncementCreate,
    search_columns=("title", "company", "description"),
    multi_filters={"category": "category", "platform": "platform", "company": "company"},
    sortable=("date", "title", "created_at"),
    default_sort="-date",
))
