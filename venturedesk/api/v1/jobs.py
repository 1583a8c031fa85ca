from __future__ import annotations

from flask import Blueprint

from venturedesk.api.v1.resources import Resource, register_resource
from venturedesk.models.job import Job
from venturedesk.schemas import JobCreate

bp = Blueprint("jobs", __name__)

register_resource(bp, Resource(
    name="Job",
    model=Job,
    path="/jobs",
    permission="jobs:write",
    schema=JobCreate,
    search_columns=("title", "company", "location"),
    multi_filters={"category": "category", "company": "company", "department": "department", "remote": "remote"},
    sortable=("created_at", "title", "company"),
))
