from __future__ import annotations

from flask import Blueprint

from venturedesk.api.v1.resources import Resource, register_resource
from venturedesk.models.candidate import Candidate
from venturedesk.schemas import CandidateCreate

bp = Blueprint("candidates", __name__)


def _sync_available(row: dict) -> dict:
    # Keep the legacy boolean in step for older readers.
    if "availability" in row:
        row["available"] = row["availability"] != "not-looking"
    return row


register_resource(bp, Resource(
    name="Candidate",
    model=Candidate,
    path="/candidates",
    permission="candidates:write",
    schema=CandidateCreate,
    search_columns=("name", "title", "summary"),
    multi_filters={"availability": "availability", "experience": "experience"},
    sortable=("created_at", "name"),
    prepare=_sync_available,
))
