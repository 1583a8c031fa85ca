from __future__ import annotations

from flask import Blueprint, jsonify

from venturedesk.api.v1.resources import serialize
from venturedesk.core.database import get_db
from venturedesk.data.reference import (
    AVAILABILITY_LABELS,
    EXPERIENCE_LABELS,
    JOB_TAG_LABELS,
    NEWS_CATEGORY_LABELS,
    SKILL_LABELS,
)
from venturedesk.models.job import JobRole, JobTag
from venturedesk.models.portfolio import InvestmentCategory

bp = Blueprint("reference", __name__)


def _vocabulary(model):
    with get_db() as db:
        rows = db.query(model).order_by(model.label.asc()).all()
        return jsonify({"data": [serialize(r) for r in rows]})


@bp.get("/job-tags")
def list_job_tags():
    return _vocabulary(JobTag)


@bp.get("/job-roles")
def list_job_roles():
    return _vocabulary(JobRole)


@bp.get("/investment-categories")
def list_investment_categories():
    return _vocabulary(InvestmentCategory)


@bp.get("/labels")
def get_labels():
    """Display labels for slugs stored on jobs, candidates and news."""
    return jsonify({
        "job_tags": JOB_TAG_LABELS,
        "skills": SKILL_LABELS,
        "news_categories": NEWS_CATEGORY_LABELS,
        "availability": AVAILABILITY_LABELS,
        "experience": EXPERIENCE_LABELS,
    })
