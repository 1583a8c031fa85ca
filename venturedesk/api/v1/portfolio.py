from __future__ import annotations

from flask import Blueprint

from venturedesk.api.v1.resources import Resource, register_resource
from venturedesk.models.portfolio import Affiliation, Investment
from venturedesk.schemas import AffiliationCreate, InvestmentCreate

bp = Blueprint("portfolio", __name__)

register_resource(bp, Resource(
    name="Investment",
    model=Investment,
    path="/investments",
    permission="investments:write",
    schema=InvestmentCreate,
    search_columns=("title", "description"),
    multi_filters={"tier": "tier", "status": "status"},
    sortable=("created_at", "title", "tier"),
    default_sort="tier",
))

register_resource(bp, Resource(
    name="Affiliation",
    model=Affiliation,
    path="/affiliations",
    permission="affiliations:write",
    schema=AffiliationCreate,
    search_columns=("title", "role"),
    sortable=("created_at", "title"),
))
