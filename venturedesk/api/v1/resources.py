"""
CRUD routes shared by every catalog table.

Each blueprint module describes its table with a Resource and calls
register_resource(); the five routes (list, get, create, update, delete)
behave the same way for all of them.
"""
from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable

from flask import Blueprint, jsonify, request
from pydantic import BaseModel, ValidationError
from sqlalchemy import inspect, or_
from sqlalchemy.exc import IntegrityError

from venturedesk.core.auth import require_api_key
from venturedesk.core.database import Base, get_db
from venturedesk.services.migrate import is_unique_violation

READ_ONLY_FIELDS = {"id", "created_at", "updated_at"}


@dataclass
class Resource:
    name: str
    model: type[Base]
    path: str
    permission: str
    schema: type[BaseModel]
    search_columns: tuple[str, ...] = ("title",)
    # query param -> column, comma-separated values are OR-ed
    multi_filters: dict[str, str] = field(default_factory=dict)
    sortable: tuple[str, ...] = ("created_at", "title")
    default_sort: str = "-created_at"
    prepare: Callable[[dict[str, Any]], dict[str, Any]] = lambda row: row


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _dt(dt):
    return dt.isoformat() if dt else None


def serialize(row: Base) -> dict[str, Any]:
    data = {}
    for attr in inspect(row).mapper.column_attrs:
        value = getattr(row, attr.key)
        data[attr.key] = _dt(value) if isinstance(value, datetime) else value
    return data


def _validation_detail(exc: ValidationError) -> list[dict[str, Any]]:
    return [{"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()]


def _json_object():
    data = request.get_json(silent=True)
    if not data:
        return None, (jsonify({"detail": "Request body must be JSON"}), 400)
    if not isinstance(data, dict):
        return None, (jsonify({"detail": "Request body must be a JSON object"}), 400)
    return data, None


def _parse_paging():
    try:
        limit = int(request.args.get("limit", 100))
        offset = int(request.args.get("offset", 0))
    except ValueError:
        return None, (jsonify({"detail": "limit and offset must be integers"}), 422)
    if not (1 <= limit <= 500):
        return None, (jsonify({"detail": "limit must be between 1 and 500"}), 422)
    if offset < 0:
        return None, (jsonify({"detail": "offset must be >= 0"}), 422)
    return (limit, offset), None


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

def register_resource(bp: Blueprint, res: Resource) -> None:
    model = res.model

    def list_rows():
        paging, err = _parse_paging()
        if err:
            return err
        limit, offset = paging

        sort = request.args.get("sort", res.default_sort)
        if sort.lstrip("-") not in res.sortable:
            return jsonify({"detail": f"sort must be one of {', '.join(res.sortable)}"}), 422

        with get_db() as db:
            query = db.query(model)

            text = (request.args.get("q") or "").strip()
            if text:
                pattern = f"%{text}%"
                query = query.filter(or_(*(getattr(model, c).ilike(pattern) for c in res.search_columns)))

            for param, column in res.multi_filters.items():
                values = [v.strip() for v in request.args.get(param, "").split(",") if v.strip()]
                if values:
                    query = query.filter(getattr(model, column).in_(values))

            if request.args.get("featured", "").lower() == "true" and hasattr(model, "featured"):
                query = query.filter(model.featured.is_(True))

            column = getattr(model, sort.lstrip("-"))
            query = query.order_by(column.desc() if sort.startswith("-") else column.asc())
            rows = query.offset(offset).limit(limit).all()
            return jsonify({"data": [serialize(r) for r in rows], "meta": {"limit": limit, "offset": offset}})

    def get_row(row_id):
        with get_db() as db:
            row = db.get(model, row_id)
            if not row:
                return jsonify({"detail": f"{res.name} not found"}), 404
            return jsonify({"data": serialize(row)})

    @require_api_key(res.permission)
    def create_row():
        data, err = _json_object()
        if err:
            return err
        try:
            payload = res.schema.model_validate(data)
        except ValidationError as exc:
            return jsonify({"detail": _validation_detail(exc)}), 422

        values = res.prepare({k: v for k, v in payload.model_dump().items() if not (k == "id" and v is None)})
        with get_db() as db:
            row = model(**values)
            db.add(row)
            try:
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                if is_unique_violation(exc):
                    return jsonify({"detail": f"{res.name} already exists"}), 409
                return jsonify({"detail": f"Create failed: {exc.orig}"}), 422
            db.refresh(row)
            return jsonify({"data": serialize(row)}), 201

    @require_api_key(res.permission)
    def update_row(row_id):
        data, err = _json_object()
        if err:
            return err

        with get_db() as db:
            row = db.get(model, row_id)
            if not row:
                return jsonify({"detail": f"{res.name} not found"}), 404

            current = {
                name: getattr(row, name)
                for name in res.schema.model_fields
                if getattr(row, name, None) is not None
            }
            try:
                merged = res.schema.model_validate({**current, **data}).model_dump()
            except ValidationError as exc:
                return jsonify({"detail": _validation_detail(exc)}), 422

            changes = res.prepare({k: merged[k] for k in data if k in merged and k not in READ_ONLY_FIELDS})
            for name, value in changes.items():
                setattr(row, name, value)
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                return jsonify({"detail": "Update would create a duplicate"}), 409
            db.refresh(row)
            return jsonify({"data": serialize(row)})

    @require_api_key(res.permission)
    def delete_row(row_id):
        with get_db() as db:
            row = db.get(model, row_id)
            if not row:
                return jsonify({"detail": f"{res.name} not found"}), 404
            db.delete(row)
            try:
                db.commit()
            except Exception:
                db.rollback()
                traceback.print_exc()
                return jsonify({"detail": f"Failed to delete {res.name}"}), 500
            return jsonify({"deleted": True, "id": row_id})

    endpoint = res.path.strip("/").replace("/", "_")
    bp.add_url_rule(res.path, f"list_{endpoint}", list_rows, methods=["GET"])
    bp.add_url_rule(res.path, f"create_{endpoint}", create_row, methods=["POST"])
    bp.add_url_rule(f"{res.path}/<row_id>", f"get_{endpoint}", get_row, methods=["GET"])
    bp.add_url_rule(f"{res.path}/<row_id>", f"update_{endpoint}", update_row, methods=["PUT", "PATCH"])
    bp.add_url_rule(f"{res.path}/<row_id>", f"delete_{endpoint}", delete_row, methods=["DELETE"])
