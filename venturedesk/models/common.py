import uuid


def new_id() -> str:
    """Random opaque row id used when a record has no slug of its own."""
    return uuid.uuid4().hex
