"""Shape stored user documents into API responses."""

from typing import Any, Dict, List, Sequence


def serialize_id(value: Any) -> str:
    """Render a MongoDB id as a string."""
    return str(value)


def build_exercise_obj(description: str, duration: int, date: str) -> Dict[str, Any]:
    return {
        "description": description,
        "duration": duration,
        "date": date,
    }


def build_exercise_obj_response(user_id: Any, username: str, exercise: Dict[str, Any]) -> Dict[str, Any]:
    """Merge the owner's id and username with a new exercise's fields.

    The exercise's own id is left out.
    """
    response = {
        "_id": serialize_id(user_id),
        "username": username,
    }
    response.update(build_exercise_obj(exercise["description"], exercise["duration"], exercise["date"]))
    return response


def build_id_less_log(log: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Drop internal ids from log entries."""
    return [
        build_exercise_obj(entry.get("description"), entry.get("duration"), entry.get("date"))
        for entry in log
    ]


def build_version_less_user_obj(user: Dict[str, Any], log: Sequence[Dict[str, Any]]) -> Dict[str, Any]:
    """Build the log response for ``user``, counting the given log."""
    return {
        "_id": serialize_id(user["_id"]),
        "username": user["username"],
        "count": len(log),
        "log": list(log),
    }


def build_user_summary(user: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "_id": serialize_id(user["_id"]),
        "username": user["username"],
    }
