"""Conversion between `comments` rows and domain models.

Domain models are frozen pydantic models, so rows are mapped by hand rather
than through the ORM.
"""

from typing import Any, Dict

from meh.domain.model import Comment, NewComment
from meh.domain.value import CommentId, CommentStatus, PostPath, SubjectId

# Assigned by the database on insert, never written by the application
GENERATED_COLUMNS = {"id", "created_at"}


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Build a Comment from a row mapping.

    Empty optional text columns and NULL references come back as "" and None.
    """
    return Comment(
        id=CommentId(row["id"]),
        post=PostPath(row["post"]),
        author=row["author"],
        email=row.get("email") or "",
        website=row.get("website") or "",
        text=row["text"],
        html=row["html"],
        ip=row.get("ip") or "",
        status=CommentStatus(row["status"]),
        user=SubjectId(row["user"]) if row.get("user") else None,
        parent=CommentId(row["parent"]) if row.get("parent") else None,
        created_at=row["created_at"],
    )


def comment_to_dict(comment: NewComment) -> Dict[str, Any]:
    """Column values for inserting a comment."""
    data = comment.model_dump(exclude=GENERATED_COLUMNS)
    data["status"] = comment.status.value
    return data
