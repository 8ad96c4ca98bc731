"""Strongly typed identifiers for comment entities."""

from typing import NewType

# Store-assigned integer key of a comment
CommentId = NewType("CommentId", int)

# Opaque path of the blog post a comment belongs to, e.g. "/2024/05/hello-world"
PostPath = NewType("PostPath", str)

# Opaque per-session subject ("sub" claim) of an identity token
SubjectId = NewType("SubjectId", str)
