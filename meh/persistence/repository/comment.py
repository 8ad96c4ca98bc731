"""PostgreSQL implementation of Comment repository."""

from typing import Collection, List, Optional

from sqlalchemy import (
    asc,
    desc,
    exists,
    func,
    literal,
    or_,
    select,
    update,
)
from sqlalchemy.ext.asyncio import AsyncSession

from meh.domain.error import PendingCommentConflict, StoreError
from meh.domain.model import Comment, NewComment
from meh.domain.repository import CommentRepository, HistoryKey
from meh.domain.value import CommentId, CommentStatus, PostPath
from meh.persistence.mappers import comment_to_dict, row_to_comment
from meh.persistence.tables import comments_table

# Advisory lock namespaces (first key of the two-key lock form)
# Locks are always taken user first, then ip, so two submitters never wait
# on each other in opposite order
_LOCK_NAMESPACE = {"user": 1, "ip": 2}


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(
        self,
        post: PostPath,
        statuses: Collection[CommentStatus],
    ) -> List[Comment]:
        """Find the comments of a post, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post == post)
            .where(comments_table.c.status.in_([s.value for s in statuses]))
            .order_by(asc(comments_table.c.created_at), asc(comments_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_post(
        self,
        post: PostPath,
        statuses: Collection[CommentStatus],
    ) -> int:
        """Count the comments of a post having one of the given statuses."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post == post)
            .where(comments_table.c.status.in_([s.value for s in statuses]))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_latest_status(
        self, key: HistoryKey, value: str
    ) -> Optional[CommentStatus]:
        """Get the status of the newest non-deleted comment by a submitter."""
        stmt = (
            select(comments_table.c.status)
            .where(comments_table.c[key] == value)
            .where(comments_table.c.status != CommentStatus.DELETED.value)
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(1)
        )
        result = await self.session.execute(stmt)
        status = result.scalar()
        return CommentStatus(status) if status else None

    async def has_pending(self, key: HistoryKey, value: str) -> bool:
        """Check whether a submitter has a comment awaiting moderation."""
        stmt = select(
            exists()
            .where(comments_table.c[key] == value)
            .where(comments_table.c.status == CommentStatus.PENDING.value)
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def insert(self, comment: NewComment) -> Comment:
        """Store a new comment unconditionally."""
        stmt = (
            comments_table.insert()
            .values(**comment_to_dict(comment))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise StoreError("Insert returned no row")

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def insert_unless_pending(self, comment: NewComment) -> Comment:
        """Store a new comment unless its submitter already has a pending one.

        Takes a transaction-scoped advisory lock per submitter key, then
        inserts with a NOT EXISTS guard. The locks are released on commit or
        rollback of the request transaction.
        """
        keys: list[tuple[HistoryKey, str]] = []
        if comment.user:
            keys.append(("user", comment.user))
        if comment.ip:
            keys.append(("ip", comment.ip))

        for key, value in keys:
            await self.session.execute(
                select(
                    func.pg_advisory_xact_lock(
                        _LOCK_NAMESPACE[key], func.hashtext(value)
                    )
                )
            )

        data = comment_to_dict(comment)
        source = select(
            *[
                literal(value, type_=comments_table.c[column].type).label(column)
                for column, value in data.items()
            ]
        )
        if keys:
            pending = (
                select(comments_table.c.id)
                .where(comments_table.c.status == CommentStatus.PENDING.value)
                .where(or_(*[comments_table.c[key] == value for key, value in keys]))
            )
            source = source.where(~exists(pending))

        stmt = (
            comments_table.insert()
            .from_select(list(data), source)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            # Only the NOT EXISTS guard suppresses the row
            conflict = keys[0][0]
            for key, value in keys:
                if await self.has_pending(key, value):
                    conflict = key
                    break
            raise PendingCommentConflict(conflict)

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def update(self, comment: Comment) -> Optional[Comment]:
        """Write the editable fields of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment.id)
            .values(
                author=comment.author,
                email=comment.email,
                website=comment.website,
                text=comment.text,
                html=comment.html,
            )
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def update_status(self, comment_id: CommentId, status: CommentStatus) -> int:
        """Overwrite the status of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(status=status.value)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment (hard delete)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
