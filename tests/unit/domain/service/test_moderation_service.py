"""Unit tests for the moderation policy."""

import time

import pytest

from meh.domain.error import RateLimitError
from meh.domain.model import NewComment
from meh.domain.repository import CommentRepository
from meh.domain.service import (
    ModerationService,
    check_token_age,
    decide_initial_status,
)
from meh.domain.value import CommentStatus, IdentityToken, PostPath, SubjectId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

NOW = 1_700_000_000


def visitor(sub: str = "visitor-1", age: int = 60) -> IdentityToken:
    return IdentityToken(
        scopes=frozenset({"user"}), iat=int(time.time()) - age, sub=SubjectId(sub)
    )


async def store(
    repo: CommentRepository,
    status: CommentStatus,
    user: str | None = None,
    ip: str = "",
) -> None:
    await repo.insert(
        NewComment(
            post=PostPath("/blog/hello"),
            author="Someone",
            text="Earlier comment",
            html="<p>Earlier comment</p>",
            ip=ip,
            status=status,
            user=SubjectId(user) if user else None,
        )
    )


class TestCheckTokenAge:
    """Tests for the token age gate."""

    def test_fresh_token_is_too_soon(self):
        with pytest.raises(RateLimitError) as exc_info:
            check_token_age(NOW, NOW, 30, 7200)

        assert exc_info.value.tag == "toosoon"
        assert str(exc_info.value).startswith("`toosoon`")

    def test_token_just_below_minimum_is_too_soon(self):
        with pytest.raises(RateLimitError) as exc_info:
            check_token_age(NOW - 29, NOW, 30, 7200)

        assert exc_info.value.tag == "toosoon"

    def test_token_at_minimum_age_passes(self):
        check_token_age(NOW - 30, NOW, 30, 7200)

    def test_token_at_maximum_age_passes(self):
        check_token_age(NOW - 7200, NOW, 30, 7200)

    def test_stale_token_is_too_late(self):
        with pytest.raises(RateLimitError) as exc_info:
            check_token_age(NOW - 7201, NOW, 30, 7200)

        assert exc_info.value.tag == "toolate"
        assert str(exc_info.value).startswith("`toolate`")


class TestDecideInitialStatus:
    """Tests for the initial status policy."""

    def test_admin_is_always_approved(self):
        assert (
            decide_initial_status(True, CommentStatus.SPAM, CommentStatus.SPAM)
            == CommentStatus.APPROVED
        )

    @pytest.mark.parametrize(
        "previous",
        [CommentStatus.APPROVED, CommentStatus.SPAM, CommentStatus.PENDING],
    )
    def test_returning_poster_inherits_status(self, previous):
        assert decide_initial_status(False, previous, None) == previous

    def test_user_history_wins_over_ip_history(self):
        assert (
            decide_initial_status(False, CommentStatus.APPROVED, CommentStatus.SPAM)
            == CommentStatus.APPROVED
        )

    def test_spam_from_same_ip_marks_as_spam(self):
        assert (
            decide_initial_status(False, None, CommentStatus.SPAM)
            == CommentStatus.SPAM
        )

    def test_approved_from_same_ip_is_not_trusted(self):
        assert (
            decide_initial_status(False, None, CommentStatus.APPROVED)
            == CommentStatus.PENDING
        )

    def test_no_history_is_pending(self):
        assert decide_initial_status(False, None, None) == CommentStatus.PENDING


class TestCheckRateLimits:
    """Tests for ModerationService.check_rate_limits."""

    @pytest.mark.asyncio
    async def test_passes_without_history(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)

        await moderation_service.check_rate_limits(visitor(), "10.0.0.1")

    @pytest.mark.asyncio
    async def test_rejects_fresh_token(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)

        with pytest.raises(RateLimitError) as exc_info:
            await moderation_service.check_rate_limits(visitor(age=0), "10.0.0.1")

        assert exc_info.value.tag == "toosoon"

    @pytest.mark.asyncio
    async def test_rejects_stale_token(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)

        with pytest.raises(RateLimitError) as exc_info:
            await moderation_service.check_rate_limits(
                visitor(age=3 * 3600), "10.0.0.1"
            )

        assert exc_info.value.tag == "toolate"

    @pytest.mark.asyncio
    async def test_rejects_subject_with_pending_comment(self, unit_env):
        # Arrange
        moderation_service = await unit_env.get(ModerationService)
        repo = await unit_env.get(CommentRepository)
        await store(repo, CommentStatus.PENDING, user="visitor-1", ip="10.0.0.9")

        # Act / Assert
        with pytest.raises(RateLimitError) as exc_info:
            await moderation_service.check_rate_limits(visitor(), "10.0.0.1")

        assert exc_info.value.tag == "pending"

    @pytest.mark.asyncio
    async def test_rejects_ip_with_pending_comment(self, unit_env):
        # Arrange
        moderation_service = await unit_env.get(ModerationService)
        repo = await unit_env.get(CommentRepository)
        await store(repo, CommentStatus.PENDING, user="someone-else", ip="10.0.0.1")

        # Act / Assert
        with pytest.raises(RateLimitError) as exc_info:
            await moderation_service.check_rate_limits(visitor(), "10.0.0.1")

        assert exc_info.value.tag == "pending"

    @pytest.mark.asyncio
    async def test_approved_history_does_not_block(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        repo = await unit_env.get(CommentRepository)
        await store(repo, CommentStatus.APPROVED, user="visitor-1", ip="10.0.0.1")

        await moderation_service.check_rate_limits(visitor(), "10.0.0.1")

    @pytest.mark.asyncio
    async def test_token_age_checked_before_pending(self, unit_env):
        # Arrange
        moderation_service = await unit_env.get(ModerationService)
        repo = await unit_env.get(CommentRepository)
        await store(repo, CommentStatus.PENDING, user="visitor-1")

        # Act / Assert
        with pytest.raises(RateLimitError) as exc_info:
            await moderation_service.check_rate_limits(visitor(age=5), "10.0.0.1")

        assert exc_info.value.tag == "toosoon"

    @pytest.mark.asyncio
    async def test_without_token_only_ip_gate_applies(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        repo = await unit_env.get(CommentRepository)

        await moderation_service.check_rate_limits(None, "10.0.0.1")

        await store(repo, CommentStatus.PENDING, ip="10.0.0.1")
        with pytest.raises(RateLimitError):
            await moderation_service.check_rate_limits(None, "10.0.0.1")


class TestInitialStatus:
    """Tests for ModerationService.initial_status."""

    @pytest.mark.asyncio
    async def test_ignores_deleted_history(self, unit_env):
        # Arrange
        moderation_service = await unit_env.get(ModerationService)
        repo = await unit_env.get(CommentRepository)
        await store(repo, CommentStatus.APPROVED, user="visitor-1")
        await store(repo, CommentStatus.DELETED, user="visitor-1")

        # Act
        status = await moderation_service.initial_status(visitor(), "10.0.0.1")

        # Assert
        assert status == CommentStatus.APPROVED

    @pytest.mark.asyncio
    async def test_uses_newest_comment(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        repo = await unit_env.get(CommentRepository)
        await store(repo, CommentStatus.APPROVED, user="visitor-1")
        await store(repo, CommentStatus.SPAM, user="visitor-1")

        status = await moderation_service.initial_status(visitor(), "10.0.0.1")

        assert status == CommentStatus.SPAM

    @pytest.mark.asyncio
    async def test_spam_ip_for_new_subject(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        repo = await unit_env.get(CommentRepository)
        await store(repo, CommentStatus.SPAM, user="spammer", ip="10.0.0.66")

        status = await moderation_service.initial_status(
            visitor("newcomer"), "10.0.0.66"
        )

        assert status == CommentStatus.SPAM

    @pytest.mark.asyncio
    async def test_admin_token_is_approved(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        admin = IdentityToken(
            scopes=frozenset({"admin", "user"}), iat=0, sub=SubjectId("admin-1")
        )

        status = await moderation_service.initial_status(admin, "10.0.0.1")

        assert status == CommentStatus.APPROVED
