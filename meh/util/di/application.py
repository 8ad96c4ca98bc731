"""Application layer DI providers."""

from dishka import Scope, provide

from meh.application.usecase.comment import (
    CountCommentsUseCase,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    EditCommentUseCase,
    GetCommentUseCase,
    ListCommentsUseCase,
    SetStatusUseCase,
)
from meh.application.usecase.token import IssueAdminTokenUseCase, RefreshTokenUseCase
from meh.domain.repository import Transaction
from meh.domain.service import (
    AvatarService,
    CommentService,
    NotificationService,
    TokenService,
)
from meh.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        token_service: TokenService,
        notification_service: NotificationService,
        avatar_service: AvatarService,
        transaction: Transaction,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            token_service=token_service,
            notification_service=notification_service,
            avatar_service=avatar_service,
            transaction=transaction,
        )

    @provide
    def get_get_comment_use_case(
        self,
        comment_service: CommentService,
        token_service: TokenService,
        avatar_service: AvatarService,
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(
            comment_service=comment_service,
            token_service=token_service,
            avatar_service=avatar_service,
        )

    @provide
    def get_edit_comment_use_case(
        self,
        comment_service: CommentService,
        token_service: TokenService,
        avatar_service: AvatarService,
    ) -> EditCommentUseCase:
        """Provide edit comment use case."""
        return EditCommentUseCase(
            comment_service=comment_service,
            token_service=token_service,
            avatar_service=avatar_service,
        )

    @provide
    def get_set_status_use_case(
        self,
        comment_service: CommentService,
        token_service: TokenService,
        avatar_service: AvatarService,
    ) -> SetStatusUseCase:
        """Provide set status use case."""
        return SetStatusUseCase(
            comment_service=comment_service,
            token_service=token_service,
            avatar_service=avatar_service,
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService, token_service: TokenService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, token_service=token_service
        )

    @provide
    def get_list_comments_use_case(
        self,
        comment_service: CommentService,
        token_service: TokenService,
        avatar_service: AvatarService,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service,
            token_service=token_service,
            avatar_service=avatar_service,
        )

    @provide
    def get_count_comments_use_case(
        self, comment_service: CommentService
    ) -> CountCommentsUseCase:
        """Provide count comments use case."""
        return CountCommentsUseCase(comment_service=comment_service)

    # Token use cases
    @provide
    def get_issue_admin_token_use_case(
        self, token_service: TokenService
    ) -> IssueAdminTokenUseCase:
        """Provide admin login use case."""
        return IssueAdminTokenUseCase(token_service=token_service)

    @provide
    def get_refresh_token_use_case(
        self, token_service: TokenService
    ) -> RefreshTokenUseCase:
        """Provide token refresh use case."""
        return RefreshTokenUseCase(token_service=token_service)
