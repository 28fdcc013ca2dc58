"""Domain layer DI providers."""

from dishka import Scope, provide

from curbside.config import AuthSettings, VisibilitySettings
from curbside.domain.repository import (
    CommentRepository,
    ImageRepository,
    ItemRepository,
    KudosRepository,
    PostRepository,
    UserRepository,
)
from curbside.domain.service import (
    CommentService,
    JWTService,
    KudosService,
    ParticipationGate,
    PostAssembler,
    PostService,
    UserService,
)
from curbside.util.clock import Clock
from curbside.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, clock: Clock
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, clock=clock)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        item_repository: ItemRepository,
        image_repository: ImageRepository,
        user_service: UserService,
        clock: Clock,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            item_repository=item_repository,
            image_repository=image_repository,
            user_service=user_service,
            clock=clock,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        clock: Clock,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            clock=clock,
        )

    @provide
    def get_kudos_service(
        self,
        kudos_repository: KudosRepository,
        post_repository: PostRepository,
        user_service: UserService,
        clock: Clock,
    ) -> KudosService:
        """Provide kudos ledger service."""
        return KudosService(
            kudos_repository=kudos_repository,
            post_repository=post_repository,
            user_service=user_service,
            clock=clock,
        )

    @provide
    def get_participation_gate(
        self,
        user_service: UserService,
        clock: Clock,
        visibility: VisibilitySettings,
    ) -> ParticipationGate:
        """Provide participation gate."""
        return ParticipationGate(
            user_service=user_service, clock=clock, visibility=visibility
        )

    @provide
    def get_post_assembler(
        self,
        post_repository: PostRepository,
        item_repository: ItemRepository,
        image_repository: ImageRepository,
        comment_service: CommentService,
        kudos_service: KudosService,
        user_service: UserService,
        gate: ParticipationGate,
    ) -> PostAssembler:
        """Provide post aggregate assembler."""
        return PostAssembler(
            post_repository=post_repository,
            item_repository=item_repository,
            image_repository=image_repository,
            comment_service=comment_service,
            kudos_service=kudos_service,
            user_service=user_service,
            gate=gate,
        )
