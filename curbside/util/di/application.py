"""Application layer DI providers."""

from dishka import Scope, provide

from curbside.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from curbside.application.usecase.comment import CreateCommentUseCase
from curbside.application.usecase.kudos import AddKudosUseCase, RemoveKudosUseCase
from curbside.application.usecase.post import (
    CreatePostUseCase,
    GetPostUseCase,
    ListNearbyPostsUseCase,
    ListRecentPostsUseCase,
    ListUserPostsUseCase,
    UpdatePostUseCase,
)
from curbside.config import VisibilitySettings
from curbside.domain.service import (
    CommentService,
    JWTService,
    KudosService,
    ParticipationGate,
    PostAssembler,
    PostService,
    UserService,
)
from curbside.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        gate: ParticipationGate,
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(
            user_service=user_service, jwt_service=jwt_service, gate=gate
        )

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        gate: ParticipationGate,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            user_service=user_service, jwt_service=jwt_service, gate=gate
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        gate: ParticipationGate,
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(
            jwt_service=jwt_service, user_service=user_service, gate=gate
        )

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, post_service: PostService, assembler: PostAssembler
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, assembler=assembler)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self,
        post_service: PostService,
        gate: ParticipationGate,
        assembler: PostAssembler,
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service, gate=gate, assembler=assembler
        )

    @provide(scope=Scope.REQUEST)
    def get_list_nearby_posts_use_case(
        self, assembler: PostAssembler, visibility: VisibilitySettings
    ) -> ListNearbyPostsUseCase:
        """Provide nearby listing use case."""
        return ListNearbyPostsUseCase(assembler=assembler, visibility=visibility)

    @provide(scope=Scope.REQUEST)
    def get_list_recent_posts_use_case(
        self, assembler: PostAssembler, visibility: VisibilitySettings
    ) -> ListRecentPostsUseCase:
        """Provide recent listing use case."""
        return ListRecentPostsUseCase(assembler=assembler, visibility=visibility)

    @provide(scope=Scope.REQUEST)
    def get_list_user_posts_use_case(
        self, assembler: PostAssembler
    ) -> ListUserPostsUseCase:
        """Provide per-user listing use case."""
        return ListUserPostsUseCase(assembler=assembler)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self, post_service: PostService, assembler: PostAssembler
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service, assembler=assembler)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    # Kudos use cases
    @provide(scope=Scope.REQUEST)
    def get_add_kudos_use_case(self, kudos_service: KudosService) -> AddKudosUseCase:
        """Provide add kudos use case."""
        return AddKudosUseCase(kudos_service=kudos_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_kudos_use_case(
        self, kudos_service: KudosService
    ) -> RemoveKudosUseCase:
        """Provide remove kudos use case."""
        return RemoveKudosUseCase(kudos_service=kudos_service)
