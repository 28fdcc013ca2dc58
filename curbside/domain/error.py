"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class DuplicateKudosError(BusinessRuleViolationError):
    """Raised when a user gives kudos to the same post twice."""

    def __init__(self, post_id: str, user_id: str):
        self.post_id = post_id
        self.user_id = user_id
        super().__init__("User already gave kudos to this post")


class UserAlreadyExistsError(BusinessRuleViolationError):
    """Raised when registering with a taken username or email."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"A user with this {field} already exists")


class InvalidCredentialsError(DomainError):
    """Raised when a username/password pair does not match."""

    def __init__(self) -> None:
        super().__init__("Invalid username or password")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class AccessDeniedError(DomainError):
    """Raised when the participation gate hides a post from the viewer."""

    def __init__(self, post_id: str):
        self.post_id = post_id
        super().__init__(
            "You need to participate by posting to view recent finds immediately"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
