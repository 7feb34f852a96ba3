"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Carries optional field-level messages for the API error body.
    """

    def __init__(self, message: str, errors: list[dict[str, str]] | None = None):
        self.errors = errors or []
        super().__init__(message)


class InvalidCategoryError(ValidationError):
    """Raised when a category slug does not resolve to an active category."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__("Invalid category")


class InvalidContentKindError(ValidationError):
    """Raised when a content kind token is not one of the known kinds."""

    def __init__(self, value: str | None):
        self.value = value
        super().__init__("Invalid content type")


class InvalidVoteTypeError(ValidationError):
    """Raised when a vote token is neither 'upvote' nor 'downvote'."""

    def __init__(self, value: str | None):
        self.value = value
        super().__init__("Invalid vote type")


class DuplicateContentError(DomainError):
    """Raised when an identical active content item already exists."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"{label} already exists")


class DuplicateCommentError(DomainError):
    """Raised when the same user repeats an active comment verbatim."""

    def __init__(self):
        super().__init__("Duplicate comment")


class DuplicateVoteError(DomainError):
    """Raised when the vote ledger's uniqueness guard rejects a write."""

    def __init__(self):
        super().__init__("Duplicate vote ignored")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
