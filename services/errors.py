from typing import List

from pydantic import ValidationError as PydanticValidationError


class FeedError(Exception):
    """Base class for errors raised by the feed store"""

    code = "INTERNAL_SERVER_ERROR"
    status_code = 500


class ValidationError(FeedError):
    """Input failed a shape or constraint check; nothing was changed"""

    code = "BAD_REQUEST"
    status_code = 400

    def __init__(self, issues: List[str]):
        self.issues = issues
        super().__init__("; ".join(issues) or "Invalid input")

    @classmethod
    def from_errors(cls, errors) -> "ValidationError":
        """Build from a list of pydantic/FastAPI error dicts"""
        issues = []
        for err in errors:
            loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
            issues.append(f"{loc}: {err['msg']}" if loc else err["msg"])
        return cls(issues)

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        return cls.from_errors(exc.errors())


class NotFoundError(FeedError):
    """An id-keyed lookup found nothing"""

    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, kind: str, id: str):
        self.kind = kind
        self.id = id
        super().__init__(f"{kind.capitalize()} with id {id} not found")
