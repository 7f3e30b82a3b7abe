from pydantic import ValidationError
from typing import Any
from .errors import BlogValidationError
from .models.blog import Blog
from .schemas import BlogPostSubmission, REQUIRED_FIELDS


def describe_validation_error(error: ValidationError) -> str:
    errors = error.errors()

    # required fields are reported first, in declaration order
    for field in REQUIRED_FIELDS:
        for err in errors:
            if err["type"] == "missing" and err["loc"] == (field,):
                return f"Missing {field} property"

    first = errors[0]
    if not first["loc"]:
        return f"Invalid blog: {first['msg']}"
    field = ".".join(str(part) for part in first["loc"])
    return f"Invalid {field} property: {first['msg']}"


def blog_submission_form(payload: Any) -> Blog:
    """
    Validates a raw JSON payload and turns it into a storable blog.

    A client-supplied ``id`` is dropped: ids come from the store on create
    and from the path on update.

    Raises:
        BlogValidationError: if the payload is not a valid blog submission
    """
    if isinstance(payload, dict):
        payload = {k: v for k, v in payload.items() if k != "id"}

    try:
        submission = BlogPostSubmission.model_validate(payload)
    except ValidationError as e:
        raise BlogValidationError(describe_validation_error(e))

    return Blog(**submission.model_dump())
