# =============================================================================
# core/services/base.py - Shared Service Helpers
# =============================================================================
# Small helpers every service uses before touching the backend:
# - require_user: refuse anonymous callers
# - parse_form: validate raw form data into a Pydantic model
# =============================================================================

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from app.auth.models import AuthUser
from app.exceptions import NotAuthenticatedError, ValidationFailedError

ModelT = TypeVar("ModelT", bound=BaseModel)


def require_user(user: AuthUser | None) -> AuthUser:
    """
    Return the caller, or raise if there is none.

    Raises:
        NotAuthenticatedError: If `user` is None
    """
    if user is None:
        raise NotAuthenticatedError()
    return user


def parse_form(model: type[ModelT], form: Mapping[str, Any] | BaseModel) -> ModelT:
    """
    Validate form data against `model`.

    Raises:
        ValidationFailedError: Naming the first offending field
    """
    if isinstance(form, model):
        return form
    data = form.model_dump() if isinstance(form, BaseModel) else dict(form)

    try:
        return model.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "form"
        raise ValidationFailedError(field, f"{field}: {first.get('msg', 'invalid value')}") from e
