"""
Form state and submission pipeline shared by all forms
"""

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, PrivateAttr

from services.api_service import ApiConnectionError, ApiError, ApiService
from utils.error_handling import StructuredLogger, set_action_context

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
IN_PROGRESS = "IN_PROGRESS"
NOT_FOUND = "NOT_FOUND"
CONFLICT = "CONFLICT"
UNAUTHORIZED = "UNAUTHORIZED"
API_ERROR = "API_ERROR"
CONNECTION_ERROR = "CONNECTION_ERROR"

@dataclass
class FormResult:
    """Result of a form submission"""
    success: bool
    data: Any = None
    error: Optional[str] = None
    error_type: Optional[str] = None
    field_errors: Dict[str, str] = field(default_factory=dict)


def error_type_for(error: ApiError) -> str:
    if isinstance(error, ApiConnectionError):
        return CONNECTION_ERROR
    if error.status_code == 404:
        return NOT_FOUND
    if error.status_code == 409:
        return CONFLICT
    if error.status_code in (401, 403):
        return UNAUTHORIZED
    return API_ERROR


class BaseForm(BaseModel):
    """
    Editable field state plus one submit action.

    Subclasses declare their fields with defaults, implement
    ``validation_errors`` and ``perform``. Fields listed in
    ``keep_on_reset`` (the record being edited, the parent id ...) survive
    ``reset()``.
    """
    model_config = ConfigDict(extra="forbid")

    action: ClassVar[str] = "form"
    failure_message: ClassVar[str] = "Failed to save"
    keep_on_reset: ClassVar[Tuple[str, ...]] = ()
    reset_on_success: ClassVar[bool] = True

    _api: Optional[ApiService] = PrivateAttr(default=None)
    _submitting: bool = PrivateAttr(default=False)

    def __init__(self, api: Optional[ApiService] = None, **data: Any):
        super().__init__(**data)
        self._api = api

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    def validation_errors(self) -> Dict[str, str]:
        """Field name -> message for every invalid field, in display order"""
        return {}

    async def perform(self) -> Any:
        raise NotImplementedError

    def reset(self) -> None:
        for name, info in type(self).model_fields.items():
            if name in self.keep_on_reset:
                continue
            setattr(self, name, info.get_default(call_default_factory=True))

    def failure(self, error: ApiError, message: Optional[str] = None) -> FormResult:
        """Log an API failure and turn it into a FormResult"""
        error_type = error_type_for(error)
        trace_id = StructuredLogger.log_error(
            f"form_{error_type.lower()}",
            f"{self.action} failed",
            exception=error,
            extra_context={"form": type(self).__name__, "fields": self.model_dump(mode="json")},
            include_traceback=False
        )
        if error_type == CONNECTION_ERROR:
            message = error.message
        else:
            message = f"{message or self.failure_message}: {error.message}"
        logger.debug(f"{self.action} failed (trace {trace_id})")
        return FormResult(success=False, error=message, error_type=error_type)

    async def submit(self) -> FormResult:
        """
        Validate and submit the form

        Returns:
            FormResult; IN_PROGRESS when a submit is already running,
            VALIDATION_ERROR with field_errors when fields are invalid
        """
        if self._submitting:
            return FormResult(success=False, error="Submission already in progress", error_type=IN_PROGRESS)

        errors = self.validation_errors()
        if errors:
            return FormResult(
                success=False,
                error=next(iter(errors.values())),
                error_type=VALIDATION_ERROR,
                field_errors=errors
            )

        self._submitting = True
        set_action_context(self.action)
        try:
            data = await self.perform()
        except ApiError as e:
            return self.failure(e)
        finally:
            self._submitting = False

        logger.info(f"{self.action} succeeded")
        if self.reset_on_success:
            self.reset()
        return FormResult(success=True, data=data)
