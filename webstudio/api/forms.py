"""
Web form validation
===================

Request-shape validation for the forms on the public site:

- the five steps of the quote wizard (each step validated on its own;
  composing them into one quote is the caller's job, see
  ``webstudio.database.core.funcs.submit_quote``)
- the review form
- the payment-code redemption form

``validate_form`` parses a payload and raises ``FormValidationError`` with one
``FieldError`` per violated constraint. Messages are in Portuguese, the
site's language. Error types without a field-specific translation fall back to
``FALLBACK_MESSAGES``, and only then to pydantic's own text.
Validation never touches the database.
"""

from typing import Any, Dict, List, Literal, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator

from webstudio.database.entities.columns import DEFAULT_COUNTRY_CODE, PAYMENT_CODE_LENGTH

FormT = TypeVar("FormT", bound=BaseModel)


class QuoteFormStep1(BaseModel):
    """Contact details."""
    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    email: EmailStr
    phone: str = Field(..., min_length=9)
    country_code: str = DEFAULT_COUNTRY_CODE


class QuoteFormStep2(BaseModel):
    """Service type."""
    service_type: Literal["website", "app"]


class QuoteFormStep3(BaseModel):
    """Business segment."""
    business_segment: str = Field(..., min_length=1)


class QuoteFormStep4(BaseModel):
    """Additional features."""
    additionals: Optional[List[str]] = None


class QuoteFormStep5(BaseModel):
    """Free-text project description."""
    project_description: Optional[str] = None


class ReviewForm(BaseModel):
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=10, max_length=500)

    @field_validator("rating", mode="before")
    @classmethod
    def reject_boolean_rating(cls, value: Any) -> Any:
        # bool is an int subclass; numeric strings from HTML forms still parse
        if isinstance(value, bool):
            raise ValueError("rating must be a number")
        return value


class PaymentCodeForm(BaseModel):
    name: str = Field(..., min_length=2)
    email: EmailStr
    code: str = Field(..., min_length=PAYMENT_CODE_LENGTH, max_length=PAYMENT_CODE_LENGTH)


_NAME_TOO_SHORT = "Nome deve ter pelo menos 2 caracteres"
_INVALID_EMAIL = "Email inválido"
_INVALID_CODE = "Código deve ter 6 dígitos"
_INVALID_RATING = "A avaliação deve estar entre 1 e 5"
_RATING_NOT_A_NUMBER = "A avaliação deve ser um número inteiro"
_REQUIRED = "Campo obrigatório"

FORM_MESSAGES: Dict[tuple, str] = {
    ("first_name", "missing"): "Nome é obrigatório",
    ("first_name", "string_too_short"): _NAME_TOO_SHORT,
    ("first_name", "string_too_long"): "Nome deve ter no máximo 50 caracteres",
    ("last_name", "string_too_short"): "Sobrenome deve ter pelo menos 2 caracteres",
    ("last_name", "string_too_long"): "Sobrenome deve ter no máximo 50 caracteres",
    ("last_name", "missing"): "Sobrenome é obrigatório",
    ("email", "value_error"): _INVALID_EMAIL,
    ("email", "missing"): "Email é obrigatório",
    ("phone", "string_too_short"): "Telefone inválido",
    ("phone", "missing"): "Telefone é obrigatório",
    ("service_type", "literal_error"): "Selecione um tipo de serviço",
    ("service_type", "missing"): "Selecione um tipo de serviço",
    ("business_segment", "string_too_short"): "Selecione um segmento",
    ("business_segment", "missing"): "Selecione um segmento",
    ("rating", "greater_than_equal"): _INVALID_RATING,
    ("rating", "less_than_equal"): _INVALID_RATING,
    ("rating", "missing"): "Selecione uma avaliação",
    ("rating", "value_error"): _RATING_NOT_A_NUMBER,
    ("rating", "int_parsing"): _RATING_NOT_A_NUMBER,
    ("rating", "int_from_float"): _RATING_NOT_A_NUMBER,
    ("rating", "int_type"): _RATING_NOT_A_NUMBER,
    ("comment", "string_too_short"): "Comentário deve ter pelo menos 10 caracteres",
    ("comment", "string_too_long"): "Comentário deve ter no máximo 500 caracteres",
    ("comment", "missing"): "Comentário é obrigatório",
    ("name", "string_too_short"): _NAME_TOO_SHORT,
    ("name", "missing"): "Nome é obrigatório",
    ("code", "string_too_short"): _INVALID_CODE,
    ("code", "string_too_long"): _INVALID_CODE,
    ("code", "missing"): "Código é obrigatório",
}
"""Portuguese messages keyed by (field, pydantic error type)."""

FALLBACK_MESSAGES: Dict[str, str] = {
    "missing": _REQUIRED,
    "string_type": "Valor inválido",
    "value_error": "Valor inválido",
}
"""Messages for error types with no field-specific translation."""


class FieldError(BaseModel):
    """One violated constraint on one form field."""
    field: str
    code: str
    message: str


class FormValidationError(ValueError):
    """
    Raised by ``validate_form`` when a payload violates at least one constraint.

    Attributes
    ----------
    form : str
        Name of the form schema that rejected the payload.
    errors : list[FieldError]
        One entry per violated constraint.
    """

    def __init__(self, form: str, errors: List[FieldError]):
        self.form = form
        self.errors = errors
        fields = ", ".join(e.field for e in errors)
        super().__init__(f"{form} rejected fields: {fields}")

    def fields(self) -> List[str]:
        return [e.field for e in self.errors]

    def as_dict(self) -> Dict[str, List[str]]:
        """Messages grouped by field, as rendered next to the inputs."""
        grouped: Dict[str, List[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped


def _field_error(error: Mapping[str, Any]) -> FieldError:
    loc = error.get("loc") or ("__root__",)
    field = str(loc[0])
    code = error["type"]
    message = FORM_MESSAGES.get((field, code)) or FALLBACK_MESSAGES.get(code, error["msg"])
    return FieldError(field=field, code=code, message=message)


def validate_form(schema: Type[FormT], payload: Mapping[str, Any]) -> FormT:
    """
    Validate a form payload against one of the form schemas.

    Parameters
    ----------
    schema : type[BaseModel]
        ``QuoteFormStep1`` … ``QuoteFormStep5``, ``ReviewForm`` or ``PaymentCodeForm``.
    payload : Mapping[str, Any]
        Raw submitted values.

    Returns
    -------
    BaseModel
        The parsed form, with defaults applied (e.g. ``country_code="+351"``).

    Raises
    ------
    FormValidationError
        If any constraint is violated.
    """
    try:
        return schema.model_validate(dict(payload))
    except ValidationError as exc:
        raise FormValidationError(schema.__name__, [_field_error(e) for e in exc.errors()]) from exc
