from schemas.application import (
    CREDIT_SCORE_OPTIONS,
    LOAN_TERM_OPTIONS,
    PROPERTY_TYPE_OPTIONS,
    Application,
    ClientContext,
    EchoAck,
    SubmitRequest,
)
from schemas.form import (
    FieldDescriptor,
    FieldView,
    StepDescriptor,
    WizardView,
)

__all__ = [
    "CREDIT_SCORE_OPTIONS",
    "LOAN_TERM_OPTIONS",
    "PROPERTY_TYPE_OPTIONS",
    "Application",
    "ClientContext",
    "EchoAck",
    "SubmitRequest",
    "FieldDescriptor",
    "FieldView",
    "StepDescriptor",
    "WizardView",
]
