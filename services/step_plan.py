"""
The four-page step plan of the application wizard, plus the pure step renderer.
Step membership is fixed: changing it changes what "Next" validates.
"""
from __future__ import annotations

from typing import Any

from schemas.application import (
    CREDIT_SCORE_OPTIONS,
    INVESTMENT_STRATEGY_OPTIONS,
    LOAN_PURPOSE_OPTIONS,
    LOAN_TERM_OPTIONS,
    PROJECT_TYPE_OPTIONS,
    PROPERTY_TYPE_OPTIONS,
)
from schemas.form import FieldDescriptor, StepDescriptor

STEP_PLAN: list[StepDescriptor] = [
    StepDescriptor(
        number=1,
        key="personal",
        title="Personal Information",
        fields=[
            FieldDescriptor(name="full_name", kind="text", label="Full Name", required=True,
                            min_length=2, placeholder="Enter your full name"),
            FieldDescriptor(name="email", kind="email", label="Email Address", required=True,
                            placeholder="your@email.com"),
            FieldDescriptor(name="phone_number", kind="tel", label="Phone Number", required=True,
                            placeholder="(555) 123-4567"),
            FieldDescriptor(name="credit_score", kind="select", label="Credit Score Range", required=True,
                            options=CREDIT_SCORE_OPTIONS),
        ],
    ),
    StepDescriptor(
        number=2,
        key="property",
        title="Property Details",
        fields=[
            FieldDescriptor(name="property_address", kind="text", label="Property Address", required=True,
                            placeholder="123 Main St, City, State ZIP"),
            FieldDescriptor(name="property_type", kind="select", label="Property Type", required=True,
                            options=PROPERTY_TYPE_OPTIONS),
            FieldDescriptor(name="loan_purpose", kind="radio", label="Loan Purpose", required=True,
                            options=LOAN_PURPOSE_OPTIONS),
            FieldDescriptor(name="closing_date", kind="date", label="Closing Date"),
        ],
    ),
    StepDescriptor(
        number=3,
        key="financial",
        title="Financial Information",
        fields=[
            FieldDescriptor(name="purchase_price", kind="money", label="Purchase Price", required=True,
                            placeholder="$500,000"),
            FieldDescriptor(name="down_payment", kind="money", label="Down Payment", placeholder="$100,000"),
            FieldDescriptor(name="additional_reserves", kind="money", label="Additional Reserves",
                            placeholder="$50,000"),
            FieldDescriptor(name="loan_term", kind="select", label="Loan Term", options=LOAN_TERM_OPTIONS),
            FieldDescriptor(name="needs_rehab_funding", kind="checkbox", label="I need rehab funding"),
            FieldDescriptor(name="rehab_funding_needed", kind="money", label="Rehab Funding Needed",
                            placeholder="$75,000", visible_when={"needs_rehab_funding": True}),
        ],
    ),
    StepDescriptor(
        number=4,
        key="strategy",
        title="Investment Strategy",
        fields=[
            FieldDescriptor(name="investment_strategy", kind="radio", label="Investment Strategy", required=True,
                            options=INVESTMENT_STRATEGY_OPTIONS),
            FieldDescriptor(name="project_type", kind="radio", label="Project Type", required=True,
                            options=PROJECT_TYPE_OPTIONS),
            FieldDescriptor(name="experience", kind="text", label="Real Estate Experience",
                            placeholder="5 years, 10 deals completed"),
            FieldDescriptor(name="ownership", kind="text",
                            label="Investment properties owned for 12 of the last 36 months"),
            FieldDescriptor(name="additional_info", kind="textarea", label="Additional Information",
                            placeholder="Tell us more about your project..."),
            FieldDescriptor(name="consent_transactional", kind="checkbox", required=True,
                            label="I agree to receive transactional messages",
                            required_message="You must consent to receive transactional messages"),
            FieldDescriptor(name="consent_marketing", kind="checkbox",
                            label="I agree to receive marketing/promotional messages"),
        ],
    ),
]


def all_fields(plan: list[StepDescriptor] | None = None) -> list[FieldDescriptor]:
    """Every descriptor of the plan in page order."""
    plan = STEP_PLAN if plan is None else plan
    return [f for step in plan for f in step.fields]


def field_index(plan: list[StepDescriptor] | None = None) -> dict[str, FieldDescriptor]:
    return {f.name: f for f in all_fields(plan)}


def get_step(step: int, plan: list[StepDescriptor] | None = None) -> StepDescriptor:
    plan = STEP_PLAN if plan is None else plan
    if step < 1 or step > len(plan):
        raise ValueError(f"Step {step} is outside 1..{len(plan)}")
    return plan[step - 1]


def visible_fields(
    step: int,
    values: dict[str, Any],
    plan: list[StepDescriptor] | None = None,
) -> list[FieldDescriptor]:
    """Fields shown on `step` given the current values, in display order."""
    return [f for f in get_step(step, plan).fields if f.is_visible(values)]


def visible_field_names(values: dict[str, Any], plan: list[StepDescriptor] | None = None) -> set[str]:
    """Names of fields visible anywhere in the plan for the current values."""
    return {f.name for f in all_fields(plan) if f.is_visible(values)}
