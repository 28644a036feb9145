from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field

LoanPurpose = Literal["Purchase", "Refinance"]
InvestmentStrategy = Literal["Flip", "Hold"]
ProjectType = Literal["Fix & Flip", "Ground Up Construction (GUC)"]

CREDIT_SCORE_OPTIONS = [
    "760+",
    "740-759",
    "720-739",
    "700-719",
    "680-699",
    "660-679",
    "640-659",
    "620-639",
    "600-619",
    "599 or Below",
]

PROPERTY_TYPE_OPTIONS = [
    "SFR",
    "2–4 Unit Residential",
    "5–9 Unit Residential",
    "10+ Unit Residential",
    "Mixed-Use",
    "Other",
]

LOAN_TERM_OPTIONS = [
    "3 months",
    "6 months",
    "9 months",
    "12 months",
    "18 months",
    "24 months",
    "36 months",
    "Other",
]

LOAN_PURPOSE_OPTIONS: list[str] = ["Purchase", "Refinance"]
INVESTMENT_STRATEGY_OPTIONS: list[str] = ["Flip", "Hold"]
PROJECT_TYPE_OPTIONS: list[str] = ["Fix & Flip", "Ground Up Construction (GUC)"]


class Application(BaseModel):
    """
    Lead-capture record as the visitor typed it.
    Money fields stay display strings ("1,250,000"); validation decides whether they parse.
    """
    email: str = ""
    full_name: str = Field("", alias="fullName")
    phone_number: str = Field("", alias="phoneNumber")
    credit_score: str = Field("", alias="creditScore")
    experience: str = ""
    ownership: str = ""
    property_address: str = Field("", alias="propertyAddress")
    property_type: str = Field("", alias="propertyType")
    loan_purpose: LoanPurpose = Field("Purchase", alias="loanPurpose")
    closing_date: Optional[date] = Field(None, alias="closingDate")
    purchase_price: str = Field("", alias="purchasePrice")
    down_payment: str = Field("", alias="downPayment")
    additional_reserves: str = Field("", alias="additionalReserves")
    loan_term: str = Field("", alias="loanTerm")
    needs_rehab_funding: bool = Field(False, alias="needsRehabFunding")
    rehab_funding_needed: str = Field("", alias="rehabFundingNeeded")
    investment_strategy: InvestmentStrategy = Field("Flip", alias="investmentStrategy")
    project_type: ProjectType = Field("Fix & Flip", alias="projectType")
    additional_info: str = Field("", alias="additionalInfo")
    consent_transactional: bool = Field(False, alias="consentTransactional")
    consent_marketing: bool = Field(False, alias="consentMarketing")

    model_config = {"populate_by_name": True}


class ClientContext(BaseModel):
    """Best-effort browser context attached to an outbound submission."""
    page_url: Optional[str] = Field(None, alias="pageUrl")
    user_agent: Optional[str] = Field(None, alias="userAgent")

    model_config = {"populate_by_name": True}


class SubmitRequest(BaseModel):
    page_url: Optional[str] = Field(None, alias="pageUrl")

    model_config = {"populate_by_name": True}


class EchoAck(BaseModel):
    success: bool
    message: str
    submission_id: Optional[int] = Field(None, alias="submissionId")

    model_config = {"populate_by_name": True}
