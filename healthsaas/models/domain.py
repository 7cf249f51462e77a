"""Pydantic models for the records exchanged with the HealthSaaS backend."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class RiskLevel(str, Enum):
    """Coarse clinical triage tag carried by every patient."""
    low = "Low"
    medium = "Medium"
    high = "High"


class Record(BaseModel):
    """Base for backend-owned records; unknown fields are kept, not rejected."""
    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)


class User(Record):
    user_id: str
    name: str
    email: str
    role: str


class Household(Record):
    id: str = Field(alias="_id")
    code: str
    location: str
    head_name: str
    phone: Optional[str] = None
    created_by: str
    created_at: str


class Patient(Record):
    id: str = Field(alias="_id")
    household_id: str
    full_name: str
    gender: str
    date_of_birth: str
    medical_condition: Optional[str] = None
    risk_level: RiskLevel
    created_at: str


class AIRecommendation(Record):
    """
    Provider-defined recommendation payload.

    Only the fields the console actually shows are named; anything else the
    provider adds is preserved as extra data.
    """
    possible_diagnosis: Optional[str] = None
    follow_up_action: Optional[str] = None
    risk_level: Optional[str] = None
    advice: Optional[str] = None


class Visit(Record):
    id: str = Field(alias="_id")
    patient_id: str
    symptoms: str
    diagnosis: Optional[str] = None
    medication: Optional[str] = None
    ai_recommendation: Optional[AIRecommendation] = None
    follow_up_date: Optional[str] = None
    notes: Optional[str] = None
    visit_date: str


class DashboardStats(Record):
    total_patients: int = Field(ge=0)
    total_visits: int = Field(ge=0)
    total_households: int = Field(ge=0)
    risk_distribution: Dict[str, int] = Field(default_factory=dict)
    timestamp: str


class AIStatus(Record):
    available: bool
    model: str


# ---------------------------------------------------------------------------
# Response envelopes
# ---------------------------------------------------------------------------


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every successful backend response."""
    model_config = ConfigDict(frozen=True)

    message: str
    data: Optional[T] = None


class HouseholdPage(Record):
    households: List[Household]
    count: int
    total: int


class PatientPage(Record):
    patients: List[Patient]
    count: int
    total: int


class VisitPage(Record):
    visits: List[Visit]
    count: int
    total: int


class UserCreated(Record):
    user_id: str


class HouseholdCreated(Record):
    household_id: str


class PatientCreated(Record):
    patient_id: str


class VisitCreated(Record):
    visit_id: str
    ai_recommendation: Optional[Dict[str, Any]] = None


class RecentActivity(Record):
    activities: List[Dict[str, Any]] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Request records
# ---------------------------------------------------------------------------


class RequestRecord(BaseModel):
    """
    Argument record sent to the backend.

    Fields the caller never set are left out of the body; an explicit None is
    sent as null so a partial update can clear a field. Fields the record does
    not name are passed through for the backend to judge.
    """
    model_config = ConfigDict(extra="allow")

    def to_body(self) -> Dict[str, Any]:
        body = self.model_dump(mode="json")
        extra = self.model_extra or {}
        return {key: value for key, value in body.items() if key in self.model_fields_set or key in extra}


class RegisterRequest(RequestRecord):
    name: str
    email: str
    password: str
    confirm_password: str
    role: Optional[str] = None


class HouseholdCreate(RequestRecord):
    code: str
    location: str
    head_name: str
    phone: Optional[str] = None
    created_by: str


class HouseholdUpdate(RequestRecord):
    code: Optional[str] = None
    location: Optional[str] = None
    head_name: Optional[str] = None
    phone: Optional[str] = None
    created_by: Optional[str] = None


class PatientCreate(RequestRecord):
    household_id: str
    full_name: str
    gender: str
    date_of_birth: str
    medical_condition: Optional[str] = None
    risk_level: Optional[str] = None


class PatientUpdate(RequestRecord):
    household_id: Optional[str] = None
    full_name: Optional[str] = None
    gender: Optional[str] = None
    date_of_birth: Optional[str] = None
    medical_condition: Optional[str] = None
    risk_level: Optional[str] = None


class VisitCreate(RequestRecord):
    patient_id: str
    symptoms: str
    diagnosis: Optional[str] = None
    medication: Optional[str] = None
    follow_up_date: Optional[str] = None
    notes: Optional[str] = None
    use_ai: Optional[bool] = None


class HealthRecommendationRequest(RequestRecord):
    patient_name: str
    age: int
    gender: str
    condition_history: str
    symptoms: str
