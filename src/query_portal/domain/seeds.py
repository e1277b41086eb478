"""Typed seed records loaded into the record store by the seed jobs."""

import hashlib
import random
import string
from datetime import UTC, datetime
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_BASE36 = string.digits + string.ascii_lowercase
_MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


def _now_iso() -> str:
    return datetime.now(tz=UTC).isoformat()


class _Schema(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SeedModel(_Schema):
    """Base schema for seed records; unknown fields are rejected."""

    collection: ClassVar[str]

    def document_key(self) -> str:
        """Return the store key this record is written under."""
        raise NotImplementedError

    def document(self) -> dict[str, object]:
        """Return the stored document with camelCase field names."""
        return self.model_dump(by_alias=True)


class Company(SeedModel):
    """Company profile, keyed by its id."""

    collection: ClassVar[str] = "companies"

    id: str = Field(min_length=1)
    name: str
    email: str
    is_active: bool = True
    services: dict[str, object] = Field(default_factory=dict)
    created_at: str = Field(default_factory=_now_iso)
    updated_at: str = Field(default_factory=_now_iso)

    def document_key(self) -> str:
        return self.id


class Customer(SeedModel):
    """Company user with login credentials, keyed by email."""

    collection: ClassVar[str] = "bank_customers"

    email: str = Field(pattern=r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
    name: str
    company_id: str
    password: str = Field(min_length=6)
    role: str = "user"
    is_active: bool = True
    access_code: str | None = None
    department: str | None = None
    position: str | None = None

    def document_key(self) -> str:
        return self.email

    def document(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude={"password"}, exclude_none=True)


class ChatMessage(_Schema):
    """Single chat turn."""

    role: Literal["user", "assistant"]
    content: str


class ChatSession(SeedModel):
    """Recorded conversation; every ingestion writes a new document."""

    collection: ClassVar[str] = "chatHistory"

    company_id: str = Field(min_length=1)
    user_id: str
    user_name: str
    timestamp: str
    messages: list[ChatMessage]
    metadata: dict[str, str] = Field(default_factory=dict)

    def document_key(self) -> str:
        millis = int(datetime.now(tz=UTC).timestamp() * 1000)
        suffix = "".join(random.choices(_BASE36, k=9))  # noqa: S311
        return f"{self.company_id}_{millis}_{suffix}"


class AttendanceRecord(SeedModel):
    """Absence dates of one employee for one month."""

    collection: ClassVar[str] = "absentees"

    access_code: str = Field(min_length=1)
    month: str = Field(pattern=_MONTH_PATTERN)
    absent_dates: list[str] = Field(default_factory=list)

    def document_key(self) -> str:
        return f"{self.access_code}_{self.month}"


class WorkHoursRecord(SeedModel):
    """Hours worked by one employee in one month."""

    collection: ClassVar[str] = "workhours"

    access_code: str = Field(min_length=1)
    month: str = Field(pattern=_MONTH_PATTERN)
    hours_worked: int = Field(ge=0)
    total_hours: int = Field(ge=0)

    def document_key(self) -> str:
        return f"{self.access_code}_{self.month}"


class FaqItem(SeedModel):
    """Canned answer to a common customer question."""

    collection: ClassVar[str] = "faq"

    question: str = Field(min_length=1)
    answer: str
    keywords: list[str] = Field(default_factory=list)
    category: str = Field(min_length=1)
    last_updated: str = Field(default_factory=_now_iso)

    def document_key(self) -> str:
        digest = hashlib.sha1(self.question.encode("utf-8")).hexdigest()[:12]
        return f"{self.category}-{digest}"


class Employee(SeedModel):
    """Employee row parsed from the HR CSV export."""

    collection: ClassVar[str] = "employees"

    employee_id: str = Field(alias="EmployeeID", min_length=1)
    name: str = Field(alias="Name")
    age: str | None = Field(default=None, alias="Age")
    city: str | None = Field(default=None, alias="City")
    contact_number: str | None = Field(default=None, alias="Contact Number")
    date_of_joining: str | None = Field(default=None, alias="DateOfJoining")
    department: str | None = Field(default=None, alias="Department")
    designation: str | None = Field(default=None, alias="Designation")
    email: str | None = Field(default=None, alias="Email")
    experience: int | float | None = Field(default=None, alias="Experience")
    gender: str | None = Field(default=None, alias="Gender")
    salary: str | None = Field(default=None, alias="Salary")

    def document_key(self) -> str:
        return self.employee_id

    def document(self) -> dict[str, object]:
        return self.model_dump(
            by_alias=True, exclude={"employee_id"}, exclude_none=True
        )


SeedRecord = (
    Company
    | Customer
    | ChatSession
    | AttendanceRecord
    | WorkHoursRecord
    | FaqItem
    | Employee
)
