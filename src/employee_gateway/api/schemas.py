"""Request and response models for the HTTP API."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from ..domain.employees import EmployeeRecord, NewEmployee


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    salary: int
    age: int
    title: str
    email: str

    @classmethod
    def from_record(cls, record: EmployeeRecord) -> Self:
        return cls(
            id=record.id,
            name=record.name,
            salary=record.salary,
            age=record.age,
            title=record.title,
            email=record.email,
        )


class CreateEmployeeRequest(BaseModel):
    """Body accepted by ``POST /``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    salary: int = Field(ge=0)
    age: int = Field(gt=0)
    title: str = Field(min_length=1)

    def to_new_employee(self) -> NewEmployee:
        return NewEmployee(name=self.name, salary=self.salary, age=self.age, title=self.title)
