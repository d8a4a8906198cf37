"""Employee routes.

Handlers are plain functions so the server runs them on its worker thread
pool; the blocking upstream client never stalls the event loop. Fixed paths
are registered before ``/{id}`` so they are matched first.
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from ..application.employees import EmployeeService
from ..exceptions import UpstreamFailure
from ..observability import get_logger
from .schemas import CreateEmployeeRequest, EmployeeResponse

logger = get_logger("employee_gateway.api.routes")

router = APIRouter(tags=["employees"])


def _service(request: Request) -> EmployeeService:
    return request.app.state.employee_service


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/", response_model=list[EmployeeResponse])
def get_all_employees(request: Request) -> list[EmployeeResponse]:
    return [EmployeeResponse.from_record(record) for record in _service(request).get_all()]


@router.get("/search/{search_string}", response_model=list[EmployeeResponse])
def get_employees_by_name_search(
    search_string: str, request: Request
) -> list[EmployeeResponse]:
    records = _service(request).search_by_name(search_string)
    return [EmployeeResponse.from_record(record) for record in records]


@router.get("/highestSalary")
def get_highest_salary_of_employees(request: Request) -> int:
    return _service(request).highest_salary()


@router.get("/topTenHighestEarningEmployeeNames")
def get_top_ten_highest_earning_employee_names(request: Request) -> list[str]:
    return _service(request).top_earning_names()


@router.get("/{id}", response_model=EmployeeResponse)
def get_employee_by_id(id: str, request: Request) -> EmployeeResponse:
    return EmployeeResponse.from_record(_service(request).get_by_id(id))


@router.post("/", response_model=EmployeeResponse)
def create_employee(body: CreateEmployeeRequest, request: Request) -> EmployeeResponse:
    record = _service(request).create(body.to_new_employee())
    return EmployeeResponse.from_record(record)


@router.delete("/{id}")
def delete_employee_by_id(id: str, request: Request) -> str:
    deleted = _service(request).delete_by_id(id)
    if deleted is None:
        logger.info("Nothing deleted for id=%s.", id)
        raise UpstreamFailure.not_found(f"No employee deleted for id={id}.")
    return deleted.name
