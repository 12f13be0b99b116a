# employees.py
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from . import services
from .config import NAME_MESSAGE, NAME_TAKEN_MESSAGE
from .database import get_async_session
from .schemas import (
    EmpExtra,
    EmployeeCreate,
    EmployeeRead,
    EmployeeUpdate,
    Extra,
    Msg,
    PageExtra,
    is_valid_name,
)

router = APIRouter(tags=["Employees"])


def parse_ids(ids: str) -> List[int]:
    """``"7"`` -> ``[7]``, ``"3-5-9"`` -> ``[3, 5, 9]``. Non-numeric tokens raise ValueError."""
    if "-" in ids:
        return [int(token) for token in ids.split("-")]
    return [int(ids)]


@router.get("/empName", response_model=Msg[PageExtra])
async def search_by_name(
        emp_name: str = Query(..., alias="empName"),
        db: AsyncSession = Depends(get_async_session)
):
    """First page of employees whose name equals ``empName``."""
    page = await services.get_by_name(db, emp_name)
    return Msg[PageExtra].succeed(PageExtra(pageInfo=page))


@router.get("/emps", response_model=Msg[PageExtra])
async def get_emps_with_json(
        pn: int = Query(1, ge=1),
        db: AsyncSession = Depends(get_async_session)
):
    """Page ``pn`` of all employees, five per page."""
    page = await services.get_all(db, pn)
    return Msg[PageExtra].succeed(PageExtra(pageInfo=page))


@router.get("/emp/{emp_id}", response_model=Msg[EmpExtra])
async def get_emp(
        emp_id: int,
        db: AsyncSession = Depends(get_async_session)
):
    employee = await services.get_emp(db, emp_id)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with id '{emp_id}' not found"
        )
    return Msg[EmpExtra].succeed(EmpExtra(emp=EmployeeRead.model_validate(employee)))


@router.get("/checkUser", response_model=Msg[Extra])
async def check_user(
        emp_name: str = Query(..., alias="empName"),
        db: AsyncSession = Depends(get_async_session)
):
    """
    Advisory availability check for a new employee name.
    Creating still relies on the store's unique constraint.
    """
    if not is_valid_name(emp_name):
        return Msg[Extra].fail({"va_msg": NAME_MESSAGE})
    if not await services.check_user(db, emp_name):
        return Msg[Extra].fail({"va_msg": NAME_TAKEN_MESSAGE})
    return Msg[Extra].succeed()


@router.post("/emp", response_model=Msg[Extra], status_code=status.HTTP_201_CREATED)
async def save_emp(
        employee_input: EmployeeCreate,
        db: AsyncSession = Depends(get_async_session)
):
    """Create an employee. Field errors come back under ``extra.errorFields``."""
    employee = await services.save_emp(db, employee_input)
    return Msg[Extra].succeed({"id": employee.id})


@router.put("/emp/{emp_id}", response_model=Msg[Extra])
async def update_emp(
        emp_id: int,
        updated_details: EmployeeUpdate,
        db: AsyncSession = Depends(get_async_session)
):
    """Write the supplied fields only. Succeeds even when no row matched."""
    await services.update_emp(db, emp_id, updated_details)
    return Msg[Extra].succeed()


@router.delete("/emp/{ids}", response_model=Msg[Extra])
async def delete_emp(
        ids: str,
        db: AsyncSession = Depends(get_async_session)
):
    """Delete one id (``/emp/7``) or a hyphen-joined batch (``/emp/3-5-9``)."""
    if "-" in ids:
        await services.delete_batch(db, parse_ids(ids))
    else:
        await services.delete_emp(db, int(ids))
    return Msg[Extra].succeed()
