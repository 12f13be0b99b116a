# services.py
import logging
from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from . import crud
from .config import PAGE_SIZE
from .models import Department, Employee
from .schemas import EmployeeCreate, EmployeeUpdate, PageInfo

logger = logging.getLogger(__name__)


async def _ensure_department(db: AsyncSession, department_id: Optional[int]) -> None:
    if department_id is None:
        return
    if await db.get(Department, department_id) is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"errorFields": {"department_id": f"Department {department_id} does not exist"}}
        )


async def get_all(db: AsyncSession, page: int, page_size: int = PAGE_SIZE) -> PageInfo:
    return await crud.paginate(db, crud.select_employees(), page, page_size)


async def get_by_name(
        db: AsyncSession,
        name: str,
        page: int = 1,
        page_size: int = PAGE_SIZE
) -> PageInfo:
    return await crud.paginate(db, crud.select_employees(name=name), page, page_size)


async def get_emp(db: AsyncSession, emp_id: int) -> Optional[Employee]:
    return await crud.get_employee(db, emp_id)


async def check_user(db: AsyncSession, name: str) -> bool:
    """True when no employee carries ``name`` yet."""
    return await crud.count_by_name(db, name) == 0


async def save_emp(db: AsyncSession, employee: EmployeeCreate) -> Employee:
    await _ensure_department(db, employee.department_id)
    db_employee = await crud.insert_employee(db, employee)
    logger.info("Created employee %s (%s)", db_employee.id, db_employee.name)
    return db_employee


async def update_emp(db: AsyncSession, emp_id: int, employee_update: EmployeeUpdate) -> int:
    fields = {
        key: value
        for key, value in employee_update.model_dump(exclude_unset=True).items()
        # department_id is the only nullable column
        if value is not None or key == "department_id"
    }
    await _ensure_department(db, fields.get("department_id"))
    rows = await crud.update_employee(db, emp_id, fields)
    logger.info("Updated employee %s fields=%s rows=%s", emp_id, sorted(fields), rows)
    return rows


async def delete_emp(db: AsyncSession, emp_id: int) -> int:
    rows = await crud.delete_employee(db, emp_id)
    logger.info("Deleted employee %s rows=%s", emp_id, rows)
    return rows


async def delete_batch(db: AsyncSession, emp_ids: List[int]) -> int:
    rows = await crud.delete_employees(db, emp_ids)
    logger.info("Deleted employees %s rows=%s", emp_ids, rows)
    return rows


async def get_depts(db: AsyncSession) -> List[Department]:
    return await crud.get_departments(db)


async def seed_departments(db: AsyncSession, names) -> List[Department]:
    """Insert the default department list when the table is still empty."""
    if await crud.get_departments(db):
        return []
    created = [await crud.insert_department(db, name) for name in names]
    logger.info("Seeded %d departments", len(created))
    return created
