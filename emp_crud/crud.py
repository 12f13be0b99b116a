# crud.py
import logging
from sqlmodel import select
from sqlalchemy import delete, func, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload
from sqlalchemy.sql import Select
from fastapi import HTTPException, status
from typing import Any, Dict, Iterable, List, Optional

from .config import NAME_TAKEN_MESSAGE, NAVIGATE_PAGES
from .models import Department, Employee
from .schemas import EmployeeCreate, EmployeeRead, PageInfo

logger = logging.getLogger(__name__)


def _name_conflict() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail={"va_msg": NAME_TAKEN_MESSAGE}
    )


# --- Employee queries ---

def select_employees(name: Optional[str] = None) -> Select:
    """Employee query with the department joined in, optionally filtered by exact name."""
    statement = select(Employee).options(selectinload(Employee.department))

    if name is not None:
        statement = statement.where(Employee.name == name)

    return statement.order_by(Employee.id.asc())


async def paginate(
        db: AsyncSession,
        statement: Select,
        page: int,
        page_size: int
) -> PageInfo:
    """Run ``statement`` for one page and count the whole result set alongside it."""
    count_statement = select(func.count()).select_from(
        statement.order_by(None).subquery()
    )
    total = (await db.execute(count_statement)).scalar_one()

    page_statement = statement.offset((page - 1) * page_size).limit(page_size)
    result = await db.execute(page_statement)
    items = [EmployeeRead.model_validate(e) for e in result.scalars().all()]

    return PageInfo.build(
        items=items,
        page=page,
        page_size=page_size,
        total=total,
        navigate_pages=NAVIGATE_PAGES
    )


async def get_employee(db: AsyncSession, emp_id: int) -> Optional[Employee]:
    statement = select(Employee).options(
        selectinload(Employee.department)
    ).where(Employee.id == emp_id)
    result = await db.execute(statement)
    return result.scalars().first()


async def count_by_name(db: AsyncSession, name: str) -> int:
    statement = select(func.count()).select_from(Employee).where(Employee.name == name)
    result = await db.execute(statement)
    return result.scalar_one()


# --- Employee writes ---

async def insert_employee(db: AsyncSession, employee: EmployeeCreate) -> Employee:
    db_employee = Employee.model_validate(employee)

    try:
        db.add(db_employee)
        await db.commit()
        await db.refresh(db_employee)
    except IntegrityError:
        await db.rollback()
        logger.warning("Insert rejected, name %r already exists", employee.name)
        raise _name_conflict()
    return db_employee


async def update_employee(
        db: AsyncSession,
        emp_id: int,
        fields: Dict[str, Any]
) -> int:
    """Write only ``fields`` onto the row; returns the number of rows changed."""
    if not fields:
        return 0

    statement = update(Employee).where(Employee.id == emp_id).values(**fields)
    try:
        result = await db.execute(statement)
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.warning("Update of employee %s rejected, name %r already exists",
                       emp_id, fields.get("name"))
        raise _name_conflict()
    return result.rowcount


async def delete_employee(db: AsyncSession, emp_id: int) -> int:
    result = await db.execute(delete(Employee).where(Employee.id == emp_id))
    await db.commit()
    return result.rowcount


async def delete_employees(db: AsyncSession, emp_ids: Iterable[int]) -> int:
    ids = list(emp_ids)
    if not ids:
        return 0

    result = await db.execute(delete(Employee).where(Employee.id.in_(ids)))
    await db.commit()
    return result.rowcount


# --- Department CRUD ---

async def get_departments(db: AsyncSession) -> List[Department]:
    statement = select(Department).order_by(Department.id.asc())
    result = await db.execute(statement)
    return result.scalars().all()


async def insert_department(db: AsyncSession, name: str) -> Department:
    db_department = Department(name=name)

    db.add(db_department)
    await db.commit()
    await db.refresh(db_department)
    return db_department
