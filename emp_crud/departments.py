# departments.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from . import services
from .database import get_async_session
from .schemas import DepartmentRead, DeptsExtra, Msg

router = APIRouter(tags=["Departments"])


@router.get("/depts", response_model=Msg[DeptsExtra])
async def get_depts(db: AsyncSession = Depends(get_async_session)):
    """All departments, for the employee form's department picker."""
    departments = await services.get_depts(db)
    return Msg[DeptsExtra].succeed(
        DeptsExtra(depts=[DepartmentRead.model_validate(d) for d in departments])
    )
