# schemas.py
from sqlmodel import SQLModel, Field
from pydantic import BaseModel, ConfigDict, field_validator
from typing import Any, Dict, Generic, List, Optional, TypeVar

from .config import (
    EMAIL_MESSAGE,
    EMAIL_PATTERN,
    GENDER_CODES,
    GENDER_MESSAGE,
    NAME_MESSAGE,
    NAME_PATTERN,
)

SUCCESS_CODE = 100
FAILURE_CODE = 200

T = TypeVar("T")


def is_valid_name(name: str) -> bool:
    """True when the name is 2-5 CJK characters or 6-16 letters/digits/_/-."""
    return NAME_PATTERN.fullmatch(name) is not None


# --- Pydantic V2 validator functions, reused by create and update ---
@field_validator('name')
def validate_name(cls, v: Optional[str]) -> Optional[str]:
    if v is None:  # Partial updates may omit the field
        return None
    if not is_valid_name(v):
        raise ValueError(NAME_MESSAGE)
    return v


@field_validator('email')
def validate_email(cls, v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    if EMAIL_PATTERN.fullmatch(v) is None:
        raise ValueError(EMAIL_MESSAGE)
    return v


@field_validator('gender', mode='before')
def validate_gender(cls, v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    if isinstance(v, str):
        v = v.strip().upper()
    if v not in GENDER_CODES:
        raise ValueError(GENDER_MESSAGE)
    return v


# --- Departments ---

class DepartmentRead(SQLModel):
    id: int
    name: str


# --- Employees ---

class EmployeeBase(SQLModel):
    name: str = Field(...)
    gender: str = Field(...)
    email: str = Field(...)
    department_id: Optional[int] = Field(default=None, ge=1)

    _validate_name = validate_name
    _validate_email = validate_email
    _validate_gender = validate_gender

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "jane_doe",
                "gender": "F",
                "email": "jane_doe@example.com",
                "department_id": 1
            }
        }
    )


# Schema for creating an employee
class EmployeeCreate(EmployeeBase):
    pass


# Schema for reading an employee, department joined in
class EmployeeRead(SQLModel):
    id: int
    name: str
    gender: str
    email: str
    department_id: Optional[int] = None
    department: Optional[DepartmentRead] = None


# Schema for updating an employee: only the fields the client sends are written
class EmployeeUpdate(SQLModel):
    name: Optional[str] = None
    gender: Optional[str] = None
    email: Optional[str] = None
    department_id: Optional[int] = Field(default=None, ge=1)

    _validate_name = validate_name
    _validate_email = validate_email
    _validate_gender = validate_gender

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "jane.doe@example.com",
                "department_id": 2
            }
        }
    )


# --- Paging ---

def navigate_window(page: int, pages: int, width: int) -> List[int]:
    """Page numbers shown around ``page``, shifted to stay inside [1, pages]."""
    if pages <= width:
        return list(range(1, pages + 1))
    start = page - width // 2
    end = page + width // 2
    if start < 1:
        return list(range(1, width + 1))
    if end > pages:
        return list(range(pages - width + 1, pages + 1))
    return list(range(start, start + width))


class PageInfo(SQLModel):
    page: int
    page_size: int
    size: int
    total: int
    pages: int
    items: List[EmployeeRead] = []
    navigate_page_nums: List[int] = []
    is_first_page: bool
    is_last_page: bool
    has_previous_page: bool
    has_next_page: bool
    pre_page: int
    next_page: int

    @classmethod
    def build(
            cls,
            items: List[EmployeeRead],
            page: int,
            page_size: int,
            total: int,
            navigate_pages: int
    ) -> "PageInfo":
        pages = (total + page_size - 1) // page_size
        return cls(
            page=page,
            page_size=page_size,
            size=len(items),
            total=total,
            pages=pages,
            items=items,
            navigate_page_nums=navigate_window(page, pages, navigate_pages),
            is_first_page=page == 1,
            is_last_page=pages == 0 or page == pages,
            has_previous_page=page > 1,
            has_next_page=page < pages,
            pre_page=page - 1 if page > 1 else 0,
            next_page=page + 1 if page < pages else 0,
        )


# --- Response envelope ---

class Msg(BaseModel, Generic[T]):
    """Uniform result: ``code`` 100 on success, 200 on failure, named payloads in ``extra``."""
    code: int
    msg: str
    extra: T

    @property
    def ok(self) -> bool:
        return self.code == SUCCESS_CODE

    @classmethod
    def succeed(cls, extra: Any = None, msg: str = "success") -> "Msg":
        return cls(code=SUCCESS_CODE, msg=msg, extra=extra if extra is not None else {})

    @classmethod
    def fail(cls, extra: Any = None, msg: str = "failure") -> "Msg":
        return cls(code=FAILURE_CODE, msg=msg, extra=extra if extra is not None else {})


class PageExtra(SQLModel):
    pageInfo: PageInfo


class EmpExtra(SQLModel):
    emp: EmployeeRead


class DeptsExtra(SQLModel):
    depts: List[DepartmentRead]


# Payload-free or failure-capable endpoints
Extra = Dict[str, Any]
