# models.py
from sqlmodel import SQLModel, Field, Relationship
from typing import List, Optional


class Department(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=50)

    employees: List["Employee"] = Relationship(back_populates="department")


class Employee(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    # Uniqueness lives in the store; /checkUser is only advisory
    name: str = Field(unique=True, index=True, max_length=50)
    gender: str = Field(max_length=1)
    email: str = Field(max_length=255)
    department_id: Optional[int] = Field(default=None, foreign_key="department.id")

    department: Optional[Department] = Relationship(back_populates="employees")
