# cli.py
import asyncio
import uuid
from typing import List, Optional

import typer

from .config import HOST, PORT
from .schemas import EmployeeCreate

app = typer.Typer(help="Employee CRUD service commands.")


def generate_employees(
        count: int,
        department_id: Optional[int] = None,
        domain: str = "example.com"
) -> List[EmployeeCreate]:
    """Synthetic employees named ``<5 hex chars><index>``, e.g. ``3fa9c0``."""
    employees = []
    for i in range(count):
        name = uuid.uuid4().hex[:5] + str(i)
        employees.append(EmployeeCreate(
            name=name,
            gender="M" if i % 2 == 0 else "F",
            email=f"{name}@{domain}",
            department_id=department_id,
        ))
    return employees


async def _seed(employees: List[EmployeeCreate]) -> int:
    from . import services
    from .database import AsyncSessionFactory, create_db_and_tables

    await create_db_and_tables()
    async with AsyncSessionFactory() as session:
        for employee in employees:
            await services.save_emp(session, employee)
    return len(employees)


@app.command("seed")
def seed(
    count: int = typer.Option(100, "--count", "-n", min=1, help="Number of employees to insert"),
    department_id: Optional[int] = typer.Option(None, "--department-id", "-d", help="Department for every row"),
    domain: str = typer.Option("example.com", help="Email domain"),
):
    """
    Bulk-insert synthetic employees.
    """
    from .main import configure_logging

    configure_logging()
    inserted = asyncio.run(_seed(generate_employees(count, department_id, domain)))
    typer.echo(f"Inserted {inserted} employees.")


@app.command("serve")
def serve(
    host: str = typer.Option(HOST, help="Bind address"),
    port: int = typer.Option(PORT, help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """
    Run the HTTP API with uvicorn.
    """
    import uvicorn

    uvicorn.run("emp_crud.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
