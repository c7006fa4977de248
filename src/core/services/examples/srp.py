"""Single Responsibility examples: employee manager and data handler."""

from __future__ import annotations

from adapters.data_pipeline import APIHandler, DBHandler, ParseHandler
from adapters.employee_repository import EmployeeRepository
from core.domain.models import Employee, EmployeeType
from core.domain.principles import Principle
from core.legacy.srp import LegacyEmployee, LegacyHandler
from core.services.data_handler import DataHandler
from core.services.examples.base import Example, ExampleContext
from core.services.payroll import TaxCalculator


def employee_manager_problem(ctx: ExampleContext) -> None:
    full_time = LegacyEmployee(1, "Robert", 1000.0, EmployeeType.FULL_TIME, ctx.sink)
    contract = LegacyEmployee(2, "Rob", 500.0, EmployeeType.CONTRACT, ctx.sink)
    full_time.save()
    full_time.calculate_tax()
    contract.save()
    contract.calculate_tax()


def employee_manager_solution(ctx: ExampleContext) -> None:
    full_time = Employee(id=1, name="Robert", salary=1000.0, employee_type=EmployeeType.FULL_TIME)
    contract = Employee(id=2, name="Rob", salary=500.0, employee_type=EmployeeType.CONTRACT)
    tax_calculator = TaxCalculator(ctx.sink)
    repository = EmployeeRepository(ctx.sink)
    for employee in (full_time, contract):
        tax_calculator.calculate_tax(employee)
        repository.save(employee)


def handler_problem(ctx: ExampleContext) -> None:
    LegacyHandler(ctx.sink).handle()


def handler_solution(ctx: ExampleContext) -> None:
    handler = DataHandler(
        api_handler=APIHandler(),
        parse_handler=ParseHandler(),
        db_handler=DBHandler(ctx.sink),
    )
    handler.handle()


EXAMPLES = (
    Example(
        principle=Principle.SRP,
        slug="employee-manager",
        title="Employee Manager Example",
        problem=employee_manager_problem,
        solution=employee_manager_solution,
    ),
    Example(
        principle=Principle.SRP,
        slug="handler",
        title="Handler Example",
        problem=handler_problem,
        solution=handler_solution,
    ),
)
