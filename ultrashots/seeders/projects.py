"""Seeds additional projects on top of those created with each customer."""

from datetime import timedelta
from typing import Dict

from ultrashots.core.database.entities import Customer, ProjectStatus
from ultrashots.core.database.repositories import CustomerRepository, ProjectRepository
from ultrashots.core.security import slugify

from .base import Seeder
from .data import ADDITIONAL_PROJECT_COUNT, ADDITIONAL_PROJECT_TYPES, CUSTOMERS, PROJECT_BUDGETS, SEED_EPOCH

STATUSES = tuple(ProjectStatus)


def project_fields(customer: Customer, project_type: str, index: int) -> Dict:
    """Deterministic attributes of the ``index``-th seeded project."""
    status = STATUSES[index % len(STATUSES)]
    started_at = SEED_EPOCH + timedelta(days=index * 9)
    completed = status is ProjectStatus.COMPLETED
    title = f"{customer.company} {project_type}"
    return {
        "slug": slugify(title),
        "customer_id": customer.id,
        "title": title,
        "summary": f"{project_type} for {customer.company}.",
        "description": f"{project_type} delivered for {customer.company}, led by {customer.name}.",
        "status": status.value,
        "budget": PROJECT_BUDGETS[index % len(PROJECT_BUDGETS)],
        "is_published": completed,
        "is_featured": completed and index % 3 == 0,
        "started_at": started_at,
        "completed_at": started_at + timedelta(days=30) if completed else None,
    }


class ProjectSeeder(Seeder):
    """Adds projects across customers and every status.

    Customers must already exist, so this seeder runs after ``CustomerSeeder``.
    """

    async def run(self) -> None:
        customers = CustomerRepository(self.session)
        projects = ProjectRepository(self.session)

        for index in range(ADDITIONAL_PROJECT_COUNT):
            email = CUSTOMERS[index % len(CUSTOMERS)]["email"]
            customer = await customers.get_by_email(email)
            if customer is None:
                raise LookupError(f"Customer {email} must be seeded before its projects")
            project_type = ADDITIONAL_PROJECT_TYPES[index % len(ADDITIONAL_PROJECT_TYPES)]
            # Offset keeps statuses and dates distinct from the customer seeder's
            await projects.first_or_create(**project_fields(customer, project_type, index + 2 * len(CUSTOMERS)))

        self.console.info(f"  {ADDITIONAL_PROJECT_COUNT} additional projects")
