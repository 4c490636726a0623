"""Seeds customers, each with a first pair of projects."""

from ultrashots.core.database.repositories import CustomerRepository, ProjectRepository

from .base import Seeder
from .data import CUSTOMER_PROJECT_TYPES, CUSTOMERS
from .projects import project_fields

PROJECTS_PER_CUSTOMER = 2


class CustomerSeeder(Seeder):
    """Creates every customer and its first projects."""

    async def run(self) -> None:
        customers = CustomerRepository(self.session)
        projects = ProjectRepository(self.session)

        for position, definition in enumerate(CUSTOMERS):
            customer = await customers.first_or_create(
                email=definition["email"],
                name=definition["name"],
                company=definition["company"],
                status=definition["status"],
                website=f"https://{definition['email'].split('@', 1)[1]}",
            )
            for offset in range(PROJECTS_PER_CUSTOMER):
                index = position * PROJECTS_PER_CUSTOMER + offset
                project_type = CUSTOMER_PROJECT_TYPES[index % len(CUSTOMER_PROJECT_TYPES)]
                await projects.first_or_create(**project_fields(customer, project_type, index))

        self.console.info(f"  {len(CUSTOMERS)} customers, {len(CUSTOMERS) * PROJECTS_PER_CUSTOMER} projects")
