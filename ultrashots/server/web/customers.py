"""
Customer management pages.

All routes need the matching ``customers.*`` permission.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request, status

from ultrashots.core.database.entities import Customer, CustomerStatus
from ultrashots.core.database.repositories import CustomerRepository, ProjectRepository
from ultrashots.core.logging_config import get_logger
from ultrashots.server.exceptions import FormValidationError
from ultrashots.server.flash import notify
from ultrashots.server.pages import render_page
from ultrashots.server.redirects import redirect_back, redirect_to
from ultrashots.server.schemas import AuthUser, CustomerCreate, CustomerRead, CustomerUpdate, ProjectRead
from ultrashots.server.services.deps import PaginationDep, SessionDep, require_permission

logger = get_logger(__name__)

router = APIRouter(prefix="/customers", tags=["customers"])

EMAIL_TAKEN_MESSAGE = "The email has already been taken."


async def _get_or_404(customers: CustomerRepository, customer_id: int) -> Customer:
    customer = await customers.get_by_id(customer_id)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Customer not found")
    return customer


@router.get("", summary="List Customers")
async def index(
    request: Request,
    session: SessionDep,
    pagination: PaginationDep,
    search: Optional[str] = None,
    customer_status: Optional[CustomerStatus] = Query(default=None, alias="status"),
    user: AuthUser = require_permission("customers.view"),
):
    """Paginated customer list, searchable by name, e-mail or company."""
    customers = CustomerRepository(session)
    filters = {"status": customer_status.value if customer_status else None}
    records = await customers.search(search, limit=pagination.per_page, offset=pagination.offset, filters=filters)
    total = await customers.count_matching(search, filters)
    return render_page(
        request,
        "Customers/Index",
        {
            "customers": [CustomerRead.model_validate(customer) for customer in records],
            "meta": pagination.meta(total),
            "filters": {"search": search, "status": customer_status},
        },
    )


@router.post("", summary="Create Customer")
async def store(
    request: Request,
    payload: CustomerCreate,
    session: SessionDep,
    user: AuthUser = require_permission("customers.create"),
):
    customers = CustomerRepository(session)
    if await customers.get_by_email(payload.email) is not None:
        raise FormValidationError({"email": EMAIL_TAKEN_MESSAGE})

    customer = await customers.create(Customer(**payload.model_dump()))
    logger.info(f"User {user.id} created customer {customer.id}")
    notify(request, "success", f"Customer {customer.name} created.")
    return redirect_to(request, f"/customers/{customer.id}")


@router.get("/{customer_id}", summary="Show Customer")
async def show(
    customer_id: int,
    request: Request,
    session: SessionDep,
    user: AuthUser = require_permission("customers.view"),
):
    """A customer with all of its projects."""
    customer = await _get_or_404(CustomerRepository(session), customer_id)
    projects = await ProjectRepository(session).list_for_customer(customer.id)
    return render_page(
        request,
        "Customers/Show",
        {
            "customer": CustomerRead.model_validate(customer),
            "projects": [ProjectRead.model_validate(project) for project in projects],
        },
    )


@router.put("/{customer_id}", summary="Update Customer")
async def update(
    customer_id: int,
    request: Request,
    payload: CustomerUpdate,
    session: SessionDep,
    user: AuthUser = require_permission("customers.edit"),
):
    customers = CustomerRepository(session)
    customer = await _get_or_404(customers, customer_id)

    changes = payload.model_dump(exclude_unset=True)
    if changes.get("email") and changes["email"] != customer.email:
        if await customers.get_by_email(changes["email"]) is not None:
            raise FormValidationError({"email": EMAIL_TAKEN_MESSAGE})

    for field, value in changes.items():
        setattr(customer, field, value)
    await customers.update(customer)
    notify(request, "success", f"Customer {customer.name} updated.")
    return redirect_to(request, f"/customers/{customer.id}")


@router.delete("/{customer_id}", summary="Delete Customer")
async def destroy(
    customer_id: int,
    request: Request,
    session: SessionDep,
    user: AuthUser = require_permission("customers.delete"),
):
    """Delete a customer. Customers that still have projects are kept."""
    customers = CustomerRepository(session)
    customer = await _get_or_404(customers, customer_id)

    if await ProjectRepository(session).count({"customer_id": customer.id}):
        notify(request, "danger", f"Customer {customer.name} still has projects.")
        return redirect_back(request)

    await customers.delete(customer.id)
    logger.info(f"User {user.id} deleted customer {customer_id}")
    notify(request, "success", f"Customer {customer.name} deleted.")
    return redirect_to(request, "/customers")
