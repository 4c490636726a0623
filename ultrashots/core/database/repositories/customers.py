"""
Customer repository interface and implementation.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy import func, or_
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..entities.customers import Customer
from .base import BaseRepository, QueryBuilder


class CustomerRepository(BaseRepository[Customer]):
    """Repository for customer data access operations using SQLModel."""

    order_by = "name"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Customer)

    async def get_by_email(self, email: str) -> Optional[Customer]:
        """Get a customer by e-mail address."""
        result = await self.session.exec(select(Customer).where(Customer.email == email.strip().lower()))
        return result.one_or_none()

    async def first_or_create(self, email: str, name: str, **fields) -> Customer:
        """Return the customer with ``email``, creating it when missing."""
        customer = await self.get_by_email(email)
        if customer is not None:
            return customer
        return await self.create(Customer(email=email.strip().lower(), name=name, **fields))

    def _search_clause(self, term: str):
        pattern = f"%{term.strip().lower()}%"
        return or_(
            func.lower(Customer.name).like(pattern),
            func.lower(Customer.email).like(pattern),
            func.lower(func.coalesce(Customer.company, "")).like(pattern),
        )

    async def search(
        self,
        term: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Customer]:
        """List customers whose name, e-mail or company contains ``term``.

        Args:
            term: Case-insensitive search term; empty lists everything
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (status)
        """
        stmt = select(Customer).order_by(Customer.name)
        if term:
            stmt = stmt.where(self._search_clause(term))
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Customer, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_matching(self, term: Optional[str] = None, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count the customers ``search`` would return without pagination."""
        stmt = select(func.count()).select_from(Customer)
        if term:
            stmt = stmt.where(self._search_clause(term))
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Customer, filters)
        result = await self.session.exec(stmt)
        return int(result.one())
