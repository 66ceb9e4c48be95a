"""
SuperApp Backend — Page Data Sources
======================================

What:  The read boundary behind the `GET /api/<module>` page endpoints. Each
       page is one "bundle" of the records its screen renders.
How:   A `DataSource` is chosen exactly once per request:
         - no identity  → StaticDataSource (bundled guest sample data)
         - identity     → StoreDataSource  (owner-scoped database queries)
       Sources are never mixed inside one response, and an authenticated
       caller whose reads fail gets the error, not the guest data.
Who:   routes/pages.py via the `select_data_source` dependency.

Concurrency:
    A bundle's reads are independent, so StoreDataSource runs them with
    asyncio.gather. An AsyncSession cannot run statements concurrently, so
    each read opens its own short-lived session from the session factory.
"""

import asyncio
import logging
import uuid
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import async_sessionmaker

from superapp.auth import Identity, get_identity
from superapp.database import async_session_factory
from superapp.schemas.pages import (
    FinancePage,
    FitnessPage,
    HabitsPage,
    MealsPage,
    ProjectsPage,
    SaverPage,
    TravelPage,
    WellnessPage,
)
from superapp.services import guest_data
from superapp.services.contact_service import contact_service
from superapp.services.finance_service import finance_service
from superapp.services.fitness_service import meal_service, workout_service
from superapp.services.habit_service import habit_service
from superapp.services.saver_service import saver_service
from superapp.services.task_service import task_service
from superapp.services.travel_service import travel_service
from superapp.services.wellness_service import wellness_service

logger = logging.getLogger(__name__)

RECENT_ITEMS_LIMIT = 5

Read = Callable[..., Awaitable[Any]]


class DataSource(ABC):
    """One method per page bundle."""

    is_guest: bool = False

    @abstractmethod
    async def projects(self) -> ProjectsPage: ...

    @abstractmethod
    async def finance(self) -> FinancePage: ...

    @abstractmethod
    async def fitness(self) -> FitnessPage: ...

    @abstractmethod
    async def meals(self) -> MealsPage: ...

    @abstractmethod
    async def habits(self) -> HabitsPage: ...

    @abstractmethod
    async def wellness(self) -> WellnessPage: ...

    @abstractmethod
    async def travel(self) -> TravelPage: ...

    @abstractmethod
    async def saver(self) -> SaverPage: ...


# ══════════════════════════════════════════════════════════════════════════
# Guests
# ══════════════════════════════════════════════════════════════════════════


class StaticDataSource(DataSource):
    """Serves the bundled sample datasets. Never touches the database."""

    is_guest = True

    async def projects(self) -> ProjectsPage:
        contacts = guest_data.contacts()
        return ProjectsPage(
            is_guest=True,
            tasks=guest_data.tasks(),
            contacts=contacts,
            contact_options=contact_service.options(contacts),
        )

    async def finance(self) -> FinancePage:
        return FinancePage(
            is_guest=True,
            transactions=guest_data.transactions(),
            budgets=guest_data.budgets(),
        )

    async def fitness(self) -> FitnessPage:
        return FitnessPage(is_guest=True, workouts=guest_data.workouts())

    async def meals(self) -> MealsPage:
        return MealsPage(is_guest=True, meals=guest_data.meals())

    async def habits(self) -> HabitsPage:
        return HabitsPage(
            is_guest=True,
            habits=guest_data.habits(),
            completions=guest_data.habit_completions(),
        )

    async def wellness(self) -> WellnessPage:
        return WellnessPage(is_guest=True, entries=guest_data.mood_entries())

    async def travel(self) -> TravelPage:
        return TravelPage(
            is_guest=True,
            trips=guest_data.trips(),
            activities=guest_data.trip_activities(),
            expenses=guest_data.trip_expenses(),
        )

    async def saver(self) -> SaverPage:
        items = guest_data.saved_items()
        return SaverPage(
            is_guest=True,
            recent_items=items[:RECENT_ITEMS_LIMIT],
            items=items,
            category_counts=guest_data.saved_item_counts(),
        )


# ══════════════════════════════════════════════════════════════════════════
# Authenticated callers
# ══════════════════════════════════════════════════════════════════════════


class StoreDataSource(DataSource):
    """Owner-scoped reads for one user, fanned out over separate sessions."""

    def __init__(
        self,
        user_id: uuid.UUID,
        session_factory: async_sessionmaker = async_session_factory,
    ):
        self.user_id = user_id
        self.session_factory = session_factory

    async def _read(self, read: Read, *args: Any) -> Any:
        async with self.session_factory() as session:
            return await read(session, self.user_id, *args)

    async def _gather(self, *reads: Read) -> list:
        return list(await asyncio.gather(*(self._read(read) for read in reads)))

    async def projects(self) -> ProjectsPage:
        tasks, contacts = await self._gather(
            task_service.list_tasks, contact_service.list_contacts
        )
        return ProjectsPage(
            is_guest=False,
            tasks=tasks,
            contacts=contacts,
            contact_options=contact_service.options(contacts),
        )

    async def finance(self) -> FinancePage:
        transactions, budgets = await self._gather(
            finance_service.list_transactions, finance_service.list_budgets
        )
        return FinancePage(is_guest=False, transactions=transactions, budgets=budgets)

    async def fitness(self) -> FitnessPage:
        workouts = await self._read(workout_service.list_workouts)
        return FitnessPage(is_guest=False, workouts=workouts)

    async def meals(self) -> MealsPage:
        meals = await self._read(meal_service.list_meals)
        return MealsPage(is_guest=False, meals=meals)

    async def habits(self) -> HabitsPage:
        habits, completions = await self._gather(
            habit_service.list_habits, habit_service.list_completions
        )
        return HabitsPage(is_guest=False, habits=habits, completions=completions)

    async def wellness(self) -> WellnessPage:
        entries = await self._read(wellness_service.list_entries)
        return WellnessPage(is_guest=False, entries=entries)

    async def travel(self) -> TravelPage:
        trips, activities, expenses = await self._gather(
            travel_service.list_trips,
            travel_service.list_activities,
            travel_service.list_expenses,
        )
        return TravelPage(
            is_guest=False, trips=trips, activities=activities, expenses=expenses
        )

    async def saver(self) -> SaverPage:
        recent, items, counts = await asyncio.gather(
            self._read(saver_service.recent_items, RECENT_ITEMS_LIMIT),
            self._read(saver_service.all_items),
            self._read(saver_service.category_counts),
        )
        return SaverPage(
            is_guest=False, recent_items=recent, items=items, category_counts=counts
        )


# ── FastAPI Dependency ────────────────────────────────────────────────────

static_data_source = StaticDataSource()


async def select_data_source(
    identity: Optional[Identity] = Depends(get_identity),
) -> DataSource:
    """Pick the data source for this request, once."""
    if identity is None:
        logger.debug("No session; serving guest sample data")
        return static_data_source
    return StoreDataSource(identity.id)
