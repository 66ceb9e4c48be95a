"""
SuperApp Backend — Page Bundle Route Handlers
===============================================

What:  One GET per screen, returning everything that screen renders:
         GET /api/projects   tasks, contacts, contact picker options
         GET /api/finance    transactions, budgets
         GET /api/fitness    workouts
         GET /api/meals      meals
         GET /api/habits     habits, completions
         GET /api/wellness   mood entries
         GET /api/travel     trips, activities, expenses
         GET /api/saver      recent items, all items, category counts
How:   The data source is chosen once per request by `select_data_source`:
       visitors without a session get the sample data (`is_guest: true`),
       signed-in users get their own records.
Who:   Called by every frontend page on load and after a write that listed
       the page in `X-Invalidated-Views`.

Caching:
    Cache-Control: private, no-cache. Bundles change with every write and
    are user-specific, so the browser must revalidate.
"""

from fastapi import APIRouter, Depends, Response

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
from superapp.services.data_sources import DataSource, select_data_source

router = APIRouter(prefix="/api", tags=["Pages"])

CACHE_CONTROL = "private, no-cache"


@router.get("/projects", response_model=ProjectsPage, summary="Projects page bundle")
async def projects_page(
    response: Response, source: DataSource = Depends(select_data_source)
) -> ProjectsPage:
    response.headers["Cache-Control"] = CACHE_CONTROL
    return await source.projects()


@router.get("/finance", response_model=FinancePage, summary="Finance page bundle")
async def finance_page(
    response: Response, source: DataSource = Depends(select_data_source)
) -> FinancePage:
    response.headers["Cache-Control"] = CACHE_CONTROL
    return await source.finance()


@router.get("/fitness", response_model=FitnessPage, summary="Fitness page bundle")
async def fitness_page(
    response: Response, source: DataSource = Depends(select_data_source)
) -> FitnessPage:
    response.headers["Cache-Control"] = CACHE_CONTROL
    return await source.fitness()


@router.get("/meals", response_model=MealsPage, summary="Meals page bundle")
async def meals_page(
    response: Response, source: DataSource = Depends(select_data_source)
) -> MealsPage:
    response.headers["Cache-Control"] = CACHE_CONTROL
    return await source.meals()


@router.get("/habits", response_model=HabitsPage, summary="Habits page bundle")
async def habits_page(
    response: Response, source: DataSource = Depends(select_data_source)
) -> HabitsPage:
    response.headers["Cache-Control"] = CACHE_CONTROL
    return await source.habits()


@router.get("/wellness", response_model=WellnessPage, summary="Wellness page bundle")
async def wellness_page(
    response: Response, source: DataSource = Depends(select_data_source)
) -> WellnessPage:
    response.headers["Cache-Control"] = CACHE_CONTROL
    return await source.wellness()


@router.get("/travel", response_model=TravelPage, summary="Travel page bundle")
async def travel_page(
    response: Response, source: DataSource = Depends(select_data_source)
) -> TravelPage:
    response.headers["Cache-Control"] = CACHE_CONTROL
    return await source.travel()


@router.get("/saver", response_model=SaverPage, summary="Universal Saver page bundle")
async def saver_page(
    response: Response, source: DataSource = Depends(select_data_source)
) -> SaverPage:
    response.headers["Cache-Control"] = CACHE_CONTROL
    return await source.saver()
