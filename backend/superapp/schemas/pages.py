"""
SuperApp Backend — Page Bundle Schemas
========================================

What:  One response model per page endpoint (`GET /api/<module>`). Every
       bundle says whether it came from the static guest datasets.
"""

from typing import Dict, List

from pydantic import BaseModel, Field

from superapp.schemas.contacts import ContactOption, ContactRecord, TaskRecord
from superapp.schemas.finance import BudgetRecord, TransactionRecord
from superapp.schemas.fitness import MealRecord, WorkoutRecord
from superapp.schemas.habits import CompletionRecord, HabitRecord
from superapp.schemas.saver import SavedItemRecord
from superapp.schemas.travel import ActivityRecord, ExpenseRecord, TripRecord
from superapp.schemas.wellness import MoodEntryRecord


class PageBundle(BaseModel):
    is_guest: bool = Field(description="True when served from static sample data")


class ProjectsPage(PageBundle):
    tasks: List[TaskRecord]
    contacts: List[ContactRecord]
    contact_options: List[ContactOption]


class FinancePage(PageBundle):
    transactions: List[TransactionRecord]
    budgets: List[BudgetRecord]


class FitnessPage(PageBundle):
    workouts: List[WorkoutRecord]


class MealsPage(PageBundle):
    meals: List[MealRecord]


class HabitsPage(PageBundle):
    habits: List[HabitRecord]
    completions: List[CompletionRecord]


class WellnessPage(PageBundle):
    entries: List[MoodEntryRecord]


class TravelPage(PageBundle):
    trips: List[TripRecord]
    activities: List[ActivityRecord]
    expenses: List[ExpenseRecord]


class SaverPage(PageBundle):
    recent_items: List[SavedItemRecord]
    items: List[SavedItemRecord]
    category_counts: Dict[str, int]
