"""
SuperApp Backend — Input Schema Tests
=======================================

What:  Field-level validation of the mutation inputs.
How:   Direct model construction; the first error's type and message are
       what the API returns in a 400.

What we test:
    ✅ Missing or blank required fields produce the field's own message
    ✅ Blank optional strings fall back to defaults
    ✅ Numbers given as strings are coerced, junk is rejected
    ✅ Budget "overall" is stored as no category; months normalize to day 1
    ✅ Boolean habits drop their target count
    ✅ Mood must be 1-5; tags are parsed from comma lists
"""

from datetime import date

import pytest
from pydantic import ValidationError

from superapp.schemas.common import parse_tag_list
from superapp.schemas.contacts import ContactInput, TaskInput
from superapp.schemas.finance import BudgetInput, TransactionInput
from superapp.schemas.habits import CompletionValueInput, HabitInput
from superapp.schemas.travel import ExpenseInput, TripInput
from superapp.schemas.wellness import MoodEntryInput


def _first_error(exc_info) -> dict:
    return exc_info.value.errors()[0]


class TestRequiredFields:

    @pytest.mark.parametrize(
        "model, data, message",
        [
            (ContactInput, {}, "First name is required"),
            (ContactInput, {"first_name": "   "}, "First name is required"),
            (TaskInput, {"description": "no title"}, "Title is required"),
            (TransactionInput, {"amount": 12}, "Description is required"),
            (HabitInput, {"name": ""}, "Habit name is required"),
            (TripInput, {"destination": None}, "Destination is required"),
            (ExpenseInput, {"title": "Taxi"}, "Trip, title, and amount are required"),
        ],
    )
    def test_missing_field_message(self, model, data, message):
        with pytest.raises(ValidationError) as exc_info:
            model.model_validate(data)

        error = _first_error(exc_info)
        assert error["type"] == "required"
        assert error["msg"] == message


class TestDefaults:

    def test_blank_optional_strings_use_defaults(self):
        contact = ContactInput.model_validate(
            {"first_name": "Ada", "email": "", "status": " "}
        )

        assert contact.email is None
        assert contact.status == "lead"

    def test_unknown_fields_are_ignored(self):
        task = TaskInput.model_validate({"title": "Call back", "user_id": "someone-else"})

        assert "user_id" not in task.values()

    def test_trip_destination_is_trimmed(self):
        trip = TripInput(destination="  Lisbon ")

        assert trip.destination == "Lisbon"
        assert trip.currency == "USD"


class TestNumbers:

    def test_numeric_string_is_coerced(self):
        transaction = TransactionInput(description="Coffee", amount="4.50")

        assert transaction.amount == 4.5

    def test_junk_amount_is_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            TransactionInput(description="Coffee", amount="four")

        error = _first_error(exc_info)
        assert error["type"] == "number_required"
        assert error["msg"] == "Valid amount is required"

    def test_completion_value_accepts_zero(self):
        payload = CompletionValueInput(completion_date=date(2026, 3, 1), value="0")

        assert payload.value == 0.0


class TestBudgetInput:

    @pytest.mark.parametrize("category", ["overall", "Overall", None])
    def test_overall_has_no_category(self, category):
        budget = BudgetInput(category=category, monthly_limit=1200)

        assert budget.category is None

    def test_month_is_normalized(self):
        budget = BudgetInput(category="food", monthly_limit="300", budget_month=date(2026, 5, 19))

        assert budget.budget_month == date(2026, 5, 1)
        assert budget.monthly_limit == 300.0

    def test_missing_month_is_current(self):
        budget = BudgetInput(monthly_limit=10)

        assert budget.budget_month == date.today().replace(day=1)


class TestHabitInput:

    def test_boolean_habit_drops_target(self):
        habit = HabitInput(name="Meditate", type="boolean", target_count=5)

        assert habit.target_count is None

    def test_counted_habit_keeps_target(self):
        habit = HabitInput(name="Water", type="counted", target_count=8)

        assert habit.target_count == 8


class TestMoodEntryInput:

    @pytest.mark.parametrize("mood", [0, 6, "great", None])
    def test_mood_out_of_range(self, mood):
        with pytest.raises(ValidationError) as exc_info:
            MoodEntryInput.model_validate({"mood": mood})

        assert _first_error(exc_info)["msg"] == "Valid mood (1-5) is required"

    def test_mood_string_is_accepted(self):
        entry = MoodEntryInput(mood="4", tags="Calm, rested , ,FOCUSED")

        assert entry.mood == 4
        assert entry.tags == ["calm", "rested", "focused"]
        assert entry.entry_date == date.today()


def test_parse_tag_list_handles_lists_and_none():
    assert parse_tag_list(None) == []
    assert parse_tag_list([" Beach", "", "Food "]) == ["beach", "food"]
