"""
SuperApp Backend — Guest Sample Data
======================================

What:  The static datasets shown to visitors without a session, one per page.
How:   Records are built as the same response models the store-backed path
       returns, so the frontend cannot tell the two apart except by
       `is_guest`. Ids are stable UUIDs (uuid5 over a fixed namespace) so
       links between records (task → contact, activity → trip) hold.
       Dates in the activity logs are relative to today, so a guest always
       sees a "current" week.

Nothing here touches the database.
"""

import math
import uuid
from datetime import date, datetime, time, timedelta, timezone
from typing import Dict, List, Optional

from superapp.schemas.contacts import ContactRecord, TaskRecord
from superapp.schemas.finance import BudgetRecord, TransactionRecord, first_of_month
from superapp.schemas.fitness import MealRecord, WorkoutRecord
from superapp.schemas.habits import CompletionRecord, HabitRecord
from superapp.schemas.saver import SavedItemRecord
from superapp.schemas.travel import ActivityRecord, ExpenseRecord, TripRecord
from superapp.schemas.wellness import MoodEntryRecord

GUEST_NAMESPACE = uuid.UUID("5b7e1f0c-2d4a-4c1e-9a57-6a0d3f9e8b21")


def guest_id(key: str) -> uuid.UUID:
    """Stable UUID for a sample record key such as 'c1' or 'ta12'."""
    return uuid.uuid5(GUEST_NAMESPACE, key)


def _ts(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def _days_ago(days: int, today: Optional[date] = None) -> date:
    return (today or date.today()) - timedelta(days=days)


def _now() -> datetime:
    return datetime.now(timezone.utc)


# ══════════════════════════════════════════════════════════════════════════
# Projects (contacts + tasks)
# ══════════════════════════════════════════════════════════════════════════

# key, first, last, email, phone, company, role, status, notes, created
_CONTACTS = [
    ("c1", "Sarah", "Chen", "sarah.chen@techcorp.io", "+1 (415) 555-0102", "TechCorp",
     "VP of Engineering", "active", "Met at React Summit 2025. Interested in our enterprise plan.",
     "2025-12-15T10:30:00"),
    ("c2", "Marcus", "Rivera", "marcus@designlabs.co", "+1 (212) 555-0198", "DesignLabs",
     "Founder & CEO", "lead", "Reached out via LinkedIn. Scheduling a demo next week.",
     "2026-01-08T14:20:00"),
    ("c3", "Emily", "Tanaka", "emily.tanaka@startup.ai", "+1 (650) 555-0147", "Startup AI",
     "Head of Product", "active", "Signed up for the pilot program. Actively using the product.",
     "2026-01-20T09:15:00"),
    ("c4", "David", "Okafor", "d.okafor@finserve.com", "+1 (312) 555-0163", "FinServe",
     "CTO", "active", "Enterprise customer. Renewed annual contract in January.",
     "2025-11-03T16:45:00"),
    ("c5", "Ava", "Morrison", "ava.m@cloudbase.dev", None, "CloudBase",
     "Senior Developer", "inactive", "Previously evaluated our API. May revisit in Q2.",
     "2025-09-22T11:00:00"),
    ("c6", "James", "Park", "jpark@novacorp.io", "+1 (206) 555-0134", "NovaCorp",
     "Engineering Manager", "lead", "Inbound from the website. Requested pricing details.",
     "2026-02-01T08:30:00"),
]

# key, title, description, status, priority, due, contact key, created
_TASKS = [
    ("t1", "Prepare Q1 product roadmap presentation",
     "Create slides covering feature releases, metrics, and upcoming milestones for the Q1 review.",
     "in_progress", "high", "2026-02-14", "c1", "2026-02-07T10:00:00"),
    ("t2", "Follow up with DesignLabs demo",
     "Send recap email and proposal after the product demo with Marcus.",
     "done", "high", "2026-02-10", "c2", "2026-02-07T14:00:00"),
    ("t3", "Review pilot feedback from Startup AI",
     "Analyze usage data and feedback from Emily's team during the pilot period.",
     "done", "medium", "2026-01-28", "c3", "2026-02-06T09:00:00"),
    ("t4", "Update API documentation for v2 endpoints",
     "Document the new authentication flow and rate limiting changes.",
     "in_progress", "medium", "2026-02-20", None, "2026-02-06T11:30:00"),
    ("t5", "Schedule contract renewal meeting with FinServe",
     "Set up a call with David to discuss the Q2 expansion plan.",
     "done", "medium", "2026-02-12", "c4", "2026-02-05T08:45:00"),
    ("t6", "Fix authentication bug on mobile",
     "Users on iOS Safari are intermittently logged out. Investigate session handling.",
     "todo", "high", "2026-02-08", None, "2026-02-04T16:20:00"),
    ("t7", "Send NovaCorp pricing proposal",
     "Prepare custom pricing based on their team size and usage estimate.",
     "todo", "low", "2026-02-18", "c6", "2026-02-04T10:00:00"),
    ("t8", "Write blog post about new features",
     "Cover the universal saver, AI search, and analytics dashboard in a launch post.",
     "done", "low", "2026-01-20", None, "2026-02-03T13:00:00"),
]


def contacts() -> List[ContactRecord]:
    return [
        ContactRecord(
            id=guest_id(key), first_name=first, last_name=last, email=email, phone=phone,
            company=company, role=role, status=status, notes=notes, created_at=_ts(created),
        )
        for key, first, last, email, phone, company, role, status, notes, created in _CONTACTS
    ]


def tasks() -> List[TaskRecord]:
    names: Dict[str, str] = {c[0]: f"{c[1]} {c[2]}" for c in _CONTACTS}
    return [
        TaskRecord(
            id=guest_id(key), title=title, description=description, status=status,
            priority=priority, due_date=date.fromisoformat(due),
            contact_id=guest_id(contact) if contact else None,
            contact_name=names.get(contact) if contact else None,
            created_at=_ts(created),
        )
        for key, title, description, status, priority, due, contact, created in _TASKS
    ]


# ══════════════════════════════════════════════════════════════════════════
# Universal Saver
# ══════════════════════════════════════════════════════════════════════════

# key, title, summary, category, tags, metadata, created
_SAVED_ITEMS = [
    ("s1", "Sarah Chen - VP of Engineering at TechCorp",
     "LinkedIn profile of a senior engineering leader with 12 years of experience in "
     "distributed systems and team building.",
     "person", ["engineering", "leadership", "enterprise"],
     {"content_type": "profile", "sentiment": "neutral", "entities": ["Sarah Chen", "TechCorp"]},
     "2026-01-18T10:00:00"),
    ("s2", "Q1 Planning Meeting Notes",
     "Discussed product roadmap priorities, hiring plan for 3 new engineers, and timeline "
     "for v2 API launch.",
     "meeting", ["planning", "roadmap", "hiring"],
     {"content_type": "meeting_notes", "urgency": "high", "entities": ["Q1", "v2 API"]},
     "2026-01-22T15:30:00"),
    ("s3", "AI-Powered Search Implementation Ideas",
     "Brainstorm on using vector embeddings for semantic search across saved items, "
     "contacts, and tasks.",
     "idea", ["ai", "search", "embeddings", "product"],
     {"content_type": "brainstorm", "sentiment": "positive", "entities": []},
     "2026-01-28T09:45:00"),
    ("s4", "Research: Best Practices for SaaS Onboarding",
     "Article summary covering onboarding flow patterns, activation metrics, and user "
     "retention strategies.",
     "reference", ["saas", "onboarding", "retention"],
     {"content_type": "article", "entities": []},
     "2026-02-01T14:00:00"),
    ("s5", "Integrate Slack Notifications for Task Updates",
     "Feature request to send Slack messages when tasks are created, completed, or overdue.",
     "task", ["integration", "slack", "notifications"],
     {"content_type": "feature_request", "urgency": "medium", "entities": ["Slack"]},
     "2026-02-03T11:20:00"),
]


def saved_items() -> List[SavedItemRecord]:
    """Newest first, matching the store-backed ordering."""
    items = [
        SavedItemRecord(
            id=guest_id(key), title=title, summary=summary, category=category, tags=tags,
            metadata=metadata, created_at=_ts(created),
            raw_text=(
                f'This is sample content for "{title}". In the full app, this would contain '
                "the original text you pasted into the Universal Saver."
            ),
        )
        for key, title, summary, category, tags, metadata, created in _SAVED_ITEMS
    ]
    return sorted(items, key=lambda item: item.created_at, reverse=True)


def saved_item_counts() -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for item in _SAVED_ITEMS:
        counts[item[3]] = counts.get(item[3], 0) + 1
    return counts


# ══════════════════════════════════════════════════════════════════════════
# Fitness & Meals
# ══════════════════════════════════════════════════════════════════════════

# key, exercise, category, sets, reps, weight, minutes, notes, days ago
_WORKOUTS = [
    ("w1", "Bench Press", "strength", 4, 8, 185, None,
     "Felt strong today. Almost hit 195 on the last set.", 0),
    ("w2", "Running", "cardio", None, None, None, 35, "5K in 28 min. Good pace.", 0),
    ("w3", "Squats", "strength", 5, 5, 225, None, "New PR on working sets!", 1),
    ("w4", "Yoga Flow", "flexibility", None, None, None, 45,
     "Morning flow session. Hips feeling much better.", 1),
    ("w5", "Deadlift", "strength", 3, 5, 275, None, "Kept form tight on every rep.", 3),
    ("w6", "Cycling", "cardio", None, None, None, 50, "Hill intervals on the trainer.", 4),
]

# key, name, type, calories, protein, carbs, fat, notes, days ago
_MEALS = [
    ("m1", "Scrambled eggs with avocado toast", "breakfast", 480, 24, 38, 26,
     "Two eggs, whole wheat bread, half an avocado.", 0),
    ("m2", "Grilled chicken salad", "lunch", 520, 42, 18, 28,
     "Mixed greens, cherry tomatoes, olive oil dressing.", 0),
    ("m3", "Protein shake", "snack", 210, 30, 12, 5, "Whey protein, almond milk, banana.", 0),
    ("m4", "Salmon with quinoa and broccoli", "dinner", 640, 45, 52, 24, None, 1),
    ("m5", "Greek yogurt with berries", "breakfast", 290, 20, 34, 8, None, 1),
]


def workouts(today: Optional[date] = None) -> List[WorkoutRecord]:
    return [
        WorkoutRecord(
            id=guest_id(key), exercise_name=name, category=category, sets=sets, reps=reps,
            weight_lbs=weight, duration_minutes=minutes, notes=notes,
            workout_date=_days_ago(ago, today), created_at=_now() - timedelta(days=ago),
        )
        for key, name, category, sets, reps, weight, minutes, notes, ago in _WORKOUTS
    ]


def meals(today: Optional[date] = None) -> List[MealRecord]:
    return [
        MealRecord(
            id=guest_id(key), meal_name=name, meal_type=meal_type, calories=calories,
            protein_g=protein, carbs_g=carbs, fat_g=fat, notes=notes,
            meal_date=_days_ago(ago, today), created_at=_now() - timedelta(days=ago),
        )
        for key, name, meal_type, calories, protein, carbs, fat, notes, ago in _MEALS
    ]


# ══════════════════════════════════════════════════════════════════════════
# Finance
# ══════════════════════════════════════════════════════════════════════════

# key, description, amount, type, category, notes, days ago
_TRANSACTIONS = [
    ("tx1", "Whole Foods groceries", 127.43, "expense", "food", "Weekly grocery run", 0),
    ("tx2", "Monthly salary", 5200, "income", "income", "Paycheck", 0),
    ("tx3", "Uber ride to airport", 42.5, "expense", "transport", None, 0),
    ("tx4", "Rent", 1750, "expense", "housing", None, 2),
    ("tx5", "Streaming subscriptions", 32.98, "expense", "subscriptions", "Two services", 5),
    ("tx6", "Concert tickets", 120, "expense", "entertainment", None, 8),
]

# key, category (None = overall), limit
_BUDGETS = [
    ("b1", None, 3500),
    ("b2", "food", 500),
    ("b3", "housing", 1800),
    ("b4", "entertainment", 200),
    ("b5", "transport", 300),
    ("b6", "subscriptions", 50),
]


def transactions(today: Optional[date] = None) -> List[TransactionRecord]:
    return [
        TransactionRecord(
            id=guest_id(key), description=description, amount=amount, type=kind,
            category=category, notes=notes, transaction_date=_days_ago(ago, today),
            created_at=_now() - timedelta(days=ago),
        )
        for key, description, amount, kind, category, notes, ago in _TRANSACTIONS
    ]


def budgets(today: Optional[date] = None) -> List[BudgetRecord]:
    month = first_of_month(today)
    return [
        BudgetRecord(
            id=guest_id(key), category=category, monthly_limit=limit,
            budget_month=month, created_at=_now(),
        )
        for key, category, limit in _BUDGETS
    ]


# ══════════════════════════════════════════════════════════════════════════
# Habits
# ══════════════════════════════════════════════════════════════════════════

# key, name, description, category, type, target, color, active, created
_HABITS = [
    ("h1", "Morning Meditation", "10 minutes of mindfulness meditation after waking up.",
     "mindfulness", "boolean", None, "#6366f1", True, "2026-01-01T08:00:00"),
    ("h2", "Drink Water", "Stay hydrated throughout the day.",
     "health", "counted", 8, "#06b6d4", True, "2026-01-01T08:00:00"),
    ("h3", "Read", "Read at least 20 pages of a book.",
     "learning", "boolean", None, "#f59e0b", True, "2026-01-05T10:00:00"),
    ("h4", "Exercise", "Any form of physical activity for 30+ minutes.",
     "health", "boolean", None, "#22c55e", True, "2026-01-05T10:00:00"),
    ("h5", "Write Journal", "Reflect on the day and write a journal entry.",
     "mindfulness", "boolean", None, "#ec4899", True, "2026-01-10T12:00:00"),
    ("h6", "No Social Media", "Avoid scrolling social media for the day.",
     "productivity", "boolean", None, "#ef4444", True, "2026-01-12T09:00:00"),
    ("h7", "Practice Guitar", "30 minutes of guitar practice.",
     "learning", "boolean", None, "#8b5cf6", False, "2026-01-15T14:00:00"),
    ("h8", "Steps", "Walk at least 10,000 steps.",
     "health", "counted", 10000, "#14b8a6", True, "2026-01-18T08:00:00"),
]


def habits() -> List[HabitRecord]:
    return [
        HabitRecord(
            id=guest_id(key), name=name, description=description, category=category,
            type=kind, target_count=target, color=color, is_active=active,
            created_at=_ts(created),
        )
        for key, name, description, category, kind, target, color, active, created in _HABITS
    ]


def _completion_value(habit_key: str, day: int) -> Optional[float]:
    """Value logged for `habit_key` `day` days ago, or None when skipped."""
    if habit_key == "h1":
        return 1 if day % 5 != 3 else None
    if habit_key == "h2":
        return 4 + math.floor(abs(math.sin(day * 1.5)) * 5)
    if habit_key == "h3":
        return 1 if day % 5 not in (1, 4) else None
    if habit_key == "h4":
        return 1 if day % 10 not in (2, 5, 8) else None
    if habit_key == "h5":
        return 1 if day % 2 == 0 else None
    if habit_key == "h6":
        return 1 if day % 5 in (0, 2) else None
    if habit_key == "h8":
        return 5000 + math.floor(abs(math.sin(day * 2.3)) * 7000)
    return None


def habit_completions(today: Optional[date] = None, days: int = 30) -> List[CompletionRecord]:
    """Thirty days of plausible history for every active habit."""
    completions = []
    for day in range(days):
        for key, *_ in _HABITS:
            value = _completion_value(key, day)
            if value is None:
                continue
            completions.append(
                CompletionRecord(
                    id=guest_id(f"hc-{key}-{day}"),
                    habit_id=guest_id(key),
                    completion_date=_days_ago(day, today),
                    value=value,
                )
            )
    return completions


# ══════════════════════════════════════════════════════════════════════════
# Wellness
# ══════════════════════════════════════════════════════════════════════════

_MOOD_NOTES = [
    ("Had a really productive morning. Felt focused and energized.", ["work", "productive"]),
    ("Woke up feeling a bit groggy but things improved after lunch.", ["exercise", "energy"]),
    ("Stressful day at work, lots of deadlines piling up.", ["social", "friends"]),
    ("Great workout in the morning set the tone for the whole day.", ["family", "gratitude"]),
    ("Feeling grateful today. Spent quality time with family.", ["stress", "work"]),
    ("Couldn't sleep well last night, dragged through the day.", ["sleep", "tired"]),
    ("Meditation session helped clear my mind. Feeling centered.", ["mindfulness", "meditation"]),
    ("Amazing dinner with friends. Laughter is the best medicine.", ["social", "food"]),
    ("Felt overwhelmed with tasks. Need to prioritize better.", ["work", "stress"]),
    ("Took a long walk in nature. Felt peaceful and recharged.", ["nature", "exercise"]),
    ("Rainy day, stayed in and read. Cozy and content.", ["relax", "reading"]),
    ("Had an argument that left me feeling drained.", ["stress", "conflict"]),
    ("Finally finished that big project. Relief and pride.", ["work", "achievement"]),
    ("Tried a new recipe and it turned out great!", ["food", "creative"]),
    ("Feeling a bit lonely today. Reached out to an old friend.", ["social", "lonely"]),
    ("Yoga class was exactly what I needed.", ["exercise", "yoga"]),
    ("Exciting news at work - got recognized for my efforts.", ["work", "achievement"]),
    ("Feeling under the weather. Resting and hydrating.", ["health", "rest"]),
    ("Journaled for 20 minutes. Helped process some emotions.", ["mindfulness", "journaling"]),
    ("Spontaneous road trip. Adventure feeds the soul.", ["travel", "adventure"]),
]


def _clamp_score(value: float) -> int:
    return max(1, min(5, round(value)))


def mood_entries(today: Optional[date] = None, days: int = 60) -> List[MoodEntryRecord]:
    """Sixty days of entries with a gentle wave in mood, energy and sleep."""
    entries = []
    for day in range(days):
        notes, tags = _MOOD_NOTES[day % len(_MOOD_NOTES)]
        mood = _clamp_score(3 + math.sin(day * 0.4) * 1.5 + math.sin(day * 1.7) * 0.8)
        entries.append(
            MoodEntryRecord(
                id=guest_id(f"me{day + 1}"),
                mood=mood,
                energy_level=_clamp_score(mood + round(math.sin(day * 0.9) * 1.2)),
                sleep_quality=_clamp_score(3 + round(math.sin(day * 0.6 + 1) * 1.5)),
                notes=notes,
                tags=list(tags),
                entry_date=_days_ago(day, today),
                created_at=_now() - timedelta(days=day),
            )
        )
    return entries


# ══════════════════════════════════════════════════════════════════════════
# Travel
# ══════════════════════════════════════════════════════════════════════════

# key, destination, description, status, start, end, budget, color, tags, created
_TRIPS = [
    ("tr1", "Tokyo, Japan", "Explore temples, food markets, and the vibrant Shibuya district.",
     "completed", "2025-11-10", "2025-11-20", 3500, "#ef4444", ["culture", "food", "adventure"],
     "2025-10-01T08:00:00"),
    ("tr2", "Paris, France", "A romantic week visiting the Eiffel Tower, Louvre, and Montmartre.",
     "booked", "2026-04-15", "2026-04-22", 4200, "#3b82f6", ["romantic", "culture", "food"],
     "2026-01-15T10:00:00"),
    ("tr3", "Bali, Indonesia", "Surf, yoga retreats, and rice terrace hikes.",
     "planning", "2026-07-01", "2026-07-14", 2800, "#22c55e", ["beach", "wellness", "nature"],
     "2026-01-20T14:00:00"),
    ("tr4", "New York City, USA", "Broadway shows, Central Park, and world-class dining.",
     "completed", "2025-12-20", "2025-12-27", 3000, "#f59e0b", ["city", "food", "entertainment"],
     "2025-11-05T09:00:00"),
    ("tr5", "Iceland", "Northern lights, geysers, and the Golden Circle road trip.",
     "planning", "2026-09-10", "2026-09-18", 5000, "#6366f1", ["adventure", "nature", "road-trip"],
     "2026-02-01T12:00:00"),
    ("tr6", "Barcelona, Spain", "Gaudi architecture, tapas crawl, and beach days.",
     "booked", "2026-05-20", "2026-05-28", 2500, "#ec4899", ["beach", "culture", "food"],
     "2026-02-05T11:00:00"),
]

# key, trip, title, description, date, start, end, location, category, cost, booked
_ACTIVITIES = [
    ("ta1", "tr1", "Visit Senso-ji Temple", "Tokyo's oldest temple in Asakusa.",
     "2025-11-11", "09:00", "11:00", "Asakusa", "sightseeing", 0, True),
    ("ta2", "tr1", "Tsukiji Outer Market Tour", "Fresh sushi and street food tasting.",
     "2025-11-11", "12:00", "14:00", "Tsukiji", "food", 45, True),
    ("ta4", "tr1", "Shinkansen to Kyoto", "Bullet train day trip.",
     "2025-11-14", "07:00", "09:30", "Tokyo Station", "transport", 130, True),
    ("ta5", "tr2", "Eiffel Tower Summit", "Sunset visit to the top.",
     "2026-04-16", "17:00", "20:00", "Champ de Mars", "sightseeing", 26, True),
    ("ta6", "tr2", "Louvre Museum", "Half-day guided tour.",
     "2026-04-17", "09:00", "13:00", "Louvre", "sightseeing", 22, True),
    ("ta7", "tr2", "Seine River Cruise", "Evening dinner cruise.",
     "2026-04-18", "19:00", "22:00", "Pont Neuf", "activity", 95, False),
    ("ta9", "tr4", "Broadway: Hamilton", "Orchestra seats.",
     "2025-12-21", "19:00", "22:00", "Richard Rodgers Theatre", "activity", 280, True),
    ("ta12", "tr6", "Sagrada Familia Tour", "Skip-the-line guided tour.",
     "2026-05-21", "09:00", "11:30", "Eixample", "sightseeing", 35, True),
]

# key, trip, title, amount, category, date, notes
_EXPENSES = [
    ("te1", "tr1", "Round-trip flights", 1100, "transport", "2025-11-10", "ANA direct from LAX"),
    ("te2", "tr1", "Hotel Shinjuku (10 nights)", 1200, "accommodation", "2025-11-10", "Shinjuku Granbell"),
    ("te6", "tr1", "Restaurants & street food", 380, "food", "2025-11-18", "Ramen, sushi, yakitori over 10 days"),
    ("te7", "tr2", "Round-trip flights", 850, "transport", "2026-04-15", "Air France via CDG"),
    ("te8", "tr2", "Boutique hotel (7 nights)", 1400, "accommodation", "2026-04-15", "Le Marais area"),
    ("te12", "tr4", "Hotel (7 nights)", 1750, "accommodation", "2025-12-20", "The Standard, High Line"),
    ("te13", "tr4", "Hamilton tickets", 560, "activities", "2025-12-21", "2x orchestra"),
    ("te16", "tr6", "Airbnb (8 nights)", 720, "accommodation", "2026-05-20", "Gothic Quarter apartment"),
]


def trips() -> List[TripRecord]:
    return [
        TripRecord(
            id=guest_id(key), destination=destination, description=description, status=status,
            start_date=date.fromisoformat(start), end_date=date.fromisoformat(end),
            budget=budget, currency="USD", cover_color=color, tags=tags, created_at=_ts(created),
        )
        for key, destination, description, status, start, end, budget, color, tags, created in _TRIPS
    ]


def trip_activities() -> List[ActivityRecord]:
    created = {t[0]: _ts(t[9]) for t in _TRIPS}
    return [
        ActivityRecord(
            id=guest_id(key), trip_id=guest_id(trip), title=title, description=description,
            activity_date=date.fromisoformat(day), start_time=time.fromisoformat(start),
            end_time=time.fromisoformat(end), location=location, category=category,
            cost=cost, is_booked=booked, created_at=created[trip],
        )
        for key, trip, title, description, day, start, end, location, category, cost, booked
        in _ACTIVITIES
    ]


def trip_expenses() -> List[ExpenseRecord]:
    created = {t[0]: _ts(t[9]) for t in _TRIPS}
    return [
        ExpenseRecord(
            id=guest_id(key), trip_id=guest_id(trip), title=title, amount=amount,
            category=category, expense_date=date.fromisoformat(day), notes=notes,
            created_at=created[trip],
        )
        for key, trip, title, amount, category, day, notes in _EXPENSES
    ]
