# Services package init
"""
SuperApp Backend — Services Layer
===================================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).
How:   Services take an AsyncSession and the caller's user id, run owner-scoped
       statements, mark the views they made stale, and return typed records.
       Each is a module-level singleton imported by routes.

Service Inventory:
    - store:               Statement helpers (insert/update/delete/upsert) that
                           turn driver failures into StoreError
    - LLMService (abstract): Categorize + embed interface
    - GeminiService:       Concrete implementation on Google Gemini
    - ContactService, TaskService:         CRM contacts and tasks
    - FinanceService:      Transactions and monthly budgets
    - WorkoutService, MealService:         Fitness and meal logs
    - HabitService:        Habits, completion toggles and counted values
    - WellnessService:     One mood entry per day
    - TravelService:       Trips, itinerary activities and trip expenses
    - SaverService:        Universal Saver: validate → categorize → embed → persist
    - SearchService:       Semantic search over saved items
    - DemoSeedService:     One-shot demo contacts and tasks
    - PreferenceService:   Sidebar mode behind a PreferenceStore
    - data_sources:        Guest/store read boundary for page bundles
"""
