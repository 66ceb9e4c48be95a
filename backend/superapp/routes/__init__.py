# Routes package init
"""
SuperApp Backend — API Routes Package
=======================================

What:  HTTP route handlers that accept requests and return responses.
How:   Each route module handles one resource group. All routes except
       /health live under /api.

Route Inventory:
    - pages.py:        GET    /api/{projects,finance,fitness,meals,habits,
                                    wellness,travel,saver}   (page bundles)
    - contacts.py:     POST   /api/contacts
                       GET    /api/contacts                  (always an array)
                       GET    /api/contacts/{id}             (contact + tasks)
                       PUT    /api/contacts/{id}
                       DELETE /api/contacts/{id}
    - tasks.py:        POST   /api/tasks
                       PATCH  /api/tasks/{id}/status
                       DELETE /api/tasks/{id}
    - finance.py:      POST   /api/transactions
                       DELETE /api/transactions/{id}
                       PUT    /api/budgets                   (upsert)
                       DELETE /api/budgets/{id}
    - fitness.py:      POST   /api/workouts,  DELETE /api/workouts/{id}
                       POST   /api/meals,     DELETE /api/meals/{id}
    - habits.py:       POST   /api/habits
                       PUT    /api/habits/{id}
                       DELETE /api/habits/{id}
                       POST   /api/habits/{id}/toggle
                       PUT    /api/habits/{id}/completions
    - wellness.py:     PUT    /api/mood-entries              (upsert by day)
                       PUT    /api/mood-entries/{id}
                       DELETE /api/mood-entries/{id}
    - travel.py:       POST/PUT/DELETE /api/trips[/{id}]
                       POST/PUT/DELETE /api/trip-activities[/{id}]
                       POST/PUT/DELETE /api/trip-expenses[/{id}]
    - saver.py:        POST   /api/saver/items
                       GET    /api/saver/items
                       DELETE /api/saver/items/{id}
                       POST   /api/saved-items/search
    - demo.py:         POST   /api/demo/seed
    - preferences.py:  GET/PUT /api/preferences/sidebar
                       POST   /api/preferences/sidebar/cycle
    - auth.py:         GET    /api/auth/me
                       POST   /api/auth/signout
    - health.py:       GET    /health

Routes are THIN: they validate input (typed models), resolve the caller,
call a service, and shape the response. Business logic lives in services.
Successful writes list the pages they changed in `X-Invalidated-Views`.
"""
