"""
SuperApp Backend — Demo Seed Service
======================================

What:  Fills an empty CRM with 8 sample contacts and 10 sample tasks so a new
       user can explore the projects page.
How:   Guard → INSERT contacts (one statement) → COMMIT → INSERT tasks (one
       statement). Tasks find their contact by "First Last" name.

Partial success:
    The contacts are committed before the tasks are inserted. If the task
    insert fails the contacts stay and the error is reported; the user can
    keep them or delete them. No compensating rollback is attempted.
"""

import logging
import uuid
from datetime import date, timedelta
from typing import Dict, List, Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from superapp.exceptions import ValidationError
from superapp.middleware.view_invalidation import mark_stale
from superapp.models.contact import Contact, Task
from superapp.services.contact_service import PROJECTS_VIEW
from superapp.services.store import run_statement

logger = logging.getLogger(__name__)

ALREADY_SEEDED_MESSAGE = "You already have contacts. Clear them first or use as-is."

# first, last, email, phone, company, role, notes, status
DEMO_CONTACTS = [
    ("Sarah", "Chen", "sarah.chen@acmecorp.com", "+1 (415) 555-0102", "Acme Corp",
     "VP of Engineering", "Met at React Summit 2025. Interested in our enterprise plan.", "active"),
    ("Marcus", "Johnson", "m.johnson@brightlabs.io", "+1 (312) 555-0198", "Bright Labs",
     "CTO", "Referred by Sarah Chen. Evaluating our API integration.", "lead"),
    ("Elena", "Rodriguez", "elena@startupventures.co", "+1 (646) 555-0134", "Startup Ventures",
     "Founder & CEO", "Early-stage startup, looking for growth tools.", "active"),
    ("David", "Kim", "david.kim@globaltrade.com", "+1 (213) 555-0177", "Global Trade Inc",
     "Head of Operations", "Existing customer since Q1 2025. Renewed annual contract.", "active"),
    ("Priya", "Patel", "priya@designforward.studio", "+1 (510) 555-0156", "Design Forward Studio",
     "Creative Director", "Potential partnership for UI/UX services.", "lead"),
    ("James", "Wright", "jwright@oldbridge.org", "+1 (202) 555-0143", "Oldbridge Foundation",
     "Program Director", "Non-profit org. Contract ended last quarter.", "inactive"),
    ("Aisha", "Okafor", "aisha@cloudnine.tech", "+1 (737) 555-0189", "CloudNine Tech",
     "Product Manager", "Interested in our analytics dashboard. Demo scheduled.", "lead"),
    ("Tom", "Mueller", "tom.m@precisionmfg.com", "+1 (614) 555-0121", "Precision Manufacturing",
     "IT Director", "Enterprise customer. Needs custom SSO integration.", "active"),
]

# title, description, contact name, status, priority, due (days from today)
DEMO_TASKS = [
    ("Send proposal to Acme Corp",
     "Prepare and send the enterprise pricing proposal for Acme Corp. Include volume discount options.",
     "Sarah Chen", "in_progress", "high", 2),
    ("Schedule API demo for Bright Labs",
     "Set up a technical demo of our REST and GraphQL APIs for Marcus and his dev team.",
     "Marcus Johnson", "todo", "high", 5),
    ("Follow up on onboarding progress",
     "Check in with Elena to see if her team has completed the onboarding checklist.",
     "Elena Rodriguez", "todo", "medium", 3),
    ("Quarterly business review prep",
     "Prepare Q4 performance report and renewal talking points for Global Trade.",
     "David Kim", "in_progress", "medium", 7),
    ("Draft partnership proposal",
     "Create a partnership proposal for Design Forward Studio covering referral terms.",
     "Priya Patel", "todo", "low", 14),
    ("SSO integration requirements doc",
     "Document the technical requirements for Precision Manufacturing's custom SSO setup.",
     "Tom Mueller", "in_progress", "high", 4),
    ("Prepare analytics demo environment",
     "Set up a sandbox environment with sample data for Aisha's upcoming demo.",
     "Aisha Okafor", "todo", "medium", 6),
    ("Update CRM data export feature",
     "Add CSV and PDF export options to the contacts list page.",
     None, "todo", "low", 21),
    ("Send renewal invoice",
     "Generate and send the annual renewal invoice to Global Trade Inc.",
     "David Kim", "done", "high", -3),
    ("Complete onboarding call notes",
     "Write up the notes from last week's onboarding kickoff call with Acme Corp.",
     "Sarah Chen", "done", "medium", -5),
]


def contact_rows(user_id: uuid.UUID) -> List[dict]:
    return [
        {
            "user_id": user_id,
            "first_name": first,
            "last_name": last,
            "email": email,
            "phone": phone,
            "company": company,
            "role": role,
            "notes": notes,
            "status": status,
        }
        for first, last, email, phone, company, role, notes, status in DEMO_CONTACTS
    ]


def task_rows(
    user_id: uuid.UUID,
    contact_ids: Dict[str, uuid.UUID],
    today: Optional[date] = None,
) -> List[dict]:
    today = today or date.today()
    return [
        {
            "user_id": user_id,
            "contact_id": contact_ids.get(contact_name) if contact_name else None,
            "title": title,
            "description": description,
            "status": status,
            "priority": priority,
            "due_date": today + timedelta(days=offset),
        }
        for title, description, contact_name, status, priority, offset in DEMO_TASKS
    ]


class DemoSeedService:
    """Seeds sample CRM data for a user with no contacts."""

    async def seed(self, db: AsyncSession, user_id: uuid.UUID) -> Dict[str, int]:
        """
        Insert the demo contacts and tasks.

        Returns:
            {"contacts": 8, "tasks": 10}

        Raises:
            ValidationError: the caller already has contacts (nothing inserted)
            StoreError: an insert failed (contacts may already be committed)
        """
        existing = await run_statement(
            db, select(Contact.id).where(Contact.user_id == user_id).limit(1)
        )
        if existing.first() is not None:
            raise ValidationError(ALREADY_SEEDED_MESSAGE)

        result = await run_statement(
            db,
            insert(Contact)
            .values(contact_rows(user_id))
            .returning(Contact.id, Contact.first_name, Contact.last_name),
        )
        contact_ids = {
            f"{first} {last}": contact_id for contact_id, first, last in result.all()
        }
        await db.commit()
        logger.info("Seeded %d demo contacts for %s", len(contact_ids), user_id)

        tasks = task_rows(user_id, contact_ids)
        await run_statement(db, insert(Task).values(tasks))
        logger.info("Seeded %d demo tasks for %s", len(tasks), user_id)

        mark_stale(PROJECTS_VIEW)
        return {"contacts": len(contact_ids), "tasks": len(tasks)}


# ── Singleton Instance ────────────────────────────────────────────────────
seed_service = DemoSeedService()
