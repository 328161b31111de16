"""Seed a development database with two workspaces for the All Tasks dashboard.

Creates the tables if they are missing (development only; production schema
is owned by the service that writes these tables), then inserts:

- user "dev" (member of workspace "Acme") and user "other" (member of "Globex");
- project "Website" in Acme with a few tasks, labels, and one archived task;
- project "Internal" in Globex with one task the dev user must never see.

Usage:
    uv run python -m scripts.seed_dev_data
Prints the dev user id; pass it to scripts.issue_dev_token.
"""

from __future__ import annotations

import asyncio
import sys
from datetime import UTC, datetime, timedelta

from app.core.config import get_settings
from app.infrastructure.persistence import database
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models import (
    Label,
    Project,
    Task,
    User,
    Workspace,
    WorkspaceUser,
)


async def run() -> None:
    get_settings()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("DATABASE_URL is not set", file=sys.stderr)
        sys.exit(1)

    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    now = datetime.now(UTC)
    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            dev = User(name="Dev User", email="dev@taskboard.local")
            other = User(name="Other User", email="other@taskboard.local")
            acme = Workspace(name="Acme")
            globex = Workspace(name="Globex")
            session.add_all([dev, other, acme, globex])
            await session.flush()

            session.add_all(
                [
                    WorkspaceUser(workspace_id=acme.id, user_id=dev.id, role="owner"),
                    WorkspaceUser(workspace_id=globex.id, user_id=other.id, role="owner"),
                ]
            )
            website = Project(workspace_id=acme.id, name="Website", slug="WEB", icon="Globe")
            internal = Project(workspace_id=globex.id, name="Internal", slug="INT")
            session.add_all([website, internal])
            await session.flush()

            tasks = [
                Task(project_id=website.id, title="Design landing page", number=1,
                     status="in-progress", priority="high", user_id=dev.id,
                     due_date=now - timedelta(days=2), created_at=now - timedelta(days=5)),
                Task(project_id=website.id, title="Write copy", number=2,
                     status="to-do", priority="medium",
                     due_date=now + timedelta(days=7), created_at=now - timedelta(days=4)),
                Task(project_id=website.id, title="Old banner", number=3,
                     status="archived", created_at=now - timedelta(days=3)),
                Task(project_id=internal.id, title="Quarterly report", number=1,
                     status="to-do", user_id=other.id, created_at=now - timedelta(days=1)),
            ]
            session.add_all(tasks)
            await session.flush()
            session.add_all(
                [
                    Label(task_id=tasks[0].id, name="design", color="#ec4899"),
                    Label(task_id=tasks[0].id, name="frontend", color="#3b82f6"),
                ]
            )

    print(f"Seeded. Dev user id: {dev.id}")


if __name__ == "__main__":
    asyncio.run(run())
