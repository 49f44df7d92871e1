#!/usr/bin/env python3
"""Seed script for a demo workspace.

Creates a team with two members, one project and a handful of tasks that
leave one member over capacity, then prints a bearer token for the owner so
``POST /api/tasks/reassign`` can be tried straight away.

Usage:
    python scripts/seed_demo.py --owner demo-user
    python scripts/seed_demo.py --owner demo-user --list
"""

import sys

from teamtasks.auth.jwt import create_access_token
from teamtasks.services.database import db_service


def seed_demo(owner_id: str):
    """Seed the demo team, project and tasks for ``owner_id``."""
    existing = [t for t in db_service.get_user_teams(owner_id) if t["name"] == "Alpha"]
    if existing:
        print("Team 'Alpha' already exists, skipping...")
        return

    team = db_service.create_team(owner_id, "Alpha", [
        {"name": "A", "role": "Developer", "capacity": 2},
        {"name": "B", "role": "Developer", "capacity": 2},
    ])
    project = db_service.create_project(team["id"], "P1", "Demo project")

    for i, priority in enumerate(["Low", "Low", "Medium", "High"], start=1):
        db_service.create_task({
            "project_id": project["id"],
            "title": f"Task {i}",
            "description": f"Demo task {i}",
            "assigned_member_name": "A",
            "priority": priority,
            "status": "Pending",
        })
        print(f"Created task: Task {i} ({priority})")

    print(f"\nSeeded team '{team['name']}' ({team['id']}) with project '{project['title']}' ({project['id']})")


def list_teams(owner_id: str):
    """List the owner's teams with their members."""
    teams = db_service.get_user_teams(owner_id)
    if not teams:
        print("No teams found.")
        return

    print("\nTeams:")
    print("-" * 60)
    for team in teams:
        print(f"  {team['name']} ({team['id']})")
        for member in team.get("members", []):
            print(f"          {member['name']} - {member['role']} (capacity {member['capacity']})")
    print("-" * 60)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Seed demo data for Team Tasks")
    parser.add_argument("--owner", "-o", required=True, help="Owner user id")
    parser.add_argument("--list", "-l", action="store_true", help="List the owner's teams")

    args = parser.parse_args()

    try:
        if args.list:
            list_teams(args.owner)
        else:
            seed_demo(args.owner)
            print(f"\nBearer token: {create_access_token(data={'sub': args.owner})}")
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)
    finally:
        db_service.close()
