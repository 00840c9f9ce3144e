#!/usr/bin/env python3
"""Create a user record. Usage: python -m scripts.create_user <username>"""
import argparse
import sys
from pathlib import Path

# Ensure project root on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from userapi.config import Settings, get_settings
from userapi.database import build_engine, build_session_factory, create_schema
from userapi.errors import UsernameTaken
from userapi.repositories.users import UserRepository
from userapi.services.sanitize import InvalidUsername, sanitize_username


def main(argv=None, settings: Settings | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a user")
    parser.add_argument("username")
    args = parser.parse_args(argv)

    try:
        username = sanitize_username(args.username)
    except InvalidUsername as exc:
        print(f"Invalid username: {exc}")
        return 2

    engine = build_engine(settings or get_settings())
    create_schema(engine)
    db = build_session_factory(engine)()
    try:
        user = UserRepository(db).create(username)
    except UsernameTaken:
        print(f"User '{username}' already exists.")
        return 1
    finally:
        db.close()
        engine.dispose()

    print(f"Created user {user.username} ({user.id}) joined {user.joined_at.isoformat()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
