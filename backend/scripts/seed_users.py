"""Seed the user directory with a system user, an admin and sample users.

Writes through the repository factory, so the target store follows
REPOSITORY_BACKEND (seeding only persists with mongodb). Users whose
email is already registered are skipped, so the script can be re-run.

Usage:
    uv run python scripts/seed_users.py --count 50

Environment Variables:
    REPOSITORY_BACKEND: "mongodb" to persist (default: inmemory)
    MONGODB_URI: MongoDB connection string
    MONGODB_DATABASE: Database name (default: staff_directory)
    SYSTEM_USER_ID: Actor recorded as creator (default: system)
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import DuplicateEmailError
from domain.user.core.ports.user_repository import IUserRepository
from domain.user.core.value_objects.gender import Gender
from domain.user.core.value_objects.user_role import UserRole

logger = logging.getLogger(__name__)

FIRST_NAMES = [
    "太郎", "花子", "一郎", "次郎", "三郎", "四郎", "五郎", "六郎", "七郎", "八郎",
    "美咲", "さくら", "あかり", "みお", "ゆい", "あい", "まな", "りん", "えみ", "なつき",
    "健太", "翔太", "大輔", "拓也", "直樹", "智也", "亮太", "和也", "翔", "大樹",
    "麻衣", "由美", "恵子", "美香", "智子", "真理", "直美", "由佳", "美穂", "佳子",
]  # fmt: skip

LAST_NAMES = [
    "山田", "佐藤", "鈴木", "高橋", "田中", "渡辺", "伊藤", "中村", "小林", "加藤",
    "吉田", "山本", "松本", "井上", "木村", "林", "斎藤", "清水", "山崎", "森",
    "池田", "橋本", "石川", "前田", "藤田", "後藤", "近藤", "村上", "遠藤", "青木",
]  # fmt: skip

# Mostly male/female with an occasional "other"
GENDER_CYCLE = [Gender.MALE, Gender.FEMALE, Gender.MALE, Gender.FEMALE, Gender.OTHER]


@dataclass(frozen=True)
class SeedUser:
    email: str
    role: UserRole
    first_name: str
    last_name: str
    gender: Optional[Gender]
    id: Optional[str] = None


def build_seed_users(count: int, system_user_id: str) -> List[SeedUser]:
    """System user (stored under `system_user_id`), admin user, then
    `count` generated users (user1..userN).
    """
    users = [
        SeedUser(
            "system@example.com", UserRole.ADMIN, "System", "User", Gender.OTHER, system_user_id
        ),
        SeedUser("admin@example.com", UserRole.ADMIN, "Admin", "User", Gender.OTHER),
    ]
    for i in range(count):
        users.append(
            SeedUser(
                email=f"user{i + 1}@example.com",
                role=UserRole.USER,
                first_name=FIRST_NAMES[i % len(FIRST_NAMES)],
                last_name=LAST_NAMES[i % len(LAST_NAMES)],
                gender=GENDER_CYCLE[i % len(GENDER_CYCLE)],
            )
        )
    return users


async def seed_users(repository: IUserRepository, count: int, acting_user_id: str) -> int:
    """Create seed users, skipping emails that are already registered.

    The system user is stored under `acting_user_id`, so audit fields
    written by the system actor resolve to a real row.

    Returns:
        Number of users created
    """
    created = 0
    for seed in build_seed_users(count, system_user_id=acting_user_id):
        user = User.create_new(
            email=seed.email,
            role=seed.role,
            first_name=seed.first_name,
            last_name=seed.last_name,
            gender=seed.gender,
            acting_user_id=acting_user_id,
        )
        try:
            await repository.create(user, user_id=seed.id)
        except DuplicateEmailError:
            logger.info("Skipping existing user", extra={"email": seed.email})
            continue
        created += 1

    logger.info("Seeding complete", extra={"created": created, "requested": count + 2})
    return created


async def _run(count: int) -> int:
    # Imported here so .env is loaded before configuration is read
    from infrastructure.config import get_repository_backend, get_system_user_id
    from infrastructure.persistence.factory import (
        ensure_indexes,
        get_user_repository,
        reset_repositories,
    )

    if get_repository_backend() != "mongodb":
        logger.warning("REPOSITORY_BACKEND is not mongodb: seeded users will not persist")

    try:
        await ensure_indexes()
        return await seed_users(get_user_repository(), count, get_system_user_id())
    finally:
        reset_repositories()


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Seed the user directory")
    parser.add_argument("--count", type=int, default=50, help="generated users (default: 50)")
    args = parser.parse_args(argv)

    env_path = Path(__file__).parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        created = asyncio.run(_run(args.count))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)

    logger.info(f"Created {created} users")


if __name__ == "__main__":
    main()
