"""Seed service - loads demo users from YAML and installs them into a store."""

from pathlib import Path

import yaml

from refmatch.core.logger import logger
from refmatch.db.store import Store
from refmatch.services.auth_service import get_password_hash

SEED_FILE = Path(__file__).parent.parent / "data" / "seed_users.yaml"

PROFILE_FIELDS = ("photo", "bio", "age")


class SeedService:
    def __init__(self, seed_file: Path = SEED_FILE):
        self.seed_file = seed_file
        self._cache: dict | None = None

    def load(self) -> dict:
        """Load the seed YAML ({"password": ..., "users": [...]})."""
        if self._cache is not None:
            return self._cache

        if not self.seed_file.exists():
            raise FileNotFoundError(f"Seed file not found: {self.seed_file}")

        with open(self.seed_file, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        self._cache = {
            "password": raw.get("password", ""),
            "users": raw.get("users", []),
        }
        return self._cache

    def users(self) -> list[dict]:
        """Seed users with plain-text password, as the CLI registers them."""
        data = self.load()
        return [{"password": data["password"], **user} for user in data["users"]]

    def profile_documents(self) -> list[dict]:
        """Seed users ready for the JSON store (hashed password, lower-case email)."""
        data = self.load()
        password_hash = get_password_hash(data["password"])
        return [
            {
                "email": user["email"].lower(),
                "password_hash": password_hash,
                "name": user.get("name", ""),
                "relationship_status": user.get("relationship_status", "single"),
                **{k: user[k] for k in PROFILE_FIELDS if user.get(k) is not None},
            }
            for user in data["users"]
        ]

    async def seed_store(self, store: Store) -> int:
        """Insert seed users whose email is not registered yet. Returns count added."""
        added = 0
        for doc in self.profile_documents():
            if await store.get_profile_by_email(doc["email"]) is not None:
                continue
            profile = await store.insert_profile(
                email=doc["email"],
                password_hash=doc["password_hash"],
                name=doc["name"],
                relationship_status=doc["relationship_status"],
            )
            extra = {k: doc[k] for k in PROFILE_FIELDS if k in doc}
            if extra:
                await store.update_profile(profile.id, extra)
            added += 1
        logger.info("Seeded {} demo users", added)
        return added


seed_service = SeedService()
