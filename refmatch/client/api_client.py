"""Thin HTTP client for the Ref API, used by scripts and the optimistic state layer."""

import requests

from refmatch.config import settings
from refmatch.core.logger import logger

REQUEST_TIMEOUT = 15  # seconds


class ApiClient:
    def __init__(self, base_url: str | None = None, session: requests.Session | None = None):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.session = session or requests.Session()
        self.token: str | None = None

    def request(self, method: str, path: str, json: dict | None = None) -> dict | None:
        """Send a request and return the decoded JSON, or None on any failure."""
        url = f"{self.base_url}{path}"
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        logger.debug("API request: {} {}", method, url)
        try:
            resp = self.session.request(
                method, url, json=json, headers=headers, timeout=REQUEST_TIMEOUT
            )
        except requests.Timeout:
            logger.error("API request timed out: {} {}", method, url)
            return None
        except requests.RequestException as exc:
            logger.error("API request failed: {} {}: {}", method, url, exc)
            return None

        if not resp.ok:
            logger.error("API error {}: {}", resp.status_code, resp.text)
            return None
        if resp.status_code == 204 or not resp.content:
            return {}
        return resp.json()

    # --- Auth & profiles ---

    def register(self, email: str, password: str, name: str | None = None,
                 relationship_status: str | None = None) -> dict | None:
        body = {"email": email, "password": password}
        if name:
            body["name"] = name
        if relationship_status:
            body["relationshipStatus"] = relationship_status
        result = self.request("POST", "/auth/register", json=body)
        if result:
            self.token = result.get("token")
        return result

    def login(self, email: str, password: str) -> dict | None:
        result = self.request("POST", "/auth/login", json={"email": email, "password": password})
        if result:
            self.token = result.get("token")
        return result

    def update_profile(self, user_id: str, **fields) -> dict | None:
        return self.request("PUT", f"/profiles/{user_id}", json=fields)

    # --- Matching ---

    def discover(self, user_id: str) -> list[dict] | None:
        result = self.request("GET", f"/discovery/{user_id}")
        return result["items"] if result else None

    def swipe(self, from_user_id: str, to_user_id: str, direction: str) -> dict | None:
        return self.request("POST", "/swipes", json={
            "fromUserId": from_user_id, "toUserId": to_user_id, "direction": direction,
        })

    def matches(self, user_id: str) -> list[dict] | None:
        result = self.request("GET", f"/matches/{user_id}")
        return result["items"] if result else None

    def push(self, matchmaker_id: str, person1_id: str, person2_id: str) -> dict | None:
        return self.request("POST", "/push", json={
            "matchmakerId": matchmaker_id, "person1Id": person1_id, "person2Id": person2_id,
        })

    def pull(self, requester_id: str, matchmaker_id: str) -> dict | None:
        return self.request("POST", "/pull", json={
            "requesterId": requester_id, "matchmakerId": matchmaker_id,
        })

    # --- Friends ---

    def add_friend(self, user_id: str, friend_id: str) -> dict | None:
        return self.request("POST", "/friends/add", json={"userId": user_id, "friendId": friend_id})

    def friends(self, user_id: str) -> list[dict] | None:
        result = self.request("GET", f"/friends/{user_id}")
        return result["items"] if result else None
