# Third-party
import requests
from requests.exceptions import RequestException
import structlog
from django.conf import settings

# First-party/Local
from memberportal.api.metrics import discord_bot_calls

log = structlog.getLogger(__name__)


class DiscordBotAPIException(Exception):
    pass


class DiscordBotNotConfigured(DiscordBotAPIException):
    pass


class DiscordBotAPI:
    """
    Client for the club's Discord bot, which owns nicknames and role
    assignments on the Discord server.

    Role sync and nickname updates are best effort: failures are logged and
    never raised, so the external server may stay stale until the next
    change to the member triggers another sync.
    """

    def __init__(self, api_url=None, api_token=None, timeout=None):
        self.api_url = api_url or settings.STEM_BOT["api_url"]
        self.api_token = api_token or settings.STEM_BOT["api_token"]
        self.timeout = timeout or settings.STEM_BOT.get("timeout", 10)

    @property
    def is_configured(self):
        return bool(self.api_url and self.api_token)

    @property
    def headers(self):
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "application/json",
            "Cache-Control": "no-store",
        }

    def _get_api_url(self, api_call: str) -> str:
        return f"{self.api_url.rstrip('/')}/api/{api_call}"

    def _get(self, api_call, params=None):
        if not self.is_configured:
            raise DiscordBotNotConfigured("Discord bot API URL or token is not configured")
        return requests.get(
            self._get_api_url(api_call),
            params=params,
            headers=self.headers,
            timeout=self.timeout,
        )

    def _post(self, api_call, body):
        if not self.is_configured:
            raise DiscordBotNotConfigured("Discord bot API URL or token is not configured")
        return requests.post(
            self._get_api_url(api_call),
            json=body,
            headers=self.headers,
            timeout=self.timeout,
        )

    def _fire_and_forget(self, api_call, body, discord_uid):
        try:
            response = self._post(api_call, body)
        except (DiscordBotAPIException, RequestException) as error:
            discord_bot_calls.labels(api_call, "error").inc()
            log.error(f"Discord bot call {api_call} for {discord_uid} failed: {error}")
            return False

        if not response.ok:
            discord_bot_calls.labels(api_call, "failed").inc()
            log.error(
                f"Discord bot call {api_call} for {discord_uid} failed. "
                f"Status: {response.status_code}, Body: {response.text}"
            )
            return False

        discord_bot_calls.labels(api_call, "ok").inc()
        log.info(f"Discord bot call {api_call} started for {discord_uid}")
        return True

    def sync_roles(self, discord_uid):
        """
        Ask the bot to reconcile the member's Discord roles with their teams
        and generation. Returns whether the bot accepted the request.
        """
        log.info(f"Syncing Discord roles for {discord_uid}")
        return self._fire_and_forget("roles/sync", {"discord_uid": discord_uid}, discord_uid)

    def update_nickname(self, discord_uid, name):
        log.info(f"Updating Discord nickname for {discord_uid} based on {name!r}")
        return self._fire_and_forget(
            "nickname/update",
            {"discord_uid": discord_uid, "name": name},
            discord_uid,
        )

    def get_display_name(self, discord_uid):
        """Returns the member's name without the bot's decorations, or None"""
        if not discord_uid:
            return None
        try:
            response = self._get("nickname", params={"discord_uid": discord_uid})
        except (DiscordBotAPIException, RequestException) as error:
            log.error(f"Error fetching nickname for {discord_uid}: {error}")
            return None

        if not response.ok:
            log.error(
                f"Failed to fetch nickname for {discord_uid}: "
                f"Status {response.status_code}, Body: {response.text}"
            )
            return None
        try:
            return response.json().get("name_only") or None
        except (ValueError, AttributeError) as error:
            log.error(f"Unexpected nickname response for {discord_uid}: {error}")
            return None

    def get_all_member_names(self):
        """
        Returns a mapping of Discord user id to display name for everyone on
        the server, or None if the bot could not be reached.
        """
        try:
            response = self._get("members")
        except (DiscordBotAPIException, RequestException) as error:
            log.error(f"Error fetching member names: {error}")
            return None

        if not response.ok:
            log.error(
                f"Failed to fetch member names - Status: {response.status_code}, "
                f"Body: {response.text}"
            )
            return None

        try:
            data = response.json()
            if not data.get("success") or not isinstance(data.get("data"), list):
                log.error("Member names response was not successful or data is not a list")
                return None
            names = {member["uid"]: member["name"] for member in data["data"]}
        except (ValueError, KeyError, TypeError, AttributeError) as error:
            log.error(f"Unexpected member names response: {error}")
            return None

        log.info(f"Fetched names of {len(names)} members")
        return names

    def get_member_status(self, discord_uid):
        """
        Returns whether the member is on the server along with their current
        nickname and roles. None if the bot could not be reached.
        """
        try:
            response = self._get("member/status", params={"discord_uid": discord_uid})
        except (DiscordBotAPIException, RequestException) as error:
            log.error(f"Error fetching member status for {discord_uid}: {error}")
            return None

        if response.status_code == 404:
            return {
                "discord_uid": discord_uid,
                "is_in_server": False,
                "current_nickname": None,
                "current_roles": [],
            }
        if not response.ok:
            log.error(
                f"Failed to fetch member status for {discord_uid}: "
                f"Status {response.status_code}, Body: {response.text}"
            )
            return None

        try:
            result = response.json()
        except ValueError as error:
            log.error(f"Unexpected member status response for {discord_uid}: {error}")
            return None
        if not isinstance(result, dict):
            log.error(f"Unexpected member status response for {discord_uid}: {result!r}")
            return None
        return result

    def create_generation_role(self, generation):
        """
        Create the Discord role for `generation`. Unlike the sync calls this
        raises `DiscordBotAPIException` on failure.

        Returns a dict with `generation` and `discord_role_id`.
        """
        try:
            response = self._post("generation", {"generation": generation})
        except RequestException as error:
            discord_bot_calls.labels("generation", "error").inc()
            raise DiscordBotAPIException(str(error)) from error

        try:
            result = response.json()
        except ValueError:
            result = {}
        if not isinstance(result, dict):
            result = {}

        if not response.ok or not result.get("success"):
            discord_bot_calls.labels("generation", "failed").inc()
            raise DiscordBotAPIException(
                result.get("error") or f"Failed to create Discord role for generation {generation}"
            )

        if "generation" not in result or not result.get("role_id"):
            discord_bot_calls.labels("generation", "failed").inc()
            raise DiscordBotAPIException(
                f"Discord bot returned no role for generation {generation}: {result!r}"
            )

        discord_bot_calls.labels("generation", "ok").inc()
        return {
            "generation": result["generation"],
            "discord_role_id": str(result["role_id"]),
        }
