"""Best-effort mirror of rounds to the external object store.

The mirror is never authoritative. Pushes run on a background executor
and the local save path never waits for them; every call, successful or
not, lands in the operation log. Nothing here raises to callers.

Remote API, one named collection:
- POST   {base}/input_data          submit serialized items
- POST   {base}/return_data         fetch the collection as raw text
- DELETE {base}/objects/{name}      delete the collection
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable

import httpx

from tigerfive.config import Settings
from tigerfive.core.errors import RemoteError
from tigerfive.core.identity import canonical_json
from tigerfive.mirror.oplog import OperationLog
from tigerfive.models.domain import RoundEntity
from tigerfive.models.types import MirrorOutcome

logger = logging.getLogger(__name__)

COLLECTION_NAME = "golf_rounds"
ITEM_DATA_TYPE = "strings"
RAW_RETURN_TYPE = "raw_text"

ClientFactory = Callable[..., httpx.Client]


def _http_client_factory(**kwargs: Any) -> httpx.Client:
    timeout = kwargs.pop("timeout", 10.0)
    return httpx.Client(timeout=timeout, **kwargs)


class RemoteMirror:
    """Fire-and-forget adapter for the remote object store."""

    def __init__(
        self,
        base_url: str | None,
        *,
        collection: str = COLLECTION_NAME,
        token: str | None = None,
        app_id: str | None = None,
        usage_key: str | None = None,
        timeout: float = 10.0,
        log: OperationLog | None = None,
        client_factory: ClientFactory | None = None,
        max_workers: int = 2,
    ):
        """Initialize the mirror.

        Args:
            base_url: API base URL. Empty or None disables all network I/O.
            collection: Named collection holding the rounds.
            token: Bearer token for the Authorization header.
            app_id: Value of the X-Generated-App-ID header.
            usage_key: Value of the X-Usage-Key header.
            timeout: Per-request timeout in seconds.
            log: Operation log to record calls in.
            client_factory: Builds httpx clients; tests inject a mock transport.
            max_workers: Background threads for pushes.
        """
        self.base_url = (base_url or "").rstrip("/")
        self.collection = collection
        self.timeout = timeout
        self.log = log if log is not None else OperationLog()
        self._token = token
        self._app_id = app_id
        self._usage_key = usage_key
        self._client_factory = client_factory or _http_client_factory
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="tigerfive-mirror"
        )

    @classmethod
    def from_settings(cls, settings: Settings, log: OperationLog | None = None) -> RemoteMirror:
        return cls(
            settings.mirror_url,
            token=settings.mirror_token,
            app_id=settings.mirror_app_id,
            usage_key=settings.mirror_usage_key,
            timeout=settings.mirror_timeout,
            log=log,
        )

    @property
    def enabled(self) -> bool:
        return bool(self.base_url)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def push(self, round: RoundEntity) -> Future[MirrorOutcome]:
        """Send one new round to the collection in the background.

        Returns:
            Future resolving to the outcome. The local save path does not
            wait on it; its only callback logs the result.
        """
        payload = {
            "created_object_name": self.collection,
            "data_type": ITEM_DATA_TYPE,
            "input_data": [canonical_json(round.to_dict())],
        }
        future = self._executor.submit(
            self._call,
            "push",
            "POST",
            "/input_data",
            payload,
            f"Round {round.id} mirrored",
        )
        future.add_done_callback(_log_push_result)
        return future

    def fetch_raw(self) -> MirrorOutcome:
        """Fetch the whole collection as unprocessed text, for inspection."""
        payload = {"object_name": self.collection, "return_type": RAW_RETURN_TYPE}
        return self._call("fetch", "POST", "/return_data", payload, "Raw remote data fetched")

    def clear(self) -> MirrorOutcome:
        """Delete the whole remote collection. Local rounds are untouched."""
        return self._call(
            "clear",
            "DELETE",
            f"/objects/{self.collection}",
            None,
            "Remote data deleted successfully",
        )

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        if self._app_id:
            headers["X-Generated-App-ID"] = self._app_id
        if self._usage_key:
            headers["X-Usage-Key"] = self._usage_key
        return headers

    def _request(self, method: str, endpoint: str, payload: dict | None) -> Any:
        """Perform one request and decode the JSON body.

        Raises:
            RemoteError: Mirror disabled, transport failure, non-2xx status,
                or a body that is not JSON.
        """
        if not self.enabled:
            raise RemoteError("Remote mirror is not configured")

        url = f"{self.base_url}{endpoint}"
        try:
            with self._client_factory(timeout=self.timeout) as client:
                response = client.request(method, url, headers=self._headers(), json=payload)
        except httpx.HTTPError as e:
            raise RemoteError(f"{method} {endpoint} failed: {e}") from e

        if not response.is_success:
            raise RemoteError(
                f"{method} {endpoint} returned {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise RemoteError(f"{method} {endpoint} returned invalid JSON") from e

    def _call(
        self,
        operation: str,
        method: str,
        endpoint: str,
        payload: dict | None,
        success_message: str,
    ) -> MirrorOutcome:
        try:
            result = self._request(method, endpoint, payload)
        except RemoteError as e:
            logger.warning(f"Remote mirror {operation} failed: {e}")
            self.log.record(method, endpoint, payload, {"error": str(e)})
            return MirrorOutcome(
                ok=False,
                operation=operation,
                message=f"Remote {operation} failed: {e}",
                error=str(e),
            )

        logger.info(f"Remote mirror {operation} succeeded: {method} {endpoint}")
        self.log.record(method, endpoint, payload, result)
        return MirrorOutcome(ok=True, operation=operation, message=success_message, response=result)


def _log_push_result(future: Future[MirrorOutcome]) -> None:
    if future.cancelled():
        logger.debug("Remote mirror push cancelled")
        return
    error = future.exception()
    if error is not None:
        logger.warning(f"Remote mirror push crashed: {error!r}")
        return
    outcome = future.result()
    if outcome.ok:
        logger.debug(outcome.message)
    else:
        logger.debug(f"Remote mirror push not stored remotely; local copy kept: {outcome.error}")
