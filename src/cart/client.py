"""HTTP client for the booking endpoints.

Attaches the stored bearer credential to every request. A 401 from the API
means the credential is no longer good: the session is cleared before the
error is raised so the caller can send the user back to log in.
"""

import httpx
import structlog

from cart.config import ClientSettings
from cart.errors import BookingRequestError
from cart.session import Session

logger = structlog.get_logger(__name__)

BOOKINGS_PATH = "/user/bookings"


class BookingClient:
    def __init__(
        self,
        session: Session,
        settings: ClientSettings | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.session = session
        self.settings = settings or ClientSettings.from_env()
        self._http = http_client or httpx.Client(
            base_url=self.settings.api_url,
            timeout=self.settings.timeout,
        )

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        token = self.session.token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(self, method: str, path: str, default_error: str, **kwargs) -> dict:
        try:
            response = self._http.request(method, path, headers=self._headers(), **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("booking_api_unreachable", method=method, path=path, error=str(exc))
            raise BookingRequestError(message=default_error) from exc

        if response.status_code == 401:
            logger.info("session_expired", path=path)
            self.session.logout()

        if response.is_error:
            raise BookingRequestError.from_response(response, default_message=default_error)

        try:
            return response.json()
        except ValueError as exc:
            logger.warning("booking_api_bad_response", method=method, path=path, status=response.status_code)
            raise BookingRequestError(message=default_error, status_code=response.status_code) from exc

    def create_booking(self, payload: dict) -> dict:
        """POST a booking request and return the response body."""
        return self._request("POST", BOOKINGS_PATH, "Failed to create booking", json=payload)

    def list_bookings(self) -> list[dict]:
        body = self._request("GET", BOOKINGS_PATH, "Failed to fetch bookings")
        return body["data"]["bookings"]

    def close(self) -> None:
        self._http.close()
