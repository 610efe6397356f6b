"""HTTP transport for ActiveSync commands."""

import logging
from typing import Optional

import requests
from requests.auth import HTTPBasicAuth

from .config import EASConfig
from .utils.exceptions import NetworkError

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/vnd.ms-sync.wbxml"
DEVICE_TYPE = "SmartPhone"


class EASClient:
    """Send ActiveSync commands to a server with basic authentication."""

    def __init__(
        self,
        config: EASConfig,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Loaded server and account configuration
            session: HTTP session to send requests with (a new one if omitted)
            timeout: Per-request timeout in seconds (transport default if None)
        """
        self.config = config
        self.session = session or requests.Session()
        self.timeout = timeout

    def _params(self, command: str) -> dict[str, str]:
        return {
            "Cmd": command,
            "User": self.config.username,
            "DeviceId": self.config.device_id,
            "DeviceType": DEVICE_TYPE,
        }

    def post(self, command: str, body: bytes) -> bytes:
        """
        POST a command document and return the raw response body.

        Args:
            command: ActiveSync command name (e.g. "FolderSync")
            body: Serialized request document

        Returns:
            Response body bytes

        Raises:
            NetworkError: If the request fails or the server answers with an
                HTTP error status
        """
        logger.debug(f"POST {command} to {self.config.exchange_url}")
        try:
            resp = self.session.post(
                self.config.exchange_url,
                params=self._params(command),
                data=body,
                headers={"Content-Type": CONTENT_TYPE},
                auth=HTTPBasicAuth(self.config.username, self.config.password),
                timeout=self.timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(f"{command} request failed: {e}") from e

        logger.debug(f"{command} response: HTTP {resp.status_code}, {len(resp.content)} bytes")
        return resp.content

    def close(self) -> None:
        self.session.close()
