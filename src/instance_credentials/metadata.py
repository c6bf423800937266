import http.client
import logging
from typing import Dict, List, Optional, Protocol
from urllib.parse import SplitResult, urlsplit

logger = logging.getLogger(__name__)

TOKEN_PATH: str = "/latest/api/token"
TOKEN_TTL_HEADER: str = "X-aws-ec2-metadata-token-ttl-seconds"
TOKEN_HEADER: str = "X-aws-ec2-metadata-token"


class MetadataFetcher(Protocol):
    def list(self, base_uri: str, path: str) -> List[str]: ...

    def get(self, base_uri: str, path: str) -> Optional[str]: ...


def check_base_uri(base_uri: Optional[str]) -> SplitResult:
    if base_uri is None:
        raise ValueError("base_uri must be provided")

    parsed = urlsplit(base_uri)
    if parsed.scheme != "http" or not parsed.hostname:
        raise ValueError(f"base_uri must be an absolute http uri; {base_uri} provided")
    if not parsed.path.endswith("/"):
        raise ValueError(f"base_uri path must end with '/'; {base_uri} provided")
    # raises ValueError on a non-numeric or out of range port
    parsed.port
    return parsed


class HttpMetadataFetcher:
    """
    Reads the EC2 instance metadata service over ``http.client``.

    Any failure (connection error, timeout, non-200 status, empty body) is
    reported as absence: ``None`` from :meth:`get` and ``[]`` from
    :meth:`list`.

    :param timeout: Connect and read timeout in seconds.
    :type timeout: float
    :param token_ttl: Lifetime requested for the IMDSv2 session token.
        ``None`` skips the token request and talks IMDSv1 only.
    :type token_ttl: Optional[int]
    """

    def __init__(self, timeout: float = 1, token_ttl: Optional[int] = 21600):
        self.timeout = timeout
        self.token_ttl = token_ttl

    def list(self, base_uri: str, path: str) -> List[str]:
        body = self.get(base_uri, path)
        if body is None:
            return []
        return [line.strip() for line in body.splitlines() if line.strip()]

    def get(self, base_uri: str, path: str) -> Optional[str]:
        parsed = check_base_uri(base_uri)

        headers = {}
        token = self._token(parsed)
        if token:
            headers[TOKEN_HEADER] = token

        return self._request(parsed, "GET", parsed.path + path, headers)

    def _token(self, parsed: SplitResult) -> Optional[str]:
        if self.token_ttl is None:
            return None

        # None here means IMDSv1 fallback
        return self._request(
            parsed, "PUT", TOKEN_PATH, {TOKEN_TTL_HEADER: str(self.token_ttl)}
        )

    def _request(
        self, parsed: SplitResult, method: str, path: str, headers: Dict[str, str]
    ) -> Optional[str]:
        conn: Optional[http.client.HTTPConnection] = None
        try:
            conn = http.client.HTTPConnection(
                parsed.hostname, parsed.port, timeout=self.timeout  # type: ignore
            )
            conn.request(method, path, headers=headers)
            response = conn.getresponse()
            if response.status != 200:
                logger.debug(f"Metadata {method} {path} returned {response.status}")
                return None

            return response.read().decode() or None

        except (OSError, http.client.HTTPException, UnicodeDecodeError) as err:
            logger.debug(f"Metadata {method} {path} error: {err}")
            return None

        finally:
            if conn is not None:
                conn.close()

    def __repr__(self) -> str:
        return f"HttpMetadataFetcher(timeout={self.timeout!r}, token_ttl={self.token_ttl!r})"
