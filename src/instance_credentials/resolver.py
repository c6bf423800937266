import logging
from typing import Optional

from .metadata import HttpMetadataFetcher, MetadataFetcher, check_base_uri

logger = logging.getLogger(__name__)

DEFAULT_BASE_URI: str = "http://169.254.169.254/latest/meta-data/"
SECURITY_CREDENTIALS_PATH: str = "iam/security-credentials/"


class RoleCredentialsResolver:
    """
    Reads the credentials document of the instance's IAM role.

    The first role listed under ``iam/security-credentials/`` is used.
    Instances carry at most one role in practice, so no ordering is applied.

    :param base_uri: Metadata service root, with trailing slash.
    :type base_uri: str
    :param fetcher: Metadata fetcher, defaults to :class:`HttpMetadataFetcher`.
    :type fetcher: Optional[MetadataFetcher]
    """

    def __init__(
        self,
        base_uri: str = DEFAULT_BASE_URI,
        fetcher: Optional[MetadataFetcher] = None,
    ):
        check_base_uri(base_uri)
        self.base_uri = base_uri
        self.fetcher: MetadataFetcher = (
            HttpMetadataFetcher() if fetcher is None else fetcher
        )

    def get(self) -> Optional[str]:
        roles = self.fetcher.list(self.base_uri, SECURITY_CREDENTIALS_PATH)
        if not roles:
            logger.debug("No IAM role attached")
            return None

        return self.fetcher.get(self.base_uri, SECURITY_CREDENTIALS_PATH + roles[0])

    __call__ = get

    def __repr__(self) -> str:
        return f"RoleCredentialsResolver({self.base_uri!r})"
