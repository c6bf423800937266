from typing import Callable, Optional

from .credentials import Credentials
from .metadata import MetadataFetcher
from .parser import parse_json
from .resolver import RoleCredentialsResolver

CredentialsSource = Callable[[], Optional[str]]


class InstanceProfileCredentialsSupplier:
    """
    Loads credentials from the EC2 Instance Metadata Service on every call.

    Nothing is cached: each :meth:`get` lists the role, fetches its
    document and parses it again. Wrap the supplier if credentials should
    be reused until their expiration.

    :param source: Zero-argument callable returning the raw credentials
        document or ``None``. Defaults to a :class:`RoleCredentialsResolver`
        on the standard metadata address.
    :type source: Optional[Callable[[], Optional[str]]]
    """

    def __init__(self, source: Optional[CredentialsSource] = None):
        if source is None:
            source = RoleCredentialsResolver()
        if not callable(source):
            raise TypeError(f"source must be callable, got {type(source).__name__}")
        self.source = source

    @classmethod
    def from_base_uri(
        cls, base_uri: str, fetcher: Optional[MetadataFetcher] = None
    ) -> "InstanceProfileCredentialsSupplier":
        return cls(RoleCredentialsResolver(base_uri, fetcher))

    def get(self) -> Credentials:
        return Credentials.from_map(parse_json(self.source()))

    __call__ = get

    def __repr__(self) -> str:
        return f"InstanceProfileCredentialsSupplier({self.source!r})"
