import logging

from .credentials import Credentials
from .metadata import HttpMetadataFetcher, MetadataFetcher
from .parser import FIELD_NAMES, parse_json
from .resolver import DEFAULT_BASE_URI, SECURITY_CREDENTIALS_PATH, RoleCredentialsResolver
from .supplier import InstanceProfileCredentialsSupplier

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Credentials",
    "DEFAULT_BASE_URI",
    "FIELD_NAMES",
    "HttpMetadataFetcher",
    "InstanceProfileCredentialsSupplier",
    "MetadataFetcher",
    "RoleCredentialsResolver",
    "SECURITY_CREDENTIALS_PATH",
    "parse_json",
]
