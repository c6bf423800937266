from types import MappingProxyType
from typing import Dict, Mapping, Optional

FIELD_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "AccessKeyId": "accessKey",
        "SecretAccessKey": "secretKey",
        "Token": "sessionToken",
    }
)

KEY_VALUE_SEPARATOR: str = " : "


def _clean(part: str) -> str:
    return part.replace('"', " ").strip()


def parse_json(text: Optional[str]) -> Dict[str, str]:
    """
    Extract the credential fields from an instance profile document.

    The document is simple, non-nested json::

        {
          "Code" : "Success",
          "LastUpdated" : "2013-02-26T02:03:57Z",
          "Type" : "AWS-HMAC",
          "AccessKeyId" : "AAAAA",
          "SecretAccessKey" : "SSSSSSS",
          "Token" : "TTTTTTT",
          "Expiration" : "2013-02-26T08:12:23Z"
        }

    so it is split on ``,`` and ``" : "`` instead of going through a json
    library. Entries without the exact separator and fields outside
    :data:`FIELD_NAMES` are skipped. Values are never coerced.

    :param text: Raw document, or ``None``.
    :type text: Optional[str]
    :return: Normalized field name to value.
    :rtype: Dict[str, str]
    """
    if text is None:
        return {}

    no_braces = text.replace("{", " ").replace("}", " ").strip()

    fields: Dict[str, str] = {}
    for entry in no_braces.split(","):
        parts = entry.split(KEY_VALUE_SEPARATOR)
        if len(parts) != 2:
            continue

        key = FIELD_NAMES.get(_clean(parts[0]))
        if key is not None:
            fields[key] = _clean(parts[1])
    return fields
