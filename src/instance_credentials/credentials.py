from typing import Dict, Mapping, Optional

import msgspec


class Credentials(
    msgspec.Struct,
    frozen=True,
    rename="camel",
    omit_defaults=True,
    forbid_unknown_fields=True,
):
    """
    Immutable AWS credentials keyed by ``accessKey``, ``secretKey`` and
    ``sessionToken``. Any of them may be missing; an empty value means the
    instance has no role attached.
    """

    access_key: Optional[str] = None
    secret_key: Optional[str] = None
    session_token: Optional[str] = None

    @classmethod
    def from_map(cls, fields: Mapping[str, str]) -> "Credentials":
        """
        :raises msgspec.ValidationError: On keys outside the normalized set or
            non-string values.
        """
        return msgspec.convert(dict(fields), cls)

    def to_map(self) -> Dict[str, str]:
        return {
            field.encode_name: getattr(self, field.name)
            for field in msgspec.structs.fields(self)
            if getattr(self, field.name) is not None
        }

    def is_empty(self) -> bool:
        return not self.to_map()
