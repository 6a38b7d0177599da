from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class CastMember:
    """A person credited on a Vimeo video."""

    real_name: str
    user_name: str = ""
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "CastMember":
        """Build a cast member from a ``cast.member`` entry of the API."""
        extra = {k: v for k, v in data.items() if k not in ("realname", "username")}
        return cls(
            real_name=str(data.get("realname") or ""),
            user_name=str(data.get("username") or ""),
            extra=extra,
        )

    @property
    def first_name(self) -> str:
        """First whitespace-delimited token of the real name, e.g. Pete for Pete Muir."""
        parts = self.real_name.split()
        return parts[0] if parts else ""
