# docker_engine_mcp/models/base.py
"""
Base class for the Docker Engine schema catalog.

Every catalog model mirrors one definition of the Docker Engine OpenAPI
document. JSON keys are kept through field aliases ("ID", "CreatedAt", ...)
while Python code uses snake_case names.
"""

from typing import Any, Dict, Set
from pydantic import BaseModel, ConfigDict


class DockerModel(BaseModel):
    """
    Lenient base model for daemon payloads.

    - Every field is optional, so partial payloads still decode.
    - Unknown keys are kept, so a decoded response re-serializes without loss.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    @classmethod
    def known_keys(cls) -> Set[str]:
        """All keys this model understands, both JSON aliases and field names."""
        keys = set()
        for name, field in cls.model_fields.items():
            keys.add(name)
            if field.alias:
                keys.add(field.alias)
        return keys

    @classmethod
    def from_arguments(cls, arguments: Dict[str, Any]) -> "DockerModel":
        """
        Coerce a flat tool-argument mapping into this model.

        Keys the model does not know are dropped before validation; missing
        keys stay unset. Raises pydantic.ValidationError on type mismatch.
        """
        known = cls.known_keys()
        return cls.model_validate({k: v for k, v in arguments.items() if k in known})

    def to_json_dict(self) -> Dict[str, Any]:
        """Serialize with JSON aliases, leaving out everything that was never set."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
