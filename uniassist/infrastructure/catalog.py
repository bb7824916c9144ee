"""
Catalog Providers for UniAssist

Static, file-backed catalogs of universities, mentors and roommate
candidates. Remote catalog fetching plugs in behind CatalogProvider.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional, Protocol, Sequence, Type, TypeVar, runtime_checkable

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from uniassist.domain.models import Mentor, RoommateCandidate, University
from uniassist.infrastructure.exceptions import ConfigurationError, ValidationError


logger = logging.getLogger(__name__)


DEFAULT_CATALOG_PATH = os.path.join(
    os.path.dirname(os.path.dirname(__file__)),
    "data",
    "catalog.json",
)

RecordType = TypeVar("RecordType", bound=BaseModel)


@runtime_checkable
class CatalogProvider(Protocol):
    """Source of candidate records."""
    
    def universities(self) -> List[University]:
        ...
    
    def mentors(self) -> List[Mentor]:
        ...
    
    def roommates(self) -> List[RoommateCandidate]:
        ...


def _parse_records(
    model: Type[RecordType],
    records: Optional[Sequence[Dict[str, Any]]],
    section: str,
) -> List[RecordType]:
    """Validate one catalog section, wrapping the first bad record's error."""
    parsed: List[RecordType] = []
    for index, record in enumerate(records or []):
        try:
            parsed.append(model.model_validate(record))
        except PydanticValidationError as e:
            raise ValidationError(
                f"Malformed {section} record at index {index}",
                field=section,
                original_error=e,
            )
    return parsed


class StaticCatalog:
    """
    In-memory catalog loaded once.
    
    Records are frozen models; the accessors return fresh lists so callers
    may reorder them freely.
    """
    
    def __init__(
        self,
        universities: Optional[Sequence[University]] = None,
        mentors: Optional[Sequence[Mentor]] = None,
        roommates: Optional[Sequence[RoommateCandidate]] = None,
    ):
        self._universities = list(universities or [])
        self._mentors = list(mentors or [])
        self._roommates = list(roommates or [])
    
    def universities(self) -> List[University]:
        return list(self._universities)
    
    def mentors(self) -> List[Mentor]:
        return list(self._mentors)
    
    def roommates(self) -> List[RoommateCandidate]:
        return list(self._roommates)
    
    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "StaticCatalog":
        """
        Build a catalog from {"universities": [...], "mentors": [...], "roommates": [...]}.
        
        Missing sections are empty.
        
        Raises:
            ValidationError: a record does not match its model
        """
        if not isinstance(payload, dict):
            raise ValidationError("Catalog payload must be a JSON object", field="catalog")
        
        return cls(
            universities=_parse_records(University, payload.get("universities"), "universities"),
            mentors=_parse_records(Mentor, payload.get("mentors"), "mentors"),
            roommates=_parse_records(RoommateCandidate, payload.get("roommates"), "roommates"),
        )
    
    @classmethod
    def from_json(cls, path: str) -> "StaticCatalog":
        """
        Load a catalog file.
        
        Raises:
            ConfigurationError: file missing or not valid JSON
            ValidationError: a record does not match its model
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Unable to read catalog from {path}",
                original_error=e,
            )
        
        catalog = cls.from_dict(payload)
        logger.info(
            f"[CATALOG] Loaded {len(catalog._universities)} universities, "
            f"{len(catalog._mentors)} mentors, {len(catalog._roommates)} roommates from {path}"
        )
        return catalog
    
    @classmethod
    def load_default(cls) -> "StaticCatalog":
        """Load the bundled sample catalog."""
        return cls.from_json(DEFAULT_CATALOG_PATH)
