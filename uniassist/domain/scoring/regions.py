"""
Region Table

Explicit region -> countries mapping used by location scoring.
Loaded from a versioned JSON asset and injected into scorers, so the
mapping can be swapped or tested independently of scoring logic.
"""

import json
import logging
import os
from functools import lru_cache
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from uniassist.infrastructure.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


DEFAULT_REGIONS_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(__file__))),
    "data",
    "regions.json",
)


class RegionTable:
    """
    Immutable lookup of which countries belong to which region.
    
    Region and country names compare case-insensitively.
    """
    
    def __init__(self, regions: Mapping[str, Iterable[str]], version: str = "custom"):
        self._version = version
        self._regions: Dict[str, Tuple[str, ...]] = {
            name: tuple(countries) for name, countries in regions.items()
        }
        self._index: Dict[str, frozenset] = {
            name.strip().lower(): frozenset(c.strip().lower() for c in countries)
            for name, countries in self._regions.items()
        }
    
    @property
    def version(self) -> str:
        return self._version
    
    @property
    def regions(self) -> List[str]:
        return list(self._regions)
    
    def countries_for(self, region: str) -> Tuple[str, ...]:
        """Countries in a region; unknown regions have none."""
        for name, countries in self._regions.items():
            if name.lower() == region.strip().lower():
                return countries
        return ()
    
    def contains(self, region: str, country: str) -> bool:
        """Check whether country lies in region."""
        countries = self._index.get(region.strip().lower())
        if not countries:
            return False
        return country.strip().lower() in countries
    
    def in_any(self, regions: Iterable[str], country: str) -> bool:
        """Check whether country lies in any of the given regions."""
        return any(self.contains(region, country) for region in regions)
    
    @classmethod
    def from_file(cls, path: str) -> "RegionTable":
        """
        Load a region table from a JSON file.
        
        Expected shape: {"version": "...", "regions": {"Region": ["Country", ...]}}
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Unable to load region table from {path}",
                original_error=e,
            )
        
        regions = payload.get("regions") if isinstance(payload, dict) else None
        if not isinstance(regions, dict):
            raise ConfigurationError(
                f"Region table at {path} has no 'regions' mapping",
                missing_keys=["regions"],
            )
        
        table = cls(regions, version=str(payload.get("version", "unversioned")))
        logger.debug(f"[REGIONS] Loaded {len(table.regions)} regions (version {table.version})")
        return table


@lru_cache
def default_region_table(path: Optional[str] = None) -> RegionTable:
    """Get the bundled region table (cached)."""
    return RegionTable.from_file(path or DEFAULT_REGIONS_PATH)
