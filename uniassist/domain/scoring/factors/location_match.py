"""
Location Match Factor

Scores the university's country against the student's preferred regions
using an injected RegionTable.
"""

from typing import Optional

from uniassist.domain.models import StudentProfile, University
from uniassist.domain.scoring.interfaces import BaseScoringFactor
from uniassist.domain.scoring.regions import RegionTable, default_region_table


class LocationMatchFactor(BaseScoringFactor):
    """
    Location match scoring factor.
    
    Weight: 15% base
    
    No stated preference is not penalized (100). A country outside every
    preferred region still gets partial credit (50).
    """
    
    def __init__(self, region_table: Optional[RegionTable] = None):
        self._regions = region_table or default_region_table()
    
    @property
    def region_table(self) -> RegionTable:
        return self._regions
    
    @property
    def name(self) -> str:
        return "location_match"
    
    @property
    def base_weight(self) -> float:
        return 0.15
    
    def calculate(self, profile: StudentProfile, university: University) -> float:
        if not profile.preferred_regions:
            return 100.0
        
        if self._regions.in_any(profile.preferred_regions, university.country):
            return 100.0
        return 50.0
