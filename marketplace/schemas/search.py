from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ManpowerSearchRequest(BaseModel):
    jobTitle: Optional[str] = None
    location: Optional[str] = None
    availabilityStatus: Optional[str] = None


class ProfessionalCategory(BaseModel):
    name: str
    count: int


class ProfessionalCategories(BaseModel):
    success: bool = True
    categories: List[ProfessionalCategory] = Field(default_factory=list)
    totalCategories: int
    totalProfessionals: int
    timestamp: str
    cached: bool
    cacheAge: str


class ManpowerStatistics(BaseModel):
    totalManpower: int
    manpowerWithCV: int
    availableManpower: int
    uniqueJobTitles: int


class ManpowerStatsResponse(BaseModel):
    success: bool = True
    statistics: ManpowerStatistics


class JobCategory(BaseModel):
    industry: str
    count: int


class JobCategoriesResponse(BaseModel):
    success: bool = True
    categories: List[JobCategory] = Field(default_factory=list)
    totalJobs: int
    timestamp: str


class EquipmentStatistics(BaseModel):
    total: int
    available: int
    onHire: int
    locations: int
    types: int


class EquipmentStatsResponse(BaseModel):
    success: bool = True
    data: EquipmentStatistics
    timestamp: str


class ResultCounts(BaseModel):
    manpower: int
    equipment: int
    jobs: int


class UniversalSearchResponse(BaseModel):
    success: bool = True
    query: str
    manpower: List[Dict[str, Any]] = Field(default_factory=list)
    equipment: List[Dict[str, Any]] = Field(default_factory=list)
    jobs: List[Dict[str, Any]] = Field(default_factory=list)
    totalResults: int
    counts: ResultCounts
    processingTime: str
    timestamp: str
