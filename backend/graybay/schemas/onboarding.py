"""
Onboarding payload shared by client onboarding and quote document export.
"""

from pydantic import Field
from typing import Optional, List

from graybay.schemas.base import APIModel


class CompanyInfo(APIModel):
    """Company details captured by the onboarding form."""
    name: str = Field(..., min_length=1, max_length=255)
    website: Optional[str] = Field(None, max_length=255)
    industry: Optional[str] = Field(None, max_length=100)
    size: Optional[str] = Field(None, max_length=50)


class ContactInfo(APIModel):
    """A contact person captured by the onboarding form."""
    name: str = Field(..., min_length=1, max_length=255)
    role: Optional[str] = Field(None, max_length=100)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)


class OnboardingContacts(APIModel):
    """Primary contact is required, technical contact is optional."""
    primary: ContactInfo
    technical: Optional[ContactInfo] = None


class PriceRange(APIModel):
    min: Optional[float] = Field(None, ge=0)
    max: Optional[float] = Field(None, ge=0)


class SelectedService(APIModel):
    """A service offered during onboarding; only `included` ones are provisioned."""
    id: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    base_price: float = Field(0, ge=0)
    custom_price: float = Field(0, ge=0)
    price_range: Optional[PriceRange] = None
    included: bool = True


class OnboardingRequest(APIModel):
    """Company, contacts and service selection assembled by the onboarding wizard."""
    company_info: CompanyInfo
    contacts: OnboardingContacts
    selected_services: List[SelectedService] = []
