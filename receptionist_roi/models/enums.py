from enum import Enum


class DaysOpenMode(str, Enum):
    WEEKDAYS = "weekdays"
    SIXDAYS = "sixdays"
    ALLDAYS = "alldays"


class PricingTier(str, Enum):
    BASIC = "basic"
    PROFESSIONAL = "professional"
    ENTERPRISE = "enterprise"


class AnalysisMode(str, Enum):
    REPLACE = "replace"
    ENHANCE = "enhance"


class Industry(str, Enum):
    PLUMBING = "plumbing"
    HVAC = "HVAC"
    ELECTRICIAN = "electrician"
    LANDSCAPING_AND_LAWN_CARE = "landscaping_and_lawn_care"
    CLEANING_SERVICES = "cleaning_services"
    ROOFING = "roofing"
    PAINTING = "painting"
    CARPENTRY = "carpentry"
    FLOORING_INSTALLATION = "flooring_installation"
    PEST_CONTROL = "pest_control"
    OTHER_HOME_SERVICES = "other_home_services"


# Not calendar-accurate; a fixed working-month approximation.
DAYS_PER_MONTH: dict[DaysOpenMode, int] = {
    DaysOpenMode.WEEKDAYS: 22,
    DaysOpenMode.SIXDAYS: 26,
    DaysOpenMode.ALLDAYS: 30,
}

# After-hours calls happen every day of the week.
AFTER_HOURS_DAYS_PER_MONTH = 30
