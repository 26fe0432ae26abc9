"""Recoding tables for the demographic fields."""

from typing import Dict, Tuple

SEX_VALUES: Tuple[str, ...] = ("Male", "Female")

EDUCATION_MAP: Dict[str, str] = {
    "Less than high school": "Secondary or less",
    "High school graduate": "Secondary or less",
    "Some college": "Some college",
    "Associate degree": "Some college",
    "Bachelor's degree": "Bachelor's",
    "Master's degree": "Postgraduate",
    "Professional degree": "Postgraduate",
    "Doctorate": "Postgraduate",
}
EDUCATION_LEVELS: Tuple[str, ...] = ("Secondary or less", "Some college", "Bachelor's", "Postgraduate")

EMPLOYMENT_MAP: Dict[str, str] = {
    "Employed full-time": "Employed",
    "Employed part-time": "Employed",
    "Self-employed": "Employed",
    "Unemployed": "Not employed",
    "Student": "Student",
    "Retired": "Retired",
}

COUNTRY_ALIASES: Dict[str, str] = {
    "USA": "United States",
    "US": "United States",
    "U.S.": "United States",
    "United States of America": "United States",
    "UK": "United Kingdom",
    "U.K.": "United Kingdom",
    "England": "United Kingdom",
    "Great Britain": "United Kingdom",
}
