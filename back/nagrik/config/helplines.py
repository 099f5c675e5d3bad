"""
Official Delhi civic helplines, and the lookup from an issue category to the
department that handles it.
"""

# Standard library imports
from dataclasses import dataclass


@dataclass(frozen=True)
class Helpline:
    authority: str
    helpline: str
    alternate_helpline: str
    department: str
    grievance_portal: str
    description: str


DEFAULT_HELPLINE_KEY = "default"

DELHI_HELPLINES: dict[str, Helpline] = {
    "waste": Helpline(
        authority="Municipal Corporation of Delhi (MCD)",
        helpline="155305",
        alternate_helpline="011-23970404",
        department="Sanitation Department",
        grievance_portal="MCD Citizen Services Portal",
        description="For garbage collection, waste management, and sanitation issues",
    ),
    "water": Helpline(
        authority="Delhi Jal Board (DJB)",
        helpline="1916",
        alternate_helpline="011-23634467",
        department="Customer Care Center",
        grievance_portal="DJB Online Complaint System",
        description="For water supply, leakage, and pipeline issues",
    ),
    "air": Helpline(
        authority="Delhi Pollution Control Committee (DPCC)",
        helpline="011-42200500",
        alternate_helpline="1800-11-4000",
        department="Environmental Monitoring",
        grievance_portal="DPCC Grievance Redressal System",
        description="For air pollution, industrial emissions, and environmental complaints",
    ),
    "transport": Helpline(
        authority="Delhi Traffic Police",
        helpline="1075",
        alternate_helpline="011-25844444",
        department="Traffic Control Room",
        grievance_portal="Delhi Traffic Police Complaint Portal",
        description="For traffic violations, road safety, and transport issues",
    ),
    "energy": Helpline(
        authority="Delhi DISCOMs",
        helpline="1912",
        alternate_helpline="1800-103-0808",
        department="Customer Care",
        grievance_portal="Consumer Grievance Redressal Forum",
        description="For power outages, electricity supply, and billing issues",
    ),
    "street_lighting": Helpline(
        authority="Municipal Corporation of Delhi (MCD)",
        helpline="155305",
        alternate_helpline="011-23970404",
        department="Electrical Department",
        grievance_portal="MCD Citizen Services Portal",
        description="For street light maintenance and lighting issues",
    ),
    "roads": Helpline(
        authority="Public Works Department (PWD)",
        helpline="011-23393233",
        alternate_helpline="1800-11-0000",
        department="Engineering Division",
        grievance_portal="PWD Delhi Complaint System",
        description="For road maintenance, potholes, and infrastructure issues",
    ),
    "health": Helpline(
        authority="Delhi Health Department",
        helpline="104",
        alternate_helpline="011-22307145",
        department="Public Health Services",
        grievance_portal="Delhi Health Services Portal",
        description="For public health concerns and medical facility complaints",
    ),
    DEFAULT_HELPLINE_KEY: Helpline(
        authority="Delhi Government",
        helpline="1076",
        alternate_helpline="011-23392007",
        department="Citizen Services",
        grievance_portal="Delhi Government Portal",
        description="For general civic issues and complaints",
    ),
}

# Category labels (including common synonyms) to helpline keys; exact match
CATEGORY_TO_HELPLINE: dict[str, str] = {
    "Waste": "waste",
    "Water": "water",
    "Air": "air",
    "Transport": "transport",
    "Energy": "energy",
    "Electricity": "energy",
    "Power": "energy",
    "Street Light": "street_lighting",
    "Street Lighting": "street_lighting",
    "Roads": "roads",
    "Infrastructure": "roads",
    "Health": "health",
    "Medical": "health",
    "Sanitation": "waste",
    "Garbage": "waste",
    "Traffic": "transport",
    "Pollution": "air",
}


def get_helpline_info(category: str) -> Helpline:
    return DELHI_HELPLINES[CATEGORY_TO_HELPLINE.get(category, DEFAULT_HELPLINE_KEY)]
