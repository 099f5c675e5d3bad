# Standard library imports
import enum


class IssueStatus(str, enum.Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"


class IssueCategory(str, enum.Enum):
    WASTE = "Waste"
    WATER = "Water"
    AIR = "Air"
    TRANSPORT = "Transport"
    ENERGY = "Energy"
    ROADS = "Roads"
    STREET_LIGHTING = "Street Lighting"
    HEALTH = "Health"
    GENERAL = "General"
