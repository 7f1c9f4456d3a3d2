import enum


class Role(str, enum.Enum):
    """Staff roles within a company."""

    ADMIN = "ADMIN"
    RECRUITER = "RECRUITER"
    HR = "HR"


class PositionType(str, enum.Enum):
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    CONTRACT = "CONTRACT"
    INTERN = "INTERN"


class ApplicantStatus(str, enum.Enum):
    """Application pipeline states. New applications start as PENDING."""

    PENDING = "PENDING"
    REVIEWED = "REVIEWED"
    INTERVIEW = "INTERVIEW"
    HIRED = "HIRED"
    REJECTED = "REJECTED"
