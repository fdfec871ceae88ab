"""
Profile data structures for the Profiles context.

A profile is the stored half of every resume: who the person is, how to reach
them, and the fixed work and education history that submitted content is
merged onto. Profiles are frozen once loaded so a cached instance can be shared
between requests.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple


def _text(value: Any) -> str:
    """Coerce an optional record value to a string ("" for missing)."""
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class Job:
    """
    One entry of a profile's work history.

    Attributes:
        title: Job title as stored (may be empty; merge falls back to submitted title)
        company: Employer name
        location: Work location
        start_date: Start date, free-form (e.g., "Jan 2021")
        end_date: End date, free-form (e.g., "Present")
    """

    title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Job":
        return cls(
            title=_text(data.get("title")),
            company=_text(data.get("company")),
            location=_text(data.get("location")),
            start_date=_text(data.get("start_date")),
            end_date=_text(data.get("end_date")),
        )


@dataclass(frozen=True)
class Education:
    """
    One entry of a profile's education history.

    Records may name the institution either ``school`` or ``institution``.
    """

    degree: str = ""
    school: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    details: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Education":
        details = data.get("details") or ()
        if isinstance(details, str):
            details = (details,)
        return cls(
            degree=_text(data.get("degree")),
            school=_text(data.get("school") or data.get("institution")),
            location=_text(data.get("location")),
            start_date=_text(data.get("start_date")),
            end_date=_text(data.get("end_date")),
            details=tuple(_text(item) for item in details),
        )


@dataclass(frozen=True)
class Profile:
    """
    Stored identity, contact and history record.

    Attributes:
        profile_id: Key the record is stored under (file stem)
        name: Full name as printed on the resume
        email, phone, location, linkedin, website: Contact fields
        experience: Ordered work history, most recent first by convention
        education: Ordered education history
    """

    profile_id: str
    name: str
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    website: str = ""
    experience: Tuple[Job, ...] = field(default_factory=tuple)
    education: Tuple[Education, ...] = field(default_factory=tuple)

    @property
    def display_name(self) -> str:
        """Name used for filenames and listings, falling back to the identifier."""
        return self.name or self.profile_id

    @classmethod
    def from_dict(cls, profile_id: str, data: Mapping[str, Any]) -> "Profile":
        """
        Build a Profile from a decoded record.

        Args:
            profile_id: Identifier the record was stored under
            data: Decoded record (JSON object or YAML mapping)

        Raises:
            ValueError: If the record is not a mapping or its history fields are not lists
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Profile record must be an object, got {type(data).__name__}")

        jobs = data.get("experience") or []
        schools = data.get("education") or []
        if not isinstance(jobs, list) or not isinstance(schools, list):
            raise ValueError("Profile 'experience' and 'education' must be lists")
        if not all(isinstance(entry, Mapping) for entry in [*jobs, *schools]):
            raise ValueError("Profile history entries must be objects")

        return cls(
            profile_id=profile_id,
            name=_text(data.get("name")),
            email=_text(data.get("email")),
            phone=_text(data.get("phone")),
            location=_text(data.get("location")),
            linkedin=_text(data.get("linkedin")),
            website=_text(data.get("website")),
            experience=tuple(Job.from_dict(job) for job in jobs),
            education=tuple(Education.from_dict(school) for school in schools),
        )

    def contact_fields(self) -> Dict[str, str]:
        return {
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "linkedin": self.linkedin,
            "website": self.website,
        }


@dataclass(frozen=True)
class ProfileSummary:
    """Identifier and display name of a stored profile, for selection lists."""

    id: str
    name: str
