"""
Profiles Context

Responsibilities:
- Loads stored profile records (identity, contacts, work and education history)
- Caches loaded profiles for the lifetime of the process
- Lists available profiles for selection

Owns: Profile records and their in-memory cache
Never: Touches submitted resume content or layouts
"""

from press.contexts.profiles.exceptions import ProfileFormatError, ProfileNotFoundError
from press.contexts.profiles.profile_data_structure import (
    Education,
    Job,
    Profile,
    ProfileSummary,
)
from press.contexts.profiles.profile_store import ProfileStore

__all__ = [
    "ProfileStore",
    "Profile",
    "ProfileSummary",
    "Job",
    "Education",
    "ProfileNotFoundError",
    "ProfileFormatError",
]
