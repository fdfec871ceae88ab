"""
Document Data Structures

Submitted content as parsed from the caller's JSON text, and the merged,
render-ready document handed to layouts.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from press.contexts.profiles.profile_data_structure import Education


@dataclass
class SubmittedExperience:
    """
    Narrative half of one experience entry.

    Attributes:
        title: Optional role title, used when the profile job has none
        details: Ordered detail bullets, passed through as submitted
    """

    title: Optional[str] = None
    details: List[Any] = field(default_factory=list)

    @classmethod
    def from_raw(cls, entry: Any) -> "SubmittedExperience":
        """Build from one element of the submitted ``experience`` array."""
        if not isinstance(entry, dict):
            return cls()
        details = entry.get("details")
        return cls(
            title=entry.get("title") or None,
            details=list(details) if isinstance(details, list) else [],
        )


@dataclass
class SubmittedContent:
    """
    Per-request narrative content supplied by the caller.

    Attributes:
        title: Professional title shown under the name
        summary: Summary paragraph
        skills: Mapping of category -> list of skills (not validated further)
        experience: Ordered narrative entries, paired with profile jobs by index
        raw: The full parsed JSON object, including keys PRESS does not use
    """

    title: Any
    summary: Any
    skills: Any
    experience: List[SubmittedExperience] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class MergedExperience:
    """Experience entry with profile structure and submitted narrative combined."""

    title: str
    company: str
    location: str
    start_date: str
    end_date: str
    details: List[Any] = field(default_factory=list)


@dataclass
class MergedDocument:
    """
    Render-ready union of a profile and submitted content.

    Field names are the variables layouts see (see to_context()).
    """

    name: str
    title: Any
    summary: Any
    skills: Any
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    website: str = ""
    experience: List[MergedExperience] = field(default_factory=list)
    education: Tuple[Education, ...] = ()

    def to_context(self) -> Dict[str, Any]:
        """Convert to the plain dict passed to Layout.render()."""
        return asdict(self)
