"""
Document merger for the Templating context.

Combines a stored Profile with per-request SubmittedContent into the
MergedDocument layouts render. Profile supplies identity, contacts, education
and the structure of each job; submitted content supplies the title, summary,
skills and the detail bullets of each job.
"""

from typing import List, Sequence

from press.contexts.profiles.profile_data_structure import Job, Profile
from press.contexts.templating.document_data_structure import (
    MergedDocument,
    MergedExperience,
    SubmittedContent,
    SubmittedExperience,
)
from press.contexts.templating.logger import _log_debug, _log_warning

# Used when neither the profile job nor the submitted entry names a role
FALLBACK_JOB_TITLE = "Engineer"


def merge_experience(
    jobs: Sequence[Job], submitted: Sequence[SubmittedExperience]
) -> List[MergedExperience]:
    """
    Pair profile jobs with submitted experience entries by position.

    Job i takes its company, location and dates from the profile and its detail
    bullets from submitted entry i. The profile's job title wins; the submitted
    title is the fallback, then FALLBACK_JOB_TITLE.

    The profile decides how many entries there are: submitted entries beyond the
    last job are dropped, and jobs without a submitted entry get no details.

    Args:
        jobs: Profile work history, in order
        submitted: Submitted experience entries, in order

    Returns:
        One MergedExperience per profile job
    """
    if len(jobs) != len(submitted):
        _log_warning(
            f"Experience count mismatch: profile has {len(jobs)} jobs, "
            f"content has {len(submitted)} entries (merging by position)"
        )

    merged = []
    for idx, job in enumerate(jobs):
        entry = submitted[idx] if idx < len(submitted) else SubmittedExperience()
        merged.append(
            MergedExperience(
                title=job.title or entry.title or FALLBACK_JOB_TITLE,
                company=job.company,
                location=job.location,
                start_date=job.start_date,
                end_date=job.end_date,
                details=list(entry.details),
            )
        )
    return merged


def merge_document(profile: Profile, content: SubmittedContent) -> MergedDocument:
    """
    Build the render-ready document for one request.

    Args:
        profile: Stored profile (not modified)
        content: Normalized submitted content

    Returns:
        MergedDocument ready for Layout.render()
    """
    _log_debug(f"Merging content into profile {profile.profile_id}")

    return MergedDocument(
        name=profile.name,
        title=content.title,
        summary=content.summary,
        skills=content.skills,
        experience=merge_experience(profile.experience, content.experience),
        education=profile.education,
        **profile.contact_fields(),
    )
