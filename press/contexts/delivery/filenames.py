"""
Filename derivation for generated resumes.

Filenames are built from the profile name, target company and role, e.g.
"Jane Doe" + "Acme, Inc." + "Sr. Eng!" -> "Jane_Doe_Acme_Inc_Sr_Eng.pdf".
Distinct inputs may map to the same name; nothing here prevents that.
"""

import re

UNSAFE_CHARACTERS = re.compile(r"[^A-Za-z0-9]")
UNDERSCORE_RUNS = re.compile(r"_+")


def sanitize_filename_part(text: str) -> str:
    """
    Make one filename component filesystem-safe.

    Every character outside [A-Za-z0-9] becomes "_", runs of "_" collapse to
    one, and leading/trailing "_" are stripped.
    """
    text = UNSAFE_CHARACTERS.sub("_", text)
    text = UNDERSCORE_RUNS.sub("_", text)
    return text.strip("_")


def derive_filename(profile_name: str, company: str, role: str) -> str:
    """Join the sanitized profile name, company and role with "_" and add ".pdf"."""
    parts = (sanitize_filename_part(part) for part in (profile_name, company, role))
    return "_".join(parts) + ".pdf"


def content_disposition(filename: str) -> str:
    """Content-Disposition header value that makes clients download the file."""
    return f'attachment; filename="{filename}"'
