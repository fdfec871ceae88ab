"""
Profile Store

Loads profile records from a directory of keyed files and caches them for the
lifetime of the process. Records are named ``<profile_id>.json`` (or
``.yaml``/``.yml``); the file stem is the identifier.
"""

import json
import os
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError

from press.contexts.profiles.exceptions import ProfileFormatError, ProfileNotFoundError
from press.contexts.profiles.logger import _log_debug, _log_info, _log_warning
from press.contexts.profiles.profile_data_structure import Profile, ProfileSummary

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", Path(__file__).resolve().parents[3]))
PROFILES_PATH = Path(os.getenv("PRESS_PROFILES_PATH", PROJECT_ROOT / "data" / "profiles"))

# Checked in order when an identifier has records in several formats
RECORD_SUFFIXES = (".json", ".yaml", ".yml")


class ProfileStore:
    """
    Read-through cache over a directory of profile records.

    Lookup is exact and case-sensitive: an identifier matches only a record
    whose file stem is identical to it. Failed lookups are never cached.

    Concurrent first loads of the same identifier may both read the record;
    the last one to finish wins the cache slot. Both produce equal profiles.
    """

    def __init__(self, profiles_path: Path = None):
        """
        Initialize the profile store.

        Args:
            profiles_path: Directory holding profile records. Defaults to
                           PRESS_PROFILES_PATH from environment
        """
        if profiles_path is None:
            profiles_path = PROFILES_PATH

        self.profiles_path = Path(profiles_path)
        self._cache: Dict[str, Profile] = {}

    def _record_index(self) -> Dict[str, Path]:
        """Map each stored identifier to its record file."""
        index: Dict[str, Path] = {}
        if not self.profiles_path.is_dir():
            _log_warning(f"Profiles directory not found: {self.profiles_path}")
            return index

        for suffix in reversed(RECORD_SUFFIXES):
            for record in self.profiles_path.glob(f"*{suffix}"):
                if record.is_file():
                    index[record.stem] = record
        return index

    def _find_record(self, profile_id: str) -> Optional[Path]:
        # Directory listing instead of path joining keeps the match exact on
        # case-insensitive filesystems and rejects identifiers like "../x"
        return self._record_index().get(profile_id)

    def _read_record(self, profile_id: str, record_path: Path) -> Profile:
        try:
            if record_path.suffix == ".json":
                data = json.loads(record_path.read_text(encoding="utf-8"))
            else:
                data = OmegaConf.to_container(OmegaConf.load(record_path), resolve=True)
            return Profile.from_dict(profile_id, data)
        except (ValueError, OSError, YAMLError, OmegaConfBaseException) as e:
            raise ProfileFormatError(profile_id, record_path, e) from e

    def load(self, profile_id: str) -> Profile:
        """
        Load a profile by identifier, reading its record on first use.

        Args:
            profile_id: Exact, case-sensitive record identifier (e.g., 'jane_doe')

        Returns:
            The cached Profile

        Raises:
            ProfileNotFoundError: If no record has this identifier
            ProfileFormatError: If the record exists but cannot be decoded
        """
        if profile_id in self._cache:
            return self._cache[profile_id]

        record_path = self._find_record(profile_id)
        if record_path is None:
            _log_warning(f'Profile "{profile_id}" not found in {self.profiles_path}')
            raise ProfileNotFoundError(profile_id)

        _log_info(f"Loading profile: {profile_id}")
        profile = self._read_record(profile_id, record_path)
        _log_debug(
            f"  {profile_id}: {len(profile.experience)} jobs, "
            f"{len(profile.education)} education entries"
        )

        self._cache[profile_id] = profile
        return profile

    def list_profiles(self) -> List[ProfileSummary]:
        """
        List every stored profile, sorted by identifier.

        Records that fail to decode are skipped with a warning so one broken
        file does not hide the rest.
        """
        summaries = []
        for profile_id in sorted(self._record_index()):
            try:
                profile = self.load(profile_id)
            except ProfileFormatError as e:
                _log_warning(f"Skipping unreadable profile {profile_id}: {e.original_error}")
                continue
            summaries.append(ProfileSummary(id=profile_id, name=profile.display_name))
        return summaries

    def clear_cache(self):
        """Clear the profile cache."""
        self._cache.clear()

    def is_cached(self, profile_id: str) -> bool:
        """
        Check if a profile is in the cache.

        Args:
            profile_id: Profile identifier

        Returns:
            True if cached, False otherwise
        """
        return profile_id in self._cache
