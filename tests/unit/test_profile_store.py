"""Unit tests for ProfileStore."""

import json

import pytest

from press.contexts.profiles import (
    Profile,
    ProfileFormatError,
    ProfileNotFoundError,
    ProfileStore,
)


@pytest.mark.unit
def test_load_json_profile(profile_store):
    """Test loading a JSON profile record."""
    profile = profile_store.load("jane_doe")

    assert isinstance(profile, Profile)
    assert profile.profile_id == "jane_doe"
    assert profile.name == "Jane Doe"
    assert profile.email == "jane.doe@example.com"
    assert [job.company for job in profile.experience] == ["Northwind Traders", "Contoso Ltd."]
    assert profile.education[0].school == "University of Washington"


@pytest.mark.unit
def test_load_yaml_profile(profile_store):
    """Test loading a YAML profile record with an 'institution' education field."""
    profile = profile_store.load("solo_dev")

    assert profile.name == "Sam Rivera"
    assert profile.phone == ""
    assert profile.experience[0].title == ""
    assert profile.experience[0].start_date == "2019"
    assert profile.education[0].school == "UT Austin"


@pytest.mark.unit
def test_profile_caching(profile_store):
    """Test that profiles are cached after first load."""
    assert not profile_store.is_cached("jane_doe")

    first = profile_store.load("jane_doe")
    assert profile_store.is_cached("jane_doe")

    second = profile_store.load("jane_doe")
    assert first is second


@pytest.mark.unit
def test_cached_profile_survives_record_deletion(tmp_path):
    """Test that a cached profile is served without rereading its record."""
    record = tmp_path / "temp.json"
    record.write_text(json.dumps({"name": "Temp Person"}))
    store = ProfileStore(tmp_path)

    store.load("temp")
    record.unlink()

    assert store.load("temp").name == "Temp Person"


@pytest.mark.unit
def test_missing_profile_not_cached(profile_store):
    """Test that an unknown profile raises and leaves no cache entry."""
    with pytest.raises(ProfileNotFoundError) as exc_info:
        profile_store.load("nobody")

    assert exc_info.value.profile_id == "nobody"
    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == 'Profile "nobody" not found'
    assert not profile_store.is_cached("nobody")
    assert profile_store._cache == {}


@pytest.mark.unit
def test_lookup_is_case_sensitive(profile_store):
    """Test that identifiers must match the record name exactly."""
    with pytest.raises(ProfileNotFoundError):
        profile_store.load("Jane_Doe")


@pytest.mark.unit
@pytest.mark.parametrize("profile_id", ["../profiles/jane_doe", "jane_doe.json", ""])
def test_path_like_identifiers_not_found(profile_store, profile_id):
    """Test that only bare record identifiers match."""
    with pytest.raises(ProfileNotFoundError):
        profile_store.load(profile_id)


@pytest.mark.unit
def test_undecodable_profile(tmp_path):
    """Test that a broken record raises ProfileFormatError and is not cached."""
    (tmp_path / "broken.json").write_text("{not json")
    store = ProfileStore(tmp_path)

    with pytest.raises(ProfileFormatError) as exc_info:
        store.load("broken")

    assert exc_info.value.status_code == 500
    assert exc_info.value.record_path == tmp_path / "broken.json"
    assert not store.is_cached("broken")


@pytest.mark.unit
def test_non_object_history_rejected(tmp_path):
    """Test that history fields must be lists of objects."""
    (tmp_path / "odd.json").write_text(json.dumps({"name": "Odd", "experience": ["not a job"]}))
    store = ProfileStore(tmp_path)

    with pytest.raises(ProfileFormatError):
        store.load("odd")


@pytest.mark.unit
def test_missing_directory_means_no_profiles(tmp_path):
    """Test that a missing profiles directory behaves as an empty store."""
    store = ProfileStore(tmp_path / "absent")

    assert store.list_profiles() == []
    with pytest.raises(ProfileNotFoundError):
        store.load("jane_doe")


@pytest.mark.unit
def test_list_profiles(profile_store):
    """Test listing stored profiles sorted by identifier."""
    summaries = profile_store.list_profiles()

    assert [(s.id, s.name) for s in summaries] == [
        ("jane_doe", "Jane Doe"),
        ("solo_dev", "Sam Rivera"),
    ]


@pytest.mark.unit
def test_list_profiles_skips_broken_records(tmp_path):
    """Test that an unreadable record does not hide the others."""
    (tmp_path / "good.json").write_text(json.dumps({"name": "Good"}))
    (tmp_path / "bad.json").write_text("[")
    store = ProfileStore(tmp_path)

    assert [s.id for s in store.list_profiles()] == ["good"]


@pytest.mark.unit
def test_display_name_falls_back_to_identifier(tmp_path):
    """Test that a profile without a name is listed under its identifier."""
    (tmp_path / "anon.json").write_text(json.dumps({"email": "a@example.com"}))
    store = ProfileStore(tmp_path)

    assert store.load("anon").display_name == "anon"


@pytest.mark.unit
def test_clear_cache(profile_store):
    """Test cache clearing."""
    profile_store.load("jane_doe")
    assert len(profile_store._cache) == 1

    profile_store.clear_cache()
    assert len(profile_store._cache) == 0
