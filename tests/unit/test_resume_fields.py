"""Unit tests for the ResumeFields input aggregate."""

import dataclasses

import pytest

from resumetex.contexts.intake.resume_fields import JobEntry, ResumeFields


@pytest.mark.unit
def test_from_mapping_accepts_camel_and_snake_case():
    camel = ResumeFields.from_mapping({"fullName": "Jane Doe", "skills": "Go"})
    snake = ResumeFields.from_mapping({"full_name": "Jane Doe", "skills": "Go"})

    assert camel == snake
    assert camel.full_name == "Jane Doe"


@pytest.mark.unit
def test_from_mapping_ignores_unknown_keys_and_none():
    fields = ResumeFields.from_mapping(
        {"fullName": None, "jobDescription": "ignored", "summary": "Hi"}
    )

    assert fields.full_name is None
    assert fields.summary == "Hi"


@pytest.mark.unit
def test_from_mapping_converts_non_strings():
    assert ResumeFields.from_mapping({"certifications": 2022}).certifications == "2022"


@pytest.mark.unit
def test_records_are_immutable():
    job = JobEntry(title="Engineer")
    with pytest.raises(dataclasses.FrozenInstanceError):
        job.title = "Manager"
