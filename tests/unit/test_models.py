"""Unit tests for the record and result models."""

import pytest
from pydantic import ValidationError

from command_search.models.record import Record
from command_search.models.response import RankedResult


class TestRecord:
    """Test cases for the Record model."""

    def test_defaults(self):
        """Test optional fields default to empty."""
        record = Record(name="Git Status", value="git status")

        assert record.description == ""
        assert record.tags == []
        assert record.created_at is None
        assert record.id

    def test_generated_ids_are_unique(self):
        """Test that records without an id get distinct ones."""
        first = Record(name="a", value="a")
        second = Record(name="a", value="a")

        assert first.id != second.id

    def test_null_optional_fields(self):
        """Test that null description and tags are treated as empty."""
        record = Record.model_validate(
            {"name": "List Files", "value": "ls -la", "description": None, "tags": None}
        )

        assert record.description == ""
        assert record.tags == []

    def test_tags_cleaned(self):
        """Test that tags are stripped and blank tags dropped."""
        record = Record(name="Up", value="docker-compose up", tags=[" docker ", "", "  ", "compose"])

        assert record.tags == ["docker", "compose"]

    @pytest.mark.parametrize("payload", [
        {"value": "ls -la"},
        {"name": "List Files"},
        {"name": "", "value": "ls -la"},
        {"name": "List Files", "value": ""},
        {"name": "   ", "value": "ls -la"},
        {"name": "List Files", "value": " \t "},
    ])
    def test_required_fields(self, payload):
        """Test that name and value are required and non-empty."""
        with pytest.raises(ValidationError):
            Record.model_validate(payload)

    def test_required_fields_trimmed(self):
        """Test that name and command text are trimmed."""
        record = Record(name="  List Files ", value=" ls -la\n")

        assert record.name == "List Files"
        assert record.value == "ls -la"

    def test_frozen(self):
        """Test that records cannot be modified."""
        record = Record(name="Git Status", value="git status")

        with pytest.raises(ValidationError):
            record.name = "Other"


def test_unranked_result():
    """Test that a bare result carries no annotations."""
    result = RankedResult(record=Record(name="Git Status", value="git status"))

    assert result.score is None
    assert result.field_scores is None
    assert result.highlights is None
