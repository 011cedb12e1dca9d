"""Unit tests for the User domain entity."""

from datetime import UTC, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from user_lookup.core.entities.user import User
from user_lookup.core.rows.user_row import UserRow


class TestUser:
    """Test the User domain entity."""

    def test_all_fields_optional(self):
        """A user can be created without any field set."""
        user = User()

        assert user.id is None
        assert user.email is None
        assert user.name is None
        assert user.timestamp is None
        assert user.local_date_time is None
        assert user.zoned_date_time is None
        assert user.instant is None

    def test_instant_is_normalized_to_utc(self):
        """Aware instants are converted to UTC."""
        paris = timezone(timedelta(hours=1))
        user = User(instant=datetime(2024, 1, 1, 1, 0, tzinfo=paris))

        assert user.instant == datetime(2024, 1, 1, 0, 0, tzinfo=UTC)
        assert user.instant.utcoffset() == timedelta(0)

    def test_naive_instant_is_taken_as_utc(self):
        user = User(instant=datetime(2024, 1, 1))

        assert user.instant == datetime(2024, 1, 1, tzinfo=UTC)

    def test_instant_parsed_from_iso_string(self):
        user = User(instant="2024-01-01T00:00:00Z")

        assert user.instant == datetime(2024, 1, 1, tzinfo=UTC)

    def test_time_fields_are_not_reconciled(self):
        """The legacy time fields may disagree with each other and with instant."""
        user = User(
            timestamp=datetime(2020, 5, 5, 12, 0),
            local_date_time=datetime(2021, 6, 6, 12, 0),
            zoned_date_time=datetime(2022, 7, 7, 12, 0, tzinfo=timezone(timedelta(hours=-5))),
            instant=datetime(2024, 1, 1, tzinfo=UTC),
        )

        assert user.timestamp == datetime(2020, 5, 5, 12, 0)
        assert user.local_date_time == datetime(2021, 6, 6, 12, 0)
        assert user.zoned_date_time.utcoffset() == timedelta(hours=-5)
        assert user.instant == datetime(2024, 1, 1, tzinfo=UTC)

    @pytest.mark.parametrize("field", ["timestamp", "local_date_time"])
    def test_local_fields_reject_an_offset(self, field: str):
        with pytest.raises(ValidationError):
            User(**{field: datetime(2024, 1, 1, tzinfo=UTC)})

    def test_zoned_field_requires_an_offset(self):
        with pytest.raises(ValidationError):
            User(zoned_date_time=datetime(2024, 1, 1))

    def test_json_uses_camel_case_time_keys(self):
        user = User(
            id=1,
            email="a@x.com",
            name="Ann",
            local_date_time=datetime(2024, 1, 1, 9, 30),
            instant=datetime(2024, 1, 1, tzinfo=UTC),
        )

        data = user.model_dump(mode="json", by_alias=True)

        assert data == {
            "id": 1,
            "email": "a@x.com",
            "name": "Ann",
            "timestamp": None,
            "localDateTime": "2024-01-01T09:30:00",
            "zonedDateTime": None,
            "instant": "2024-01-01T00:00:00Z",
        }

    def test_legacy_time_fields_marked_deprecated_in_schema(self):
        properties = User.model_json_schema()["properties"]

        assert properties["timestamp"]["deprecated"] is True
        assert properties["local_date_time"]["deprecated"] is True
        assert properties["zoned_date_time"]["deprecated"] is True
        assert "deprecated" not in properties["instant"]

    def test_representation_lists_every_field(self):
        """Should have a string representation carrying every field."""
        user = User(id=7, email="a@x.com", name="Ann")

        text = repr(user)
        assert text.startswith("User(")
        for fragment in (
            "id=7",
            "email='a@x.com'",
            "name='Ann'",
            "timestamp=None",
            "local_date_time=None",
            "zoned_date_time=None",
            "instant=None",
        ):
            assert fragment in text

    def test_built_from_row(self):
        row = UserRow(id=3, email="b@x.com", name="Bob")

        user = User.model_validate(row, from_attributes=True)

        assert user.id == 3
        assert user.email == "b@x.com"
        assert user.name == "Bob"
