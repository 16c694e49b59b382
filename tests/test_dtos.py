from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from edgestore_sdk import ComparisonOperators, FileInfoForUpload, ListFilesFilter, Pagination, PathSegment
from edgestore_sdk.application.dtos.files import to_wire


def test_filter_serializes_wire_names():
    f = ListFilesFilter(
        or_=[
            ListFilesFilter(path={"type": "post"}),
            ListFilesFilter(metadata={"name": ComparisonOperators[str](starts_with="img_")}),
        ],
        uploaded_at=ComparisonOperators[datetime](
            between=(datetime(2024, 1, 1, 0, 0), datetime(2024, 2, 1, 0, 0)),
        ),
    )

    assert to_wire(f) == {
        "OR": [
            {"path": {"type": "post"}},
            {"metadata": {"name": {"startsWith": "img_"}}},
        ],
        "uploadedAt": {"between": ["2024-01-01T00:00:00Z", "2024-02-01T00:00:00Z"]},
    }


def test_filter_accepts_wire_shaped_mapping():
    f = ListFilesFilter.model_validate({
        "AND": [{"path": {"author": {"neq": "bob"}}}],
        "uploadedAt": {"gte": "2024-01-01T00:00:00"},
    })
    assert f.and_[0].path["author"].neq == "bob"
    assert f.uploaded_at.gte == datetime(2024, 1, 1)


def test_file_info_for_upload_from_camel_case():
    info = FileInfoForUpload.model_validate({
        "size": 10,
        "extension": "png",
        "isPublic": True,
        "path": [{"key": "type", "value": "post"}],
        "replaceTargetUrl": "https://files/old.png",
    })
    assert info.is_public is True
    assert info.path == [PathSegment(key="type", value="post")]
    assert info.replace_target_url == "https://files/old.png"
    assert info.metadata is None


def test_to_wire_passes_plain_values_through():
    raw = {"path": {"type": {"eq": "post"}}}
    assert to_wire(raw) is raw


def test_naive_and_utc_datetimes_serialize_identically():
    naive = ListFilesFilter(uploaded_at=datetime(2024, 1, 1))
    aware = ListFilesFilter(uploaded_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
    assert to_wire(naive) == to_wire(aware) == {"uploadedAt": "2024-01-01T00:00:00Z"}


def test_non_utc_offset_is_kept():
    tz = timezone(timedelta(hours=2))
    f = ListFilesFilter(uploaded_at=ComparisonOperators[datetime](lt=datetime(2024, 1, 1, 12, tzinfo=tz)))
    assert to_wire(f) == {"uploadedAt": {"lt": "2024-01-01T12:00:00+02:00"}}


def test_pagination_requires_both_fields():
    with pytest.raises(ValidationError):
        Pagination(current_page=1)
    with pytest.raises(ValidationError):
        Pagination(page_size=10)
    assert to_wire(Pagination(current_page=3, page_size=50)) == {"currentPage": 3, "pageSize": 50}
