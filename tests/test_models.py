import pytest

from artifact_uploader.errors import MissingFieldError
from artifact_uploader.models import CreatedSharedLink, ListSharedLinksResult, SharedLink


def _link(url, tag):
    return {
        "id": "id:" + url[-5:],
        "name": "report.pdf",
        "url": url,
        "path_lower": "/report.pdf",
        "link_permissions": {"resolved_visibility": {".tag": tag}},
    }


def test_shared_link_reads_resolved_visibility():
    link = SharedLink.from_json(_link("https://dropbox.com/s/a?dl=0", "team_only"))
    assert link.visibility == "team_only"
    assert not link.is_public
    assert link.path_lower == "/report.pdf"


def test_first_public_keeps_response_order():
    result = ListSharedLinksResult.from_json({
        "links": [
            _link("https://dropbox.com/s/team?dl=0", "team_only"),
            _link("https://dropbox.com/s/one?dl=0", "public"),
            _link("https://dropbox.com/s/two?dl=0", "public"),
        ]
    })
    assert result.first_public().url == "https://dropbox.com/s/one?dl=0"


def test_missing_links_key_means_no_links():
    result = ListSharedLinksResult.from_json({})
    assert result.links == []
    assert result.first_public() is None


def test_link_without_permissions_is_not_public():
    assert not SharedLink.from_json({"url": "https://dropbox.com/s/a"}).is_public


def test_created_link_requires_string_url():
    assert CreatedSharedLink.from_json({"url": "https://dropbox.com/s/abc?dl=0"}).url.endswith("?dl=0")
    for payload in ({}, {"url": 42}, ["url"]):
        with pytest.raises(MissingFieldError) as excinfo:
            CreatedSharedLink.from_json(payload)
        assert excinfo.value.field == "url"


def test_null_links_means_no_links():
    assert ListSharedLinksResult.from_json({"links": None}).links == []


@pytest.mark.parametrize("payload", [{"links": ["x"]}, {"links": "abc"}, {"links": [{"link_permissions": "public"}]}])
def test_malformed_links_raise_missing_field(payload):
    with pytest.raises(MissingFieldError):
        ListSharedLinksResult.from_json(payload)


def test_null_fields_decode_as_empty():
    link = SharedLink.from_json({
        "id": None,
        "url": None,
        "link_permissions": {"resolved_visibility": {".tag": "public"}},
    })
    assert link.url == ""
    assert link.id == ""
    assert link.is_public


def test_non_string_url_is_rejected():
    with pytest.raises(MissingFieldError) as excinfo:
        SharedLink.from_json({"url": 7})
    assert excinfo.value.field == "url"
