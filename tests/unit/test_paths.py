"""Tests for URI assembly."""

from datetime import date, datetime

from congress_client.paths import build_uri, redact_uri, resource_path

ROOT = "https://api.example.com/svc/politics/v3/us/legislative/congress"


class TestResourcePath:
    def test_format_suffix_on_last_segment(self):
        assert resource_path(ROOT, 113, "house", "members", fmt="json") == f"{ROOT}/113/house/members.json"

    def test_xml_suffix(self):
        assert resource_path(ROOT, "members", "new", fmt="xml") == f"{ROOT}/members/new.xml"

    def test_trailing_slash_on_root(self):
        assert resource_path(ROOT + "/", "states", fmt="json") == f"{ROOT}/states.json"

    def test_segments_are_encoded(self):
        assert resource_path(ROOT, "members", "a/b c", fmt="json") == f"{ROOT}/members/a%2Fb%20c.json"

    def test_dates_use_iso_format(self):
        path = resource_path(ROOT, "house", "votes", date(2013, 1, 1), date(2013, 1, 15), fmt="json")
        assert path == f"{ROOT}/house/votes/2013-01-01/2013-01-15.json"


class TestBuildUri:
    def test_key_only(self):
        assert build_uri(f"{ROOT}/members/new.json", "abc") == f"{ROOT}/members/new.json?api-key=abc"

    def test_empty_params_add_nothing(self):
        assert build_uri("p", "abc", {}) == "p?api-key=abc"

    def test_params_follow_key_in_order(self):
        assert build_uri("p", "abc", {"state": "NY", "district": 10}) == "p?api-key=abc&state=NY&district=10"

    def test_params_are_url_encoded(self):
        assert build_uri("p", "abc", {"state": "New York", "q": "a&b"}) == "p?api-key=abc&state=New+York&q=a%26b"

    def test_idempotent(self):
        params = {"state": "NY", "district": "10"}
        assert build_uri("p", "abc", params) == build_uri("p", "abc", params)


class TestRedact:
    def test_hides_key(self):
        assert redact_uri("p?api-key=secret&state=NY") == "p?api-key=***&state=NY"

    def test_no_key(self):
        assert redact_uri("p?state=NY") == "p?state=NY"


class TestDatetimeSegment:
    def test_datetime_uses_date_part(self):
        path = resource_path(ROOT, "senate", "votes", datetime(2013, 1, 1, 12, 30), "2013-01-15", fmt="json")
        assert path == f"{ROOT}/senate/votes/2013-01-01/2013-01-15.json"
