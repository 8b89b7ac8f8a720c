import json
from urllib.parse import parse_qs, urlsplit

from dnsimple.api import Client, HttpResponse, ListOptions, Pagination
from dnsimple.templates import (
    Template,
    TemplateRecord,
    TemplatesService,
    template_path,
    template_record_path,
)


class FakeTransport:
    def __init__(self, status=200, body=None):
        self.status = status
        self.body = body
        self.calls = []

    def __call__(self, method, url, headers, body):
        self.calls.append((method, url, dict(headers), body))
        payload = b"" if self.body is None else json.dumps(self.body).encode()
        return HttpResponse(self.status, {"Content-Type": "application/json"}, payload)

    @property
    def method(self):
        return self.calls[-1][0]

    @property
    def path(self):
        return urlsplit(self.calls[-1][1]).path

    @property
    def query(self):
        return parse_qs(urlsplit(self.calls[-1][1]).query)

    @property
    def json_body(self):
        return json.loads(self.calls[-1][3])


def make_service(transport):
    return TemplatesService(Client(token="token", transport=transport))


ALPHA = {
    "id": 1,
    "account_id": 1010,
    "name": "Alpha",
    "sid": "alpha",
    "description": "An alpha template.",
    "created_at": "2016-03-22T11:08:58Z",
    "updated_at": "2016-03-22T11:08:58Z",
}

LIST_TEMPLATES = {
    "data": [ALPHA, {"id": 2, "account_id": 1010, "name": "Beta", "sid": "beta"}],
    "pagination": {"current_page": 1, "per_page": 30, "total_entries": 2, "total_pages": 1},
}

LIST_RECORDS = {
    "data": [
        {"id": 296, "template_id": 268, "name": "", "content": "192.168.1.1", "ttl": 3600, "priority": None, "type": "A"},
        {"id": 298, "template_id": 268, "name": "www", "content": "example.com", "ttl": 3600, "priority": None, "type": "CNAME"},
    ],
    "pagination": {"current_page": 1, "per_page": 30, "total_entries": 2, "total_pages": 1},
}

MX_RECORD = {
    "id": 301,
    "template_id": 268,
    "name": "",
    "content": "mx.example.com",
    "ttl": 600,
    "priority": 10,
    "type": "MX",
    "created_at": "2016-05-03T08:03:26Z",
    "updated_at": "2016-05-03T08:03:26Z",
}

WANT_ALPHA = Template(
    id=1,
    sid="alpha",
    account_id=1010,
    name="Alpha",
    description="An alpha template.",
    created_at="2016-03-22T11:08:58Z",
    updated_at="2016-03-22T11:08:58Z",
)


def test_template_path():
    assert template_path("1010", "") == "/1010/templates"
    assert template_path("1010", "1") == "/1010/templates/1"


def test_template_record_path():
    assert template_record_path("1010", "1", 0) == "/1010/templates/1/records"
    assert template_record_path("1010", "1", 2) == "/1010/templates/1/records/2"


def test_list_templates():
    transport = FakeTransport(body=LIST_TEMPLATES)
    response = make_service(transport).list_templates("1010", None)
    assert transport.method == "GET"
    assert transport.path == "/v2/1010/templates"
    assert transport.query == {}
    assert response.pagination == Pagination(current_page=1, per_page=30, total_pages=1, total_entries=2)
    assert len(response.data) == 2
    assert response.data[0].id == 1
    assert response.data[0].name == "Alpha"


def test_list_templates_with_options():
    transport = FakeTransport(body=LIST_TEMPLATES)
    make_service(transport).list_templates("1010", ListOptions(page=2, per_page=20))
    assert transport.query == {"page": ["2"], "per_page": ["20"]}


def test_create_template():
    transport = FakeTransport(status=201, body={"data": {"id": 1, "account_id": 1010, "name": "Beta", "sid": "beta"}})
    response = make_service(transport).create_template("1010", Template(name="Beta"))
    assert transport.method == "POST"
    assert transport.path == "/v2/1010/templates"
    assert transport.json_body == {"name": "Beta"}
    assert response.data.id == 1
    assert response.data.name == "Beta"


def test_get_template():
    transport = FakeTransport(body={"data": ALPHA})
    response = make_service(transport).get_template("1010", "1")
    assert transport.method == "GET"
    assert transport.path == "/v2/1010/templates/1"
    assert response.data == WANT_ALPHA


def test_update_template():
    transport = FakeTransport(body={"data": ALPHA})
    response = make_service(transport).update_template("1010", "1", Template(name="Alpha"))
    assert transport.method == "PATCH"
    assert transport.path == "/v2/1010/templates/1"
    assert transport.json_body == {"name": "Alpha"}
    assert response.data == WANT_ALPHA


def test_delete_template():
    transport = FakeTransport(status=204)
    response = make_service(transport).delete_template("1010", "1")
    assert transport.method == "DELETE"
    assert transport.path == "/v2/1010/templates/1"
    assert response.data is None


def test_apply_template():
    transport = FakeTransport(status=204)
    response = make_service(transport).apply_template("1010", "1", "example.com")
    assert transport.method == "POST"
    assert transport.path == "/v2/1010/domains/example.com/templates/1"
    assert response.http_response.status_code == 204


def test_list_template_records():
    transport = FakeTransport(body=LIST_RECORDS)
    response = make_service(transport).list_template_records("1010", "1", None)
    assert transport.method == "GET"
    assert transport.path == "/v2/1010/templates/1/records"
    assert transport.query == {}
    assert response.pagination == Pagination(current_page=1, per_page=30, total_pages=1, total_entries=2)
    assert len(response.data) == 2
    assert response.data[0].id == 296
    assert response.data[0].content == "192.168.1.1"


def test_list_template_records_with_options():
    transport = FakeTransport(body=LIST_RECORDS)
    make_service(transport).list_template_records("1010", "1", ListOptions(page=2, per_page=20))
    assert transport.query == {"page": ["2"], "per_page": ["20"]}


def test_create_template_record():
    body = {"data": {"id": 300, "template_id": 268, "name": "", "content": "mx.example.com", "ttl": 600, "priority": 10, "type": "MX"}}
    transport = FakeTransport(status=201, body=body)
    response = make_service(transport).create_template_record("1010", "1", TemplateRecord(name="Beta"))
    assert transport.method == "POST"
    assert transport.path == "/v2/1010/templates/1/records"
    assert transport.json_body == {"name": "Beta"}
    assert response.data.id == 300
    assert response.data.content == "mx.example.com"


def test_template_record_keeps_blank_name():
    assert TemplateRecord(content="mx.example.com").to_dict() == {"name": "", "content": "mx.example.com"}


def test_get_template_record():
    transport = FakeTransport(body={"data": MX_RECORD})
    response = make_service(transport).get_template_record("1010", "1", 2)
    assert transport.method == "GET"
    assert transport.path == "/v2/1010/templates/1/records/2"
    assert response.data == TemplateRecord(
        id=301,
        template_id=268,
        name="",
        content="mx.example.com",
        ttl=600,
        priority=10,
        type="MX",
        created_at="2016-05-03T08:03:26Z",
        updated_at="2016-05-03T08:03:26Z",
    )


def test_delete_template_record():
    transport = FakeTransport(status=204)
    response = make_service(transport).delete_template_record("1010", "1", 2)
    assert transport.method == "DELETE"
    assert transport.path == "/v2/1010/templates/1/records/2"
    assert response.data is None