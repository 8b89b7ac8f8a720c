import json
from urllib.parse import parse_qs, urlsplit

import pytest

from dnsimple.api import APIError, Client, HttpResponse, ListOptions, Pagination
from dnsimple.services import (
    DomainServiceSettings,
    Service,
    ServiceSetting,
    ServicesService,
    domain_services_path,
    service_path,
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
    def headers(self):
        return self.calls[-1][2]


def make_service(transport):
    return ServicesService(Client(token="token", transport=transport))


SERVICE_1 = {
    "id": 1,
    "name": "Service 1",
    "sid": "service1",
    "description": "First service example.",
    "setup_description": None,
    "requires_setup": True,
    "default_subdomain": None,
    "created_at": "2014-02-14T19:15:19Z",
    "updated_at": "2016-03-04T09:23:27Z",
    "settings": [
        {
            "name": "username",
            "label": "Service 1 Account Username",
            "append": ".service1.com",
            "description": "Your Service 1 username is used to connect services to your account.",
            "example": "username",
            "password": False,
        }
    ],
}

LIST_SERVICES = {
    "data": [SERVICE_1, {"id": 2, "name": "Service 2", "sid": "service2"}],
    "pagination": {"current_page": 1, "per_page": 30, "total_entries": 2, "total_pages": 1},
}

APPLIED_SERVICES = {
    "data": [{"id": 1, "name": "WordPress", "sid": "wordpress"}],
    "pagination": {"current_page": 1, "per_page": 30, "total_entries": 1, "total_pages": 1},
}


def test_service_path():
    assert service_path("") == "/services"
    assert service_path("name") == "/services/name"


def test_domain_services_path():
    assert domain_services_path("1010", "example.com", "") == "/1010/domains/example.com/services"
    assert domain_services_path("1010", "example.com", "1") == "/1010/domains/example.com/services/1"


def test_list_services():
    transport = FakeTransport(body=LIST_SERVICES)
    response = make_service(transport).list_services(None)
    assert transport.method == "GET"
    assert transport.path == "/v2/services"
    assert transport.query == {}
    assert transport.headers["Accept"] == "application/json"
    assert response.pagination == Pagination(current_page=1, per_page=30, total_pages=1, total_entries=2)
    assert len(response.data) == 2
    assert response.data[0].id == 1
    assert response.data[0].name == "Service 1"


def test_list_services_with_options():
    transport = FakeTransport(body=LIST_SERVICES)
    make_service(transport).list_services(ListOptions(page=2, per_page=20))
    assert transport.query == {"page": ["2"], "per_page": ["20"]}


def test_get_service():
    transport = FakeTransport(body={"data": SERVICE_1})
    response = make_service(transport).get_service("1")
    assert transport.method == "GET"
    assert transport.path == "/v2/services/1"
    assert response.data == Service(
        id=1,
        sid="service1",
        name="Service 1",
        description="First service example.",
        setup_description="",
        requires_setup=True,
        default_subdomain="",
        created_at="2014-02-14T19:15:19Z",
        updated_at="2016-03-04T09:23:27Z",
        settings=[
            ServiceSetting(
                name="username",
                label="Service 1 Account Username",
                append=".service1.com",
                description="Your Service 1 username is used to connect services to your account.",
                example="username",
                password=False,
            )
        ],
    )


def test_applied_services():
    transport = FakeTransport(body=APPLIED_SERVICES)
    response = make_service(transport).applied_services("1010", "example.com", None)
    assert transport.method == "GET"
    assert transport.path == "/v2/1010/domains/example.com/services"
    assert transport.query == {}
    assert response.pagination == Pagination(current_page=1, per_page=30, total_pages=1, total_entries=1)
    assert len(response.data) == 1
    assert response.data[0].id == 1
    assert response.data[0].sid == "wordpress"


def test_apply_service():
    transport = FakeTransport()
    settings = DomainServiceSettings(settings={"app": "foo"})
    response = make_service(transport).apply_service("1010", "service1", "example.com", settings)
    assert transport.method == "POST"
    assert transport.path == "/v2/1010/domains/example.com/services/service1"
    assert json.loads(transport.calls[-1][3]) == {"settings": {"app": "foo"}}
    assert response.data is None
    assert response.http_response.status_code == 200


def test_unapply_service():
    transport = FakeTransport()
    response = make_service(transport).unapply_service("1010", "service1", "example.com")
    assert transport.method == "DELETE"
    assert transport.path == "/v2/1010/domains/example.com/services/service1"
    assert response.data is None


def test_get_service_not_found():
    transport = FakeTransport(status=404, body={"message": "Service `9` not found"})
    with pytest.raises(APIError) as info:
        make_service(transport).get_service("9")
    assert info.value.status_code == 404