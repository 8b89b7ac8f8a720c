# dnsimple

A Python client for part of the DNSimple v2 HTTP API. It uses only the
standard library. It can also parse the event payloads that DNSimple posts
to your webhooks.

## What it covers

| Module                     | Service class               | Endpoints                                                        |
|----------------------------|-----------------------------|------------------------------------------------------------------|
| `dnsimple.zones`           | `ZonesService`              | zones, zone files, DNS activation, distribution checks, records  |
| `dnsimple.templates`       | `TemplatesService`          | templates, template records, applying a template to a domain     |
| `dnsimple.services`        | `ServicesService`           | one-click services, applying and unapplying them on domains      |
| `dnsimple.tlds`            | `TldsService`               | supported TLDs and their extended attributes                     |
| `dnsimple.registrar`       | `RegistrarService`          | transfer lock, registrant changes, WHOIS privacy                 |
| `dnsimple.vanity`          | `VanityNameServersService`  | enabling and disabling vanity name servers                       |
| `dnsimple.webhooks`        | `WebhooksService`           | listing, creating, fetching and deleting webhooks                |
| `dnsimple.webhook.events`  |                             | parsing incoming webhook event payloads                          |

The shared pieces are in `dnsimple.api`:

- `Client(token=None, *, base_url=..., user_agent=..., transport=None)`
  sends JSON requests. It has `request`, `get`, `post`, `put`, `patch` and
  `delete`, and sends an `Authorization: Bearer <token>` header when a token
  is given. The transport is a callable `(method, url, headers, body)` that
  returns an `HttpResponse`. The default transport is `urllib_transport`.
  To test without a network, pass in your own transport.
- `ListOptions(page, per_page, sort)` holds paging and sorting.
  `add_url_query_options` adds the options that are set to a path as a
  query string. `versioned` puts `/v2` in front of a path.
- `Response` holds the decoded `data`, the `pagination` of a list call (a
  `Pagination`) and the raw `http_response`.
- `APIError` is raised for any status outside 2xx. It has `message`,
  `attribute_errors` and `status_code`, and the raw `response`.
- `Model` is the base of every API object. `Model.from_dict` builds one from
  decoded JSON and ignores unknown keys. `Model.to_dict` gives back the JSON
  body that is sent. Fields that are empty are left out of that body.

## Calling the API

```python
from dnsimple.api import Client
from dnsimple.zones import ZonesService, ZoneRecordAttributes, ZoneRecordListOptions

client = Client(token="token")
zones = ZonesService(client)

listing = zones.list_records("1010", "example.com", ZoneRecordListOptions(type="A", page=2))
for record in listing.data:
    print(record.id, record.name, record.content)
print(listing.pagination.total_entries)

created = zones.create_record(
    "1010", "example.com", ZoneRecordAttributes(name="", type="A", content="127.0.0.1")
)
```

In `ZoneRecordAttributes`, a `name` of `None` leaves the name out of the
request. An empty string `""` is sent as it is and means the zone apex.

Calls that delete or apply something return a `Response` whose `data` is
`None`: `delete_record`, `delete_template`, `apply_template`,
`apply_service`, `unapply_service`, `disable_vanity_name_servers` and the
like. `WebhooksService.list_webhooks` accepts options but ignores them,
because the webhook list is not paged.

The path helpers can also be called on their own:

```python
from dnsimple.api import versioned
from dnsimple.zones import zone_record_path

versioned(zone_record_path("1010", "example.com", 1))
# '/v2/1010/zones/example.com/records/1'
```

## Reading webhook events

```python
from dnsimple.webhook.events import parse_event, WebhookEventData

event = parse_event(request_body)
print(event.name, event.account.display)

if isinstance(event.data, WebhookEventData):
    print(event.data.webhook.url)
```

`parse_event` takes bytes or a string. It picks the data class from the
event name, for example `ZoneRecordEventData` for `zone_record.create`.
A name it does not know gives a `GenericEventData`, which is a plain dict
of the `data` object. The original bytes are kept in `event.payload`. A
payload that is not a valid event raises `ValueError`.

Zones, zone records, webhooks, WHOIS privacy and users are decoded into
their model classes. Accounts, invitations, domains, contacts,
certificates, delegation signer records and e-mail forwards stay plain
dicts.

## What it does not do

The package does not cover every part of the API. There are no calls for
accounts and identity, domains, contacts, domain registration, renewal or
transfer, certificates, DNSSEC or e-mail forwards. There is no
command-line tool. It does not retry or throttle requests, and it does not
fetch further pages by itself.

## Running the tests

```
pip install -e ".[test]"
pytest
```