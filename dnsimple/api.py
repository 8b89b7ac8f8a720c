"""HTTP client, response containers and JSON model support for the API."""

from __future__ import annotations

import dataclasses
import enum
import json
import types
import typing
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Generic, Mapping, TypeVar

API_VERSION = "v2"
DEFAULT_BASE_URL = "https://api.dnsimple.com"
DEFAULT_USER_AGENT = "dnsimple-client"

T = TypeVar("T")


class Omit(enum.Enum):
    """When a model field is left out of its JSON form."""

    EMPTY = "empty"
    NONE = "none"
    NEVER = "never"


def json_field(
    default: Any = dataclasses.MISSING,
    *,
    default_factory: Any = dataclasses.MISSING,
    key: str | None = None,
    omit: Omit | None = None,
) -> Any:
    """Declare a model field with its JSON key and omission policy."""
    metadata: dict[str, Any] = {}
    if key:
        metadata["key"] = key
    if omit is not None:
        metadata["omit"] = omit
    return field(default=default, default_factory=default_factory, metadata=metadata)


@dataclass
class HttpResponse:
    """A raw HTTP response as returned by a transport."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def header(self, name: str, default: str | None = None) -> str | None:
        """Look up a header case-insensitively."""
        wanted = name.lower()
        return next((v for k, v in self.headers.items() if k.lower() == wanted), default)

    def json(self) -> Any:
        """Decode the body as JSON, or return None when it is empty."""
        if not self.body.strip():
            return None
        return json.loads(self.body)


class APIError(Exception):
    """Raised when the API answers with a status outside the 2xx range."""

    def __init__(self, response: HttpResponse):
        self.response = response
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if not isinstance(payload, dict):
            payload = {}
        self.message: str = payload.get("message") or f"HTTP {response.status_code}"
        self.attribute_errors: dict[str, list[str]] = payload.get("errors") or {}
        super().__init__(f"{response.status_code}: {self.message}")

    @property
    def status_code(self) -> int:
        return self.response.status_code


_MODELS: dict[str, list[type]] = {}

_LIST_PREFIXES = ("list[", "List[", "typing.List[")
_DICT_PREFIXES = ("dict[", "Dict[", "typing.Dict[", "Mapping[", "typing.Mapping[")
_OPTIONAL_PREFIXES = ("Optional[", "typing.Optional[")


def _split_union(text: str) -> list[str]:
    """Split an annotation on its top-level '|' separators."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in text:
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        if char == "|" and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    parts.append("".join(current).strip())
    return [p for p in parts if p]


def _find_model(owner: type, name: str) -> type | None:
    candidates = _MODELS.get(name.rsplit(".", 1)[-1])
    if not candidates:
        return None
    same_module = [c for c in candidates if c.__module__ == owner.__module__]
    return (same_module or candidates)[0]


def _decode_text(owner: type, hint: str, value: Any) -> Any:
    hint = hint.strip().strip("'\"")
    for prefix in _OPTIONAL_PREFIXES:
        if hint.startswith(prefix) and hint.endswith("]"):
            hint = hint[len(prefix):-1]
            break
    parts = [p for p in _split_union(hint) if p != "None"]
    if len(parts) != 1:
        return value
    hint = parts[0]
    for prefix in _LIST_PREFIXES:
        if hint.startswith(prefix) and hint.endswith("]"):
            item = hint[len(prefix):-1]
            return [_decode(owner, item, v) for v in value]
    if hint in ("list", "List"):
        return list(value)
    if any(hint.startswith(prefix) for prefix in _DICT_PREFIXES) or hint in ("dict", "Dict"):
        return dict(value)
    model = _find_model(owner, hint)
    if model is not None:
        return model.from_dict(value)
    return value


def _decode(owner: type, hint: Any, value: Any) -> Any:
    if value is None:
        return None
    if isinstance(hint, str):
        return _decode_text(owner, hint, value)
    origin = typing.get_origin(hint)
    if origin in (typing.Union, types.UnionType):
        args = [a for a in typing.get_args(hint) if a is not type(None)]
        return _decode(owner, args[0], value) if len(args) == 1 else value
    if origin is list:
        args = typing.get_args(hint)
        item = args[0] if args else Any
        return [_decode(owner, item, v) for v in value]
    if origin is dict:
        return dict(value)
    if isinstance(hint, type) and issubclass(hint, Model):
        return hint.from_dict(value)
    return value


def _encode(value: Any) -> Any:
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, list):
        return [_encode(v) for v in value]
    if isinstance(value, dict):
        return {k: _encode(v) for k, v in value.items()}
    return value


@dataclass
class Model:
    """Base for API objects that map to and from JSON dictionaries."""

    _omit: ClassVar[Omit] = Omit.EMPTY

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        _MODELS.setdefault(cls.__name__, []).append(cls)

    @classmethod
    def from_dict(cls, data):
        """Build an instance from a decoded JSON object, ignoring unknown keys."""
        if not isinstance(data, Mapping):
            raise TypeError(f"{cls.__name__} expects a mapping, got {type(data).__name__}")
        kwargs = {}
        for f in dataclasses.fields(cls):
            if not f.init:
                continue
            key = f.metadata.get("key") or f.name
            value = data.get(key)
            if value is None:
                continue
            kwargs[f.name] = _decode(cls, f.type, value)
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form, leaving out fields as their policy says."""
        out: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            omit = f.metadata.get("omit", self._omit)
            if value is None and omit is not Omit.NEVER:
                continue
            if omit is Omit.EMPTY and not isinstance(value, Model) and not value:
                continue
            out[f.metadata.get("key") or f.name] = _encode(value)
        return out


@dataclass
class Pagination(Model):
    """Paging information attached to list responses."""

    current_page: int = 0
    per_page: int = 0
    total_entries: int = 0
    total_pages: int = 0


@dataclass
class Response(Generic[T]):
    """The decoded result of an API call."""

    data: T | None = None
    pagination: Pagination | None = None
    http_response: HttpResponse | None = None


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass
class ListOptions:
    """Paging and sorting options for list calls."""

    page: int | None = None
    per_page: int | None = None
    sort: str | None = None

    def to_query(self) -> dict[str, str]:
        """Return the set options as query parameters, sorted by name."""
        pairs = {
            f.metadata.get("query", f.name): _query_value(getattr(self, f.name))
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is not None
        }
        return dict(sorted(pairs.items()))


@dataclass
class User(Model):
    """A user."""

    id: int = 0
    email: str = ""


def versioned(path: str) -> str:
    """Prefix a path with the API version."""
    return f"/{API_VERSION}/{path.strip('/')}"


def add_url_query_options(path: str, options: ListOptions | None) -> str:
    """Append the options as a query string to the path."""
    if options is None:
        return path
    query = options.to_query()
    if not query:
        return path
    base, _, existing = path.partition("?")
    merged = dict(urllib.parse.parse_qsl(existing, keep_blank_values=True))
    merged.update(query)
    return f"{base}?{urllib.parse.urlencode(sorted(merged.items()))}"


Transport = Callable[[str, str, Mapping[str, str], "bytes | None"], HttpResponse]


def urllib_transport(method, url, headers, body):
    """Send a request with the standard library and return the raw response."""
    request = urllib.request.Request(url, data=body, headers=dict(headers), method=method)
    try:
        with urllib.request.urlopen(request) as reply:
            return HttpResponse(reply.status, dict(reply.headers.items()), reply.read())
    except urllib.error.HTTPError as error:
        try:
            content = error.read()
        finally:
            error.close()
        return HttpResponse(error.code, dict(error.headers.items()), content)


class Client:
    """Sends authenticated JSON requests to the API."""

    def __init__(
        self,
        token: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Transport | None = None,
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.transport = transport or urllib_transport

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def request(self, method, path, payload=None) -> HttpResponse:
        """Send a request; raise APIError unless the status is 2xx."""
        body = None
        if payload is not None:
            if isinstance(payload, Model):
                payload = payload.to_dict()
            body = json.dumps(payload).encode("utf-8")
        response = self.transport(method, self.base_url + path, self._headers(), body)
        if not response.ok:
            raise APIError(response)
        return response

    def get(self, path) -> HttpResponse:
        return self.request("GET", path)

    def post(self, path, payload=None) -> HttpResponse:
        return self.request("POST", path, payload)

    def put(self, path, payload=None) -> HttpResponse:
        return self.request("PUT", path, payload)

    def patch(self, path, payload=None) -> HttpResponse:
        return self.request("PATCH", path, payload)

    def delete(self, path, payload=None) -> HttpResponse:
        return self.request("DELETE", path, payload)


class BaseService:
    """Common plumbing for the API service groups."""

    def __init__(self, client: Client):
        self.client = client

    def _call(self, method, path, payload=None, model=None, many=False) -> Response:
        http_response = self.client.request(method, path, payload)
        if model is None:
            return Response(http_response=http_response)
        body = http_response.json()
        if not isinstance(body, dict):
            body = {}
        raw = body.get("data")
        if raw is None:
            data = [] if many else None
        elif many:
            data = [model.from_dict(item) for item in raw]
        else:
            data = model.from_dict(raw)
        raw_pagination = body.get("pagination")
        pagination = Pagination.from_dict(raw_pagination) if raw_pagination else None
        return Response(data=data, pagination=pagination, http_response=http_response)