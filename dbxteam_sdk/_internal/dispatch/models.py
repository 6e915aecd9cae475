"""Route descriptors, wire envelopes and call results for the dispatcher.

Every route of the API is described once by a ``Route`` and executed by
``RouteDispatcher``. The models here are shared by all routes.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, NoReturn, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from dbxteam_sdk.exceptions import DbxTeamError

T = TypeVar("T")

# =============================================================================
# Constants
# =============================================================================

API_VERSION = 2
DEFAULT_NAMESPACE = "team"
JSON_CONTENT_TYPE = "application/json"

# =============================================================================
# Wire Base Models
# =============================================================================


class WireModel(BaseModel):
    """Base for every JSON record exchanged with the API.

    Unknown fields are ignored so additive server changes keep decoding.
    """

    model_config = ConfigDict(populate_by_name=True)


class TaggedModel(WireModel):
    """Base for tagged-union variants.

    The discriminant is ``.tag`` on the wire and ``tag`` in Python. Variants
    narrow ``tag`` to a ``Literal`` so unknown tags fail validation.
    """

    tag: str = Field(alias=".tag")


# =============================================================================
# Error Envelope
# =============================================================================


class UserMessage(WireModel):
    """Localized message suitable for end users."""

    text: str
    locale: str


class ApiErrorEnvelope(WireModel):
    """JSON error body for every non-200 status except 400.

    ``error`` holds the raw route-specific union; it is decoded separately
    against the route's error type, and only for 409 responses.
    """

    error_summary: str
    user_message: UserMessage | None = None
    error: Any = None


# =============================================================================
# Route Descriptor
# =============================================================================


@dataclass(frozen=True)
class Route(Generic[T]):
    """Immutable description of one RPC route.

    Attributes:
        name: Identifier, e.g. ``members/list/continue``.
        path: Route path below the namespace.
        arg_type: Argument type, or None when the route takes no body.
        result_type: Success type, or None for void routes.
        error_type: Route-specific error union for 409, or None.
        namespace: API namespace the route belongs to.
    """

    name: str
    path: str
    arg_type: Any = None
    result_type: Any = None
    error_type: Any = None
    namespace: str = DEFAULT_NAMESPACE

    arg_adapter: TypeAdapter | None = field(init=False, repr=False, compare=False)
    result_adapter: TypeAdapter | None = field(init=False, repr=False, compare=False)
    error_adapter: TypeAdapter | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Adapters are built once per route and shared by every call.
        for attr, tp in (
            ("arg_adapter", self.arg_type),
            ("result_adapter", self.result_type),
            ("error_adapter", self.error_type),
        ):
            object.__setattr__(self, attr, TypeAdapter(tp) if tp is not None else None)

    @property
    def has_request_body(self) -> bool:
        return self.arg_type is not None

    @property
    def url_path(self) -> str:
        return f"/{API_VERSION}/{self.namespace}/{self.path}"


# =============================================================================
# Call Results
# =============================================================================


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful call carrying the decoded result."""

    value: T
    ok: ClassVar[bool] = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Failed call carrying one error from the SDK taxonomy."""

    error: DbxTeamError
    ok: ClassVar[bool] = False

    def unwrap(self) -> NoReturn:
        raise self.error


CallResult = Success[T] | Failure
