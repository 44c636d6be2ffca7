"""Data models shared by the OpenAPI extractors and the tool synthesizer.

The extractors turn a raw OpenAPI/Swagger mapping into Operation records;
the generator modules turn each Operation into a ToolDefinition. JSON output
uses the camelCase keys MCP clients and code generators expect.
"""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer


class SchemeType(str, Enum):
    """Security scheme type. Unknown or missing types become CUSTOM."""

    API_KEY = "apiKey"
    HTTP = "http"
    OAUTH2 = "oauth2"
    OPEN_ID_CONNECT = "openIdConnect"
    CUSTOM = "custom"

    @classmethod
    def _missing_(cls, value):
        return cls.CUSTOM


class ParamLocation(str, Enum):
    """Where a parameter travels. Missing or unknown `in` values mean QUERY."""

    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    COOKIE = "cookie"

    @classmethod
    def _missing_(cls, value):
        return cls.QUERY


ParamType = Literal["string", "number", "boolean", "object", "array"]
OperationSource = Literal["path", "webhook"]


def _drop_none(data: dict, keys: tuple[str, ...]) -> dict:
    for key in keys:
        if key in data and data[key] is None:
            del data[key]
    return data


class Operation(BaseModel):
    """One HTTP-method handler on one path (or webhook)."""

    id: str  # "PATH GET /pets/{id}"
    method: str  # lowercase verb
    path: str
    tags: list[str]
    summary: str = ""
    operation_id: str = ""
    parameters: list[dict[str, Any]] = []  # path-level first, not deduplicated
    request_body: dict[str, Any] | None = None
    security: list[Any] | None = None  # None inherits the global requirement
    responses: dict[str, Any] = {}
    source: OperationSource = "path"


class SchemeSummary(BaseModel):
    """A named security scheme as declared by the document."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    type: SchemeType = SchemeType.CUSTOM
    in_: str | None = Field(default=None, alias="in")
    scheme: str | None = None
    bearer_format: str | None = Field(default=None, alias="bearerFormat")
    open_id_connect_url: str | None = Field(default=None, alias="openIdConnectUrl")
    flows: list[str] = []


class ResolvedScheme(BaseModel):
    """A scheme referenced by an operation's security requirement."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    type: SchemeType = SchemeType.CUSTOM
    in_: str | None = Field(default=None, alias="in")
    scheme: str | None = None
    bearer_format: str | None = Field(default=None, alias="bearerFormat")
    open_id_connect_url: str | None = Field(default=None, alias="openIdConnectUrl")
    scopes: list[str] = []
    description: str = ""
    flows: list[str] | None = None  # oauth2 only

    @model_serializer(mode="wrap")
    def omit_missing_flows(self, handler: SerializerFunctionWrapHandler) -> dict:
        return _drop_none(handler(self), ("flows",))


class AuthRequirement(BaseModel):
    """OR-of-AND security reduced to a required flag and unique schemes."""

    model_config = ConfigDict(frozen=True)

    required: bool
    schemes: list[ResolvedScheme]


class ToolParam(BaseModel):
    """A single tool argument.

    The synthetic `body` param has neither location nor schema.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    type: ParamType = "string"
    required: bool = False
    location: ParamLocation | None = None
    description: str = ""
    param_schema: dict[str, Any] | None = Field(default=None, alias="schema")

    @model_serializer(mode="wrap")
    def omit_body_fields(self, handler: SerializerFunctionWrapHandler) -> dict:
        return _drop_none(handler(self), ("location", "schema", "param_schema"))


class ToolAnnotations(BaseModel):
    model_config = ConfigDict(frozen=True)

    readOnlyHint: bool
    destructiveHint: bool
    idempotentHint: bool
    openWorldHint: bool = True


class Endpoint(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    method: str
    path: str
    tags: list[str]
    operation_id: str = Field(default="", alias="operationId")
    source: OperationSource = "path"


class ToolDefinition(BaseModel):
    """Normalized output unit, later exposed as an MCP tool."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    name: str
    description: str
    params: list[ToolParam]
    auth: AuthRequirement | None = None
    input_schema: dict[str, Any] = Field(alias="inputSchema")
    output_schema: dict[str, Any] | None = Field(default=None, alias="outputSchema")
    annotations: ToolAnnotations
    endpoint: Endpoint


class SynthesisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    tools: list[ToolDefinition]
    servers: list[str]
    schemes: list[SchemeSummary]
