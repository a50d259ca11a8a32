from typing import Any, Callable, Dict, Literal, Mapping, Optional, TypedDict, Union


HttpMethod = Literal['GET', 'POST', 'PUT', 'DELETE', 'PATCH']

# None values are dropped from the query string
ParamValue = Union[str, int, float, bool, None]
QueryParamsType = Mapping[str, ParamValue]


class ClientOptionsType(TypedDict, total=False):
    endpoint: str  # base URL, e.g. https://analytics.example.com/api
    apiKey: str  # cloud auth, sent as x-entrolytics-api-key
    userId: str  # self-hosted auth
    secret: str  # self-hosted auth, matches the server's APP_SECRET
    transport: Callable[..., Any]
    timeout: float  # only used by the default transport


class RequestOptionsType(TypedDict, total=False):
    method: HttpMethod
    body: Any
    params: Optional[QueryParamsType]
    headers: Optional[Dict[str, str]]
