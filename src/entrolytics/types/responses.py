from typing import Any, Literal, TypedDict, Union


class ApiSuccessType(TypedDict):
    ok: Literal[True]
    status: int
    data: Any


class ApiFailureType(TypedDict):
    ok: Literal[False]
    status: int  # 0 when the request never got a response
    error: str


# Uniform result of every request; branch on result["ok"]
ApiResponseType = Union[ApiSuccessType, ApiFailureType]
