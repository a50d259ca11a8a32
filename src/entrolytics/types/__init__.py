# Export all types
from .common import (
    ClientOptionsType, HttpMethod, ParamValue, QueryParamsType, RequestOptionsType
)
from .responses import ApiFailureType, ApiResponseType, ApiSuccessType
