from networking.application.service import DispatchTask, Service
from networking.domain.behavior import (
    AuthTokenBehavior,
    CombinedBehavior,
    HeadersBehavior,
    LoggingBehavior,
    ParametersBehavior,
    RequestBehavior,
)
from networking.domain.body import JsonBody, RawBody, RequestBody, UrlEncodedBody
from networking.domain.configuration import Configuration, TransportSettings
from networking.domain.errors import (
    ApiError,
    CodingError,
    ContractViolation,
    DataNotEncodable,
    DecodingFailed,
    EncodingFailed,
    InvalidURL,
    NetworkingError,
    NoResponse,
    RequestError,
    TransportError,
)
from networking.domain.path import DirectoryPath, FilePath
from networking.domain.request import HttpMethod, Request, TransportRequest
from networking.domain.resource import Resource
from networking.domain.result import Failure, Result, Success

__all__ = [
    "ApiError",
    "AuthTokenBehavior",
    "CodingError",
    "CombinedBehavior",
    "Configuration",
    "ContractViolation",
    "DataNotEncodable",
    "DecodingFailed",
    "DirectoryPath",
    "DispatchTask",
    "EncodingFailed",
    "Failure",
    "FilePath",
    "HeadersBehavior",
    "HttpMethod",
    "InvalidURL",
    "JsonBody",
    "LoggingBehavior",
    "NetworkingError",
    "NoResponse",
    "ParametersBehavior",
    "RawBody",
    "Request",
    "RequestBehavior",
    "RequestBody",
    "RequestError",
    "Resource",
    "Result",
    "Service",
    "Success",
    "TransportError",
    "TransportRequest",
    "TransportSettings",
]
