# ABOUTME: Abstract request serializer interface for turning parameter objects into calls
# ABOUTME: Defines the contract between request models and the HTTP transport

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

from market_client.models.request.prepared import PreparedRequest

RequestT = TypeVar("RequestT", bound=BaseModel)


class AbstractRequestSerializer(ABC, Generic[RequestT]):
    """
    [L0] Abstract base class for request serialization.

    A request serializer converts a request parameter object into the method,
    path and query parameters of an outbound HTTP call. Implementations must
    validate the request first and must not produce anything for a request
    that fails validation, so a malformed request never reaches the transport.
    """

    @abstractmethod
    def serialize(self, request: RequestT) -> PreparedRequest:
        """
        Validates a request and converts it into a `PreparedRequest`.

        Args:
            request: The request parameter object.

        Returns:
            PreparedRequest: The transport-ready form of the request.

        Raises:
            RequestValidationError: If the request parameters are inconsistent.
            NotSupportedError: If the serializer does not handle this request type.
        """
        pass
