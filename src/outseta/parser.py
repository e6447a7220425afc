"""JSON conversion between wire payloads and typed models."""

from __future__ import annotations

import logging
from abc import ABC
from abc import abstractmethod
from typing import Optional
from typing import Type
from typing import TypeVar

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from outseta.errors import OutsetaParseError
from outseta.models import OutsetaBaseModel
from outseta.pagination import ItemPage

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=OutsetaBaseModel)


class JsonParser(ABC):
    """JSON engine used by :class:`ParserFacade`."""

    @abstractmethod
    def object_to_json_string(self, obj: OutsetaBaseModel) -> str:
        """Serialize a model using its wire field names."""

    @abstractmethod
    def json_string_to_object(self, json_string: str, model_class: Type[T]) -> T:
        """Deserialize a single JSON object into ``model_class``."""

    @abstractmethod
    def json_string_to_page(self, json_string: str, model_class: Type[T]) -> ItemPage[T]:
        """Deserialize a ``{"metadata": ..., "items": [...]}`` envelope."""


class PydanticJsonParser(JsonParser):
    """JSON engine backed by pydantic's validators and serializers."""

    def object_to_json_string(self, obj: OutsetaBaseModel) -> str:
        try:
            return obj.model_dump_json(by_alias=True)
        except (PydanticSerializationError, AttributeError, TypeError, ValueError) as e:
            logger.debug(f"Serialization of {type(obj).__name__} failed: {e}")
            raise OutsetaParseError(
                f"Unable to convert {type(obj).__name__} to a json string.",
                data=obj,
            ) from e

    def json_string_to_object(self, json_string: str, model_class: Type[T]) -> T:
        try:
            return model_class.model_validate_json(json_string)
        except (ValidationError, TypeError, ValueError) as e:
            logger.debug(f"Deserialization into {model_class.__name__} failed: {e}")
            raise OutsetaParseError(
                f"Unable to convert json string to {model_class.__name__} type.",
                data=json_string,
            ) from e

    def json_string_to_page(self, json_string: str, model_class: Type[T]) -> ItemPage[T]:
        try:
            return ItemPage[model_class].model_validate_json(json_string)
        except (ValidationError, TypeError, ValueError) as e:
            logger.debug(f"Deserialization into a page of {model_class.__name__} failed: {e}")
            raise OutsetaParseError(
                f"Unable to convert json string to a page of {model_class.__name__} type.",
                data=json_string,
            ) from e


class ParserFacade:
    """Entry point for all JSON conversions done by the clients."""

    def __init__(self, json_parser: Optional[JsonParser] = None) -> None:
        """Initialize parser facade.

        Args:
            json_parser: JSON engine, defaults to :class:`PydanticJsonParser`
        """
        self.json_parser = json_parser or PydanticJsonParser()

    def object_to_json_string(self, obj: OutsetaBaseModel) -> str:
        """Serialize a model to JSON text.

        Args:
            obj: Model to serialize

        Returns:
            JSON text using the API's field names

        Raises:
            OutsetaParseError: The model holds a value that cannot be serialized
        """
        return self.json_parser.object_to_json_string(obj)

    def json_string_to_object(self, json_string: str, model_class: Type[T]) -> T:
        """Deserialize JSON text into a model.

        Args:
            json_string: JSON text of a single object
            model_class: Target model class

        Returns:
            Parsed model

        Raises:
            OutsetaParseError: Malformed JSON, an unparseable date or a shape mismatch
        """
        return self.json_parser.json_string_to_object(json_string, model_class)

    def json_string_to_page(self, json_string: str, model_class: Type[T]) -> ItemPage[T]:
        """Deserialize a page envelope into a typed page.

        Args:
            json_string: JSON text of the page envelope
            model_class: Model class of the page items

        Returns:
            Parsed page

        Raises:
            OutsetaParseError: Malformed JSON or a wrong envelope shape
        """
        return self.json_parser.json_string_to_page(json_string, model_class)
