from http import HTTPStatus
from typing import Dict, List, Optional


class CatalogError(Exception):
    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict:
        return {"message": self.message}


class ValidationError(CatalogError):
    status_code = HTTPStatus.BAD_REQUEST
    default_message = "Invalid request body"

    def __init__(self, errors: List[Dict[str, str]], message: Optional[str] = None):
        super().__init__(message)
        self.errors = errors

    @classmethod
    def from_messages(cls, messages: Dict) -> "ValidationError":
        """Flattens marshmallow's {field: [messages]} into {field, message} items."""
        errors = []
        for field_name, field_messages in messages.items():
            if isinstance(field_messages, dict):
                field_messages = [
                    message
                    for nested in field_messages.values()
                    for message in (nested if isinstance(nested, list) else [nested])
                ]
            elif not isinstance(field_messages, list):
                field_messages = [field_messages]
            for message in field_messages:
                errors.append({"field": field_name, "message": str(message)})
        return cls(errors)

    def to_dict(self) -> Dict:
        return {"message": self.message, "errors": self.errors}


class NotFoundError(CatalogError):
    status_code = HTTPStatus.NOT_FOUND
    default_message = "Not found"


class StorageError(CatalogError):
    default_message = "Media storage unavailable"


class UploadError(CatalogError):
    default_message = "Poster upload failed"


class CorsRejection(CatalogError):
    status_code = HTTPStatus.FORBIDDEN
    default_message = "Origin not allowed"
