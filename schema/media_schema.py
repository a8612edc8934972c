from marshmallow import EXCLUDE, INCLUDE, Schema, ValidationError, fields

from common.errors import ValidationError as CatalogValidationError


def not_blank(value):
    if isinstance(value, str) and not value.strip():
        raise ValidationError("Field may not be blank.")


class MediaSchema(Schema):
    class Meta:
        unknown = INCLUDE  # extra media fields are stored verbatim

    Year = fields.Raw(
        required=True, validate=not_blank, error_messages={"required": "year required"}
    )
    Title = fields.Raw(
        required=True, validate=not_blank, error_messages={"required": "title required"}
    )
    Type = fields.Raw(
        required=True, validate=not_blank, error_messages={"required": "type required"}
    )


class ReviewRequestSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    comment = fields.Str(
        required=True,
        validate=not_blank,
        error_messages={
            "required": "Please enter valid comment text",
            "invalid": "Please enter valid comment text",
        },
    )
    rate = fields.Raw(
        required=True, error_messages={"required": "Please enter valid rating"}
    )


class MediaResponseSchema(Schema):
    id = fields.Str()
    Title = fields.Raw()
    Year = fields.Raw()
    Type = fields.Raw()
    Poster = fields.Str()
    createdAt = fields.Str()


def require_object(body) -> dict:
    if not isinstance(body, dict):
        raise CatalogValidationError(
            [{"field": "body", "message": "Request body must be a JSON object"}]
        )
    return body


def load_body(schema: Schema, body) -> dict:
    """Runs a marshmallow schema over a JSON body, raising the catalog error type."""
    require_object(body)
    try:
        return schema.load(body)
    except ValidationError as e:
        raise CatalogValidationError.from_messages(e.messages)
