from marshmallow import Schema, fields


class ChirpCreateSchema(Schema):
    body = fields.String(required=True)


class ChirpOutSchema(Schema):
    id = fields.String()
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
    body = fields.String()
    user_id = fields.String()
