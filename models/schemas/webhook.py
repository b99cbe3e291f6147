from marshmallow import EXCLUDE, Schema, fields


class WebhookDataSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    user_id = fields.UUID()


class WebhookSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    event = fields.String(required=True)
    data = fields.Nested(WebhookDataSchema)
