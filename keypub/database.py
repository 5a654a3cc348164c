from tortoise.models import Model
from tortoise import fields

class PubKey(Model):
    # UUID v4 in canonical hyphenated form, generated on publish
    id = fields.CharField(pk=True, max_length=36)
    public_key = fields.TextField()
    note = fields.TextField(null=True)

    class Meta:
        table = "pub_keys"
