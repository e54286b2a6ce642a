from rest_framework import serializers


class TagListField(serializers.ListField):
    """
    Accepts ``["a", "b"]`` or ``"a, b"``; stores a clean list of strings
    with blanks removed.
    """

    child = serializers.CharField(max_length=50, allow_blank=True)

    def to_internal_value(self, data):
        if isinstance(data, str):
            data = data.split(",")
        tags = super().to_internal_value(data)
        return [tag.strip() for tag in tags if tag and tag.strip()]
