# stores/converters.py


class PositiveIntConverter:
    """Page numbers: 1, 2, 3 ... (0 and leading zeros do not match)."""

    regex = "[1-9][0-9]*"

    def to_python(self, value):
        return int(value)

    def to_url(self, value):
        return str(value)
