class MalformedActivityDate(ValueError):
    """Raised when an activity's date cannot be mapped to a calendar day."""

    def __init__(self, value):
        super().__init__(f"Malformed activity date: {value!r}")
        self.value = value
