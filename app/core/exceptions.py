class InvalidVideoError(ValueError):
    def __init__(self, field: str, value: object):
        self.field = field
        self.value = value
        super().__init__(f"Invalid video {field}: {value!r}")
