"""Exceptions raised by the Open Location Code codec."""


class OpenLocationCodeError(ValueError):
    """Base class for codec errors."""


class InvalidLength(OpenLocationCodeError):
    """Requested code length is below 2, or odd and shorter than 8."""

    def __init__(self, code_length: int):
        self.code_length = code_length
        super().__init__(f"Invalid Open Location Code length: {code_length}")


class InvalidCode(OpenLocationCodeError):
    """Code is not a valid full code."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Not a valid full Open Location Code: {code!r}")


class PaddedCode(OpenLocationCodeError):
    """Padded codes cannot be shortened."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Cannot shorten padded code: {code!r}")


class CodeTooShort(OpenLocationCodeError):
    """Code has too few significant characters to be shortened."""

    def __init__(self, code: str, code_length: int, minimum: int):
        self.code = code
        self.code_length = code_length
        super().__init__(
            f"Code length must be at least {minimum} to shorten, "
            f"got {code_length}: {code!r}"
        )


class InvalidShortCode(OpenLocationCodeError):
    """Code passed for recovery is neither short nor full."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Not a valid short Open Location Code: {code!r}")
