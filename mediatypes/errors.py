class MediaTypeError(Exception):
    pass


class HeaderFormatError(MediaTypeError, ValueError):
    """Header text does not follow the media type grammar."""
    def __init__(self, message, text=None, position=None):
        if position is not None:
            message = f'{message} at index {position}'
        if text is not None:
            message = f'{message}: {text!r}'
        super().__init__(message)
        self.text = text
        self.position = position


class ReadOnlyError(MediaTypeError, AttributeError):
    """Mutation attempted on a frozen media type, parameter list or parameter."""
    def __init__(self, obj):
        super().__init__(f'{type(obj).__name__} is read-only')


class QualityRangeError(MediaTypeError, ValueError):
    def __init__(self, value):
        super().__init__(f'quality {value!r} is outside the range 0.0 to 1.0')
        self.value = value
