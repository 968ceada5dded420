class TimeTagError(ValueError):
    pass


class MalformedTokenError(TimeTagError):
    pass


class InvalidTimestampError(TimeTagError):
    pass


class MissingStartTimeError(TimeTagError):
    pass


class EmbeddedLineTagError(TimeTagError):
    pass


class LrcParseError(TimeTagError):
    pass
