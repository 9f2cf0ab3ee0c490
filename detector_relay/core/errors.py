"""
Error taxonomy for the relay.

Everything raised while talking to the detector or interpreting its answer is
a RelayError; the /api/analyze route turns any of them into a 502 whose body
carries `message`. Request validation is not in here: it is reported as a
ValidationResult, never raised.
"""


class RelayError(Exception):
    """Base class. `message` is safe to show to the caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DetectorError(RelayError):
    """The call to the detector collaborator failed."""


class DetectorHttpError(DetectorError):
    def __init__(self, status: int, body: str):
        super().__init__(f"Error del detector ({status}): {body}")
        self.status = status
        self.body = body


class DetectorUnreachableError(DetectorError):
    def __init__(self, cause: BaseException):
        detail = str(cause) or type(cause).__name__
        super().__init__(f"No se pudo contactar al detector: {detail}")
        self.cause = cause


class DetectorResponseError(DetectorError):
    """2xx answer whose body is not JSON."""


class ScoreError(RelayError):
    """The detector answered but no usable score could be derived."""


class ScoreNotFoundError(ScoreError):
    def __init__(self, message: str = "No se pudo extraer el puntaje de IA de la respuesta del detector."):
        super().__init__(message)


class InvalidScoreError(ScoreError):
    pass
