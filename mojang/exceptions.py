from typing import Optional


class MojangError(Exception):
    """
    Base class for errors produced by the Mojang API client.
    """
    pass


class TransportError(MojangError):
    """
    Called when a request to the Mojang API fails, either because of the
    network or because of an unexpected response code.
    """
    url: str
    status: Optional[int]

    def __init__(self, url: str, status: Optional[int] = None,
                 reason: str = '') -> None:
        self.url = url
        self.status = status
        msg = f'{url} returned {status}' if status is not None else url
        super().__init__(f'{msg}: {reason}' if reason else msg)


class DecodeError(MojangError):
    """
    Called when the texture property of a session profile can't be decoded.

    :ivar stage: The step of the decode which failed, one of 'property',
    'base64', 'json' or 'textures'.
    """
    stage: str

    def __init__(self, stage: str, reason: str) -> None:
        self.stage = stage
        super().__init__(f'{stage}: {reason}')


class InvalidIdentifierError(MojangError, ValueError):
    """
    Called when a UUID is not 32 hexadecimal characters.
    """
    pass
