from __future__ import annotations

import asyncio
import logging
from configparser import ConfigParser
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union
from urllib.parse import quote

from mojang import skins
from mojang.controllers.httpclient import HttpClient
from mojang.exceptions import DecodeError, TransportError
from mojang.parsing import textures as textures_parsing
from mojang.result import Err, Ok, Result
from models.profile import SessionProfile
from models.user import UsernameRecord


_here = Path(__file__).parent
_cfg = ConfigParser()
_cfg.read(_here.parent.parent / 'config/mojang.ini')

STATUS_URL = _cfg.get('Endpoints', 'Status',
                      fallback='https://status.mojang.com/check')
PROFILE_ENDPOINT = _cfg.get(
    'Endpoints', 'Profile',
    fallback='https://sessionserver.mojang.com/session/minecraft/profile/')
UUID_ENDPOINT = _cfg.get(
    'Endpoints', 'Uuid',
    fallback='https://api.mojang.com/users/profiles/minecraft/')
UUIDS_URL = _cfg.get('Endpoints', 'Uuids',
                     fallback='https://api.mojang.com/profiles/minecraft')
HISTORY_ENDPOINT = _cfg.get('Endpoints', 'History',
                            fallback='https://api.mojang.com/user/profiles/')

STATUS_TTL = _cfg.getint('TTL', 'Status', fallback=60)
PROFILE_TTL = _cfg.getint('TTL', 'Profile', fallback=60)
UUID_TTL = _cfg.getint('TTL', 'Uuid', fallback=3600)
HISTORY_TTL = _cfg.getint('TTL', 'History', fallback=3600)
HTTP_TIMEOUT = _cfg.getfloat('HTTP', 'Timeout', fallback=10)

# The bulk endpoint rejects larger batches
MAX_BULK_USERNAMES = 10


def profile_url(uuid: str, signed: bool = False) -> str:
    """
    Get the URL for the session profile endpoint with the UUID filled in.

    :param uuid: The dash-free UUID of the player.
    :param signed: Whether the properties should come with signatures.
    :return: The corresponding URL.
    """
    url = PROFILE_ENDPOINT + uuid
    return url + '?unsigned=false' if signed else url


def uuid_url(username: str, at: Optional[datetime] = None) -> str:
    """
    Get the URL for the username to UUID endpoint, optionally at a point in
    time.

    :param username: The username to look up.
    :param at: The time at which the username should have been in use.
    :return: The corresponding URL.
    """
    url = UUID_ENDPOINT + quote(username, safe='')
    if at is not None:
        url += f'?at={int(at.timestamp())}'
    return url


def history_url(uuid: str) -> str:
    """
    Get the URL for the username history endpoint with the UUID filled in.

    :param uuid: The dash-free UUID of the player.
    :return: The corresponding URL.
    """
    return f'{HISTORY_ENDPOINT}{uuid}/names'


class MojangAPI:
    """
    Async wrapper for the Mojang account API. Every call returns a Result: Ok
    with the JSON body (or a model built from it), or Err with the error which
    stopped it. Nothing is retried.

    :ivar http: The HTTP client which performs the requests.
    """
    http: HttpClient
    _owns_http: bool

    def __init__(self, http: Optional[HttpClient] = None) -> None:
        """
        Construct an API wrapper instance.

        :param http: The HTTP client to use. If omitted, one is created and
        managed by the wrapper's context.
        :return: None.
        """
        self._owns_http = http is None
        self.http = http if http is not None \
            else HttpClient(timeout=HTTP_TIMEOUT)

    async def __aenter__(self) -> MojangAPI:
        """
        Enter the session of the HTTP client, if this wrapper owns it.

        :return: The wrapper.
        """
        if self._owns_http:
            await self.http.__aenter__()
        return self

    async def __aexit__(self, *args) -> None:
        """
        Close the session of the HTTP client, if this wrapper owns it.

        :return: None.
        """
        if self._owns_http:
            await self.http.__aexit__(*args)

    async def get_status(self) -> Result[Any, TransportError]:
        """
        Get the health of the Mojang services.

        :return: Ok with the list of {service: colour} entries.
        """
        return await self.http.get(STATUS_URL, ttl=STATUS_TTL)

    async def get_uuid(self, username: str, at: Optional[datetime] = None) \
            -> Result[Optional[Dict[str, Any]], TransportError]:
        """
        Look up the UUID of a username.

        :param username: The username to look up.
        :param at: The time at which the username should have been in use.
        :return: Ok with {'id', 'name'}, or Ok(None) if nobody has the name.
        """
        return await self.http.get(uuid_url(username, at), ttl=UUID_TTL)

    async def get_uuids(self, usernames: Sequence[str]) \
            -> Result[List[Dict[str, Any]], TransportError]:
        """
        Look up the UUIDs of several usernames with a single request.

        :param usernames: At most 10 usernames.
        :return: Ok with a list of {'id', 'name'} for the names which exist.
        """
        if len(usernames) > MAX_BULK_USERNAMES:
            raise ValueError(f'At most {MAX_BULK_USERNAMES} usernames can be '
                             f'looked up at once, got {len(usernames)}')
        return await self.http.post(UUIDS_URL, list(usernames))

    async def get_name_history(self, uuid: str) \
            -> Result[List[UsernameRecord], TransportError]:
        """
        Get the username history of a player, oldest first.

        :param uuid: The dash-free UUID of the player.
        :return: Ok with the list of username records.
        """
        res = await self.http.get(history_url(uuid), ttl=HISTORY_TTL)
        if isinstance(res, Err):
            return res
        return Ok([UsernameRecord.from_dict(d) for d in res.value or []])

    async def get_profile(self, uuid: str, signed: bool = False) \
            -> Result[SessionProfile, Union[TransportError, DecodeError]]:
        """
        Get the session profile of a player, with its textures decoded.

        If the player never set a skin, the profile gets the default skin
        which its UUID is entitled to instead.

        A UUID which is not 32 hex characters raises InvalidIdentifierError
        before anything is fetched. An unknown player comes back as a
        TransportError with status 204.

        :param uuid: The dash-free UUID of the player.
        :param signed: Whether the properties should come with signatures.
        :return: Ok with the augmented profile, or Err with the transport or
        decode error.
        """
        skins.check_identifier(uuid)
        logging.debug(f'Attempting to get profile {uuid}')
        url = profile_url(uuid, signed)
        res = await self.http.get(url, ttl=PROFILE_TTL)
        if isinstance(res, Err):
            logging.debug(f'FAIL could not get profile {uuid}')
            return res
        if res.value is None:
            logging.debug(f'FAIL no profile for {uuid}')
            return Err(TransportError(url, 204, 'No such player'))

        body = res.value
        try:
            if not isinstance(body, dict):
                raise DecodeError('property', 'Profile body is not an object')
            textures = textures_parsing.deserialize(body.get('properties'))
            # Decoded entries are discarded entirely when there are none
            if not textures:
                variant = skins.classify(uuid)
                logging.info(f'Profile {uuid} has no textures, using the '
                             f'default {variant.value} skin')
                textures = skins.default_textures(variant)
            profile = SessionProfile.from_dict(body, textures)
        except DecodeError as e:
            logging.debug(f'FAIL could not decode profile {uuid}: {e}')
            return Err(e)
        except (KeyError, TypeError, AttributeError) as e:
            logging.debug(f'FAIL malformed profile {uuid}: {e!r}')
            return Err(DecodeError('property', f'Malformed profile: {e!r}'))

        logging.debug(f'OK got profile {uuid} ({profile.name})')
        return Ok(profile)


# Something to test the API wrapper with
if __name__ == '__main__':
    import aioconsole
    import json

    logging.basicConfig(level=logging.DEBUG,
                        format='[%(asctime)s] %(funcName)s > %(levelname)s: '
                               '%(message)s',
                        datefmt='%m/%d/%Y %I:%M:%S %p')

    def show(res: Result) -> None:
        if isinstance(res, Err):
            print(f'FAIL {res.error}')
            return
        value = res.value
        if isinstance(value, SessionProfile):
            value = value.to_dict()
        elif isinstance(value, list):
            value = [v.__dict__ if isinstance(v, UsernameRecord) else v
                     for v in value]
        print(json.dumps(value, indent=2, default=str))

    async def main():
        async with MojangAPI() as api:
            while True:
                inp = (await aioconsole.ainput('Enter a command: ')).split()
                if not inp:
                    continue
                if inp[0] == 'quit':
                    break
                elif inp[0] == 'status':
                    show(await api.get_status())
                elif inp[0] == 'uuid' and len(inp) == 2:
                    show(await api.get_uuid(inp[1]))
                elif inp[0] == 'uuids' and len(inp) > 1:
                    show(await api.get_uuids(inp[1:]))
                elif inp[0] == 'history' and len(inp) == 2:
                    show(await api.get_name_history(inp[1]))
                elif inp[0] == 'profile' and len(inp) == 2:
                    show(await api.get_profile(inp[1]))
                else:
                    print('Commands: status, uuid <name>, uuids <names...>, '
                          'history <uuid>, profile <uuid>, quit')

    asyncio.run(main())
