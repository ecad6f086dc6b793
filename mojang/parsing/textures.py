import base64
import binascii
import json
from typing import Any, Dict, Sequence

from mojang.exceptions import DecodeError
from models.profile import TextureEntry, TextureSet


TEXTURES_PROPERTY = 'textures'


def decode_payload(b64: str) -> Dict[str, Any]:
    """
    Decode the base64 JSON document held by a textures property.

    :param b64: The base64 value of the property.
    :return: The decoded JSON object.
    """
    try:
        raw = base64.b64decode(b64, validate=True)
    except (binascii.Error, ValueError, TypeError) as e:
        raise DecodeError('base64', str(e)) from e

    try:
        payload = json.loads(raw.decode('utf-8'))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DecodeError('json', str(e)) from e

    if not isinstance(payload, dict):
        raise DecodeError('json', f'Expected an object, got '
                                  f'{type(payload).__name__}')
    return payload


def extract_textures(payload: Dict[str, Any]) -> TextureSet:
    """
    Get the texture slots out of a decoded textures payload.

    :param payload: The decoded payload.
    :return: The texture set, which may be empty.
    """
    textures = payload.get('textures')
    if not isinstance(textures, dict):
        raise DecodeError('textures', 'Payload has no textures object')

    try:
        return {slot: TextureEntry.from_dict(d)
                for slot, d in textures.items()}
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise DecodeError('textures', f'Bad texture entry: {e!r}') from e


def deserialize(properties: Sequence[Dict[str, Any]]) -> TextureSet:
    """
    Decode the texture set of a profile from its upstream properties list.

    Only the first property is read, the session server always puts the
    textures property there.

    :param properties: The 'properties' field of a session profile.
    :return: The decoded texture set, which may be empty.
    """
    if not properties:
        raise DecodeError('property', 'Profile has no properties')

    first = properties[0]
    if not isinstance(first, dict) or first.get('name') != TEXTURES_PROPERTY:
        raise DecodeError('property', 'First property is not the textures '
                                      'property')
    if not isinstance(first.get('value'), str):
        raise DecodeError('property', 'Textures property has no value')

    return extract_textures(decode_payload(first['value']))
