import re
from enum import Enum

from mojang.exceptions import InvalidIdentifierError
from models.profile import TextureEntry, TextureSet


CLASSIC_DEFAULT_URL = 'http://textures.minecraft.net/texture/' \
                      '1a4af718455d4aab528e7a61f86fa25e6a369d1768dcb13f7df' \
                      '319a713eb810b'
SLIM_DEFAULT_URL = 'http://textures.minecraft.net/texture/' \
                   '3b60a1f6d562f52aaebbf1434f1de147933a3affe0e764fa49ea0' \
                   '57536623cd3'

_UUID_RE = re.compile(r'[0-9a-fA-F]{32}')

# Last hex digit of each 32-bit word of the UUID
_WORD_ENDS = (7, 15, 23, 31)


class SkinVariant(Enum):
    """
    The two default body shapes a player without a custom skin can have.
    """
    CLASSIC = 'classic'
    SLIM = 'slim'


def check_identifier(uuid: str) -> None:
    """
    Make sure a UUID is in the dash-free 32 hex character form.

    :param uuid: The UUID to check.
    :return: None.
    """
    if not isinstance(uuid, str) or not _UUID_RE.fullmatch(uuid):
        raise InvalidIdentifierError(f'Expected 32 hex characters, got '
                                     f'{uuid!r}')


def classify(uuid: str) -> SkinVariant:
    """
    Get the default skin variant of a player from its UUID.

    The low bit of the XOR of the four 32-bit words decides the variant, which
    is the same as the parity of the XOR of the last hex digit of each word.
    Odd is slim, even is classic.

    :param uuid: The dash-free UUID of the player.
    :return: The default skin variant of the player.
    """
    check_identifier(uuid)
    bits = 0
    for i in _WORD_ENDS:
        bits ^= int(uuid[i], 16)
    return SkinVariant.SLIM if bits & 1 else SkinVariant.CLASSIC


def default_textures(variant: SkinVariant) -> TextureSet:
    """
    Get the canonical texture set of a default skin variant.

    :param variant: The skin variant.
    :return: A new texture set with only a SKIN slot.
    """
    if variant is SkinVariant.SLIM:
        return {'SKIN': TextureEntry(SLIM_DEFAULT_URL, {'model': 'slim'})}
    return {'SKIN': TextureEntry(CLASSIC_DEFAULT_URL)}
