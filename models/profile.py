from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


def _freeze(d: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(d))


@dataclass(frozen=True)
class Property:
    """
    Class defining a single entry of a session profile's properties list.

    The value of the 'textures' property is a base64 string containing a JSON
    document, other values are opaque.

    :ivar extra: Any other keys of the upstream entry, kept as is.
    """
    name: str
    value: str
    signature: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'extra', _freeze(self.extra))

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> Property:
        extra = {k: v for k, v in d.items()
                 if k not in ('name', 'value', 'signature')}
        return cls(d['name'], d['value'], d.get('signature'), extra)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {'name': self.name, 'value': self.value}
        if self.signature is not None:
            d['signature'] = self.signature
        d.update(self.extra)
        return d


@dataclass(frozen=True)
class TextureEntry:
    """
    Class defining one texture slot (SKIN or CAPE) of a profile.
    """
    url: str
    metadata: Optional[Mapping[str, str]] = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if self.metadata is not None:
            object.__setattr__(self, 'metadata', _freeze(self.metadata))

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> TextureEntry:
        return cls(d['url'], d.get('metadata'))

    @property
    def model(self) -> str:
        """
        Get the body shape of the texture, classic unless stated otherwise.

        :return: Either 'slim' or 'classic'.
        """
        if self.metadata and self.metadata.get('model') == 'slim':
            return 'slim'
        return 'classic'

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {'url': self.url}
        if self.metadata is not None:
            d['metadata'] = dict(self.metadata)
        return d


TextureSet = Mapping[str, TextureEntry]


@dataclass(frozen=True)
class SessionProfile:
    """
    Class defining a player's session profile, as served by the session
    server, augmented with its decoded (or default) textures.

    The texture set is stored as a read-only mapping, so a profile can be
    shared and hashed.

    :ivar properties: The upstream properties, untouched and in upstream
    order.
    :ivar textures: The texture slots of the player, never empty.
    """
    id: str
    name: str
    properties: Tuple[Property, ...]
    textures: TextureSet = field(hash=False)
    profile_actions: Tuple[str, ...] = field(default=())
    legacy: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, 'properties', tuple(self.properties))
        object.__setattr__(self, 'textures', _freeze(self.textures))

    @classmethod
    def from_dict(cls, d: Dict[str, Any],
                  textures: TextureSet) -> SessionProfile:
        """
        Construct a profile from the session server's JSON body and an
        already resolved texture set.

        :param d: The JSON body of the profile endpoint.
        :param textures: The texture set to attach.
        :return: The augmented profile.
        """
        return cls(id=d['id'],
                   name=d['name'],
                   properties=tuple(Property.from_dict(p)
                                    for p in d.get('properties', [])),
                   textures=textures,
                   profile_actions=tuple(d.get('profileActions', [])),
                   legacy=d.get('legacy', False))

    @property
    def skin(self) -> Optional[TextureEntry]:
        return self.textures.get('SKIN')

    @property
    def cape(self) -> Optional[TextureEntry]:
        return self.textures.get('CAPE')

    def to_dict(self) -> Dict[str, Any]:
        """
        Get the upstream wire shape of the profile with a 'textures' field
        added.

        :return: The profile as a JSON-compatible dict.
        """
        d: Dict[str, Any] = {
            'id': self.id,
            'name': self.name,
            'properties': [p.to_dict() for p in self.properties],
        }
        if self.profile_actions:
            d['profileActions'] = list(self.profile_actions)
        if self.legacy:
            d['legacy'] = True
        d['textures'] = {slot: entry.to_dict()
                         for slot, entry in self.textures.items()}
        return d
