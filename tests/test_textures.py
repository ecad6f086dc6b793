import base64
import json
import unittest

from mojang.exceptions import DecodeError
from mojang.parsing import textures

SKIN_URL = 'http://textures.minecraft.net/texture/' \
           '292009a4925b58f02c77dadc3ecef07ea4c7472f64e0fdc32ce5522489362680'
CAPE_URL = 'http://textures.minecraft.net/texture/' \
           '953cac8b779fe41383e675ee2b86071a71658f2180f56fbce8aa315ea70e2ed6'


def encode(payload) -> str:
    return base64.b64encode(json.dumps(payload).encode('utf-8')).decode()


def textures_property(payload) -> dict:
    return {'name': 'textures', 'value': encode(payload)}


class TestDeserialize(unittest.TestCase):
    def test_skin_and_cape(self) -> None:
        payload = {
            'timestamp': 1633024844313,
            'profileId': 'dad8b95ccf6a44df982e8c8dd70201e0',
            'profileName': 'jeb_',
            'textures': {
                'SKIN': {'url': SKIN_URL, 'metadata': {'model': 'slim'}},
                'CAPE': {'url': CAPE_URL},
            },
        }
        result = textures.deserialize([textures_property(payload)])

        self.assertCountEqual(result, ['SKIN', 'CAPE'])
        self.assertEqual(result['SKIN'].url, SKIN_URL)
        self.assertEqual(result['SKIN'].model, 'slim')
        self.assertEqual(result['CAPE'].url, CAPE_URL)
        self.assertIsNone(result['CAPE'].metadata)

    def test_empty_textures(self) -> None:
        result = textures.deserialize([textures_property({'textures': {}})])
        self.assertEqual(result, {})

    def test_only_first_property_is_read(self) -> None:
        props = [textures_property({'textures': {'SKIN': {'url': 'X'}}}),
                 {'name': 'textures', 'value': 'not base64 at all!'}]
        self.assertEqual(textures.deserialize(props)['SKIN'].url, 'X')

    def test_no_properties(self) -> None:
        for props in ([], None):
            with self.assertRaises(DecodeError) as cm:
                textures.deserialize(props)
            self.assertEqual(cm.exception.stage, 'property')

    def test_first_property_not_textures(self) -> None:
        props = [{'name': 'other', 'value': encode({'textures': {}})}]
        with self.assertRaises(DecodeError) as cm:
            textures.deserialize(props)
        self.assertEqual(cm.exception.stage, 'property')

    def test_bad_base64(self) -> None:
        with self.assertRaises(DecodeError) as cm:
            textures.deserialize([{'name': 'textures', 'value': '!!!!'}])
        self.assertEqual(cm.exception.stage, 'base64')

    def test_bad_json(self) -> None:
        value = base64.b64encode(b'{"textures": ').decode()
        with self.assertRaises(DecodeError) as cm:
            textures.deserialize([{'name': 'textures', 'value': value}])
        self.assertEqual(cm.exception.stage, 'json')

    def test_json_not_an_object(self) -> None:
        with self.assertRaises(DecodeError) as cm:
            textures.deserialize([textures_property([1, 2, 3])])
        self.assertEqual(cm.exception.stage, 'json')

    def test_missing_textures_field(self) -> None:
        with self.assertRaises(DecodeError) as cm:
            textures.deserialize([textures_property({'timestamp': 0})])
        self.assertEqual(cm.exception.stage, 'textures')

    def test_entry_without_url(self) -> None:
        payload = {'textures': {'SKIN': {'metadata': {'model': 'slim'}}}}
        with self.assertRaises(DecodeError) as cm:
            textures.deserialize([textures_property(payload)])
        self.assertEqual(cm.exception.stage, 'textures')


if __name__ == '__main__':
    unittest.main()
