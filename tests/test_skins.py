import unittest

from mojang import skins
from mojang.exceptions import InvalidIdentifierError
from mojang.skins import SkinVariant

CLASSIC_UUID = 'dad8b95ccf6a44df982e8c8dd70201e0'
SLIM_UUID = 'dad8b95ccf6a44df982e8c8dd70201e1'


class TestClassify(unittest.TestCase):
    def test_classic(self) -> None:
        # c ^ f ^ d ^ 0 = 14
        self.assertIs(skins.classify(CLASSIC_UUID), SkinVariant.CLASSIC)

    def test_slim(self) -> None:
        # c ^ f ^ d ^ 1 = 15
        self.assertIs(skins.classify(SLIM_UUID), SkinVariant.SLIM)

    def test_only_word_ends_matter(self) -> None:
        self.assertIs(skins.classify('0' * 32), SkinVariant.CLASSIC)
        self.assertIs(skins.classify('f' * 32), SkinVariant.CLASSIC)
        self.assertIs(skins.classify('0000000100000000'
                                     '0000000000000000'), SkinVariant.SLIM)
        self.assertIs(skins.classify('ffffffeeffffffffffffffffffffffff'),
                      SkinVariant.SLIM)

    def test_uppercase(self) -> None:
        self.assertIs(skins.classify(SLIM_UUID.upper()), SkinVariant.SLIM)

    def test_deterministic(self) -> None:
        for uuid in (CLASSIC_UUID, SLIM_UUID):
            variants = {skins.classify(uuid) for _ in range(10)}
            self.assertEqual(len(variants), 1)

    def test_invalid(self) -> None:
        for uuid in ('dad8b95c-cf6a-44df-982e-8c8dd70201e0', 'abc',
                     'g' * 32, 'dad8b95ccf6a44df982e8c8dd70201e0\n', '', None):
            with self.assertRaises(InvalidIdentifierError):
                skins.classify(uuid)

    def test_check_identifier(self) -> None:
        self.assertIsNone(skins.check_identifier(CLASSIC_UUID))
        with self.assertRaises(InvalidIdentifierError):
            skins.check_identifier(CLASSIC_UUID[:-1])

    def test_invalid_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            skins.classify('xyz')


class TestDefaultTextures(unittest.TestCase):
    def test_classic(self) -> None:
        textures = skins.default_textures(SkinVariant.CLASSIC)

        self.assertEqual(list(textures), ['SKIN'])
        self.assertEqual(textures['SKIN'].url, skins.CLASSIC_DEFAULT_URL)
        self.assertIsNone(textures['SKIN'].metadata)
        self.assertEqual(textures['SKIN'].model, 'classic')

    def test_slim(self) -> None:
        textures = skins.default_textures(SkinVariant.SLIM)

        self.assertEqual(list(textures), ['SKIN'])
        self.assertEqual(textures['SKIN'].url, skins.SLIM_DEFAULT_URL)
        self.assertEqual(textures['SKIN'].metadata, {'model': 'slim'})
        self.assertEqual(textures['SKIN'].model, 'slim')

    def test_fresh_copies(self) -> None:
        a = skins.default_textures(SkinVariant.SLIM)
        b = skins.default_textures(SkinVariant.SLIM)
        self.assertIsNot(a, b)
        self.assertEqual(a, b)


if __name__ == '__main__':
    unittest.main()
