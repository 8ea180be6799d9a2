import unittest

from optionpy import NONE, Some, FakeOption, FakeSome, FakeNone, FAKE_NONE, fake_option, real_option


class TestFakeOption(unittest.TestCase):
    def test_is_unrelated_to_option(self):
        from optionpy import Option
        self.assertFalse(isinstance(FakeSome(1), Option))
        self.assertFalse(isinstance(FAKE_NONE, Option))
        self.assertFalse(hasattr(FakeSome(1), "map"))
        self.assertTrue(isinstance(FAKE_NONE, FakeOption))
        self.assertIs(FakeNone(), FAKE_NONE)

    def test_conversions(self):
        self.assertEqual(fake_option(Some("x")), FakeSome("x"))
        self.assertIs(fake_option(NONE), FAKE_NONE)
        self.assertEqual(real_option(FakeSome("x")), Some("x"))
        self.assertIs(real_option(FAKE_NONE), NONE)
        self.assertEqual(real_option(fake_option(Some(None))), Some(None))

    def test_conversions_reject_foreign_values(self):
        with self.assertRaises(TypeError):
            fake_option("x")  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            real_option(Some("x"))  # type: ignore[arg-type]
