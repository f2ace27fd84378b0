import unittest
from scopelib.default import default_or_raise


class TestDefaultOrRaise(unittest.TestCase):

    def test_plain_value_is_returned(self):
        self.assertEqual(default_or_raise(5), 5)
        self.assertIsNone(default_or_raise(None))

    def test_exception_is_raised(self):
        with self.assertRaises(KeyError):
            default_or_raise(KeyError("k"))

    def test_message_is_appended(self):
        with self.assertRaises(ValueError) as context:
            default_or_raise(ValueError("bad value"), message="while looking up 'k'")
        self.assertEqual(context.exception.args, ("bad value | while looking up 'k'",))

    def test_message_with_non_string_argument(self):
        with self.assertRaises(LookupError) as context:
            default_or_raise(LookupError(42), message="context")
        self.assertEqual(context.exception.args, ("context", 42))


if __name__ == "__main__":
    unittest.main()
