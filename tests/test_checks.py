import unittest

from validatedpy import (
    valid, invalid, cond, from_predicate, from_optional, attempt, validate_all, joined,
)


class TestLifting(unittest.TestCase):
    def test_cond(self):
        self.assertEqual(cond(True, 1, "e"), valid(1))
        self.assertEqual(cond(False, 1, "e"), invalid("e"))

    def test_from_predicate(self):
        non_empty = from_predicate(lambda s: len(s) > 0, "empty")
        self.assertEqual(non_empty("x"), valid("x"))
        self.assertEqual(non_empty(""), invalid("empty"))
        small = from_predicate(lambda n: n < 10, error_fn=lambda n: [f"{n} too large"])
        self.assertEqual(small(12), invalid(["12 too large"]))

    def test_from_predicate_keeps_callable_error_value(self):
        not_none = from_predicate(lambda x: x is not None, ValueError)
        self.assertEqual(not_none(None), invalid(ValueError))
        fallback = lambda: "default"
        self.assertEqual(from_predicate(lambda x: False, fallback)(1), invalid(fallback))

    def test_from_optional(self):
        self.assertEqual(from_optional(None, "missing"), invalid("missing"))
        self.assertEqual(from_optional(0, "missing"), valid(0))

    def test_attempt(self):
        self.assertEqual(attempt(lambda: int("42"), lambda ex: type(ex).__name__), valid(42))
        self.assertEqual(attempt(lambda: int("x"), lambda ex: type(ex).__name__), invalid("ValueError"))


class TestValidateAll(unittest.TestCase):
    def setUp(self):
        self.checks = [
            from_predicate(lambda s: len(s) >= 3, ["too short"]),
            from_predicate(lambda s: s.islower(), ["not lowercase"]),
            from_predicate(lambda s: s.isalpha(), ["not alphabetic"]),
        ]

    def test_passes_value_through(self):
        self.assertEqual(validate_all("abcd", *self.checks), valid("abcd"))

    def test_reports_every_failure_in_check_order(self):
        self.assertEqual(validate_all("A1", *self.checks),
                         invalid(["too short", "not lowercase", "not alphabetic"]))

    def test_custom_semigroup(self):
        checks = [from_predicate(lambda n: n > 0, "not positive"), from_predicate(lambda n: n % 2 == 0, "odd")]
        self.assertEqual(validate_all(-3, *checks, semigroup=joined(", ")), invalid("not positive, odd"))

    def test_no_checks(self):
        self.assertEqual(validate_all(5), valid(5))


if __name__ == "__main__":
    unittest.main()
