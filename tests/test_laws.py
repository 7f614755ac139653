import unittest

from validatedpy import valid, invalid, ap, merge, empty, SUM, ADD

# E: strings under concatenation, A: ints under addition
SAMPLES = [valid(0), valid(5), valid(-2), invalid(""), invalid("a"), invalid("bc")]
FUNCS = [lambda x: x + 1, lambda x: x * 3, lambda x: -x]


class TestFunctorLaws(unittest.TestCase):
    def test_identity(self):
        for v in SAMPLES:
            self.assertEqual(v.map(lambda x: x), v)

    def test_composition(self):
        for v in SAMPLES:
            for f in FUNCS:
                for g in FUNCS:
                    self.assertEqual(v.map(f).map(g), v.map(lambda x: g(f(x))))


class TestApplicativeLaws(unittest.TestCase):
    def test_identity(self):
        for v in SAMPLES:
            self.assertEqual(ap(valid(lambda x: x), v), v)

    def test_homomorphism(self):
        for f in FUNCS:
            for x in [0, 4, -7]:
                self.assertEqual(ap(valid(f), valid(x)), valid(f(x)))

    def test_interchange(self):
        for f in FUNCS:
            u = valid(f)
            for y in [0, 4]:
                self.assertEqual(ap(u, valid(y)), ap(valid(lambda g: g(y)), u))

    def test_composition(self):
        compose = lambda f: lambda g: lambda x: f(g(x))
        fns = [valid(FUNCS[0]), valid(FUNCS[1]), invalid("u"), invalid("v")]
        for u in fns:
            for w in fns:
                for v in SAMPLES:
                    lhs = ap(ap(ap(valid(compose), u), w), v)
                    rhs = ap(u, ap(w, v))
                    self.assertEqual(lhs, rhs)


class TestSemigroupLaws(unittest.TestCase):
    def test_merge_associative(self):
        for a in SAMPLES:
            for b in SAMPLES:
                for c in SAMPLES:
                    self.assertEqual(merge(merge(a, b), c), merge(a, merge(b, c)))

    def test_empty_is_identity(self):
        for v in SAMPLES:
            self.assertEqual(merge(empty(SUM), v, ADD, SUM), v)
            self.assertEqual(merge(v, empty(SUM), ADD, SUM), v)


if __name__ == "__main__":
    unittest.main()
