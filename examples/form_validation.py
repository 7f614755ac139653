"""
Form validation: report every problem with a signup form in one pass.

Run: python examples/form_validation.py
"""
from dataclasses import dataclass

from validatedpy import (
    from_predicate,
    from_optional,
    attempt,
    map_n,
    sequence,
    sequence_accumulating,
    configure,
)


@dataclass(frozen=True)
class Signup:
    name: str
    age: int
    email: str


non_blank = from_predicate(lambda s: s.strip() != "", ["name is blank"])
has_at = from_predicate(lambda s: "@" in s, error_fn=lambda s: [f"{s!r} is not an email"])


def parse_age(raw: str):
    return attempt(lambda: int(raw), lambda ex: [f"age {raw!r} is not a number"])


def validate_signup(form: dict):
    email = from_optional(form.get("email"), ["email missing"])
    if email.is_valid():
        email = has_at(email.value)
    return map_n(Signup, non_blank(form.get("name", "")), parse_age(form.get("age", "")), email)


def main():
    configure(level="DEBUG")

    # all three errors come back, in field order
    print("bad form:", validate_signup({"name": " ", "age": "forty", "email": "nobody"}))
    print("no email:", validate_signup({"name": "Ada", "age": "36"}))
    print("good form:", validate_signup({"name": "Ada", "age": "36", "email": "ada@example.org"}))

    ages = [parse_age(a) for a in ["1", "x", "y"]]
    print("sequence (first error):", sequence(ages))
    print("sequence_accumulating:", sequence_accumulating(ages))


if __name__ == "__main__":
    main()
